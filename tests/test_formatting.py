import pytest

from property_price.formatting import format_inr, format_lakhs


@pytest.mark.parametrize("price, expected", [
    (0, "₹0"),
    (999, "₹999"),
    (100000, "₹1,00,000"),
    (4500000, "₹45,00,000"),
    (12345678, "₹1,23,45,678"),
    (5399999.6, "₹54,00,000"),
    (-100000, "-₹1,00,000"),
])
def test_format_inr(price, expected):
    assert format_inr(price) == expected


@pytest.mark.parametrize("price, expected", [
    (4500000, "45.00 Lakhs"),
    (5400000, "54.00 Lakhs"),
    (123456, "1.23 Lakhs"),
])
def test_format_lakhs(price, expected):
    assert format_lakhs(price) == expected
