"""
Display helpers for rupee amounts.
"""
from property_price.config import CURRENCY_SYMBOL, LAKH


def _group_indian(digits: str) -> str:
    # last three digits, then groups of two: 4500000 -> 45,00,000
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_inr(price: float) -> str:
    """
    Format a price as whole rupees with Indian digit grouping, e.g. ₹45,00,000.
    """
    amount = int(round(abs(price)))
    sign = "-" if price < 0 and amount else ""
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(str(amount))}"


def format_lakhs(price: float) -> str:
    return f"{price / LAKH:.2f} Lakhs"
