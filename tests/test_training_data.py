import pytest

from property_price.data.training_data import (
    AREA_MULTIPLIERS,
    FEATURE_COLUMNS,
    TARGET_COLUMN,
    TRAINING_SET,
    load_training_data,
)


def test_training_set_rows():
    assert [s.features for s in TRAINING_SET] == [
        (1200, 2, 1, 1, 1.0),
        (1500, 3, 2, 1, 1.2),
        (2000, 3, 2, 2, 1.0),
        (2500, 4, 3, 2, 1.5),
        (3000, 4, 3, 3, 1.3),
        (3500, 5, 4, 3, 1.4),
    ]
    assert [s.price for s in TRAINING_SET] == [2500000, 3500000, 4500000, 6000000, 7500000, 9000000]


def test_area_table():
    assert dict(AREA_MULTIPLIERS) == {
        "Central Delhi": 2.0,
        "South Delhi": 1.8,
        "North Delhi": 1.5,
        "East Delhi": 1.3,
        "West Delhi": 1.4,
        "Noida": 1.2,
        "Gurgaon": 1.6,
        "Faridabad": 1.1,
        "Ghaziabad": 1.0,
        "Greater Noida": 1.1,
    }
    assert list(AREA_MULTIPLIERS)[0] == "Central Delhi"


def test_area_table_is_read_only():
    with pytest.raises(TypeError):
        AREA_MULTIPLIERS["Mumbai"] = 3.0


def test_load_training_data():
    X, y = load_training_data()
    assert list(X.columns) == list(FEATURE_COLUMNS)
    assert X.shape == (6, 5)
    assert y.name == TARGET_COLUMN
    assert y.tolist() == [s.price for s in TRAINING_SET]
    assert X.iloc[3].tolist() == [2500.0, 4.0, 3.0, 2.0, 1.5]
