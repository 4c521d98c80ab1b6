"""
Fixed training data for the property price model.

This module provides the six sample properties the regression model is fit
on, and the area multiplier table used both as a model input and as a final
price scale.

Prices are whole Indian rupees. `load_training_data()` returns the same rows as
a pandas frame/series pair for training and evaluation.
"""

from types import MappingProxyType
from typing import NamedTuple, Tuple

import pandas as pd

FEATURE_COLUMNS = ("square_footage", "bedrooms", "bathrooms", "garage", "area_multiplier")
TARGET_COLUMN = "price"


class Sample(NamedTuple):
    features: Tuple[float, float, float, float, float]
    price: float


# [sqft, bedrooms, bathrooms, garage, area_multiplier] -> price (INR)
TRAINING_SET: Tuple[Sample, ...] = (
    Sample((1200.0, 2.0, 1.0, 1.0, 1.0), 2500000.0),  # 25 lakhs
    Sample((1500.0, 3.0, 2.0, 1.0, 1.2), 3500000.0),  # 35 lakhs
    Sample((2000.0, 3.0, 2.0, 2.0, 1.0), 4500000.0),  # 45 lakhs
    Sample((2500.0, 4.0, 3.0, 2.0, 1.5), 6000000.0),  # 60 lakhs
    Sample((3000.0, 4.0, 3.0, 3.0, 1.3), 7500000.0),  # 75 lakhs
    Sample((3500.0, 5.0, 4.0, 3.0, 1.4), 9000000.0),  # 90 lakhs
)

# Insertion order is the order areas are offered in the form.
AREA_MULTIPLIERS = MappingProxyType({
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
})


def load_training_data() -> Tuple[pd.DataFrame, pd.Series]:
    """
    Return the training set as a feature frame and a price series.

    Returns
    -------
    X : pd.DataFrame
        One row per sample, columns in `FEATURE_COLUMNS` order.
    y : pd.Series
        Prices aligned with `X`.
    """
    X = pd.DataFrame([s.features for s in TRAINING_SET], columns=list(FEATURE_COLUMNS), dtype=float)
    y = pd.Series([s.price for s in TRAINING_SET], name=TARGET_COLUMN, dtype=float)
    return X, y
