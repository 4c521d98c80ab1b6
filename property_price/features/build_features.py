"""
Feature assembly for the property price model.

"""
from typing import Any, Tuple

import pandas as pd

from property_price.data.training_data import AREA_MULTIPLIERS


def parse_numeric(value: Any) -> float:
    """
    Coerce a form value to float. Unparseable input becomes NaN.
    """
    return float(pd.to_numeric(value, errors="coerce"))


def area_multiplier(area: str) -> float:
    """
    Look up the price multiplier for a named area.
    """
    return AREA_MULTIPLIERS[area]


def build_feature_vector(square_footage, bedrooms, bathrooms, garage, area: str) -> Tuple[float, ...]:
    """
    Assemble the 5-element feature vector the model expects.
    """
    return (
        parse_numeric(square_footage),
        parse_numeric(bedrooms),
        parse_numeric(bathrooms),
        parse_numeric(garage),
        area_multiplier(area),
    )
