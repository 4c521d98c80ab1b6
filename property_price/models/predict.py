"""
Property Price - Prediction Helper

Provides `Estimator`, the trained handle the form calls on every input
change. `Estimator.predict(features)`:
- Copies the 5-element feature vector into a single-row buffer.
- Runs one forward pass to get the raw price.
- Scales the raw price by the area multiplier (features[4]) and rounds it.

The area multiplier is a model input and is applied again afterwards. That
is how estimates have always been produced and is kept as-is.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from typing import Iterator, Sequence, Union

import numpy as np

from property_price.config import N_FEATURES
from property_price.models.train import PriceModel

AREA_INDEX = N_FEATURES - 1


@contextmanager
def _feature_row(features: Sequence[float]) -> Iterator[np.ndarray]:
    """
    Build the single-row feature buffer for one prediction.

    A fresh buffer is made per call and is only referenced by the `with`
    block and its caller, so it is freed when `predict` returns or raises.
    """
    row = np.asarray([list(features)], dtype=np.float64)
    if row.shape != (1, N_FEATURES):
        raise ValueError(f"expected {N_FEATURES} features, got {row.shape[1]}")
    yield row


def apply_area_multiplier(raw: float, multiplier: float) -> Union[int, float]:
    """
    Scale a raw price by the area multiplier and round half up, as
    JavaScript's Math.round does.

    Non-finite results are returned unrounded.
    """
    value = raw * multiplier
    if not math.isfinite(value):
        return value
    whole = math.floor(value)
    return int(whole + 1 if value - whole >= 0.5 else whole)


class Estimator:
    """
    Trained price estimator.

    Only built from a fitted `PriceModel`, so holding one means the model is
    ready.
    """

    def __init__(self, model: PriceModel) -> None:
        self.model = model

    def predict(self, features: Sequence[float]) -> Union[int, float]:
        """
        Predict the price of one property.

        Parameters
        ----------
        features : sequence of float
            [square_footage, bedrooms, bathrooms, garage, area_multiplier]

        Returns
        -------
        int
            Estimated price in rupees. NaN (float) if any feature is NaN or infinite.
        """
        with _feature_row(features) as row:
            raw = float(self.model.predict_raw(row)[0])
            multiplier = float(row[0, AREA_INDEX])
        return apply_area_multiplier(raw, multiplier)


if __name__ == "__main__":
    from property_price.features.build_features import build_feature_vector
    from property_price.models.train import train_model

    example = build_feature_vector(2000, 3, 2, 2, "Noida")
    print("Predicted price:", Estimator(train_model()).predict(example))
