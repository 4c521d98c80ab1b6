"""
Training utilities for the property price network.

Usage (from project root)
-------------------------
# Train with default settings and print per-epoch loss:
python -m property_price.models.train

# Or import functions:
from property_price.models.train import train_model
model = train_model(epochs=100, verbose=True)
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np
from sklearn.neural_network import MLPRegressor
from sklearn.preprocessing import StandardScaler

from property_price.config import (
    ACTIVATION,
    EPOCHS,
    HIDDEN_UNITS,
    LEARNING_RATE,
    N_FEATURES,
    RANDOM_STATE,
    STANDARDIZE,
)
from property_price.data.training_data import load_training_data


class TrainingError(Exception):
    pass


class PriceModel:
    """
    A fitted network plus the scalers it was trained behind.

    `predict_raw` maps rows of raw features to raw prices in rupees. Rows
    holding a NaN or infinity produce NaN instead of reaching the network.
    """

    def __init__(
        self,
        network: MLPRegressor,
        feature_scaler: Optional[StandardScaler] = None,
        target_scaler: Optional[StandardScaler] = None,
        loss_history: Optional[List[float]] = None,
    ) -> None:
        self.network = network
        self.feature_scaler = feature_scaler
        self.target_scaler = target_scaler
        self.loss_history: List[float] = list(loss_history or [])

    def predict_raw(self, X: np.ndarray) -> np.ndarray:
        X = np.asarray(X, dtype=np.float64)
        out = np.full(X.shape[0], np.nan, dtype=np.float64)
        finite = np.isfinite(X).all(axis=1)
        if not finite.any():
            return out

        rows = X[finite]
        if self.feature_scaler is not None:
            rows = self.feature_scaler.transform(rows)
        preds = np.asarray(self.network.predict(rows), dtype=np.float64).reshape(-1, 1)
        if self.target_scaler is not None:
            preds = self.target_scaler.inverse_transform(preds)
        out[finite] = preds.ravel()
        return out


def build_network(
    hidden_units: int = HIDDEN_UNITS,
    learning_rate: float = LEARNING_RATE,
    batch_size: int = 6,
    random_state: int = RANDOM_STATE,
) -> MLPRegressor:
    """
    Create the unfitted regressor: one ReLU hidden layer, identity output,
    Adam on squared error with no weight penalty.
    """
    return MLPRegressor(
        hidden_layer_sizes=(hidden_units,),
        activation=ACTIVATION,
        solver="adam",
        learning_rate_init=learning_rate,
        alpha=0.0,
        batch_size=batch_size,
        shuffle=False,
        random_state=random_state,
    )


def _check_options(epochs: int, hidden_units: int, learning_rate: float) -> None:
    if not (epochs > 0):
        raise TrainingError(f"invalid epochs: {epochs}, expected greater than 0")
    if not (hidden_units > 0):
        raise TrainingError(f"invalid hidden units: {hidden_units}, expected greater than 0")
    if not (learning_rate > 0):
        raise TrainingError(f"invalid learning rate: {learning_rate}, expected greater than 0")


def train_model(
    epochs: int = EPOCHS,
    learning_rate: float = LEARNING_RATE,
    hidden_units: int = HIDDEN_UNITS,
    random_state: int = RANDOM_STATE,
    standardize: bool = STANDARDIZE,
    verbose: bool = False,
) -> PriceModel:
    """
    Fit the price network on the fixed training set.

    Each epoch is one full-batch Adam step over all six samples, run through
    `partial_fit` so the loss can be reported as training goes.

    Parameters
    ----------
    epochs : int
        Number of passes over the training set. No early stopping.
    learning_rate : float
        Adam step size.
    hidden_units : int
        Width of the hidden layer.
    random_state : int
        Seed for weight initialisation.
    standardize : bool
        If True, features and prices are standardized before fitting and raw
        outputs are mapped back to rupees.
    verbose : bool
        If True, print the loss after every epoch.

    Returns
    -------
    PriceModel
        The fitted network with its scalers and per-epoch loss history.
    """
    _check_options(epochs, hidden_units, learning_rate)

    X_df, y_ser = load_training_data()
    X = X_df.to_numpy(dtype=np.float64)
    y = y_ser.to_numpy(dtype=np.float64)
    if X.shape[1] != N_FEATURES:
        raise TrainingError(f"training data has {X.shape[1]} features, expected {N_FEATURES}")

    feature_scaler = target_scaler = None
    if standardize:
        feature_scaler = StandardScaler().fit(X)
        target_scaler = StandardScaler().fit(y.reshape(-1, 1))
        X = feature_scaler.transform(X)
        y = target_scaler.transform(y.reshape(-1, 1)).ravel()

    network = build_network(
        hidden_units=hidden_units,
        learning_rate=learning_rate,
        batch_size=X.shape[0],
        random_state=random_state,
    )

    loss_history: List[float] = []
    for epoch in range(epochs):
        network.partial_fit(X, y)
        loss_history.append(float(network.loss_))
        if verbose:
            print(f"Epoch {epoch}: loss = {network.loss_}")

    if verbose:
        print(f"Training complete after {epochs} epochs, final loss = {loss_history[-1]:.6f}")

    return PriceModel(network, feature_scaler, target_scaler, loss_history)


if __name__ == "__main__":
    from property_price.features.build_features import build_feature_vector
    from property_price.models.predict import Estimator

    estimator = Estimator(train_model(verbose=True))
    example = build_feature_vector(2000, 3, 2, 2, "Noida")
    print(f"Estimated price for {example}: {estimator.predict(example)}")
