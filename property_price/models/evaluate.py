"""
Evaluation utilities for the trained price estimator.

Usage (from project root)
-------------------------
# Train with default settings and print fit metrics:
python -m property_price.models.evaluate

# Or import functions:
from property_price.models.evaluate import evaluate_estimator, prediction_table
evaluate_estimator(estimator)
"""

from __future__ import annotations

from typing import Dict

import numpy as np
import pandas as pd
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from property_price.data.training_data import TARGET_COLUMN, load_training_data
from property_price.models.predict import Estimator


def prediction_table(estimator: Estimator) -> pd.DataFrame:
    """
    Score every training sample.

    Returns
    -------
    pd.DataFrame
        The training features and price, plus `raw_prediction` (network
        output in rupees) and `estimate` (area-scaled, rounded price).
    """
    X, y = load_training_data()
    df = X.copy()
    df[TARGET_COLUMN] = y
    df["raw_prediction"] = estimator.model.predict_raw(X.to_numpy(dtype=np.float64))
    df["estimate"] = [estimator.predict(row) for row in X.itertuples(index=False)]
    return df


def evaluate_estimator(estimator: Estimator, verbose: bool = True) -> Dict[str, float]:
    """
    Measure how closely the raw network output fits the training prices.

    Parameters
    ----------
    estimator : Estimator
    verbose : bool
        If True, print the per-sample table and a summary.

    Returns
    -------
    metrics : dict
        'MAE', 'RMSE' and 'R2' of raw predictions against the labels.
    """
    df = prediction_table(estimator)
    y_true = df[TARGET_COLUMN]
    y_pred = df["raw_prediction"]

    mae = mean_absolute_error(y_true, y_pred)
    rmse = np.sqrt(mean_squared_error(y_true, y_pred))
    r2 = r2_score(y_true, y_pred)

    if verbose:
        print(df.to_string(index=False))
        print("\nTraining-set fit:")
        print(f"MAE={mae:,.2f}, RMSE={rmse:,.2f}, R2={r2:.4f}")

    return {"MAE": float(mae), "RMSE": float(rmse), "R2": float(r2)}


if __name__ == "__main__":
    from property_price.models.lifecycle import train_estimator

    print("Training estimator with default settings...")
    metrics = evaluate_estimator(train_estimator())
    print("\nMetrics:", metrics)
