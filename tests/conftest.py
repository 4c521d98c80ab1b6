import pytest

from property_price.models.lifecycle import train_estimator

# Enough epochs at a larger step for the fit to settle near the labels.
CONVERGED_OPTIONS = {"epochs": 3000, "learning_rate": 0.01}


@pytest.fixture(scope="session")
def default_estimator():
    return train_estimator()


@pytest.fixture(scope="session")
def converged_estimator():
    return train_estimator(**CONVERGED_OPTIONS)
