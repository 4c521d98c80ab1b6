import threading

import pytest

from property_price.models.lifecycle import (
    EstimatorLifecycle,
    ModelNotReadyError,
    ModelState,
    initialize,
)
from property_price.models.predict import Estimator
from tests.stubs import ConstantModel


def _gated(estimator, gate):
    def train():
        assert gate.wait(timeout=10)
        return estimator
    return train


def test_loading_then_ready():
    gate = threading.Event()
    stub = Estimator(ConstantModel(1_000_000.0))
    lifecycle = EstimatorLifecycle(_gated(stub, gate))

    assert lifecycle.state is ModelState.LOADING
    assert not lifecycle.ready
    with pytest.raises(ModelNotReadyError):
        lifecycle.estimator

    gate.set()
    assert lifecycle.wait(timeout=10) is stub
    assert lifecycle.state is ModelState.READY
    assert lifecycle.estimator is stub
    assert lifecycle.estimator.predict([1000, 1, 1, 1, 1.2]) == 1_200_000


def test_on_ready_delivers_estimator():
    gate = threading.Event()
    stub = Estimator(ConstantModel(1.0))
    lifecycle = EstimatorLifecycle(_gated(stub, gate))

    delivered = threading.Event()
    received = []

    def callback(estimator):
        received.append(estimator)
        delivered.set()

    lifecycle.on_ready(callback)
    assert not delivered.is_set()
    gate.set()
    assert delivered.wait(timeout=10)
    assert received == [stub]


def test_on_ready_after_completion_runs_immediately():
    stub = Estimator(ConstantModel(1.0))
    lifecycle = EstimatorLifecycle(lambda: stub)
    lifecycle.wait(timeout=10)

    received = []
    lifecycle.on_ready(received.append)
    assert received == [stub]


def test_training_failure_surfaces_on_wait():
    def broken():
        raise RuntimeError("diverged")

    lifecycle = EstimatorLifecycle(broken)
    with pytest.raises(RuntimeError, match="diverged"):
        lifecycle.wait(timeout=10)
    assert lifecycle.state is ModelState.LOADING

    received = []
    lifecycle.on_ready(received.append)
    assert received == []


def test_initialize_trains_in_background():
    lifecycle = initialize(epochs=5)
    estimator = lifecycle.wait(timeout=60)
    assert lifecycle.ready
    assert isinstance(estimator, Estimator)
    assert len(estimator.model.loss_history) == 5
