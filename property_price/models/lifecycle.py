"""
Readiness lifecycle for the price estimator.

Training runs once on a background worker. `initialize()` returns an
`EstimatorLifecycle` immediately, in the `LOADING` state; it moves to `READY`
when the fit completes and never moves back. Callers either poll
(`ready`, `state`), subscribe (`on_ready`) or block (`wait`).
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Any, Callable, Optional

from property_price.models.predict import Estimator
from property_price.models.train import train_model


class ModelNotReadyError(RuntimeError):
    pass


class ModelState(Enum):
    LOADING = "loading"
    READY = "ready"


def train_estimator(**training_options: Any) -> Estimator:
    """
    Train synchronously and return the estimator. Options go to `train_model`.
    """
    return Estimator(train_model(**training_options))


class EstimatorLifecycle:
    def __init__(self, train_fn: Callable[..., Estimator] = train_estimator, **training_options: Any) -> None:
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="price-model-training")
        self._future: Future = executor.submit(train_fn, **training_options)
        # the submitted fit still runs; this only lets the worker exit afterwards
        executor.shutdown(wait=False)

    @property
    def state(self) -> ModelState:
        if self._future.done() and self._future.exception() is None:
            return ModelState.READY
        return ModelState.LOADING

    @property
    def ready(self) -> bool:
        return self.state is ModelState.READY

    @property
    def estimator(self) -> Estimator:
        if not self.ready:
            raise ModelNotReadyError("Model is still training, wait for readiness before predicting.")
        return self._future.result()

    def wait(self, timeout: Optional[float] = None) -> Estimator:
        """
        Block until training completes and return the estimator.

        Re-raises any exception raised by training.
        """
        return self._future.result(timeout=timeout)

    def on_ready(self, callback: Callable[[Estimator], Any]) -> None:
        """
        Call `callback(estimator)` once training has completed.

        Runs immediately in the calling thread if training already finished,
        otherwise on the training worker. Not called if training failed.
        """
        def _deliver(future: Future) -> None:
            if future.exception() is None:
                callback(future.result())

        self._future.add_done_callback(_deliver)


def initialize(**training_options: Any) -> EstimatorLifecycle:
    """
    Start training in the background and return its lifecycle handle.
    """
    return EstimatorLifecycle(train_estimator, **training_options)
