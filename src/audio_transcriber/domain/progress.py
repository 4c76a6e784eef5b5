"""Advisory progress reporting, kept separate from provider job status."""

import threading
from collections.abc import Callable

ProgressCallback = Callable[[float], None]


class ProgressTracker:
    """
    Synthetic, monotonically non-decreasing progress estimate.

    The estimate is not derived from the provider. It advances by a fixed step
    on every call to ``advance`` but never passes ``ceiling`` until
    ``complete`` snaps it to 100.
    """

    def __init__(
        self,
        callback: ProgressCallback | None = None,
        step: float = 10.0,
        ceiling: float = 90.0,
    ):
        self._callback = callback
        self._step = step
        self._ceiling = ceiling
        self._value = 0.0
        self._lock = threading.Lock()

    @property
    def value(self) -> float:
        return self._value

    def advance(self) -> float:
        with self._lock:
            if self._value < 100.0:
                self._value = min(self._value + self._step, self._ceiling)
            value = self._value
        self._emit(value)
        return value

    def complete(self) -> float:
        with self._lock:
            self._value = 100.0
        self._emit(100.0)
        return 100.0

    def _emit(self, value: float) -> None:
        if self._callback is not None:
            self._callback(value)
