"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Callable

import pytest


class CallRecorder:
    """Zero-argument factory that records how many times it was invoked."""

    def __init__(self, value: Any = None, error: BaseException | None = None):
        self.value = value
        self.error = error
        self.calls = 0

    def __call__(self) -> Any:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.value

    @property
    def called(self) -> bool:
        return self.calls > 0


@pytest.fixture
def recorder() -> Callable[..., CallRecorder]:
    """Build call recorders: ``recorder(10)`` or ``recorder(error=ValueError())``."""
    return CallRecorder
