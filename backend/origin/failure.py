"""
backend.origin.failure

Purpose:
    Failure injection for the origin handler. The handler receives a FailureSource
    (a zero-arg callable returning True when the call should fail) so tests can force
    either branch without touching randomness.

Author:
    Kanir Pandya

Created:
    2026-02-16
"""

from __future__ import annotations

import random
from typing import Callable, Optional

FailureSource = Callable[[], bool]

DEFAULT_FAILURE_RATE = 0.25


class RandomFailureInjector:
    """
    Independent draw per call: fails with probability `rate`.
    """

    def __init__(self, rate: float = DEFAULT_FAILURE_RATE, rng: Optional[random.Random] = None) -> None:
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"failure rate must be within [0, 1], got {rate}")
        self.rate = rate
        self._rng = rng or random.Random()

    def __call__(self) -> bool:
        return self._rng.random() < self.rate

    def __repr__(self) -> str:
        return f"RandomFailureInjector(rate={self.rate})"


def never_fail() -> bool:
    return False


def always_fail() -> bool:
    return True
