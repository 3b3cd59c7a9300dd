"""Random source interface injected into beans and machines."""

from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """Anything that can produce gaussian samples and bounded integers.

    ``random.Random`` satisfies this protocol; tests substitute scripted
    sources to force fall outcomes.
    """

    def gauss(self, mu: float, sigma: float) -> float:
        """Return a sample from a normal distribution."""
        ...

    def randrange(self, stop: int) -> int:
        """Return a uniformly chosen integer in [0, stop)."""
        ...
