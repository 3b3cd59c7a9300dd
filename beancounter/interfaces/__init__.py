"""Interface abstractions for the bean counter.

- IBeanMachine: Galton box state machine (abstract base class)
- RandomSource: injected randomness protocol (random.Random satisfies it)
- StepObserver: read-only collaborator notified after each step
- BeanMode, FallDirection: re-exported from core for convenience
"""

from beancounter.core.bean_enums import BeanMode, FallDirection
from beancounter.interfaces.machine import IBeanMachine
from beancounter.interfaces.observer import StepObserver
from beancounter.interfaces.random_source import RandomSource

__all__ = [
    "IBeanMachine",
    "RandomSource",
    "StepObserver",
    "BeanMode",
    "FallDirection",
]
