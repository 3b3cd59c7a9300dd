"""Core modules for the bean counter.

- bean: single bean and its luck/skill fall policy
- bean_enums: FallDirection and BeanMode
- peg_grid: triangular (row, column) grid of in-flight beans
- machine: BeanCounterLogic, the step-driven state machine
- simulation_engine: runs a machine to completion and notifies observers
- invariants: observer that validates the machine after every step
- builders: bean population and machine factories
"""

from beancounter.core.bean import Bean
from beancounter.core.bean_enums import BeanMode, FallDirection
from beancounter.core.builders import create_beans, create_machine, create_random_source
from beancounter.core.exceptions import (
    BeanCounterError,
    ConfigurationError,
    InvariantViolationError,
    PegPositionError,
    SlotIndexError,
)
from beancounter.core.invariants import InvariantChecker
from beancounter.core.machine import BeanCounterLogic
from beancounter.core.peg_grid import PegGrid
from beancounter.core.simulation_engine import SimulationEngine

__all__ = [
    # Beans
    "Bean",
    "BeanMode",
    "FallDirection",
    # Machine
    "PegGrid",
    "BeanCounterLogic",
    "SimulationEngine",
    "InvariantChecker",
    # Factories
    "create_beans",
    "create_machine",
    "create_random_source",
    # Errors
    "BeanCounterError",
    "ConfigurationError",
    "InvariantViolationError",
    "PegPositionError",
    "SlotIndexError",
]
