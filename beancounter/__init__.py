"""Bean counter (Galton box) simulator.

Beans are dropped through a triangular grid of pegs; at every peg a bean
falls left or right, and the beans pile up in slots at the bottom to
approximate a binomial distribution.

Getting started:
    from beancounter import BeanMode, create_beans, create_machine, SimulationEngine

    machine = create_machine()
    machine.reset(create_beans(400, BeanMode.LUCK))
    SimulationEngine().run(machine)
    print(machine.get_slot_bean_counts())
"""

from beancounter.core.bean import Bean
from beancounter.core.bean_enums import BeanMode, FallDirection
from beancounter.core.builders import create_beans, create_machine, create_random_source
from beancounter.core.exceptions import BeanCounterError, ConfigurationError
from beancounter.core.invariants import InvariantChecker
from beancounter.core.machine import BeanCounterLogic
from beancounter.core.simulation_engine import SimulationEngine
from beancounter.interfaces.machine import IBeanMachine
from beancounter.utils.config_loader import get_config, load_config

__all__ = [
    # Core
    "Bean",
    "BeanMode",
    "FallDirection",
    "BeanCounterLogic",
    "IBeanMachine",
    "SimulationEngine",
    "InvariantChecker",
    # Factories
    "create_beans",
    "create_machine",
    "create_random_source",
    # Configuration
    "get_config",
    "load_config",
    # Errors
    "BeanCounterError",
    "ConfigurationError",
]
