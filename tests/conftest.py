"""
Pytest configuration and shared fixtures for the bean counter test suite.
"""

import sys
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

# Ensure project root is on PYTHONPATH so 'beancounter' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from beancounter.core.bean import Bean  # noqa: E402
from beancounter.core.bean_enums import FallDirection  # noqa: E402
from beancounter.core.machine import BeanCounterLogic  # noqa: E402
from beancounter.utils.config_loader import clear_config_cache  # noqa: E402


class ScriptedRandom:
    """Random source returning preset values.

    gauss() always returns ``sample``; randrange() cycles through ``flips``.
    """

    def __init__(self, sample: float = 0.0, flips=(0,)):
        self.sample = sample
        self.flips = list(flips)
        self.gauss_calls = []
        self.randrange_calls = 0

    def gauss(self, mu: float, sigma: float) -> float:
        self.gauss_calls.append((mu, sigma))
        return self.sample

    def randrange(self, stop: int) -> int:
        value = self.flips[self.randrange_calls % len(self.flips)]
        self.randrange_calls += 1
        return value


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def machine():
    """A 4-slot machine (3 rows of pegs) with its seed bean at the top."""
    return BeanCounterLogic(4)


@pytest.fixture
def make_bean():
    """Factory for stub beans that always fall the same way."""

    def _make(direction: FallDirection = FallDirection.LEFT) -> Mock:
        bean = Mock(spec=Bean)
        bean.fall.return_value = direction
        return bean

    return _make
