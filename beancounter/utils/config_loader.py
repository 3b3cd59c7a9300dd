"""Helpers for loading and validating bean counter configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml  # type: ignore[import-untyped]

from beancounter.core.exceptions import ConfigurationError
from beancounter.utils.consts import ConstUtils


@dataclass(frozen=True)
class MachineConfig:
    slot_count: int = ConstUtils.DEFAULT_SLOT_COUNT


@dataclass(frozen=True)
class SkillConfig:
    mean_factor: float = ConstUtils.SKILL_MEAN_FACTOR
    variance_factor: float = ConstUtils.SKILL_VARIANCE_FACTOR


@dataclass(frozen=True)
class BeanCounterConfig:
    machine: MachineConfig
    skill: SkillConfig


# Configuration cache keyed by resolved path
_LOADER_CACHE: dict[str, BeanCounterConfig] = {}


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled config lives at beancounter/config.yaml
        base = Path(__file__).parent.parent / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("Config root must be a mapping")
    return raw


def _parse_config_from_dict(raw: dict[str, Any]) -> BeanCounterConfig:
    try:
        machine_raw = raw["machine"]
        skill_raw = raw.get("skill") or {}

        cfg = BeanCounterConfig(
            machine=MachineConfig(slot_count=int(machine_raw["slot_count"])),
            skill=SkillConfig(
                mean_factor=float(
                    skill_raw.get("mean_factor", ConstUtils.SKILL_MEAN_FACTOR)
                ),
                variance_factor=float(
                    skill_raw.get("variance_factor", ConstUtils.SKILL_VARIANCE_FACTOR)
                ),
            ),
        )
    except KeyError as exc:
        raise ConfigurationError(f"Missing required config key: {exc}") from exc
    except (TypeError, ValueError, AttributeError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    _validate_config(cfg)
    return cfg


def _validate_config(cfg: BeanCounterConfig) -> None:
    """Basic sanity checks to fail fast on bad configs."""
    if cfg.machine.slot_count < 1:
        raise ConfigurationError("machine.slot_count", "must be >= 1")
    if cfg.skill.mean_factor < 0:
        raise ConfigurationError("skill.mean_factor", "must be >= 0")
    if cfg.skill.variance_factor < 0:
        raise ConfigurationError("skill.variance_factor", "must be >= 0")


def load_config(path: Optional[str] = None) -> BeanCounterConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            beancounter/config.yaml.

    Returns:
        BeanCounterConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_config_from_dict(raw=raw)


def get_config(path: Optional[str] = None) -> BeanCounterConfig:
    """Return the loaded config for path, loading and caching if necessary.

    Repeated calls for the same path return the cached instance without
    re-reading the YAML file.
    """
    key = str(Path(_get_config_path(path=path)).resolve())
    if key not in _LOADER_CACHE:
        _LOADER_CACHE[key] = load_config(path=path)
    return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    _LOADER_CACHE.clear()
