"""Tool configuration and YAML loading."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import StrEnum
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_INDENT_UNIT = 4
DEFAULT_EXECUTABLE = "amber"
CONFIG_SECTION = "amberpy"


class ConfigError(ValueError):
    """Raised for invalid configuration values or files."""


class UnlocatedPolicy(StrEnum):
    """What to do with a diagnostic header that never receives a location."""

    DROP = "drop"
    KEEP = "keep"


@dataclass(frozen=True, slots=True)
class AmberConfig:
    """Settings passed explicitly into parser, indenter and CLI calls."""

    indent_unit: int = DEFAULT_INDENT_UNIT
    strip_ansi: bool = True
    executable: str = DEFAULT_EXECUTABLE
    unlocated: UnlocatedPolicy = UnlocatedPolicy.DROP

    def __post_init__(self):
        if isinstance(self.indent_unit, bool) or not isinstance(self.indent_unit, int):
            raise ConfigError(f"indent_unit must be an integer, got {self.indent_unit!r}")
        if self.indent_unit < 1:
            raise ConfigError(f"indent_unit must be positive, got {self.indent_unit}")
        if not isinstance(self.strip_ansi, bool):
            raise ConfigError(f"strip_ansi must be a boolean, got {self.strip_ansi!r}")
        if not isinstance(self.executable, str) or not self.executable.strip():
            raise ConfigError("executable must be a non-empty string")
        if not isinstance(self.unlocated, UnlocatedPolicy):
            try:
                object.__setattr__(self, "unlocated", UnlocatedPolicy(self.unlocated))
            except ValueError as exc:
                choices = ", ".join(policy.value for policy in UnlocatedPolicy)
                raise ConfigError(f"unlocated must be one of {choices}, got {self.unlocated!r}") from exc

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "AmberConfig":
        """Build a config from plain data, rejecting unknown keys."""
        known = {field.name for field in fields(AmberConfig)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return AmberConfig(**dict(data))

    def with_overrides(self, **overrides: Any) -> "AmberConfig":
        """Copy with the non-None overrides applied (CLI flags)."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self


def load_config(path: str | Path) -> AmberConfig:
    """Load an AmberConfig from a YAML file.

    The settings may sit at the top level or under an `amberpy:` section.
    An empty file yields the defaults.
    """
    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if raw is None:
        logger.debug("Empty config file %s, using defaults", config_path)
        return AmberConfig()
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    if CONFIG_SECTION in raw:
        raw = raw[CONFIG_SECTION] or {}
        if not isinstance(raw, Mapping):
            raise ConfigError(f"`{CONFIG_SECTION}` section in {config_path} must be a mapping")

    config = AmberConfig.from_mapping(raw)
    logger.debug("Loaded config from %s: %s", config_path, config)
    return config
