"""Simulator configuration."""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Union

from .errors import ConfigError

# camelCase option names accepted alongside the field names
OPTION_ALIASES = {
    "parseTo": "parse_to",
    "memorySize": "memory_size",
    "errorLogging": "error_logging",
    "debug": "debug",
    "logging": "logging",
}


@dataclass(frozen=True)
class SimulatorConfig:
    """Options fixed for the lifetime of a simulator."""
    parse_to: str = "hexadecimal"
    memory_size: int = 4096
    error_logging: bool = False
    debug: bool = False
    logging: bool = True

    def __post_init__(self):
        if (
            not isinstance(self.memory_size, int)
            or isinstance(self.memory_size, bool)
            or self.memory_size < 1
        ):
            raise ConfigError(f"memory_size must be a positive integer, got {self.memory_size!r}")
        if not isinstance(self.parse_to, str):
            raise ConfigError(f"parse_to must be a string, got {self.parse_to!r}")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "SimulatorConfig":
        """Merge an options mapping over the defaults."""
        return cls().merged(options or {})

    def merged(self, options: Mapping[str, Any]) -> "SimulatorConfig":
        """Return a copy with the given options applied."""
        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in options.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"Unknown option: {key}")
            changes[name] = value
        return replace(self, **changes)


ConfigLike = Union[SimulatorConfig, Mapping[str, Any], None]


def resolve_config(config: ConfigLike) -> SimulatorConfig:
    if isinstance(config, SimulatorConfig):
        return config
    return SimulatorConfig.from_options(config)
