"""
Engine Configuration

This module holds the engine defaults and reads overrides from
CLASSICIPHER_* environment variables.
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

OUTPUT_FORMATS = ('no-spaces', 'five-group')

# Default engine parameters
ENGINE_DEFAULT_PARAMS = {
    'output_format': 'no-spaces',  # or 'five-group'
    'group_size': 5,               # letters per group in five-group output
    'log_level': 'WARNING',
    'hill_attempts': 1000,         # draws before Hill key generation gives up
}

ENV_PREFIX = 'CLASSICIPHER_'


@dataclass
class EngineConfig:
    """Resolved engine settings."""
    output_format: str = ENGINE_DEFAULT_PARAMS['output_format']
    group_size: int = ENGINE_DEFAULT_PARAMS['group_size']
    log_level: str = ENGINE_DEFAULT_PARAMS['log_level']
    hill_attempts: int = ENGINE_DEFAULT_PARAMS['hill_attempts']

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {', '.join(OUTPUT_FORMATS)}")
        if self.group_size <= 0:
            raise ValueError("Group size must be positive")
        if self.hill_attempts <= 0:
            raise ValueError("Hill attempts must be positive")

        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _int_setting(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name.upper()} must be an integer, got {raw!r}")


def load_config(environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
    """
    Build the engine configuration from defaults and environment.

    Args:
        environ: Mapping to read overrides from (default: os.environ)

    Returns:
        The resolved EngineConfig

    Raises:
        ValueError: If an override is malformed
    """
    if environ is None:
        environ = os.environ

    settings = dict(ENGINE_DEFAULT_PARAMS)
    for name, default in ENGINE_DEFAULT_PARAMS.items():
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is None:
            continue
        settings[name] = _int_setting(name, raw) if isinstance(default, int) else raw

    return EngineConfig(**settings)
