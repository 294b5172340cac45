# SPDX-License-Identifier: MIT
"""CLI configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    """Read a boolean environment variable."""
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean value for {name}: {raw!r}")


@dataclass
class CLIConfig:
    """Configuration for the h-version command.

    Attributes:
        legacy_debug: Render diagnostics with the epoch repeated in the
            build_metadata field instead of the real build metadata
        color: Use colored output for errors and warnings
    """

    legacy_debug: bool = True
    color: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CLIConfig":
        """Create configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigError: If a variable holds an unrecognized value
        """
        if environ is None:
            environ = os.environ

        config = cls()
        config.legacy_debug = _env_flag(environ, "H_VERSION_LEGACY_DEBUG", config.legacy_debug)
        config.color = _env_flag(environ, "H_VERSION_COLOR", config.color)

        # https://no-color.org
        if environ.get("NO_COLOR"):
            config.color = False

        return config
