# SPDX-License-Identifier: MIT
"""Loose version parsing and comparison.

This package parses free-form version strings (epoch-prefixed, semver-like,
date or alphanumeric schemes) and orders them by precedence. Any string is
accepted; nothing is rejected as invalid.

Example:
    >>> from h_version import parse_version, compare_versions
    >>>
    >>> version = parse_version("1:2.3.4-rc+255")
    >>> version.epoch
    1
    >>> version.components
    ('2', '3', '4')
    >>> str(version)
    '1:2.3.4-rc+255'
    >>>
    >>> compare_versions("1.0.0-SNAPSHOT", "1.2.3-alpha+001")
    <Ordering.LESS: -1>
"""

__version__ = "0.1.0"

from .version import (
    Version,
    parse_version,
    parse_unsigned,
    is_numeric_component,
    MAX_NUMERIC,
)
from .compare import (
    Ordering,
    compare_versions,
    version_key,
    sort_versions,
    max_version,
)
from .render import (
    format_version,
    debug_string,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "parse_unsigned",
    "is_numeric_component",
    "MAX_NUMERIC",
    # Version comparison
    "Ordering",
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
    # Rendering
    "format_version",
    "debug_string",
]
