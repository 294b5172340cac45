# SPDX-License-Identifier: MIT
"""Version comparison.

Precedence: epoch, then components, then pre-release.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Optional, Union

from .version import Version, is_numeric_component, parse_unsigned, parse_version

logger = logging.getLogger(__name__)

VersionLike = Union[str, Version]


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_int(cls, value: int) -> "Ordering":
        """Return the Ordering matching the sign of ``value``."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    @property
    def phrase(self) -> str:
        """Return the English phrase for this ordering, e.g. "less than"."""
        return _PHRASES[self]


_PHRASES = {
    Ordering.LESS: "less than",
    Ordering.EQUAL: "equal to",
    Ordering.GREATER: "greater than",
}


def _cmp(a: Any, b: Any) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def _compare_epoch(epoch1: Optional[int], epoch2: Optional[int]) -> Ordering:
    """Compare two epochs. A missing epoch ranks below any epoch."""
    if epoch1 is None and epoch2 is None:
        return Ordering.EQUAL
    if epoch1 is None:
        return Ordering.LESS
    if epoch2 is None:
        return Ordering.GREATER
    return _cmp(epoch1, epoch2)


def _compare_components(parts1: tuple[str, ...], parts2: tuple[str, ...]) -> Ordering:
    """Compare components pairwise.

    Only the first ``min(len(parts1), len(parts2))`` positions are looked at;
    "1.2" and "1.2.3" are equal here.
    """
    for p1, p2 in zip(parts1, parts2):
        numeric1 = is_numeric_component(p1)
        numeric2 = is_numeric_component(p2)

        if numeric1 and numeric2:
            result = _cmp(parse_unsigned(p1), parse_unsigned(p2))
        elif numeric1:
            # Numeric < non-numeric, whatever the values
            return Ordering.LESS
        elif numeric2:
            return Ordering.GREATER
        else:
            result = _cmp(p1, p2)

        if result != Ordering.EQUAL:
            return result

    return Ordering.EQUAL


def _compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> Ordering:
    """Compare two pre-release strings, ignoring case.

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if pre1 is None and pre2 is None:
        return Ordering.EQUAL
    if pre1 is None:
        return Ordering.GREATER  # Release > pre-release
    if pre2 is None:
        return Ordering.LESS  # Pre-release < release
    return _cmp(pre1.lower(), pre2.lower())


_STEPS: tuple[tuple[str, Callable[[Version, Version], Ordering]], ...] = (
    ("epoch", lambda v1, v2: _compare_epoch(v1.epoch, v2.epoch)),
    ("components", lambda v1, v2: _compare_components(v1.components, v2.components)),
    ("pre_release", lambda v1, v2: _compare_prerelease(v1.pre_release, v2.pre_release)),
)


def compare_versions(version1: VersionLike, version2: VersionLike) -> Ordering:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1) if version1 < version2
        Ordering.EQUAL (0) if version1 and version2 have the same precedence
        Ordering.GREATER (1) if version1 > version2

    Raises:
        TypeError: If either argument is neither a string nor a Version

    Note:
        Build metadata is ignored, so versions that differ only in build
        metadata compare EQUAL even though they are not ``==``.

    Examples:
        >>> compare_versions("1.2.3-alpha+001", "1.2.3-beta+002")
        <Ordering.LESS: -1>
        >>> compare_versions("1:2.3.4", "1.2.3-alpha+001")
        <Ordering.GREATER: 1>
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        <Ordering.EQUAL: 0>
    """
    v1 = version1 if isinstance(version1, Version) else parse_version(version1)
    v2 = version2 if isinstance(version2, Version) else parse_version(version2)

    for step, compare_step in _STEPS:
        result = compare_step(v1, v2)
        if result != Ordering.EQUAL:
            logger.debug("%s is %s %s (decided by %s)", v1, result.phrase, v2, step)
            return result

    logger.debug("%s is equal to %s", v1, v2)
    return Ordering.EQUAL


_VersionKey = cmp_to_key(compare_versions)


def version_key(version: VersionLike) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        An object ordered the same way as ``compare_versions``

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _VersionKey(version)


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list:
    """Sort versions from lowest to highest precedence (stable)."""
    return sorted(versions, key=version_key, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> VersionLike:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If ``versions`` is empty
    """
    return max(versions, key=version_key)
