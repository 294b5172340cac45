# SPDX-License-Identifier: MIT
"""Version string parsing.

Accepts any string and splits it, left to right, into:
- Epoch: ``1:`` in ``1:2.3.4``
- Components: ``2``, ``3``, ``4`` (split on ``.`` and ``-``)
- Pre-release: ``-alpha``, ``-SNAPSHOT``, ``-rc.1``
- Build metadata: ``+001``, ``+build.5``

Nothing is ever rejected. Segments that are not recognized are left absent.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .render import format_version

# Largest value accepted as an unsigned number (epoch or numeric component).
MAX_NUMERIC = 2**64 - 1

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
_COMPONENT_SEPARATORS = re.compile(r"[.\-]")


def parse_unsigned(text: str) -> Optional[int]:
    """Parse ``text`` as an unsigned 64-bit integer.

    Returns None unless the whole string is ASCII digits, optionally led by
    a single ``+``, with a value no larger than ``MAX_NUMERIC``.
    """
    if not _UNSIGNED_PATTERN.fullmatch(text):
        return None
    # Leading zeros are allowed in any number; anything longer than
    # MAX_NUMERIC's 20 digits cannot fit and must not reach int().
    digits = text.removeprefix("+").lstrip("0") or "0"
    if len(digits) > len(str(MAX_NUMERIC)):
        return None
    value = int(digits)
    if value > MAX_NUMERIC:
        return None
    return value


def is_numeric_component(token: str) -> bool:
    """Return True if ``token`` compares numerically."""
    return parse_unsigned(token) is not None


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed version identifier.

    Attributes:
        epoch: Precedence override before the first ``:`` (e.g. 1 in "1:2.3.4")
        components: Raw tokens of the main version, never empty
        pre_release: Text after the first ``-`` (e.g. "alpha", "rc.1")
        build_metadata: Text after the first ``+`` (e.g. "001")

    ``==`` compares all four fields. The ordering operators follow
    ``compare_versions`` and ignore build metadata, so two versions can be
    ordered as equal while ``==`` is False.
    """

    epoch: Optional[int]
    components: tuple[str, ...]
    pre_release: Optional[str] = None
    build_metadata: Optional[str] = None

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return format_version(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _compare(self, other) >= 0

    @classmethod
    def default(cls) -> "Version":
        """Return the default version, ``0.0.1``."""
        return parse_version("0.0.1")

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.pre_release is not None

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build metadata."""
        return format_version(Version(self.epoch, self.components))


def _compare(version1: Version, version2: Version) -> int:
    from .compare import compare_versions

    return compare_versions(version1, version2)


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: Any string, e.g. "1:2.3.4-rc+001" or "2023.03.01"

    Returns:
        A Version object. Parsing never fails for a string input.

    Raises:
        TypeError: If ``version_string`` is not a string

    Examples:
        >>> parse_version("1.2.3-alpha+001")
        Version(epoch=None, components=('1', '2', '3'), pre_release='alpha', build_metadata='001')

        >>> parse_version("1:2.3.4")
        Version(epoch=1, components=('2', '3', '4'), pre_release=None, build_metadata=None)

        >>> parse_version("12345")
        Version(epoch=12345, components=('12345',), pre_release=None, build_metadata=None)
    """
    if not isinstance(version_string, str):
        raise TypeError(
            f"Version must be a string, got {type(version_string).__name__}"
        )

    # Without a colon the whole string is both the epoch candidate and the
    # remainder, so "12345" gets an epoch as well as a component.
    epoch_text, colon, rest = version_string.partition(":")
    if not colon:
        rest = version_string
    epoch = parse_unsigned(epoch_text)

    body, plus, build_metadata = rest.partition("+")
    main, dash, pre_release = body.partition("-")

    return Version(
        epoch=epoch,
        components=tuple(_COMPONENT_SEPARATORS.split(main)),
        pre_release=pre_release if dash else None,
        build_metadata=build_metadata if plus else None,
    )
