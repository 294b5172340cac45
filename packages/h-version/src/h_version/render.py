# SPDX-License-Identifier: MIT
"""Rendering of parsed versions as display and diagnostic strings."""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .version import Version

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}

# Categories written as \u{..}: controls, format, unassigned, private use,
# surrogates and line/paragraph separators. Spaces other than " " too.
_UNPRINTABLE_CATEGORIES = {"Cc", "Cf", "Cn", "Co", "Cs", "Zl", "Zp"}


def format_version(version: Version) -> str:
    """Return the canonical display string of a version.

    The shape is ``[epoch:]c1.c2...cn[-pre_release][+build_metadata]``.

    Examples:
        >>> from h_version import parse_version
        >>> format_version(parse_version("1:23423.553.845-rc+255"))
        '1:23423.553.845-rc+255'
    """
    text = ".".join(version.components)
    if version.epoch is not None:
        text = f"{version.epoch}:{text}"
    if version.pre_release is not None:
        text += f"-{version.pre_release}"
    if version.build_metadata is not None:
        text += f"+{version.build_metadata}"
    return text


def _is_unprintable(char: str) -> bool:
    category = unicodedata.category(char)
    if category == "Zs":
        return char != " "
    return category in _UNPRINTABLE_CATEGORIES


def _quote(token: str) -> str:
    chars = []
    for char in token:
        if char in _ESCAPES:
            chars.append(_ESCAPES[char])
        elif _is_unprintable(char):
            chars.append(f"\\u{{{ord(char):x}}}")
        else:
            chars.append(char)
    return '"' + "".join(chars) + '"'


def debug_string(version: Version, *, legacy: bool = True) -> str:
    """Return a fixed-field diagnostic rendering of a version.

    Args:
        version: The version to describe
        legacy: When True, the ``build_metadata`` field repeats the epoch,
            matching the output existing consumers were written against.
            When False, it shows the real build metadata.

    Examples:
        >>> from h_version import parse_version
        >>> debug_string(parse_version("1:2.3.4+7"))
        'epoch:1 components:["2", "3", "4"] pre_release: build_metadata:1'
        >>> debug_string(parse_version("1:2.3.4+7"), legacy=False)
        'epoch:1 components:["2", "3", "4"] pre_release: build_metadata:7'
    """
    epoch = version.epoch if version.epoch is not None else 0
    components = "[" + ", ".join(_quote(c) for c in version.components) + "]"
    pre_release = version.pre_release or ""
    if legacy:
        build_metadata = str(epoch)
    else:
        build_metadata = version.build_metadata or ""
    return (
        f"epoch:{epoch} components:{components} "
        f"pre_release:{pre_release} build_metadata:{build_metadata}"
    )
