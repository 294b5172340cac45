# SPDX-License-Identifier: MIT
"""CLI entry point for the h-version command."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

import click

from h_version import compare_versions, debug_string, parse_version

from . import __version__
from .config import CLIConfig, ConfigError

# Exit status for a wrong number of arguments (EX_USAGE).
EXIT_USAGE = 64


def echo_error(message: str, color: bool = True) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red" if color else None, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str, color: bool = True) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow" if color else None, err=True)


@contextmanager
def debug_logging(enabled: bool) -> Iterator[None]:
    """Send h_version debug logs to stderr while the block runs."""
    if not enabled:
        yield
        return

    logger = logging.getLogger("h_version")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__, prog_name="h-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show how each version was parsed and which part decided the result.",
)
@click.option(
    "--legacy-debug/--metadata",
    "legacy_debug",
    default=None,
    help="Diagnostic format: repeat the epoch in build_metadata (legacy) or show real metadata.",
)
@click.argument("versions", nargs=-1)
def cli(verbose: bool, legacy_debug: Optional[bool], versions: tuple[str, ...]) -> None:
    """Compare two version strings.

    Prints whether VERSION1 is less than, equal to, or greater than VERSION2.
    Build metadata (after "+") is ignored when comparing.

    \b
    Examples:
        h-version 1.2.3-alpha+001 1.2.3-beta+002
        h-version 1:2.3.4 2023.03.01
        h-version -v 1.0.0-SNAPSHOT 1.0.0
    """
    if len(versions) != 2:
        echo_info("there must be two arguments")
        sys.exit(EXIT_USAGE)

    config = CLIConfig.from_env()
    if legacy_debug is None:
        legacy_debug = config.legacy_debug

    text1, text2 = versions
    version1 = parse_version(text1)
    version2 = parse_version(text2)

    if verbose:
        for text, version in ((text1, version1), (text2, version2)):
            echo_info(f"{text}: {debug_string(version, legacy=legacy_debug)}")
        has_metadata = version1.build_metadata is not None or version2.build_metadata is not None
        if legacy_debug and has_metadata:
            echo_warning(
                "legacy diagnostics show the epoch in build_metadata; use --metadata to see it",
                color=config.color,
            )

    with debug_logging(verbose):
        ordering = compare_versions(version1, version2)
    echo_info(f"{text1} is {ordering.phrase} {text2}")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e), color=not os.environ.get("NO_COLOR"))
        sys.exit(1)


if __name__ == "__main__":
    main()
