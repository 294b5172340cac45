# SPDX-License-Identifier: MIT
"""Command-line front end for h-version comparisons."""

__version__ = "0.1.0"
