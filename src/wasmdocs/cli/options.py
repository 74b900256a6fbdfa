# topmark:header:start
#
#   project      : WasmDocs
#   file         : options.py
#   file_relpath : src/wasmdocs/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Common CLI option utilities.

Centralizes the reusable options (verbosity, color, configuration overrides)
and their resolution logic so the command itself stays thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from wasmdocs.cli.errors import WasmdocsUsageError
from wasmdocs.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings: unknown options (``--keygen``, build flags) are
#: passed through as positional arguments.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: A logging-style level: TRACE (``-vvv``), DEBUG (``-vv``),
            INFO (``-v``), ERROR (``-q``), WARNING by default.

    Raises:
        WasmdocsUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise WasmdocsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. With -v, print each command line.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress progress output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` option to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable ANSI colors in program output.",
    )(f)


def config_override_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the configuration file and override options to a command."""
    f = click.option(
        "--skip-build",
        "skip_build",
        is_flag=True,
        help="Do not run the upstream build step.",
    )(f)
    f = click.option(
        "--build-script",
        "build_script",
        type=str,
        default=None,
        metavar="PATH",
        help="Upstream build step to run first (default: ./build-web).",
    )(f)
    f = click.option(
        "--generator",
        "generator",
        type=str,
        default=None,
        metavar="EXE",
        help="Documentation generator executable (default: typedoc).",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Configuration file (wasmdocs.toml, or a pyproject.toml with [tool.wasmdocs]).",
    )(f)
    return f
