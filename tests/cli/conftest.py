# topmark:header:start
#
#   project      : WasmDocs
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""CLI test helpers.

`run_cli` invokes the Click command in-process with `CliRunner`; the
autouse `isolation` fixture has already moved the working directory to an
empty temporary project.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from wasmdocs.cli.exit_codes import ExitCode
from wasmdocs.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(argv: Sequence[str] | None = None) -> Result:
    """Invoke the CLI with ``argv`` and return the Click result.

    Args:
        argv (Sequence[str] | None): CLI argument vector, e.g. ``["--rpc"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv or []), obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: int) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
