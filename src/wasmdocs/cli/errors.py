# topmark:header:start
#
#   project      : WasmDocs
#   file         : errors.py
#   file_relpath : src/wasmdocs/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Exceptions for the WasmDocs CLI.

Raise these in CLI code to signal errors with standardized messages and exit
codes. They prefer the project console if one is present in the Click context
(see `show()`); otherwise Click's default styling applies.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from wasmdocs.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from wasmdocs.pipeline.runner import StepFailedError


class WasmdocsError(click.ClickException):
    """Base class for all WasmDocs CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class WasmdocsUsageError(WasmdocsError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class WasmdocsConfigError(WasmdocsError):
    """Error for configuration errors (unreadable/invalid config)."""

    exit_code = ExitCode.CONFIG_ERROR


class WasmdocsStepFailedError(WasmdocsError):
    """A build or generator step failed; the CLI exits with that step's status."""

    def __init__(self, error: StepFailedError) -> None:
        super().__init__(str(error))
        self.exit_code = error.returncode
        self.step = error.step
