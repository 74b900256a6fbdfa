# topmark:header:start
#
#   project      : WasmDocs
#   file         : runner.py
#   file_relpath : src/wasmdocs/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Run a build plan sequentially, stopping at the first failing step.

Each step runs to completion before the next one starts. A non-zero status
raises `StepFailedError`; the remaining steps are never started. Failures that
never produce an exit status are mapped to the usual shell statuses:

- executable not found: 127
- executable found but cannot be run, or missing working directory: 126
- terminated by signal ``N``: ``128 + N``
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from wasmdocs.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from wasmdocs.config.logging import WasmdocsLogger
    from wasmdocs.pipeline.steps import Step

logger: WasmdocsLogger = get_logger(__name__)

STATUS_CANNOT_EXECUTE: Final[int] = 126
STATUS_NOT_FOUND: Final[int] = 127
STATUS_SIGNAL_BASE: Final[int] = 128


class StepFailedError(Exception):
    """Raised when a step exits with a non-zero status.

    Attributes:
        step (Step): The failing step.
        returncode (int): The step's exit status (always non-zero, positive).
        reason (str): Short description of the failure.
    """

    def __init__(self, step: Step, returncode: int, reason: str) -> None:
        super().__init__(f"{step.label}: {reason}")
        self.step = step
        self.returncode = returncode
        self.reason = reason


@dataclass(frozen=True, slots=True)
class RunReport:
    """Outcome of a successful run.

    Attributes:
        completed (tuple[Step, ...]): Steps that ran, in execution order.
    """

    completed: tuple[Step, ...]

    @property
    def count(self) -> int:
        """Number of completed steps."""
        return len(self.completed)


def normalize_returncode(returncode: int) -> int:
    """Map a `subprocess` return code to a shell-style exit status.

    Negative values (terminated by a signal) become ``128 + signal``.
    """
    if returncode < 0:
        return STATUS_SIGNAL_BASE - returncode
    return returncode


def run_step(step: Step) -> None:
    """Run one step, raising `StepFailedError` on failure."""
    logger.debug("Running %s in %s: %s", step.name, step.cwd, step.display())
    if not step.cwd.is_dir():
        raise StepFailedError(
            step, STATUS_CANNOT_EXECUTE, f"working directory not found: {step.cwd}"
        )
    try:
        completed = subprocess.run(step.argv, cwd=step.cwd, check=False)
    except FileNotFoundError as e:
        raise StepFailedError(step, STATUS_NOT_FOUND, f"command not found: {step.argv[0]}") from e
    except PermissionError as e:
        raise StepFailedError(
            step, STATUS_CANNOT_EXECUTE, f"permission denied: {step.argv[0]}"
        ) from e
    except OSError as e:
        raise StepFailedError(step, STATUS_CANNOT_EXECUTE, f"cannot execute: {e}") from e

    status: int = normalize_returncode(completed.returncode)
    if status != 0:
        if completed.returncode < 0:
            reason = f"terminated by signal {-completed.returncode}"
        else:
            reason = f"exited with status {status}"
        raise StepFailedError(step, status, reason)
    logger.trace("Step %s finished", step.name)


def run_plan(
    plan: Sequence[Step],
    *,
    on_step: Callable[[Step], None] | None = None,
) -> RunReport:
    """Execute ``plan`` sequentially with fail-fast semantics.

    Args:
        plan (Sequence[Step]): Steps in execution order.
        on_step (Callable[[Step], None] | None): Called before each step starts.

    Returns:
        RunReport: The completed steps.

    Raises:
        StepFailedError: From the first step that fails; later steps do not run.
    """
    completed: list[Step] = []
    for step in plan:
        if on_step is not None:
            on_step(step)
        try:
            run_step(step)
        except StepFailedError as e:
            logger.error("Step %s failed with status %d", step.name, e.returncode)
            raise
        completed.append(step)
    logger.info("Completed %d step(s)", len(completed))
    return RunReport(completed=tuple(completed))
