# topmark:header:start
#
#   project      : WasmDocs
#   file         : steps.py
#   file_relpath : src/wasmdocs/pipeline/steps.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Pipeline step model."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class Step:
    """A single external command in a documentation build.

    Attributes:
        name (str): Stable step identifier: ``"build"`` or a surface key.
        label (str): Human-readable description used in program output.
        argv (tuple[str, ...]): Command and arguments, executed without a shell.
        cwd (Path): Working directory of the command.
    """

    name: str
    label: str
    argv: tuple[str, ...]
    cwd: Path

    def display(self) -> str:
        """Return the command line as a shell-quoted string."""
        return shlex.join(self.argv)
