# topmark:header:start
#
#   project      : WasmDocs
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Pytest configuration for the WasmDocs test suite.

Subprocesses are never spawned: the `fake_run` fixture replaces
`subprocess.run` as seen by the pipeline runner and records every command.
Each test runs from its own temporary working directory so no configuration
file from the repository is discovered.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from wasmdocs.config.model import DocsConfig, MutableDocsConfig
from wasmdocs.constants import LOG_LEVEL_ENV_VAR
from wasmdocs.pipeline import runner

F = TypeVar("F", bound=Callable[..., object])


def as_typed_mark(mark: Any) -> Callable[[F], F]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: Callable[[F], F] = as_typed_mark(pytest.mark.cli)


@dataclass
class FakeRun:
    """Stand-in for `subprocess.run` that records commands instead of running them.

    Attributes:
        calls (list[tuple[str, ...]]): Every argv received, in call order.
        cwds (list[Path | None]): Working directory of every call.
        failures (dict[str, int]): Return code to report when the key occurs
            anywhere in the argv.
        missing (set[str]): Executables that raise `FileNotFoundError`.
        forbidden (set[str]): Executables that raise `PermissionError`.
    """

    calls: list[tuple[str, ...]] = field(default_factory=lambda: [])
    cwds: list[Path | None] = field(default_factory=lambda: [])
    failures: dict[str, int] = field(default_factory=lambda: {})
    missing: set[str] = field(default_factory=lambda: set())
    forbidden: set[str] = field(default_factory=lambda: set())

    def __call__(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        check: bool = False,
    ) -> subprocess.CompletedProcess[bytes]:
        argv: tuple[str, ...] = tuple(args)
        self.calls.append(argv)
        self.cwds.append(cwd)
        if argv[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        if argv[0] in self.forbidden:
            raise PermissionError(13, "Permission denied", argv[0])
        for needle, code in self.failures.items():
            if needle in argv:
                return subprocess.CompletedProcess(argv, code)
        return subprocess.CompletedProcess(argv, 0)

    def by_executable(self, executable: str) -> list[tuple[str, ...]]:
        """Return the recorded calls whose argv starts with ``executable``."""
        return [c for c in self.calls if c[0] == executable]

    def generator_calls(self, generator: str = "typedoc") -> list[tuple[str, ...]]:
        """Return the recorded documentation generator calls."""
        return self.by_executable(generator)

    def option_values(self, option: str, generator: str = "typedoc") -> list[str]:
        """Return the value following ``option`` in each generator call."""
        return [c[c.index(option) + 1] for c in self.generator_calls(generator)]


@pytest.fixture(autouse=True)
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from an empty temporary project directory.

    Also ensures the runtime log level is not forced via the environment.

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    return cwd


@pytest.fixture(autouse=True)
def reset_root_logging() -> Iterator[None]:
    """Drop handlers installed by the CLI so later tests never log to a closed stream."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
    """Replace `subprocess.run` in the pipeline runner with a recording fake."""
    fake = FakeRun()
    monkeypatch.setattr(runner.subprocess, "run", fake)
    return fake


def make_config(**overrides: Any) -> DocsConfig:
    """Return a frozen `DocsConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Field values set on the mutable layer before freezing.

    Returns:
        DocsConfig: An immutable configuration snapshot.
    """
    m = MutableDocsConfig(root=Path.cwd())
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
