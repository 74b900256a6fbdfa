# topmark:header:start
#
#   project      : WasmDocs
#   file         : main.py
#   file_relpath : src/wasmdocs/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""WasmDocs command-line entry point.

Usage::

    wasmdocs [OPTIONS] [--keygen | --rpc | --core | --sdk] [BUILD ARGS...]

The upstream build step runs first with every positional argument forwarded
to it. The first argument then selects the documentation surface to build;
without one (or with any other value) all four surfaces are built in order.
The first failing step stops the run and its status becomes the exit status.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from wasmdocs.cli.console import ClickConsole
from wasmdocs.cli.errors import WasmdocsConfigError, WasmdocsStepFailedError
from wasmdocs.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    config_override_options,
    resolve_verbosity,
)
from wasmdocs.config.loaders import resolve_config
from wasmdocs.config.logging import get_logger, resolve_env_log_level, setup_logging
from wasmdocs.config.model import ConfigError, DocsConfig, MutableDocsConfig
from wasmdocs.constants import BUILD_STEP_NAME, WASMDOCS_VERSION
from wasmdocs.pipeline.planner import make_plan
from wasmdocs.pipeline.runner import RunReport, StepFailedError, run_plan
from wasmdocs.surfaces import select_surfaces

if TYPE_CHECKING:
    from collections.abc import Callable

    from wasmdocs.cli.console import ConsoleLike
    from wasmdocs.config.logging import WasmdocsLogger
    from wasmdocs.pipeline.steps import Step
    from wasmdocs.surfaces import Surface

logger: WasmdocsLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` will be populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only.
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj.setdefault("console", ClickConsole(enable_color=not no_color))


def build_config(
    *,
    config_path: Path | None,
    generator: str | None,
    build_script: str | None,
    skip_build: bool,
) -> DocsConfig:
    """Resolve configuration files and apply CLI overrides.

    Raises:
        WasmdocsConfigError: If a configuration source is unreadable or invalid.
    """
    try:
        layer: MutableDocsConfig = resolve_config(cwd=Path.cwd(), config_path=config_path)
        cli_layer = MutableDocsConfig(
            generator=generator,
            build_script=build_script,
            skip_build=True if skip_build else None,
        )
        return layer.merge_with(cli_layer).freeze()
    except ConfigError as e:
        raise WasmdocsConfigError(str(e)) from e


def make_announcer(console: ConsoleLike, verbosity_level: int) -> Callable[[Step], None]:
    """Return the ``on_step`` callback printing progress for each step."""

    def announce(step: Step) -> None:
        if verbosity_level > logging.WARNING:
            return
        if step.name == BUILD_STEP_NAME:
            console.print(console.styled(f"Running {step.label}", bold=True))
        else:
            console.print(console.styled(f"Building {step.label} documentation", bold=True))
        if verbosity_level <= logging.INFO:
            console.print(f"  $ {step.display()}")

    return announce


@click.command(
    context_settings=CONTEXT_SETTINGS,
    help=(
        "Build the WASM32 SDK API reference. "
        "Pass --keygen, --rpc, --core or --sdk as the first argument to build a "
        "single surface; otherwise all surfaces are built. "
        "All arguments are forwarded to the upstream build step."
    ),
)
@common_verbose_options
@common_color_options
@config_override_options
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    help="Print the commands that would run, without running them.",
)
@click.version_option(WASMDOCS_VERSION, "--version", prog_name="wasmdocs")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
    generator: str | None,
    build_script: str | None,
    skip_build: bool,
    dry_run: bool,
    args: tuple[str, ...],
) -> None:
    """Entry point for the WasmDocs CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]
    verbosity_level: int = ctx.obj["verbosity_level"]

    selection: tuple[Surface, ...] = select_surfaces(args[0] if args else None)
    config: DocsConfig = build_config(
        config_path=config_path,
        generator=generator,
        build_script=build_script,
        skip_build=skip_build,
    )
    plan: tuple[Step, ...] = make_plan(config, selection, args)

    if dry_run:
        for step in plan:
            console.print(step.display())
        return

    try:
        report: RunReport = run_plan(plan, on_step=make_announcer(console, verbosity_level))
    except StepFailedError as e:
        raise WasmdocsStepFailedError(e) from e

    if verbosity_level <= logging.WARNING:
        built: int = report.count - (0 if config.skip_build else 1)
        console.print(console.styled(f"Built {built} documentation surface(s).", fg="green"))


if __name__ == "__main__":
    cli()
