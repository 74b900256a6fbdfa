# topmark:header:start
#
#   project      : WasmDocs
#   file         : planner.py
#   file_relpath : src/wasmdocs/pipeline/planner.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Turn a configuration and a surface selection into an ordered build plan."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wasmdocs.config.logging import get_logger
from wasmdocs.constants import BUILD_STEP_NAME
from wasmdocs.pipeline.steps import Step

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wasmdocs.config.logging import WasmdocsLogger
    from wasmdocs.config.model import DocsConfig
    from wasmdocs.surfaces import Surface, SurfaceSpec

logger: WasmdocsLogger = get_logger(__name__)


def build_step(config: DocsConfig, forward_args: Sequence[str]) -> Step:
    """Return the upstream build step, forwarding the CLI arguments unchanged."""
    return Step(
        name=BUILD_STEP_NAME,
        label=f"web build ({config.build_script})",
        argv=(config.build_script, *forward_args),
        cwd=config.root,
    )


def generator_argv(config: DocsConfig, spec: SurfaceSpec) -> tuple[str, ...]:
    """Return the documentation generator command line for one surface.

    The order mirrors the generator invocation of the original wrapper:
    ``--name``, ``--sourceLinkExternal``, ``--readme``, ``--options``, ``--out``
    and finally the entry file.
    """
    argv: list[str] = [config.generator, "--name", spec.name]
    if config.source_link_external:
        argv.append("--sourceLinkExternal")
    argv += ["--readme", config.readme]
    argv += ["--options", config.options]
    argv += ["--out", spec.out]
    argv.append(spec.entry)
    return tuple(argv)


def surface_step(config: DocsConfig, surface: Surface) -> Step:
    """Return the generator step for ``surface``."""
    spec: SurfaceSpec = config.surface(surface)
    return Step(
        name=surface.value,
        label=spec.name,
        argv=generator_argv(config, spec),
        cwd=config.root,
    )


def make_plan(
    config: DocsConfig,
    selection: Sequence[Surface],
    forward_args: Sequence[str] = (),
) -> tuple[Step, ...]:
    """Plan a documentation build.

    Args:
        config (DocsConfig): Resolved configuration.
        selection (Sequence[Surface]): Surfaces to build, in build order.
        forward_args (Sequence[str]): Arguments forwarded to the build step.

    Returns:
        tuple[Step, ...]: The build step (unless ``config.skip_build``) followed
            by one generator step per selected surface.
    """
    steps: list[Step] = []
    if config.skip_build:
        logger.info("Skipping upstream build step")
    else:
        steps.append(build_step(config, forward_args))
    steps.extend(surface_step(config, s) for s in selection)
    logger.debug("Planned %d step(s): %s", len(steps), [s.name for s in steps])
    return tuple(steps)
