# topmark:header:start
#
#   project      : WasmDocs
#   file         : surfaces.py
#   file_relpath : src/wasmdocs/surfaces.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Documentation surfaces of the WASM32 SDK.

A *surface* is one of the four documentation outputs: Key Generation, RPC,
Core and the full combined SDK. Each surface is built from its own TypeScript
entry file into its own output directory.

The first command-line argument selects the surface to build:

| Argument    | Surface                      |
|-------------|------------------------------|
| `--keygen`  | Key Generation               |
| `--rpc`     | RPC                          |
| `--core`    | Core                         |
| `--sdk`     | full SDK                     |
| none/other  | all four, in `BUILD_ORDER`   |
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from wasmdocs.config.logging import get_logger
from wasmdocs.constants import PROJECT_NAME

if TYPE_CHECKING:
    from collections.abc import Mapping

    from wasmdocs.config.logging import WasmdocsLogger

logger: WasmdocsLogger = get_logger(__name__)


class Surface(str, Enum):
    """Documentation surface identifiers.

    The value is the key used in configuration files (``[surfaces.<key>]``).
    """

    KEYGEN = "keygen"
    RPC = "rpc"
    CORE = "core"
    SDK = "sdk"

    @property
    def flag(self) -> str:
        """Command-line argument selecting this surface (e.g. ``--keygen``)."""
        return f"--{self.value}"

    @classmethod
    def from_flag(cls, arg: str | None) -> Surface | None:
        """Return the surface selected by ``arg``, or ``None`` if it selects none."""
        if arg is None:
            return None
        for surface in cls:
            if surface.flag == arg:
                return surface
        return None


@dataclass(frozen=True, slots=True)
class SurfaceSpec:
    """Per-surface generator arguments.

    Attributes:
        surface (Surface): The surface these values belong to.
        name (str): Project name shown in the generated documentation (``--name``).
        out (str): Output directory (``--out``).
        entry (str): Entry file passed as the generator's input.
    """

    surface: Surface
    name: str
    out: str
    entry: str


BUILD_ORDER: Final[tuple[Surface, ...]] = (
    Surface.KEYGEN,
    Surface.RPC,
    Surface.CORE,
    Surface.SDK,
)

DEFAULT_SURFACES: Final[Mapping[Surface, SurfaceSpec]] = {
    Surface.KEYGEN: SurfaceSpec(
        surface=Surface.KEYGEN,
        name=f"{PROJECT_NAME} - Key Generation",
        out="docs/kaspa-keygen",
        entry="build/docs/kaspa-keygen.ts",
    ),
    Surface.RPC: SurfaceSpec(
        surface=Surface.RPC,
        name=f"{PROJECT_NAME} - RPC",
        out="docs/kaspa-rpc",
        entry="build/docs/kaspa-rpc.ts",
    ),
    Surface.CORE: SurfaceSpec(
        surface=Surface.CORE,
        name=f"{PROJECT_NAME} - Core",
        out="docs/kaspa-core",
        entry="build/docs/kaspa-core.ts",
    ),
    Surface.SDK: SurfaceSpec(
        surface=Surface.SDK,
        name=PROJECT_NAME,
        out="docs/kaspa",
        entry="build/docs/kaspa.ts",
    ),
}


def select_surfaces(arg: str | None) -> tuple[Surface, ...]:
    """Resolve the surfaces to build from the first command-line argument.

    Args:
        arg (str | None): The first positional argument, or ``None`` if absent.

    Returns:
        tuple[Surface, ...]: A single surface for a recognized flag, otherwise
            every surface in `BUILD_ORDER`.
    """
    surface: Surface | None = Surface.from_flag(arg)
    if surface is None:
        logger.debug("No surface selected by %r; building all surfaces", arg)
        return BUILD_ORDER
    logger.debug("Surface selected by %r: %s", arg, surface.value)
    return (surface,)
