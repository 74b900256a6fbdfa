# topmark:header:start
#
#   project      : WasmDocs
#   file         : model.py
#   file_relpath : src/wasmdocs/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Configuration model: immutable `DocsConfig` and its mutable builder.

`MutableDocsConfig` holds one configuration *layer*: every field is optional and
``None`` means "not set by this layer". Layers are combined with
`MutableDocsConfig.merge_with` (later layers win) and turned into an immutable
`DocsConfig` with `MutableDocsConfig.freeze`, which fills unset fields from the
built-in defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from wasmdocs.config.keys import Toml
from wasmdocs.config.logging import get_logger
from wasmdocs.constants import (
    DEFAULT_BUILD_SCRIPT,
    DEFAULT_GENERATOR,
    DEFAULT_OPTIONS_DIR,
    DEFAULT_README,
)
from wasmdocs.surfaces import DEFAULT_SURFACES, Surface, SurfaceSpec

if TYPE_CHECKING:
    from collections.abc import Mapping

    from wasmdocs.config.logging import WasmdocsLogger
    from wasmdocs.config.types import TomlTable

logger: WasmdocsLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration source cannot be read or holds invalid values."""


@dataclass(frozen=True, slots=True)
class DocsConfig:
    """Immutable, fully resolved configuration for one documentation run.

    Attributes:
        root (Path): Working directory for every subprocess.
        build_script (str): Upstream build step executable.
        skip_build (bool): If True, the upstream build step is not run.
        generator (str): Documentation generator executable.
        readme (str): Readme passed to the generator (``--readme``).
        options (str): Generator options directory (``--options``).
        source_link_external (bool): Whether ``--sourceLinkExternal`` is passed.
        surfaces (Mapping[Surface, SurfaceSpec]): Per-surface generator arguments.
        config_files (tuple[Path, ...]): Configuration files that contributed, in
            merge order.
    """

    root: Path
    build_script: str
    skip_build: bool
    generator: str
    readme: str
    options: str
    source_link_external: bool
    surfaces: Mapping[Surface, SurfaceSpec]
    config_files: tuple[Path, ...] = ()

    def surface(self, surface: Surface) -> SurfaceSpec:
        """Return the generator arguments for ``surface``."""
        return self.surfaces[surface]

    def thaw(self) -> MutableDocsConfig:
        """Return a mutable copy of this configuration with every field set."""
        return MutableDocsConfig(
            root=self.root,
            build_script=self.build_script,
            skip_build=self.skip_build,
            generator=self.generator,
            readme=self.readme,
            options=self.options,
            source_link_external=self.source_link_external,
            surfaces={
                s: {
                    Toml.KEY_NAME: spec.name,
                    Toml.KEY_OUT: spec.out,
                    Toml.KEY_ENTRY: spec.entry,
                }
                for s, spec in self.surfaces.items()
            },
            config_files=list(self.config_files),
        )


@dataclass
class MutableDocsConfig:
    """One mutable configuration layer.

    Fields left as ``None`` are not set by this layer and fall through to
    earlier layers on merge, or to the built-in defaults on `freeze`.
    """

    root: Path | None = None
    build_script: str | None = None
    skip_build: bool | None = None
    generator: str | None = None
    readme: str | None = None
    options: str | None = None
    source_link_external: bool | None = None
    surfaces: dict[Surface, dict[str, str]] = field(default_factory=lambda: {})
    config_files: list[Path] = field(default_factory=lambda: [])

    def merge_with(self, other: MutableDocsConfig) -> MutableDocsConfig:
        """Return a new layer where values set in ``other`` override this one.

        Surface overrides are merged key by key, so a later layer may change a
        single surface's output directory and keep its name and entry file.
        """
        surfaces: dict[Surface, dict[str, str]] = {s: dict(v) for s, v in self.surfaces.items()}
        for s, values in other.surfaces.items():
            surfaces.setdefault(s, {}).update(values)

        def pick(mine: Any, theirs: Any) -> Any:
            return mine if theirs is None else theirs

        return MutableDocsConfig(
            root=pick(self.root, other.root),
            build_script=pick(self.build_script, other.build_script),
            skip_build=pick(self.skip_build, other.skip_build),
            generator=pick(self.generator, other.generator),
            readme=pick(self.readme, other.readme),
            options=pick(self.options, other.options),
            source_link_external=pick(self.source_link_external, other.source_link_external),
            surfaces=surfaces,
            config_files=[*self.config_files, *other.config_files],
        )

    def freeze(self) -> DocsConfig:
        """Freeze this layer into an immutable `DocsConfig`.

        Unset fields take the built-in defaults; an unset ``root`` is the
        current working directory.

        Raises:
            ConfigError: If a string value resolves to an empty string.
        """
        surfaces: dict[Surface, SurfaceSpec] = {}
        for s, default in DEFAULT_SURFACES.items():
            overrides: dict[str, str] = self.surfaces.get(s, {})
            surfaces[s] = replace(
                default,
                name=overrides.get(Toml.KEY_NAME, default.name),
                out=overrides.get(Toml.KEY_OUT, default.out),
                entry=overrides.get(Toml.KEY_ENTRY, default.entry),
            )

        config = DocsConfig(
            root=self.root if self.root is not None else Path.cwd(),
            build_script=self.build_script or DEFAULT_BUILD_SCRIPT,
            skip_build=bool(self.skip_build),
            generator=self.generator or DEFAULT_GENERATOR,
            readme=self.readme if self.readme is not None else DEFAULT_README,
            options=self.options if self.options is not None else DEFAULT_OPTIONS_DIR,
            source_link_external=(
                True if self.source_link_external is None else self.source_link_external
            ),
            surfaces=surfaces,
            config_files=tuple(self.config_files),
        )
        for spec in config.surfaces.values():
            for attr in (Toml.KEY_NAME, Toml.KEY_OUT, Toml.KEY_ENTRY):
                if not getattr(spec, attr):
                    raise ConfigError(f"[surfaces.{spec.surface.value}] {attr} must not be empty")
        if not config.readme or not config.options:
            raise ConfigError("[generator] readme and options must not be empty")
        return config

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | None = None,
    ) -> MutableDocsConfig:
        """Build a configuration layer from a parsed TOML table.

        Unknown sections, keys and surfaces are logged and ignored.

        Args:
            data (TomlTable): The ``wasmdocs.toml`` document (or the
                ``[tool.wasmdocs]`` table of ``pyproject.toml``).
            config_file (Path | None): Source file, used to resolve a relative
                ``root`` and to record provenance.

        Returns:
            MutableDocsConfig: The layer described by ``data``.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        where: str = str(config_file) if config_file else "<config>"
        _warn_unknown(data, Toml.ROOT_KEYS, where, section=None)

        layer = cls()
        if config_file is not None:
            layer.config_files.append(config_file)

        root_raw: str | None = _get_str(data, Toml.KEY_ROOT, where, section=None)
        if root_raw is not None:
            root = Path(root_raw).expanduser()
            if not root.is_absolute() and config_file is not None:
                root = config_file.parent / root
            layer.root = root

        build: TomlTable = _get_table(data, Toml.SECTION_BUILD, where)
        _warn_unknown(build, Toml.BUILD_KEYS, where, section=Toml.SECTION_BUILD)
        layer.build_script = _get_str(build, Toml.KEY_SCRIPT, where, section=Toml.SECTION_BUILD)
        layer.skip_build = _get_bool(build, Toml.KEY_SKIP, where, section=Toml.SECTION_BUILD)

        gen: TomlTable = _get_table(data, Toml.SECTION_GENERATOR, where)
        _warn_unknown(gen, Toml.GENERATOR_KEYS, where, section=Toml.SECTION_GENERATOR)
        layer.generator = _get_str(gen, Toml.KEY_EXECUTABLE, where, section=Toml.SECTION_GENERATOR)
        layer.readme = _get_str(gen, Toml.KEY_README, where, section=Toml.SECTION_GENERATOR)
        layer.options = _get_str(gen, Toml.KEY_OPTIONS, where, section=Toml.SECTION_GENERATOR)
        layer.source_link_external = _get_bool(
            gen, Toml.KEY_SOURCE_LINK_EXTERNAL, where, section=Toml.SECTION_GENERATOR
        )

        surfaces: TomlTable = _get_table(data, Toml.SECTION_SURFACES, where)
        known: dict[str, Surface] = {s.value: s for s in Surface}
        for key, raw in surfaces.items():
            section = f"{Toml.SECTION_SURFACES}.{key}"
            if key not in known:
                logger.warning("%s: ignoring unknown surface [%s]", where, section)
                continue
            if not isinstance(raw, dict):
                raise ConfigError(f"{where}: [{section}] must be a table")
            _warn_unknown(raw, Toml.SURFACE_KEYS, where, section=section)
            values: dict[str, str] = {}
            for attr in (Toml.KEY_NAME, Toml.KEY_OUT, Toml.KEY_ENTRY):
                value = _get_str(raw, attr, where, section=section)
                if value is not None:
                    values[attr] = value
            if values:
                layer.surfaces[known[key]] = values

        logger.debug("Configuration layer from %s: %s", where, layer)
        return layer


# --- TOML value accessors ---


def _label(key: str, section: str | None) -> str:
    return f"[{section}] {key}" if section else key


def _warn_unknown(
    table: Mapping[str, Any],
    allowed: frozenset[str],
    where: str,
    *,
    section: str | None,
) -> None:
    for key in table:
        if key not in allowed:
            logger.warning("%s: ignoring unknown key %s", where, _label(key, section))


def _get_table(data: Mapping[str, Any], key: str, where: str) -> TomlTable:
    value: Any = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{where}: [{key}] must be a table")
    return value


def _get_str(data: Mapping[str, Any], key: str, where: str, *, section: str | None) -> str | None:
    value: Any = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(
            f"{where}: {_label(key, section)} must be a string, got {type(value).__name__}"
        )
    return value


def _get_bool(
    data: Mapping[str, Any], key: str, where: str, *, section: str | None
) -> bool | None:
    value: Any = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(
            f"{where}: {_label(key, section)} must be a boolean, got {type(value).__name__}"
        )
    return value
