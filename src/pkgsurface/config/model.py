# topmark:header:start
#
#   project      : PkgSurface
#   file         : model.py
#   file_relpath : src/pkgsurface/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Settings`: an immutable snapshot consumed by one generation pass.
    - `MutableSettings`: a mutable builder used while merging configuration
      layers; it can be frozen into `Settings` and thawed back for edits.

Every `MutableSettings` field is tri-state: ``None`` means "inherit from a
lower layer". `MutableSettings.merge_with` is last-wins over explicitly set
values only, and `MutableSettings.freeze` fills anything still unset from the
runtime defaults in `pkgsurface.config.io.load_defaults_dict`.

Merge order (lowest to highest precedence):
    1) Built-in defaults
    2) ``[tool.pkgsurface]`` in ``pyproject.toml`` next to the model
    3) ``pkgsurface.toml`` next to the model
    4) Extra config files passed explicitly (in the order provided)
    5) CLI / API overrides
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pkgsurface.config.io import (
    check_unknown_keys,
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_nested_table,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from pkgsurface.config.keys import Toml
from pkgsurface.config.logging import get_logger
from pkgsurface.constants import (
    PKGSURFACE_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from pkgsurface.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from pkgsurface.config.io import TomlTable
    from pkgsurface.config.logging import PkgSurfaceLogger

logger: PkgSurfaceLogger = get_logger(__name__)

_SNAPSHOT_MODES: tuple[str, ...] = ("write", "compare")

# Known keys per section, used to flag typos in user configuration.
_KNOWN_KEYS: dict[str, tuple[str, ...]] = {
    Toml.SECTION_GENERATOR: (Toml.KEY_SERVICE, Toml.KEY_SERVICE_NAME),
    Toml.SECTION_SCHEMA: (Toml.KEY_GENERATE_SCHEMAS, Toml.KEY_ALLOWLIST),
    Toml.SECTION_OUTPUT: (
        Toml.KEY_DIRECTORY,
        Toml.KEY_TYPES_FILE,
        Toml.KEY_RUNTIME_FILE,
        Toml.KEY_SNAPSHOT_FILE,
        Toml.KEY_TYPES_IMPORT,
        Toml.KEY_RUNTIME_IMPORT,
        Toml.KEY_SNAPSHOT_IMPORT,
        Toml.KEY_BANNER,
    ),
    Toml.SECTION_SNAPSHOT: (
        Toml.KEY_DIRECTORY,
        Toml.KEY_MODE_ENV,
        Toml.KEY_DEFAULT_MODE,
        Toml.KEY_SYSTEM_TIME_MS,
        Toml.KEY_TIMEOUT_MS,
        Toml.KEY_RUNNER_PACKAGE,
        Toml.KEY_TEST_PACKAGE,
    ),
}


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable generation settings.

    Attributes:
        service (str): Shape id of the service to generate for; empty selects
            the single service declared in the model.
        service_name (str): Override for the aggregate client identifier; empty
            derives it from the service symbol.
        generate_schemas (bool): Enable schema mode for every service.
        schema_allowlist (tuple[str, ...]): Service shape ids for which schema
            mode is enabled even when ``generate_schemas`` is False.
        output_dir (str): Directory (relative to the package root) receiving
            the artifacts.
        types_file (str): File name of the type-only export list.
        runtime_file (str): File name of the runtime-check script.
        snapshot_file (str): File name of the snapshot-test harness.
        types_import (str): Module path of the generated type declarations,
            relative to ``output_dir``.
        runtime_import (str): Module path of the generated runtime entry point.
        snapshot_import (str): Module path the snapshot harness imports from.
        banner (str): First line written into every artifact.
        snapshot_dir (str): Snapshot directory name, joined to the test file's
            own directory at test time.
        snapshot_mode_env (str): Environment variable selecting the snapshot mode.
        snapshot_default_mode (str): Mode used when the variable is unset.
        system_time_ms (int): Fixed logical clock pinned by the harness.
        snapshot_timeout_ms (int): Timeout of the grouped snapshot suite.
        runner_package (str): Package providing ``SnapshotRunner``.
        test_package (str): Test framework package (``describe``/``it``/...).
        config_files (tuple[str, ...]): Config sources merged into this snapshot.
        warnings (tuple[str, ...]): Problems found while reading configuration.
    """

    service: str
    service_name: str

    generate_schemas: bool
    schema_allowlist: tuple[str, ...]

    output_dir: str
    types_file: str
    runtime_file: str
    snapshot_file: str
    types_import: str
    runtime_import: str
    snapshot_import: str
    banner: str

    snapshot_dir: str
    snapshot_mode_env: str
    snapshot_default_mode: str
    system_time_ms: int
    snapshot_timeout_ms: int
    runner_package: str
    test_package: str

    config_files: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def thaw(self) -> MutableSettings:
        """Return a mutable copy of these settings.

        Returns:
            MutableSettings: A builder initialized from this snapshot.
        """
        values: dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
        values["schema_allowlist"] = list(self.schema_allowlist)
        values["config_files"] = list(self.config_files)
        values["warnings"] = list(self.warnings)
        return MutableSettings(**values)

    @classmethod
    def defaults(cls) -> Settings:
        """Return the runtime default settings."""
        return MutableSettings.from_defaults().freeze()


@dataclass
class MutableSettings:
    """Mutable settings builder; ``None`` fields inherit from lower layers."""

    service: str | None = None
    service_name: str | None = None

    generate_schemas: bool | None = None
    schema_allowlist: list[str] | None = None

    output_dir: str | None = None
    types_file: str | None = None
    runtime_file: str | None = None
    snapshot_file: str | None = None
    types_import: str | None = None
    runtime_import: str | None = None
    snapshot_import: str | None = None
    banner: str | None = None

    snapshot_dir: str | None = None
    snapshot_mode_env: str | None = None
    snapshot_default_mode: str | None = None
    system_time_ms: int | None = None
    snapshot_timeout_ms: int | None = None
    runner_package: str | None = None
    test_package: str | None = None

    config_files: list[str] = field(default_factory=lambda: [])
    warnings: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableSettings:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), source=None)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: Path | None = None) -> MutableSettings:
        """Create a draft from a parsed PkgSurface configuration table.

        Args:
            data (TomlTable): The ``[tool.pkgsurface]`` table or the content of a
                ``pkgsurface.toml`` document.
            source (Path | None): Origin of the data, recorded in ``config_files``.

        Returns:
            MutableSettings: The resulting draft; unset keys stay ``None``.
        """
        warnings: list[str] = []
        check_unknown_keys(data, _KNOWN_KEYS, warnings=warnings)

        gen_tbl: TomlTable = get_table_value(data, Toml.SECTION_GENERATOR)
        schema_tbl: TomlTable = get_table_value(data, Toml.SECTION_SCHEMA)
        out_tbl: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        snap_tbl: TomlTable = get_table_value(data, Toml.SECTION_SNAPSHOT)
        logger.trace("TOML [%s]: %s", Toml.SECTION_GENERATOR, gen_tbl)
        logger.trace("TOML [%s]: %s", Toml.SECTION_SCHEMA, schema_tbl)
        logger.trace("TOML [%s]: %s", Toml.SECTION_OUTPUT, out_tbl)
        logger.trace("TOML [%s]: %s", Toml.SECTION_SNAPSHOT, snap_tbl)

        def _str(tbl: TomlTable, section: str, key: str) -> str | None:
            return get_string_value_or_none_checked(
                tbl, key, where=f"[{section}]", warnings=warnings
            )

        def _int(tbl: TomlTable, section: str, key: str) -> int | None:
            return get_int_value_or_none_checked(tbl, key, where=f"[{section}]", warnings=warnings)

        draft = cls(
            service=_str(gen_tbl, Toml.SECTION_GENERATOR, Toml.KEY_SERVICE),
            service_name=_str(gen_tbl, Toml.SECTION_GENERATOR, Toml.KEY_SERVICE_NAME),
            generate_schemas=get_bool_value_or_none_checked(
                schema_tbl,
                Toml.KEY_GENERATE_SCHEMAS,
                where=f"[{Toml.SECTION_SCHEMA}]",
                warnings=warnings,
            ),
            schema_allowlist=get_string_list_value_or_none_checked(
                schema_tbl,
                Toml.KEY_ALLOWLIST,
                where=f"[{Toml.SECTION_SCHEMA}]",
                warnings=warnings,
            ),
            output_dir=_str(out_tbl, Toml.SECTION_OUTPUT, Toml.KEY_DIRECTORY),
            types_file=_str(out_tbl, Toml.SECTION_OUTPUT, Toml.KEY_TYPES_FILE),
            runtime_file=_str(out_tbl, Toml.SECTION_OUTPUT, Toml.KEY_RUNTIME_FILE),
            snapshot_file=_str(out_tbl, Toml.SECTION_OUTPUT, Toml.KEY_SNAPSHOT_FILE),
            types_import=_str(out_tbl, Toml.SECTION_OUTPUT, Toml.KEY_TYPES_IMPORT),
            runtime_import=_str(out_tbl, Toml.SECTION_OUTPUT, Toml.KEY_RUNTIME_IMPORT),
            snapshot_import=_str(out_tbl, Toml.SECTION_OUTPUT, Toml.KEY_SNAPSHOT_IMPORT),
            banner=_str(out_tbl, Toml.SECTION_OUTPUT, Toml.KEY_BANNER),
            snapshot_dir=_str(snap_tbl, Toml.SECTION_SNAPSHOT, Toml.KEY_DIRECTORY),
            snapshot_mode_env=_str(snap_tbl, Toml.SECTION_SNAPSHOT, Toml.KEY_MODE_ENV),
            snapshot_default_mode=_str(snap_tbl, Toml.SECTION_SNAPSHOT, Toml.KEY_DEFAULT_MODE),
            system_time_ms=_int(snap_tbl, Toml.SECTION_SNAPSHOT, Toml.KEY_SYSTEM_TIME_MS),
            snapshot_timeout_ms=_int(snap_tbl, Toml.SECTION_SNAPSHOT, Toml.KEY_TIMEOUT_MS),
            runner_package=_str(snap_tbl, Toml.SECTION_SNAPSHOT, Toml.KEY_RUNNER_PACKAGE),
            test_package=_str(snap_tbl, Toml.SECTION_SNAPSHOT, Toml.KEY_TEST_PACKAGE),
            config_files=[str(source)] if source is not None else [],
            warnings=warnings,
        )

        if (
            draft.snapshot_default_mode is not None
            and draft.snapshot_default_mode not in _SNAPSHOT_MODES
        ):
            msg = (
                f"Ignoring [{Toml.SECTION_SNAPSHOT}].{Toml.KEY_DEFAULT_MODE} = "
                f"{draft.snapshot_default_mode!r}; expected one of {', '.join(_SNAPSHOT_MODES)}"
            )
            logger.warning(msg)
            draft.warnings.append(msg)
            draft.snapshot_default_mode = None
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableSettings | None:
        """Load configuration from a single TOML file.

        ``pyproject.toml`` files contribute their ``[tool.pkgsurface]`` table;
        any other file is read as a whole.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableSettings | None: The draft, or None when a ``pyproject.toml``
                has no ``[tool.pkgsurface]`` table.
        """
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            tool_tbl: TomlTable | None = get_nested_table(data, PYPROJECT_TOOL_SECTION)
            if tool_tbl is None:
                logger.debug("No [%s] table in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = tool_tbl
        logger.debug("Loaded configuration from %s", path)
        return cls.from_toml_dict(data, source=path)

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableSettings:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Model file or directory used for discovery; its
                directory is searched for ``pyproject.toml`` then ``pkgsurface.toml``.
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after discovery, in the given order.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableSettings: The merged draft.

        Raises:
            ConfigError: If an explicit config file does not exist.
        """
        draft: MutableSettings = cls.from_defaults()

        if not no_config and anchor is not None:
            directory: Path = anchor if anchor.is_dir() else anchor.parent
            for name in (PYPROJECT_TOML_NAME, PKGSURFACE_TOML_NAME):
                candidate: Path = directory / name
                if candidate.is_file():
                    layer: MutableSettings | None = cls.from_toml_file(candidate)
                    if layer is not None:
                        draft = draft.merge_with(layer)

        for path in extra_config_files or ():
            if not path.is_file():
                raise ConfigError(f"Config file not found: {path}")
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)

        return draft

    def merge_with(self, other: MutableSettings) -> MutableSettings:
        """Return a new draft where explicitly set values from ``other`` win.

        Args:
            other (MutableSettings): The draft whose set values override this one.

        Returns:
            MutableSettings: The merged draft; provenance and warnings accumulate.
        """
        overrides: dict[str, Any] = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if f.name not in ("config_files", "warnings") and getattr(other, f.name) is not None
        }
        merged: MutableSettings = replace(self, **overrides)
        merged.config_files = [*self.config_files, *other.config_files]
        merged.warnings = [*self.warnings, *other.warnings]
        return merged

    def apply_overrides(self, overrides: Mapping[str, Any]) -> MutableSettings:
        """Apply CLI/API overrides; ``None`` values are ignored.

        Raises:
            ConfigError: If an override names an unknown setting.
        """
        known: set[str] = {f.name for f in fields(self)}
        for key, value in overrides.items():
            if key not in known:
                raise ConfigError(f"Unknown setting: {key}")
            if value is None:
                continue
            if key == "schema_allowlist":
                value = list(value)
            setattr(self, key, value)
        return self

    def freeze(self) -> Settings:
        """Freeze this builder into immutable `Settings`, filling unset values from defaults."""
        base: MutableSettings = MutableSettings.from_toml_dict(load_defaults_dict())
        resolved: MutableSettings = base.merge_with(self)
        return Settings(
            service=resolved.service or "",
            service_name=resolved.service_name or "",
            generate_schemas=bool(resolved.generate_schemas),
            schema_allowlist=tuple(resolved.schema_allowlist or ()),
            output_dir=_required(resolved.output_dir),
            types_file=_required(resolved.types_file),
            runtime_file=_required(resolved.runtime_file),
            snapshot_file=_required(resolved.snapshot_file),
            types_import=_required(resolved.types_import),
            runtime_import=_required(resolved.runtime_import),
            snapshot_import=_required(resolved.snapshot_import),
            banner=_required(resolved.banner),
            snapshot_dir=_required(resolved.snapshot_dir),
            snapshot_mode_env=_required(resolved.snapshot_mode_env),
            snapshot_default_mode=_required(resolved.snapshot_default_mode),
            system_time_ms=_required(resolved.system_time_ms),
            snapshot_timeout_ms=_required(resolved.snapshot_timeout_ms),
            runner_package=_required(resolved.runner_package),
            test_package=_required(resolved.test_package),
            config_files=tuple(self.config_files),
            warnings=tuple(self.warnings),
        )


def _required(value: Any) -> Any:
    # Defaults populate every field, so None here means the defaults table is incomplete.
    if value is None:
        raise ConfigError("Incomplete runtime defaults")
    return value
