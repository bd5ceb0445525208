# topmark:header:start
#
#   project      : PkgSurface
#   file         : io.py
#   file_relpath : src/pkgsurface/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
*checked* getters validate the expected shape and record a warning (both in
the log and in the caller's warning list) when a value has the wrong type;
the value is then treated as unset so defaulting behavior does not change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pkgsurface.config.keys import Toml
from pkgsurface.config.logging import get_logger
from pkgsurface.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from pkgsurface.config.logging import PkgSurfaceLogger

TomlTable = dict[str, Any]

logger: PkgSurfaceLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return PkgSurface's runtime defaults as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_GENERATOR: {
            Toml.KEY_SERVICE: "",
            Toml.KEY_SERVICE_NAME: "",
        },
        Toml.SECTION_SCHEMA: {
            Toml.KEY_GENERATE_SCHEMAS: False,
            Toml.KEY_ALLOWLIST: [],
        },
        Toml.SECTION_OUTPUT: {
            Toml.KEY_DIRECTORY: "test",
            Toml.KEY_TYPES_FILE: "index-types.ts",
            Toml.KEY_RUNTIME_FILE: "index-objects.spec.mjs",
            Toml.KEY_SNAPSHOT_FILE: "snapshots.integ.spec.ts",
            Toml.KEY_TYPES_IMPORT: "../dist-types/index.d",
            Toml.KEY_RUNTIME_IMPORT: "../dist-cjs/index.js",
            Toml.KEY_SNAPSHOT_IMPORT: "../src",
            Toml.KEY_BANNER: "// pkgsurface generated code",
        },
        Toml.SECTION_SNAPSHOT: {
            Toml.KEY_DIRECTORY: "snapshots",
            Toml.KEY_MODE_ENV: "SNAPSHOT_MODE",
            Toml.KEY_DEFAULT_MODE: "write",
            # 1999-12-31T23:59:59.999Z
            Toml.KEY_SYSTEM_TIME_MS: 946702799999,
            Toml.KEY_TIMEOUT_MS: 30000,
            Toml.KEY_RUNNER_PACKAGE: "@smithy/snapshot-testing",
            Toml.KEY_TEST_PACKAGE: "vitest",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read {path}: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table, or an empty dict when absent."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected table for [%s], got %s", key, type(value).__name__)
    return {}


def get_nested_table(table: TomlTable, dotted: str) -> TomlTable | None:
    """Return the sub-table at a dotted path (e.g. ``tool.pkgsurface``), or None."""
    current: Any = table
    for part in dotted.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return cast("TomlTable", current) if isinstance(current, dict) else None


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    warnings.append(f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> bool | None:
    """Return an optional bool value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    warnings.append(f"Expected bool in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
    warnings.append(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_string_list_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> list[str] | None:
    """Extract an optional list of strings, dropping non-string entries with a warning.

    Returns:
        list[str] | None: ``None`` when the key is missing or not a list, otherwise
            the string entries in their original order.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    loc: Final[str] = f"{where}.{key}"
    if not isinstance(value, list):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        warnings.append(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return None
    out: list[str] = []
    for v in cast("list[Any]", value):
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            warnings.append(f"Ignoring non-string entry in {loc}: {v!r}")
    return out


def check_unknown_keys(
    table: TomlTable,
    known: dict[str, tuple[str, ...]],
    *,
    warnings: list[str],
) -> None:
    """Warn about sections and keys that PkgSurface does not recognize.

    Args:
        table (TomlTable): The PkgSurface configuration table.
        known (dict[str, tuple[str, ...]]): Known keys per known section.
        warnings (list[str]): Receives one message per unknown section or key.
    """
    for section, body in table.items():
        if section not in known:
            logger.warning("Ignoring unknown section [%s]", section)
            warnings.append(f"Ignoring unknown section [{section}]")
            continue
        if not isinstance(body, dict):
            continue
        for key in cast("TomlTable", body):
            if key not in known[section]:
                logger.warning("Ignoring unknown key [%s].%s", section, key)
                warnings.append(f"Ignoring unknown key [{section}].{key}")
