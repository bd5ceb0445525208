# topmark:header:start
#
#   project      : PkgSurface
#   file         : keys.py
#   file_relpath : src/pkgsurface/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for PkgSurface configuration.

Keys defined here are the external configuration API as it appears in
``pkgsurface.toml`` and in ``[tool.pkgsurface]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by PkgSurface configuration.

    The ordering of constants mirrors `pkgsurface.config.io.load_defaults_dict`.
    """

    # [generator]
    SECTION_GENERATOR: Final[str] = "generator"

    KEY_SERVICE: Final[str] = "service"
    KEY_SERVICE_NAME: Final[str] = "service_name"

    # [schema]
    SECTION_SCHEMA: Final[str] = "schema"

    KEY_GENERATE_SCHEMAS: Final[str] = "generate_schemas"
    KEY_ALLOWLIST: Final[str] = "allowlist"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_DIRECTORY: Final[str] = "directory"
    KEY_TYPES_FILE: Final[str] = "types_file"
    KEY_RUNTIME_FILE: Final[str] = "runtime_file"
    KEY_SNAPSHOT_FILE: Final[str] = "snapshot_file"
    KEY_TYPES_IMPORT: Final[str] = "types_import"
    KEY_RUNTIME_IMPORT: Final[str] = "runtime_import"
    KEY_SNAPSHOT_IMPORT: Final[str] = "snapshot_import"
    KEY_BANNER: Final[str] = "banner"

    # [snapshot]
    SECTION_SNAPSHOT: Final[str] = "snapshot"

    # KEY_DIRECTORY is shared with [output]
    KEY_MODE_ENV: Final[str] = "mode_env"
    KEY_DEFAULT_MODE: Final[str] = "default_mode"
    KEY_SYSTEM_TIME_MS: Final[str] = "system_time_ms"
    KEY_TIMEOUT_MS: Final[str] = "timeout_ms"
    KEY_RUNNER_PACKAGE: Final[str] = "runner_package"
    KEY_TEST_PACKAGE: Final[str] = "test_package"

    SECTIONS: Final[tuple[str, ...]] = (
        SECTION_GENERATOR,
        SECTION_SCHEMA,
        SECTION_OUTPUT,
        SECTION_SNAPSHOT,
    )
