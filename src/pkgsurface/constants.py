# topmark:header:start
#
#   project      : PkgSurface
#   file         : constants.py
#   file_relpath : src/pkgsurface/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PkgSurface Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

PKGSURFACE_VERSION: str = get_version("pkgsurface")

# Per-directory config file and the pyproject.toml table holding the same keys.
PKGSURFACE_TOML_NAME: Final[str] = "pkgsurface.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "tool.pkgsurface"

LOG_LEVEL_ENV: Final[str] = "PKGSURFACE_LOG_LEVEL"

# Suffixes applied to symbol names by the client generator.
CLIENT_SUFFIX: Final[str] = "Client"
COMMAND_SUFFIX: Final[str] = "Command"
INPUT_SUFFIX: Final[str] = "Input"
OUTPUT_SUFFIX: Final[str] = "Output"
SERVICE_EXCEPTION_SUFFIX: Final[str] = "ServiceException"
SCHEMA_SUFFIX: Final[str] = "$"

# Name of the host language's root error type.
HOST_BASE_ERROR: Final[str] = "Error"

# Well-known trait ids read from the model.
ENUM_TRAIT: Final[str] = "smithy.api#enum"
ERROR_TRAIT: Final[str] = "smithy.api#error"
PAGINATED_TRAIT: Final[str] = "smithy.api#paginated"
WAITABLE_TRAIT: Final[str] = "smithy.waiters#waitable"
UNIT_SHAPE_ID: Final[str] = "smithy.api#Unit"
