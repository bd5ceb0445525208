# topmark:header:start
#
#   project      : PkgSurface
#   file         : naming.py
#   file_relpath : src/pkgsurface/surface/naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Naming conventions of the generated client package.

Every derived identifier is computed here so that a change of convention is a
one-place edit.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from pkgsurface.constants import (
    CLIENT_SUFFIX,
    COMMAND_SUFFIX,
    INPUT_SUFFIX,
    OUTPUT_SUFFIX,
)
from pkgsurface.core.errors import SymbolResolutionError

if TYPE_CHECKING:
    from pkgsurface.model.shapes import Shape
    from pkgsurface.model.symbols import Symbol

# JavaScript identifier names as emitted by the client generator.
_IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def checked_name(symbol: Symbol, shape: Shape) -> str:
    """Return ``symbol.name`` after checking it is a usable identifier.

    Raises:
        SymbolResolutionError: If the name is empty or not an identifier.
    """
    if not _IDENTIFIER_RE.match(symbol.name):
        raise SymbolResolutionError(str(shape.id), symbol.name)
    return symbol.name


def bare_client_name(client_name: str) -> str:
    """Identifier of the bare client class (``<Name>Client``)."""
    return client_name + CLIENT_SUFFIX


def aggregate_client_name(client_name: str) -> str:
    """Identifier of the aggregate convenience client (``<Name>``)."""
    return client_name


def command_name(symbol_name: str) -> str:
    """Identifier of an operation's command class."""
    return symbol_name + COMMAND_SUFFIX


def command_input_name(symbol_name: str) -> str:
    """Identifier of an operation's command input type."""
    return command_name(symbol_name) + INPUT_SUFFIX


def command_output_name(symbol_name: str) -> str:
    """Identifier of an operation's command output type."""
    return command_name(symbol_name) + OUTPUT_SUFFIX
