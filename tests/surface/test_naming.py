# topmark:header:start
#
#   project      : PkgSurface
#   file         : test_naming.py
#   file_relpath : tests/surface/test_naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the naming conventions and the JSON view of surface entries."""

from __future__ import annotations

import json

import pytest

from pkgsurface.core.errors import SymbolResolutionError
from pkgsurface.model.symbols import Symbol
from pkgsurface.surface import naming
from pkgsurface.surface.types import Category, Role, RuntimeKind, SurfaceEntry
from tests.surface.fakes import operation


def test_derived_identifiers() -> None:
    """Derived identifiers append the generator's suffixes."""
    assert naming.bare_client_name("Weather") == "WeatherClient"
    assert naming.aggregate_client_name("Weather") == "Weather"
    assert naming.command_name("GetCity") == "GetCityCommand"
    assert naming.command_input_name("GetCity") == "GetCityCommandInput"
    assert naming.command_output_name("GetCity") == "GetCityCommandOutput"


def test_checked_name_accepts_identifiers() -> None:
    """Letters, digits, ``_`` and ``$`` make valid identifiers."""
    shape = operation("Ping")
    for name in ("Ping", "_ping", "$ping", "Ping2"):
        assert naming.checked_name(Symbol(name), shape) == name


def test_checked_name_rejects_empty_names() -> None:
    """An empty symbol name is a contract violation of the provider."""
    with pytest.raises(SymbolResolutionError, match="example.fake#Ping"):
        naming.checked_name(Symbol(""), operation("Ping"))


def test_entry_to_dict_is_json_serializable() -> None:
    """`SurfaceEntry.to_dict` uses plain values only."""
    entry = SurfaceEntry(
        identifier="Ping$",
        category=Category.COMMANDS,
        runtime_kind=RuntimeKind.OBJECT,
        owner="example.fake#Ping",
        role=Role.SCHEMA,
        schema_of="PingCommand",
    )

    data = json.loads(json.dumps(entry.to_dict()))
    assert data == {
        "identifier": "Ping$",
        "category": "commands",
        "runtime_kind": "object",
        "has_schema_artifact": False,
        "owner": "example.fake#Ping",
        "role": "schema",
        "schema_of": "PingCommand",
        "ancestor": None,
    }
    assert entry.is_schema
