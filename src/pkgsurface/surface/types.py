# topmark:header:start
#
#   project      : PkgSurface
#   file         : types.py
#   file_relpath : src/pkgsurface/surface/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data types produced by the surface enumerator.

A `SurfaceEntry` is one expected export of the generated package. Entries are
built fresh for every generation pass, never mutated, and consumed by the
artifact renderers in `pkgsurface.emitters`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class TestKind(str, Enum):
    """Artifact family an enumeration is computed for."""

    # Not a pytest test class.
    __test__ = False

    TYPES = "types"
    RUNTIME = "runtime"
    SNAPSHOT = "snapshot"


class Category(str, Enum):
    """Export category; member order is the order categories appear in artifacts."""

    CLIENTS = "clients"
    COMMANDS = "commands"
    ENUMS = "enums"
    STRUCTURES = "structures"
    ERRORS = "errors"
    BASE_EXCEPTION = "base_exception"
    WAITERS = "waiters"
    PAGINATORS = "paginators"


class RuntimeKind(str, Enum):
    """What an exported identifier is at runtime.

    Members:
        FUNCTION: A callable (clients, commands, waiters, paginators).
        OBJECT: A plain object (enums, schema objects).
        ERROR_CLASS: An error class whose prototype chain is asserted.
        TYPE_ONLY: Exists only in the type declarations (command Input/Output).
    """

    FUNCTION = "function"
    OBJECT = "object"
    ERROR_CLASS = "error_class"
    TYPE_ONLY = "type_only"


class Role(IntEnum):
    """Position of an entry among the entries derived from one owner."""

    PRIMARY = 0
    AGGREGATE = 1
    INPUT = 2
    OUTPUT = 3
    SCHEMA = 4


@dataclass(frozen=True)
class SurfaceEntry:
    """One expected export of the generated package.

    Attributes:
        identifier (str): Exported identifier.
        category (Category): Category the entry is grouped under.
        runtime_kind (RuntimeKind): What the identifier is at runtime.
        has_schema_artifact (bool): True when a schema object for the same owner
            is part of the same enumeration.
        owner (str): Shape id (or helper name) the entry is derived from; drives
            the order within a category.
        role (Role): Position among the entries sharing ``owner``.
        schema_of (str | None): For schema objects, the identifier of the entry
            the schema describes.
        ancestor (str | None): For error classes, the type the class must descend from.
    """

    identifier: str
    category: Category
    runtime_kind: RuntimeKind
    has_schema_artifact: bool = False
    owner: str = ""
    role: Role = Role.PRIMARY
    schema_of: str | None = None
    ancestor: str | None = None

    @property
    def is_schema(self) -> bool:
        """True for schema objects."""
        return self.role is Role.SCHEMA

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of this entry."""
        return {
            "identifier": self.identifier,
            "category": self.category.value,
            "runtime_kind": self.runtime_kind.value,
            "has_schema_artifact": self.has_schema_artifact,
            "owner": self.owner,
            "role": self.role.name.lower(),
            "schema_of": self.schema_of,
            "ancestor": self.ancestor,
        }
