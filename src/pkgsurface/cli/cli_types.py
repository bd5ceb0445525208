# topmark:header:start
#
#   project      : PkgSurface
#   file         : cli_types.py
#   file_relpath : src/pkgsurface/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types for PkgSurface options.

`EnumChoiceParam` turns option values such as ``--kind runtime`` or
``--only snapshot`` into members of the string enums used across the package
(`TestKind`, `ArtifactKind`, `OutputFormat`, `ColorMode`), so commands receive
enum members instead of raw strings.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

    class ParamTypeBase(Protocol):
        """Typed stand-in for `click.ParamType` during type checking."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """Accept the value of any member of ``enum_cls``, case-insensitively.

    Args:
        enum_cls (type[E]): A string-valued enum.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name = enum_cls.__name__.lower()
        self._members: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted values, in declaration order."""
        return [str(m.value) for m in self.enum_cls]

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Return the member whose value matches ``value``.

        Raises:
            click.BadParameter: If no member matches.
        """
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self._members.get(str(value).lower())
        if member is None:
            raise click.BadParameter(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param=param,
                ctx=ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete enum values starting with ``incomplete``."""
        from click.shell_completion import CompletionItem

        prefix: str = incomplete.lower()
        return [CompletionItem(v) for v in self.choices if v.lower().startswith(prefix)]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
