# topmark:header:start
#
#   project      : PkgSurface
#   file         : surface.py
#   file_relpath : src/pkgsurface/cli/commands/surface.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PkgSurface `surface` command.

Prints the surface enumeration of one test kind, in canonical order, without
rendering or writing any artifact. Useful to inspect what ``generate`` will
check and to diff enumerations between model revisions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from pkgsurface import api
from pkgsurface.cli.cli_types import EnumChoiceParam
from pkgsurface.cli.cmd_common import get_console, load_cli_settings, require_model
from pkgsurface.cli.errors import translate_errors
from pkgsurface.cli.formats import (
    OutputFormat,
    meta_payload,
    render_markdown_table,
    to_json,
    to_ndjson,
)
from pkgsurface.cli.options import common_config_options, model_argument
from pkgsurface.surface.ordering import CATEGORY_ORDER
from pkgsurface.surface.types import TestKind

if TYPE_CHECKING:
    from pathlib import Path

    from pkgsurface.cli.console import ConsoleLike
    from pkgsurface.config.model import Settings
    from pkgsurface.surface.plan import SurfacePlan
    from pkgsurface.surface.types import SurfaceEntry


def _render_default(
    console: ConsoleLike, plan: SurfacePlan, kind: TestKind, entries: tuple[SurfaceEntry, ...]
) -> None:
    console.print(
        console.styled(f"{plan.client_name} {kind.value} surface", bold=True, underline=True)
    )
    console.print(f"  service: {plan.service_id}")
    console.print(f"  schema mode: {'on' if plan.schema_mode else 'off'}")
    for category in CATEGORY_ORDER:
        group: list[SurfaceEntry] = [e for e in entries if e.category is category]
        if not group:
            continue
        console.print()
        console.print(console.styled(f"{category.value} ({len(group)})", bold=True))
        width: int = max(len(e.identifier) for e in group)
        for e in group:
            detail: str = e.runtime_kind.value
            if e.ancestor:
                detail += f" < {e.ancestor}"
            if e.schema_of:
                detail += f" (schema of {e.schema_of})"
            console.print(f"  {e.identifier:<{width}}  {console.styled(detail, fg='cyan')}")


def _render_markdown(
    console: ConsoleLike, plan: SurfacePlan, kind: TestKind, entries: tuple[SurfaceEntry, ...]
) -> None:
    console.print(f"# {plan.client_name} {kind.value} surface\n")
    console.print(f"- Service: `{plan.service_id}`")
    console.print(f"- Schema mode: {'on' if plan.schema_mode else 'off'}\n")
    rows: list[list[str]] = [
        [f"`{e.identifier}`", e.category.value, e.runtime_kind.value, e.ancestor or ""]
        for e in entries
    ]
    console.print(
        render_markdown_table(["Identifier", "Category", "Runtime kind", "Ancestor"], rows),
        nl=False,
    )


@click.command(
    name="surface",
    help="Print the expected exports of the client package generated from MODEL.",
)
@model_argument
@common_config_options
@click.option(
    "--kind",
    "kind",
    type=EnumChoiceParam(TestKind),
    default=TestKind.TYPES.value,
    show_default=True,
    help=f"Enumeration to print ({', '.join(k.value for k in TestKind)}).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def surface_command(
    *,
    model_path: Path,
    config_paths: tuple[Path, ...],
    no_config: bool,
    service: str | None,
    generate_schemas: bool | None,
    kind: TestKind,
    output_format: OutputFormat | None,
) -> None:
    """Print the surface enumeration."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    require_model(model_path)
    with translate_errors():
        settings: Settings = load_cli_settings(
            model_path,
            config_paths=config_paths,
            no_config=no_config,
            service=service,
            generate_schemas=generate_schemas,
        )
        plan: SurfacePlan = api.plan(model_path, settings)
        entries: tuple[SurfaceEntry, ...] = plan.entries(kind)

    for warning in settings.warnings:
        console.warn(f"Warning: {warning}")

    if fmt is OutputFormat.JSON:
        payload: dict[str, Any] = {
            "meta": meta_payload(),
            "service": plan.service_id,
            "client": plan.client_name,
            "base_exception": plan.base_exception,
            "schema_mode": plan.schema_mode,
            "kind": kind.value,
            "entries": [e.to_dict() for e in entries],
        }
        console.print(to_json(payload))
    elif fmt is OutputFormat.NDJSON:
        if entries:
            console.print(to_ndjson([{"kind": kind.value, **e.to_dict()} for e in entries]))
    elif fmt is OutputFormat.MARKDOWN:
        _render_markdown(console, plan, kind, entries)
    else:
        _render_default(console, plan, kind, entries)
