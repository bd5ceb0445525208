# topmark:header:start
#
#   project      : PkgSurface
#   file         : formats.py
#   file_relpath : src/pkgsurface/cli/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats of the informational commands, and their renderers.

Machine formats (JSON, NDJSON) are stable and colorless.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Any

from pkgsurface.constants import PKGSURFACE_VERSION

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        DEFAULT: Human-friendly text output; may include ANSI color if enabled.
        JSON: A single JSON document.
        NDJSON: One JSON object per line.
        MARKDOWN: A Markdown document.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption."""
    return fmt in {OutputFormat.JSON, OutputFormat.NDJSON}


def meta_payload() -> dict[str, str]:
    """Return the tool metadata attached to machine output."""
    return {"tool": "pkgsurface", "version": PKGSURFACE_VERSION}


def to_json(payload: Mapping[str, Any]) -> str:
    """Serialize ``payload`` as indented JSON."""
    return json.dumps(payload, indent=2)


def to_ndjson(records: Sequence[Mapping[str, Any]]) -> str:
    """Serialize ``records`` as newline-delimited JSON (no trailing newline)."""
    return "\n".join(json.dumps(r, separators=(",", ":")) for r in records)


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [max(3, len(str(h))) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(c):<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    out: list[str] = [
        _line(headers),
        "| " + " | ".join("-" * w for w in widths) + " |",
    ]
    out.extend(_line(r) for r in rows)
    return "\n".join(out) + "\n"
