# topmark:header:start
#
#   project      : PkgSurface
#   file         : diff.py
#   file_relpath : src/pkgsurface/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorized preview of unified diffs between committed and expected artifacts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as either a sequence of lines or a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        # Show control characters explicitly
        content: str = line.replace("\r", "\\r")
        if line.startswith(("+++", "---")):
            return chalk.bold.white(content)
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    if show_line_numbers:
        return "".join(
            f"{chalk.gray(f'{i:04d}|')}{process_line(line)}\n" for i, line in enumerate(lines, 1)
        )
    return "".join(f"{process_line(line)}\n" for line in lines)
