# topmark:header:start
#
#   project      : PkgSurface
#   file         : __main__.py
#   file_relpath : src/pkgsurface/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PkgSurface via ``python -m pkgsurface``.

It delegates directly to `pkgsurface.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how PkgSurface is launched.

Examples:
    Regenerate the verification artifacts for a model::

        python -m pkgsurface generate model.json --out test
"""

from __future__ import annotations

from pkgsurface.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
