# topmark:header:start
#
#   project      : PkgSurface
#   file         : __init__.py
#   file_relpath : src/pkgsurface/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by the generator, the API and the CLI."""

from __future__ import annotations
