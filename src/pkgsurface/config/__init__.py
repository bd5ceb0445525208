# topmark:header:start
#
#   project      : PkgSurface
#   file         : __init__.py
#   file_relpath : src/pkgsurface/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for PkgSurface.

Re-exports the settings model so callers can write
``from pkgsurface.config import Settings, MutableSettings``.
"""

from __future__ import annotations

from pkgsurface.config.model import MutableSettings, Settings

__all__: list[str] = [
    "MutableSettings",
    "Settings",
]
