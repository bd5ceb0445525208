# topmark:header:start
#
#   project      : PkgSurface
#   file         : __init__.py
#   file_relpath : src/pkgsurface/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PkgSurface CLI subcommands."""
