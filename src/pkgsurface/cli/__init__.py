# topmark:header:start
#
#   project      : PkgSurface
#   file         : __init__.py
#   file_relpath : src/pkgsurface/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface of PkgSurface."""
