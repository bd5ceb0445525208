# topmark:header:start
#
#   project      : PkgSurface
#   file         : __init__.py
#   file_relpath : src/pkgsurface/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PkgSurface package.

PkgSurface reconciles the export surface of a generated TypeScript client
package with the service model it was generated from. It enumerates every
identifier the package is expected to export and emits test artifacts that
fail when the package's compile-time or runtime exports diverge from that
enumeration.
"""

from __future__ import annotations
