# topmark:header:start
#
#   project      : PkgSurface
#   file         : exit_codes.py
#   file_relpath : src/pkgsurface/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the PkgSurface CLI.

PkgSurface aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. The one deliberate
divergence is `WOULD_CHANGE=2`, returned by ``pkgsurface check`` when a
committed artifact no longer matches what the model would generate. Click's
own usage errors also exit with 2, so tests should check the output as well as
the exit code.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PkgSurface CLI.

    Attributes:
        SUCCESS: Successful execution; artifacts are written or in sync.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: ``check`` found artifacts that differ from the model.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        MODEL_ERROR: The model is malformed or lacks the service. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        GENERATION_ERROR: A collaborator violated its contract during
            enumeration. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    MODEL_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    GENERATION_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
