# topmark:header:start
#
#   project      : WasmDocs
#   file         : exit_codes.py
#   file_relpath : src/wasmdocs/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Standardized exit codes used by the WasmDocs CLI.

A failing build or generator step makes WasmDocs exit with *that step's*
status, so the codes below only cover failures WasmDocs detects itself.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the WasmDocs CLI.

    WasmDocs follows the BSD `sysexits` convention where practical, and the
    shell convention for commands that cannot be started.

    Attributes:
        SUCCESS: Every step succeeded (or ``--dry-run``).
        FAILURE: Generic failure.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (unreadable/invalid config). Mirrors
            BSD ``EX_CONFIG (78)``.
        CANNOT_EXECUTE: A step's executable exists but cannot be run (shell ``126``).
        COMMAND_NOT_FOUND: A step's executable was not found (shell ``127``).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    CONFIG_ERROR = 78
    CANNOT_EXECUTE = 126
    COMMAND_NOT_FOUND = 127
