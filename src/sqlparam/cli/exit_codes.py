# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Exit codes for the sqlparam command line.

Exit codes:
    0 OK: query rewritten
    1 INPUT_ERROR: input could not be read, or bad configuration
    2 REWRITE_ERROR: query contains an unterminated or malformed construct
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by the sqlparam CLI."""

    OK = 0
    INPUT_ERROR = 1
    REWRITE_ERROR = 2
