# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations and lexical constants."""

from enum import StrEnum


class Dialect(StrEnum):
    POSTGRES = "postgres"
    SQLITE = "sqlite"
    ORACLE = "oracle"


class SegmentKind(StrEnum):
    TEXT = "text"
    LITERAL = "literal"
    PLACEHOLDER = "placeholder"


PLACEHOLDER_MARKER = "?"

# Prefix written in front of the parameter number for each dialect
PLACEHOLDER_PREFIXES: dict[Dialect, str] = {
    Dialect.POSTGRES: "$",
    Dialect.SQLITE: "?",
    Dialect.ORACLE: ":",
}

LINE_COMMENT_START = "--"
BLOCK_COMMENT_START = "/*"
BLOCK_COMMENT_END = "*/"
