# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Lexical rules that split SQL into inert and live segments."""

from sqlparam.parsers.lexer import (
    block_comment,
    classify,
    comment,
    dollar_literal,
    line_comment,
    literal,
    quote_literal,
    quoted_identifier,
)

__all__ = [
    "block_comment",
    "classify",
    "comment",
    "dollar_literal",
    "line_comment",
    "literal",
    "quote_literal",
    "quoted_identifier",
]
