# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""sqlparam - rewrite ``?`` placeholders into native positional parameters."""

__version__ = "0.1.0"

from sqlparam.core.constants import Dialect, SegmentKind
from sqlparam.core.exceptions import (
    CommentNestingError,
    ConfigurationError,
    MalformedDollarTagError,
    RewriteError,
    ScanStalledError,
    SqlParamError,
    UnterminatedCommentError,
    UnterminatedLiteralError,
)
from sqlparam.models.segment import Query, Segment
from sqlparam.parsers.lexer import classify
from sqlparam.rewriter import adapt_query, render, rewrite

__all__ = [
    "CommentNestingError",
    "ConfigurationError",
    "Dialect",
    "MalformedDollarTagError",
    "Query",
    "RewriteError",
    "ScanStalledError",
    "Segment",
    "SegmentKind",
    "SqlParamError",
    "UnterminatedCommentError",
    "UnterminatedLiteralError",
    "__version__",
    "adapt_query",
    "classify",
    "render",
    "rewrite",
]
