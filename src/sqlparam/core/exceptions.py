# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for sqlparam."""

from __future__ import annotations


class SqlParamError(Exception):
    """Base exception for all sqlparam errors."""


class ConfigurationError(SqlParamError, ValueError):
    """Invalid or missing configuration, e.g. an unknown dialect."""


class RewriteError(SqlParamError):
    """The query could not be rewritten.

    Raised before the query ever reaches the database, so callers should
    surface it as a preparation failure rather than an execution failure.
    """

    def __init__(self, reason: str, position: int | None = None) -> None:
        self.reason = reason
        self.position = position
        msg = f"query rewrite failed: {reason}"
        if position is not None:
            msg += f" (at offset {position})"
        super().__init__(msg)


class UnterminatedLiteralError(RewriteError):
    """A quoted identifier, string or dollar-quoted literal was never closed."""

    def __init__(self, construct: str, position: int | None = None) -> None:
        self.construct = construct
        super().__init__(f"unterminated or malformed {construct}", position)


class UnterminatedCommentError(RewriteError):
    """A block comment (at any nesting level) was never closed."""

    def __init__(self, position: int | None = None, depth: int = 1) -> None:
        self.depth = depth
        super().__init__(f"unterminated block comment (open depth {depth})", position)


class MalformedDollarTagError(RewriteError):
    """The tag of a dollar-quoted literal starts with a digit."""

    def __init__(self, tag: str, position: int | None = None) -> None:
        self.tag = tag
        super().__init__(f"dollar-quote tag {tag!r} must not start with a digit", position)


class CommentNestingError(RewriteError):
    """Block comments nest deeper than the configured bound."""

    def __init__(self, limit: int, position: int | None = None) -> None:
        self.limit = limit
        super().__init__(f"block comment nesting exceeds {limit} levels", position)


class ScanStalledError(RewriteError):
    """The scanner could not make progress."""

    def __init__(self, position: int | None = None) -> None:
        super().__init__("scanner made no progress", position)
