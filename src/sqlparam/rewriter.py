# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Query parameter rewriting for cross-database compatibility.

Client code writes ``?`` positional markers; PostgreSQL expects ``$1, $2,
…``, SQLite accepts ``?1, ?2, …`` and Oracle ``:1, :2, …``.  The
:func:`rewrite` function classifies the query with
:func:`sqlparam.parsers.lexer.classify` and renders it for the target
dialect, leaving markers inside literals and comments untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlparam.core.constants import PLACEHOLDER_PREFIXES, Dialect, SegmentKind
from sqlparam.core.exceptions import ConfigurationError, RewriteError
from sqlparam.core.logging import query_excerpt
from sqlparam.models.segment import Query, Segment
from sqlparam.parsers.lexer import classify

logger = logging.getLogger("sqlparam.rewriter")


def resolve_dialect(dialect: str | Dialect) -> Dialect:
    """Return the :class:`Dialect` named by *dialect*.

    Raises:
        ConfigurationError: If *dialect* is not recognised.
    """
    try:
        return Dialect(str(dialect).strip().lower())
    except ValueError:
        expected = ", ".join(repr(d.value) for d in Dialect)
        msg = f"Unknown SQL dialect: {dialect!r}. Expected one of {expected}."
        raise ConfigurationError(msg) from None


def render(segments: Iterable[Segment], dialect: str | Dialect = Dialect.POSTGRES) -> bytes:
    """Fold *segments* into UTF-8 output, numbering placeholders from 1.

    Raises:
        RewriteError: If the text cannot be encoded as UTF-8 (lone surrogates).
    """
    prefix = PLACEHOLDER_PREFIXES[resolve_dialect(dialect)]
    parts: list[str] = []
    counter = 1

    for segment in segments:
        if segment.kind is SegmentKind.PLACEHOLDER:
            parts.append(f"{prefix}{counter}")
            counter += 1
        else:
            parts.append(segment.content)

    output = "".join(parts)
    try:
        return output.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise RewriteError("query text is not encodable as UTF-8", exc.start) from exc


def rewrite(
    query: str | Query,
    dialect: str | Dialect = Dialect.POSTGRES,
    *,
    max_comment_depth: int | None = None,
) -> bytes:
    """Rewrite ``?`` placeholders in *query* for the target *dialect*.

    Args:
        query: SQL text with ``?`` positional placeholders.
        dialect: Target dialect name, ``"postgres"`` by default.
        max_comment_depth: Optional bound on nested block comments.

    Returns:
        The rewritten query, UTF-8 encoded.

    Raises:
        RewriteError: If a literal or comment is unterminated or malformed.
        ConfigurationError: If *dialect* is not recognised.
    """
    target = resolve_dialect(dialect)
    text = query.text if isinstance(query, Query) else query

    try:
        segments = classify(text, max_comment_depth)
    except RewriteError as exc:
        logger.debug(
            "Rewrite for %s failed: %s",
            target,
            exc.reason,
            extra={
                "dialect": target.value,
                "position": exc.position,
                "excerpt": query_excerpt(text, exc.position),
            },
        )
        raise

    placeholders = sum(1 for s in segments if s.is_placeholder)
    logger.debug(
        "Rewrote query for %s: %d segments, %d placeholders",
        target,
        len(segments),
        placeholders,
    )
    return render(segments, target)


def adapt_query(query: str, dialect: str) -> str:
    """Rewrite ``?`` parameter placeholders for the target *dialect*.

    Convenience wrapper around :func:`rewrite` for drivers that take the
    query as text rather than bytes.

    Raises:
        RewriteError: If the query cannot be classified.
        ConfigurationError: If *dialect* is not recognised.
    """
    return rewrite(query, dialect).decode("utf-8")
