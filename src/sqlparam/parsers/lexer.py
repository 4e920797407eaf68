# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Split a SQL query into text, inert literal and placeholder segments.

Each rule takes the full query text and a cursor position and returns a
:class:`~sqlparam.models.segment.RuleMatch` when its introducer is present
at that position, or ``None`` otherwise.  Once a rule has matched its
introducer it is committed: a malformed or unterminated construct raises a
:class:`~sqlparam.core.exceptions.RewriteError` subclass instead of
falling through to a lower-precedence rule.

Inert spans (comments, quoted identifiers, string and dollar-quoted
literals) are never scanned for placeholder markers.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import Enum

from sqlparam.core.constants import (
    BLOCK_COMMENT_END,
    BLOCK_COMMENT_START,
    LINE_COMMENT_START,
    PLACEHOLDER_MARKER,
)
from sqlparam.core.exceptions import (
    CommentNestingError,
    ConfigurationError,
    MalformedDollarTagError,
    ScanStalledError,
    UnterminatedCommentError,
    UnterminatedLiteralError,
)
from sqlparam.models.segment import RuleMatch, Segment

logger = logging.getLogger("sqlparam.parsers.lexer")

Rule = Callable[[str, int], "RuleMatch | None"]

# Maximal run of characters that cannot start a placeholder, comment,
# quoted identifier or literal.
_PLAIN_RUN_RE = re.compile(r"[^\\?\-/\"'$]+")


# ---------------------------------------------------------------------------
# Plain text and placeholders
# ---------------------------------------------------------------------------


def plain_text(text: str, pos: int) -> RuleMatch | None:
    """Match the longest run of ordinary SQL text starting at *pos*."""
    match = _PLAIN_RUN_RE.match(text, pos)
    if match is None:
        return None
    return RuleMatch([Segment.text(match.group(0))], match.end())


def placeholder(text: str, pos: int) -> RuleMatch | None:
    if text.startswith(PLACEHOLDER_MARKER, pos):
        return RuleMatch([Segment.placeholder()], pos + len(PLACEHOLDER_MARKER))
    return None


def any_char(text: str, pos: int) -> RuleMatch | None:
    """Copy a single character that no other rule claimed."""
    if pos >= len(text):
        return None
    return RuleMatch([Segment.literal(text[pos])], pos + 1)


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


def line_comment(text: str, pos: int) -> RuleMatch | None:
    """Match ``-- ...`` through the end of the line.

    The newline is part of the comment when present.  A comment running to
    the end of the input is still complete.
    """
    if not text.startswith(LINE_COMMENT_START, pos):
        return None
    newline = text.find("\n", pos + len(LINE_COMMENT_START))
    end = len(text) if newline == -1 else newline + 1
    return RuleMatch([Segment.literal(text[pos:end])], end)


def _check_depth_bound(max_depth: int | None) -> None:
    if max_depth is not None and max_depth < 1:
        msg = f"max_comment_depth must be at least 1, got {max_depth}"
        raise ConfigurationError(msg)


def block_comment(text: str, pos: int, max_depth: int | None = None) -> RuleMatch | None:
    """Match a ``/* ... */`` comment, honouring nested comments.

    Nesting is tracked with a depth counter so arbitrarily deep comments
    never exhaust the call stack.

    Args:
        text: The full query text.
        pos: Cursor position to match at.
        max_depth: Optional bound on nesting depth.  ``None`` is unbounded.

    Raises:
        UnterminatedCommentError: If any nesting level is left open.
        CommentNestingError: If nesting goes deeper than *max_depth*.
        ConfigurationError: If *max_depth* is below 1.
    """
    if not text.startswith(BLOCK_COMMENT_START, pos):
        return None
    _check_depth_bound(max_depth)

    length = len(text)
    depth = 1
    i = pos + len(BLOCK_COMMENT_START)
    while depth:
        if i >= length:
            raise UnterminatedCommentError(pos, depth)
        if text.startswith(BLOCK_COMMENT_END, i):
            depth -= 1
            i += len(BLOCK_COMMENT_END)
        elif text.startswith(BLOCK_COMMENT_START, i):
            depth += 1
            if max_depth is not None and depth > max_depth:
                raise CommentNestingError(max_depth, i)
            i += len(BLOCK_COMMENT_START)
        else:
            i += 1

    return RuleMatch([Segment.literal(text[pos:i])], i)


def comment(text: str, pos: int, max_depth: int | None = None) -> RuleMatch | None:
    return line_comment(text, pos) or block_comment(text, pos, max_depth)


# ---------------------------------------------------------------------------
# Quoted identifiers
# ---------------------------------------------------------------------------


def quoted_identifier(text: str, pos: int) -> RuleMatch | None:
    """Match a ``"quoted identifier"``; ``""`` stands for one literal quote.

    The scan keeps a single flag: whether the previous character was a
    quote.  A quote after a quote continues the body, anything else after
    a quote ends the identifier.  The span must hold an even number of
    double quotes, otherwise the identifier was never closed.
    """
    if not text.startswith('"', pos):
        return None

    length = len(text)
    i = pos + 1
    saw_quote = False
    while i < length:
        ch = text[i]
        if saw_quote:
            if ch != '"':
                break
            saw_quote = False
        elif ch == '"':
            saw_quote = True
        i += 1

    span = text[pos:i]
    if span.count('"') % 2:
        raise UnterminatedLiteralError("quoted identifier", pos)
    return RuleMatch([Segment.literal(span)], i)


# ---------------------------------------------------------------------------
# String and dollar-quoted literals
# ---------------------------------------------------------------------------


class _QuoteState(Enum):
    OTHER = 1
    QUOTE = 2  # just saw a quote that may close the literal
    BACKQ = 3  # just saw a backslash; next character is taken as-is


def quote_literal(text: str, pos: int) -> RuleMatch | None:
    """Match a ``'string literal'`` with ``''`` and ``\\'`` escapes.

    Only quotes that the scan actually consumed after a backslash count as
    escaped for the parity check, so ``'a\\\\'`` (an escaped backslash
    followed by the closing quote) is accepted.
    """
    if not text.startswith("'", pos):
        return None

    length = len(text)
    i = pos + 1
    state = _QuoteState.OTHER
    escaped = 0
    while i < length:
        ch = text[i]
        if state is _QuoteState.QUOTE:
            if ch != "'":
                break
            state = _QuoteState.OTHER
        elif state is _QuoteState.BACKQ:
            if ch == "'":
                escaped += 1
            state = _QuoteState.OTHER
        elif ch == "'":
            state = _QuoteState.QUOTE
        elif ch == "\\":
            state = _QuoteState.BACKQ
        i += 1

    body = text[pos + 1 : i]
    if (body.count("'") - escaped) % 2 == 0:
        raise UnterminatedLiteralError("string literal", pos)
    return RuleMatch([Segment.literal(text[pos:i])], i)


def dollar_literal(text: str, pos: int) -> RuleMatch | None:
    """Match a ``$tag$ ... $tag$`` literal (the tag may be empty).

    A ``$`` with no later ``$``, or a ``$tag$`` whose closing ``$tag$``
    never appears, is not a dollar quote and is left to the fallback rule.

    Raises:
        MalformedDollarTagError: If the tag starts with a digit.
    """
    if not text.startswith("$", pos):
        return None

    tag_end = text.find("$", pos + 1)
    if tag_end == -1:
        return None

    tag = text[pos + 1 : tag_end]
    if tag and "0" <= tag[0] <= "9":
        raise MalformedDollarTagError(tag, pos)

    delimiter = f"${tag}$"
    close = text.find(delimiter, tag_end + 1)
    if close == -1:
        return None
    end = close + len(delimiter)
    return RuleMatch([Segment.literal(text[pos:end])], end)


def literal(text: str, pos: int) -> RuleMatch | None:
    """Match either kind of quoted literal at *pos*."""
    return quote_literal(text, pos) or dollar_literal(text, pos)


# ---------------------------------------------------------------------------
# Top-level classification
# ---------------------------------------------------------------------------


def _rules(max_comment_depth: int | None) -> tuple[Rule, ...]:
    def _comment(text: str, pos: int) -> RuleMatch | None:
        return comment(text, pos, max_comment_depth)

    return (plain_text, placeholder, _comment, quoted_identifier, literal, any_char)


def classify(text: str, max_comment_depth: int | None = None) -> list[Segment]:
    """Split *text* into an ordered list of segments covering it exactly.

    Rules are tried in precedence order at each position; the first one
    that matches wins.

    Raises:
        RewriteError: If any inert construct is unterminated or malformed.
    """
    _check_depth_bound(max_comment_depth)
    rules = _rules(max_comment_depth)
    segments: list[Segment] = []
    length = len(text)
    pos = 0

    while pos < length:
        result: RuleMatch | None = None
        for rule in rules:
            result = rule(text, pos)
            if result is not None:
                break
        if result is None or result.end <= pos:
            raise ScanStalledError(pos)
        segments.extend(result.segments)
        pos = result.end

    logger.debug("Classified %d characters into %d segments", length, len(segments))
    return segments
