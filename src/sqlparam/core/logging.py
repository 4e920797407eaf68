# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Structured logging that keeps SQL literal contents out of log output."""

import json
import logging
import re
import sys
from typing import Any

REDACT_PATTERNS = [
    # Single-quoted SQL string bodies, including '' and \' escapes
    (re.compile(r"'(?:[^'\\]|\\.|'')+'"), "'[REDACTED]'"),
    # Dollar-quoted bodies: $$...$$ or $tag$...$tag$
    (re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*|)\$.*?\$\1\$", re.DOTALL), r"$\1$[REDACTED]$\1$"),
]

# Rewrite context attached to records through ``extra=``
CONTEXT_FIELDS = ("dialect", "position", "excerpt")

EXCERPT_MARKER = "<-- here"


def redact_sensitive(text: str) -> str:
    for pattern, replacement in REDACT_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def query_excerpt(query: str, position: int | None, width: int = 40) -> str:
    """Return up to *width* characters of *query* leading up to *position*.

    Text from *position* onwards is left out: it starts the construct that
    failed, which may be an unclosed literal.  Complete literals inside the
    window are redacted.
    """
    if position is None:
        return ""
    start = max(0, position - width)
    window = redact_sensitive(query[start:position])
    prefix = "..." if start else ""
    return f"{prefix}{window}{EXCERPT_MARKER}"


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    context: dict[str, Any] = {}
    for field in CONTEXT_FIELDS:
        value = getattr(record, field, None)
        if value is not None:
            context[field] = value
    return context


class JsonFormatter(logging.Formatter):
    """One JSON object per line; rewrite context becomes top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_sensitive(record.getMessage()),
        }
        log_entry.update(_record_context(record))
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = redact_sensitive(str(record.exc_info[1]))
        return json.dumps(log_entry)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = redact_sensitive(super().format(record))
        excerpt = getattr(record, "excerpt", None)
        if excerpt:
            msg += f" | near: {excerpt}"
        return msg


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Attach a single stderr handler to the ``sqlparam`` logger."""
    root = logging.getLogger("sqlparam")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            TextFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    root.addHandler(handler)
