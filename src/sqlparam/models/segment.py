# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Segment and query models produced and consumed by the rewriter."""

from __future__ import annotations

from dataclasses import dataclass

from sqlparam.core.constants import SegmentKind


@dataclass(frozen=True, slots=True)
class Segment:
    """One classified span of a query.

    ``TEXT`` and ``LITERAL`` segments are copied to the output unchanged.
    ``PLACEHOLDER`` segments carry no content and are replaced by the next
    numbered parameter reference.
    """

    kind: SegmentKind
    content: str = ""

    @classmethod
    def text(cls, content: str) -> Segment:
        return cls(SegmentKind.TEXT, content)

    @classmethod
    def literal(cls, content: str) -> Segment:
        return cls(SegmentKind.LITERAL, content)

    @classmethod
    def placeholder(cls) -> Segment:
        return cls(SegmentKind.PLACEHOLDER)

    @property
    def is_placeholder(self) -> bool:
        return self.kind is SegmentKind.PLACEHOLDER


@dataclass(frozen=True, slots=True)
class RuleMatch:
    """Result of a lexical rule: the segments it produced and the new cursor."""

    segments: list[Segment]
    end: int


@dataclass(frozen=True, slots=True)
class Query:
    """Immutable wrapper around the SQL text handed in by the driver."""

    text: str

    def __str__(self) -> str:
        return self.text
