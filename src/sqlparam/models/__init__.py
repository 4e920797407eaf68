# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Data models for classified query segments."""

from sqlparam.models.segment import Query, RuleMatch, Segment

__all__ = ["Query", "RuleMatch", "Segment"]
