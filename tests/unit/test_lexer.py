# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for the lexical rules and top-level classification."""

from __future__ import annotations

import pytest

from sqlparam.core.constants import SegmentKind
from sqlparam.core.exceptions import (
    CommentNestingError,
    ConfigurationError,
    MalformedDollarTagError,
    RewriteError,
    UnterminatedCommentError,
    UnterminatedLiteralError,
)
from sqlparam.models.segment import Segment
from sqlparam.parsers.lexer import (
    any_char,
    block_comment,
    classify,
    comment,
    dollar_literal,
    line_comment,
    literal,
    placeholder,
    plain_text,
    quote_literal,
    quoted_identifier,
)


def _joined(segments: list[Segment]) -> str:
    return "".join("?" if s.is_placeholder else s.content for s in segments)


# ---------------------------------------------------------------------------
# Plain text, placeholders and the fallback
# ---------------------------------------------------------------------------


class TestPlainText:
    def test_stops_at_special_character(self) -> None:
        result = plain_text("select 1 ?", 0)
        assert result is not None
        assert result.segments == [Segment.text("select 1 ")]
        assert result.end == 9

    def test_matches_from_cursor(self) -> None:
        result = plain_text("?abc'", 1)
        assert result is not None
        assert result.segments == [Segment.text("abc")]
        assert result.end == 4

    @pytest.mark.parametrize("ch", ["\\", "?", "-", "/", '"', "'", "$"])
    def test_special_character_does_not_match(self, ch: str) -> None:
        assert plain_text(ch + "abc", 0) is None


class TestPlaceholder:
    def test_marker(self) -> None:
        result = placeholder("?, ?", 0)
        assert result is not None
        assert result.segments == [Segment.placeholder()]
        assert result.end == 1

    def test_not_a_marker(self) -> None:
        assert placeholder("x?", 0) is None


class TestAnyChar:
    def test_single_character(self) -> None:
        result = any_char("a - b", 2)
        assert result is not None
        assert result.segments == [Segment.literal("-")]
        assert result.end == 3

    def test_end_of_input(self) -> None:
        assert any_char("abc", 3) is None


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class TestLineComment:
    def test_includes_newline(self) -> None:
        result = line_comment("-- hi ?\nselect", 0)
        assert result is not None
        assert result.segments == [Segment.literal("-- hi ?\n")]
        assert result.end == 8

    def test_runs_to_end_of_input(self) -> None:
        result = line_comment("-- tail ?", 0)
        assert result is not None
        assert result.segments == [Segment.literal("-- tail ?")]
        assert result.end == 9

    def test_crlf_kept_verbatim(self) -> None:
        result = line_comment("-- a\r\nx", 0)
        assert result is not None
        assert result.segments == [Segment.literal("-- a\r\n")]

    def test_single_hyphen_is_not_a_comment(self) -> None:
        assert line_comment("- 1", 0) is None


class TestBlockComment:
    def test_simple(self) -> None:
        result = block_comment("/* ? */ x", 0)
        assert result is not None
        assert result.segments == [Segment.literal("/* ? */")]
        assert result.end == 7

    def test_nested(self) -> None:
        result = block_comment("/* a /* b */ c */ ?", 0)
        assert result is not None
        assert result.segments == [Segment.literal("/* a /* b */ c */")]
        assert result.end == 17

    def test_unterminated(self) -> None:
        with pytest.raises(UnterminatedCommentError) as excinfo:
            block_comment("/* never closed ?", 0)
        assert excinfo.value.position == 0
        assert excinfo.value.depth == 1

    def test_unterminated_inner_level(self) -> None:
        with pytest.raises(UnterminatedCommentError) as excinfo:
            block_comment("/* outer /* inner */", 0)
        assert excinfo.value.depth == 1

    def test_unterminated_reports_open_depth(self) -> None:
        with pytest.raises(UnterminatedCommentError) as excinfo:
            block_comment("/* /* /* */", 0)
        assert excinfo.value.depth == 2

    def test_deep_nesting_does_not_recurse(self) -> None:
        depth = 50_000
        text = "/*" * depth + "*/" * depth
        result = block_comment(text, 0)
        assert result is not None
        assert result.end == len(text)

    def test_depth_bound(self) -> None:
        text = "/* /* /* */ */ */"
        assert block_comment(text, 0, max_depth=3) is not None
        with pytest.raises(CommentNestingError) as excinfo:
            block_comment(text, 0, max_depth=2)
        assert excinfo.value.limit == 2
        assert excinfo.value.position == 6

    @pytest.mark.parametrize("bound", [0, -5])
    def test_depth_bound_below_one_rejected(self, bound: int) -> None:
        with pytest.raises(ConfigurationError, match="at least 1"):
            block_comment("/* x */", 0, max_depth=bound)

    def test_single_slash_is_not_a_comment(self) -> None:
        assert block_comment("/ 2", 0) is None


class TestComment:
    def test_dispatches_to_both_forms(self) -> None:
        line = comment("-- x", 0)
        block = comment("/* x */", 0)
        assert line is not None and line.end == 4
        assert block is not None and block.end == 7

    def test_no_comment(self) -> None:
        assert comment("x", 0) is None


# ---------------------------------------------------------------------------
# Quoted identifiers
# ---------------------------------------------------------------------------


class TestQuotedIdentifier:
    def test_simple(self) -> None:
        result = quoted_identifier('"col?" = 1', 0)
        assert result is not None
        assert result.segments == [Segment.literal('"col?"')]
        assert result.end == 6

    def test_doubled_quote_escape(self) -> None:
        result = quoted_identifier('"a""b" x', 0)
        assert result is not None
        assert result.segments == [Segment.literal('"a""b"')]
        assert result.end == 6

    def test_identifier_at_end_of_input(self) -> None:
        result = quoted_identifier('"abc"', 0)
        assert result is not None
        assert result.end == 5

    def test_unterminated(self) -> None:
        with pytest.raises(UnterminatedLiteralError) as excinfo:
            quoted_identifier('"abc', 0)
        assert excinfo.value.construct == "quoted identifier"

    def test_unterminated_after_escape(self) -> None:
        with pytest.raises(UnterminatedLiteralError):
            quoted_identifier('"ab""', 0)

    def test_not_an_identifier(self) -> None:
        assert quoted_identifier("abc", 0) is None


# ---------------------------------------------------------------------------
# String and dollar-quoted literals
# ---------------------------------------------------------------------------


class TestQuoteLiteral:
    def test_simple(self) -> None:
        result = quote_literal("'what?' x", 0)
        assert result is not None
        assert result.segments == [Segment.literal("'what?'")]
        assert result.end == 7

    def test_doubled_quote_escape(self) -> None:
        result = quote_literal("'it''s' x", 0)
        assert result is not None
        assert result.segments == [Segment.literal("'it''s'")]
        assert result.end == 7

    def test_backslash_quote_escape(self) -> None:
        result = quote_literal("'it\\'s' x", 0)
        assert result is not None
        assert result.segments == [Segment.literal("'it\\'s'")]
        assert result.end == 7

    def test_escaped_backslash_before_closing_quote(self) -> None:
        result = quote_literal("'a\\\\' x", 0)
        assert result is not None
        assert result.segments == [Segment.literal("'a\\\\'")]
        assert result.end == 5

    def test_empty_literal(self) -> None:
        result = quote_literal("'' x", 0)
        assert result is not None
        assert result.end == 2

    def test_unterminated(self) -> None:
        with pytest.raises(UnterminatedLiteralError) as excinfo:
            quote_literal("'abc", 0)
        assert excinfo.value.construct == "string literal"
        assert excinfo.value.position == 0

    def test_unterminated_after_backslash_escape(self) -> None:
        with pytest.raises(UnterminatedLiteralError):
            quote_literal("'abc\\'", 0)

    def test_not_a_literal(self) -> None:
        assert quote_literal('"x"', 0) is None


class TestDollarLiteral:
    def test_empty_tag(self) -> None:
        result = dollar_literal("$$ ? $$ x", 0)
        assert result is not None
        assert result.segments == [Segment.literal("$$ ? $$")]
        assert result.end == 7

    def test_tag_must_match_exactly(self) -> None:
        text = "$tag$ has $other$ and $ta$ ? $tag$ tail"
        result = dollar_literal(text, 0)
        assert result is not None
        assert result.segments == [Segment.literal("$tag$ has $other$ and $ta$ ? $tag$")]
        assert text[result.end :] == " tail"

    def test_digit_tag_is_malformed(self) -> None:
        with pytest.raises(MalformedDollarTagError) as excinfo:
            dollar_literal("$1 and $2", 0)
        assert excinfo.value.tag == "1 and "

    def test_unclosed_tag_is_not_a_literal(self) -> None:
        assert dollar_literal("$fn$ body without end", 0) is None

    def test_lone_dollar_is_not_a_literal(self) -> None:
        assert dollar_literal("$5", 0) is None


class TestLiteral:
    def test_quote_form(self) -> None:
        result = literal("'x'", 0)
        assert result is not None and result.end == 3

    def test_dollar_form(self) -> None:
        result = literal("$$x$$", 0)
        assert result is not None and result.end == 5

    def test_neither(self) -> None:
        assert literal("x", 0) is None


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    def test_empty_input(self) -> None:
        assert classify("") == []

    def test_segment_kinds(self) -> None:
        segments = classify("select ?, '?', \"?\" from t")
        assert [s.kind for s in segments] == [
            SegmentKind.TEXT,
            SegmentKind.PLACEHOLDER,
            SegmentKind.TEXT,
            SegmentKind.LITERAL,
            SegmentKind.TEXT,
            SegmentKind.LITERAL,
            SegmentKind.TEXT,
        ]

    def test_covers_input_exactly(self) -> None:
        query = (
            "select a - b / c, \"x\"\"y\", 'it''s ?', $q$ ? $q$ -- tail ?\n"
            "from t /* a /* b */ ? */ where id = ? and p = $5"
        )
        segments = classify(query)
        assert _joined(segments) == query
        assert sum(1 for s in segments if s.is_placeholder) == 1

    def test_fallback_characters(self) -> None:
        segments = classify("a\\b")
        assert segments == [Segment.text("a"), Segment.literal("\\"), Segment.text("b")]

    def test_committed_rule_does_not_fall_back(self) -> None:
        with pytest.raises(RewriteError):
            classify("select 'abc")

    def test_depth_bound_checked_without_comments(self) -> None:
        with pytest.raises(ConfigurationError):
            classify("select ?", max_comment_depth=0)

    def test_unclosed_dollar_tag_copied_through(self) -> None:
        segments = classify("$a$ ?")
        assert segments == [
            Segment.literal("$"),
            Segment.text("a"),
            Segment.literal("$"),
            Segment.text(" "),
            Segment.placeholder(),
        ]

    def test_depth_bound_is_passed_through(self) -> None:
        with pytest.raises(CommentNestingError):
            classify("select /* /* */ */ 1", max_comment_depth=1)
