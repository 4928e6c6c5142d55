# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""Tests for classifier.py module."""

import pytest

from divinepl.classifier import (
    BLOCK_BEGIN,
    BLOCK_END,
    classify,
    extract_between,
    physical_lines,
    scan,
)
from divinepl.schemas import Announcement, Statement


class TestClassify:
    """Tests for statement classification."""

    def test_empty_text(self):
        """Empty input yields no statements."""
        assert classify("") == []

    def test_line_numbers_skip_blank_lines(self):
        """Line numbers are 1-based physical positions."""
        text = "let a = 1\n\n   \nlet b = 2\n"
        statements = classify(text)
        assert [s.line_number for s in statements] == [1, 4]
        assert [s.text for s in statements] == ["let a = 1", "let b = 2"]

    def test_text_is_trimmed(self):
        """Statement text has surrounding whitespace removed."""
        statements = classify("    bless thing()   \t")
        assert statements == [Statement(line_number=1, text="bless thing()")]

    def test_comments_produce_no_statement(self):
        """// comment lines are skipped."""
        statements = classify("// function evil() {}\nlet x = 1")
        assert [s.line_number for s in statements] == [2]

    def test_devotional_line_fully_consumed(self):
        """A single-line prayer never becomes a statement, even if it looks sinful."""
        text = "\U0001F64F Lord, forgive this function kill Process \U0001F64F\nlet x = 1"
        statements = classify(text)
        assert [s.line_number for s in statements] == [2]

    def test_flags(self):
        """Flags are computed from independent substring tests."""
        statements = classify('miracle heal() { covenant("x"); revelation("y") }')
        stmt = statements[0]
        assert stmt.is_miracle is True
        assert stmt.is_covenant is True
        assert stmt.has_revelation is True

    def test_miracle_flag_requires_leading_keyword(self):
        """is_miracle only holds when the line starts with 'miracle'."""
        stmt = classify("let m = miracle()")[0]
        assert stmt.is_miracle is False

    def test_promise_sets_covenant_flag(self):
        """'promise' counts as a covenant keyword."""
        stmt = classify("let p = promise(3)")[0]
        assert stmt.is_covenant is True
        assert stmt.has_revelation is False

    def test_idempotent(self):
        """Classifying twice yields identical sequences."""
        text = f"let a = 1\n{BLOCK_BEGIN}\nhidden\nlet b = 2"
        assert classify(text) == classify(text)

    def test_statement_count_bounded_by_nonempty_lines(self):
        """Never more statements than non-empty lines."""
        text = "a\n\nb\n// c\n\U0001F64F d\n" + BLOCK_BEGIN + "\ne\n" + BLOCK_END + "\nf"
        nonempty = [line for line in text.split("\n") if line.strip()]
        assert len(classify(text)) <= len(nonempty)
        assert [s.text for s in classify(text)] == ["a", "b", "f"]

    def test_only_newlines_break_lines(self):
        """Form feeds and other Unicode breaks stay inside their physical line."""
        statements = classify("let x = '\x0c'\nfunction foo() {}\nlet s = 'a\u2028b'\nlet y = 2")
        assert [s.line_number for s in statements] == [1, 2, 3, 4]
        assert statements[0].text == "let x = '\x0c'"
        assert statements[1].text == "function foo() {}"

    def test_crlf_line_endings(self):
        statements = classify("let a = 1\r\n\r\nlet b = 2\r\n")
        assert [(s.line_number, s.text) for s in statements] == [(1, "let a = 1"), (3, "let b = 2")]


class TestPhysicalLines:
    """Tests for physical line splitting."""

    def test_empty_text(self):
        assert physical_lines("") == []

    def test_trailing_newline_adds_no_line(self):
        assert physical_lines("a\nb\n") == ["a", "b"]

    def test_form_feed_is_not_a_break(self):
        assert physical_lines("a\x0cb\x0bc\x85d") == ["a\x0cb\x0bc\x85d"]


class TestPrayerBlocks:
    """Tests for multi-line prayer block suppression."""

    def test_block_content_suppressed(self):
        """Lines inside a block never become statements."""
        text = "\n".join([
            "let before = 1",
            BLOCK_BEGIN,
            "function unblessed() {}",
            "let satan = 666",
            BLOCK_END,
            "let after = 2",
        ])
        statements = classify(text)
        assert [s.line_number for s in statements] == [1, 6]

    def test_markers_are_not_statements(self):
        """Begin and end markers produce nothing themselves."""
        assert classify(f"{BLOCK_BEGIN}\n{BLOCK_END}") == []

    def test_markers_match_after_trimming(self):
        """Markers are recognised with surrounding whitespace."""
        text = f"   {BLOCK_BEGIN}  \nhidden\n\t{BLOCK_END}\nshown"
        assert [s.text for s in classify(text)] == ["shown"]

    def test_unterminated_block_swallows_rest(self):
        """An unmatched begin marker suppresses everything after it."""
        text = f"let a = 1\n{BLOCK_BEGIN}\nlet b = 2\nlet c = 3\nlet d = 4"
        statements = classify(text)
        assert [s.line_number for s in statements] == [1]

    def test_unterminated_block_alone(self):
        """Three ordinary lines after an unmatched begin marker yield nothing."""
        text = f"{BLOCK_BEGIN}\nlet b = 2\nlet c = 3\nlet d = 4"
        assert classify(text) == []

    def test_end_marker_outside_block_is_noop(self):
        """A stray end marker is ignored."""
        text = f"{BLOCK_END}\nlet a = 1"
        statements = classify(text)
        assert [s.line_number for s in statements] == [2]

    def test_no_statement_inside_any_block(self):
        """No statement line number falls strictly inside a block."""
        lines = ["a", BLOCK_BEGIN, "b", "c", BLOCK_END, "d", BLOCK_BEGIN, "e", BLOCK_END, "f"]
        statements = classify("\n".join(lines))
        inside = {3, 4, 8}
        assert not inside & {s.line_number for s in statements}


class TestExtractBetween:
    """Tests for delimiter extraction."""

    def test_simple(self):
        assert extract_between('revelation("Hello")', 'revelation("', '")') == "Hello"

    def test_missing_opening(self):
        assert extract_between('print("x")', 'revelation("', '")') is None

    def test_missing_closing(self):
        assert extract_between('revelation("unterminated', 'revelation("', '")') is None

    def test_first_closing_after_opening(self):
        """Stops at the first closing token, not the last."""
        text = 'revelation("a") + revelation("b")'
        assert extract_between(text, 'revelation("', '")') == "a"

    def test_two_openings_one_closing(self):
        """Uses the first opening token even when a second one follows."""
        text = 'revelation("first revelation("second")'
        assert extract_between(text, 'revelation("', '")') == 'first revelation("second'

    def test_closing_before_opening_ignored(self):
        """A closing token before the opening one does not count."""
        text = '") revelation("late")'
        assert extract_between(text, 'revelation("', '")') == "late"


class TestAnnouncements:
    """Tests for announcement extraction during scan."""

    def test_revelation_and_print(self):
        """Both call forms are extracted, revelation first."""
        result = scan('bless f() { revelation("Rise"); print("up") }')
        assert result.announcements == (
            Announcement(line_number=1, kind="revelation", message="Rise"),
            Announcement(line_number=1, kind="print", message="up"),
        )

    def test_extraction_on_comment_line(self):
        """Comment lines still announce, without producing a statement."""
        result = scan('// print("still heard")')
        assert result.statements == ()
        assert result.announcements == (
            Announcement(line_number=1, kind="print", message="still heard"),
        )

    def test_no_extraction_inside_block(self):
        """Block content is never extracted."""
        result = scan(f'{BLOCK_BEGIN}\nrevelation("hidden")\n{BLOCK_END}')
        assert result.announcements == ()

    def test_missing_delimiter_skipped(self):
        """Incomplete calls are silently skipped."""
        result = scan("revelation(message)")
        assert result.announcements == ()
        assert len(result.statements) == 1

    def test_prayer_lines_recorded(self):
        """Single-line prayers are recorded by line number."""
        result = scan("let a = 1\n\U0001F64F Lord guide me \U0001F64F")
        assert result.prayer_lines == (2,)

    @pytest.mark.parametrize("text", ["", "\n\n", "   "])
    def test_blank_input(self, text):
        result = scan(text)
        assert result.statements == ()
        assert result.announcements == ()
