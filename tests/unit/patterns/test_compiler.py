"""Unit tests for pattern compilation.

Tests include/exclude splitting, wildcard segment compilation, anchors
and regex compilation errors.
"""

import pytest
from wildpaths.patterns.compiler import (
    common_anchor,
    compile_glob,
    compile_regex,
    compile_segment,
    normalize_separators,
    split_patterns,
)
from wildpaths.patterns.errors import PatternSyntaxError, WildpathsError
from wildpaths.patterns.models import CasePolicy, SegmentKind


class TestSplitPatterns:
    """Tests for split_patterns function."""

    def test_splits_includes_and_excludes(self) -> None:
        """Patterns starting with ! become excludes without the marker."""
        includes, excludes = split_patterns(["**/*.jpg", "!**/.svn/**", "*.gif"])

        assert includes == ["**/*.jpg", "*.gif"]
        assert excludes == ["**/.svn/**"]

    def test_empty_strings_ignored(self) -> None:
        """Empty pattern strings are skipped."""
        includes, excludes = split_patterns(["", "*.txt", ""])

        assert includes == ["*.txt"]
        assert excludes == []

    def test_bare_exclude_marker_rejected(self) -> None:
        """A lone ! is a syntax error."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            split_patterns(["!"])

        assert exc_info.value.pattern == "!"


class TestCompileSegment:
    """Tests for compile_segment function."""

    def test_literal(self) -> None:
        """Segments without wildcard characters are literal."""
        segment = compile_segment("animals")

        assert segment.kind == SegmentKind.LITERAL
        assert segment.regex is None

    def test_globstar(self) -> None:
        """A whole ** segment is a globstar."""
        assert compile_segment("**").kind == SegmentKind.GLOBSTAR

    def test_double_star_inside_name_is_wildcard(self) -> None:
        """** inside a longer name behaves like a single *."""
        segment = compile_segment("a**b")

        assert segment.kind == SegmentKind.WILDCARD
        assert segment.regex is not None
        assert segment.regex.fullmatch("axyzb")
        assert not segment.regex.fullmatch("ax/yb")

    def test_question_mark_matches_one_character(self) -> None:
        """? matches exactly one character."""
        segment = compile_segment("ca?.jpg")

        assert segment.regex is not None
        assert segment.regex.fullmatch("cat.jpg")
        assert not segment.regex.fullmatch("ca.jpg")
        assert not segment.regex.fullmatch("cart.jpg")

    def test_regex_metacharacters_are_literal(self) -> None:
        """Characters such as . + ( are matched literally."""
        segment = compile_segment("a+(1).*")

        assert segment.regex is not None
        assert segment.regex.fullmatch("a+(1).txt")
        assert not segment.regex.fullmatch("aa(1)xtxt")

    def test_case_insensitive(self) -> None:
        """Case-insensitive wildcard segments ignore case."""
        segment = compile_segment("*.JPG", case_sensitive=False)

        assert segment.regex is not None
        assert segment.regex.fullmatch("cat.jpg")


class TestCompileGlob:
    """Tests for compile_glob function."""

    def test_segments(self) -> None:
        """Patterns are split on / into segments."""
        compiled = compile_glob("images/**/*.jpg", CasePolicy.SENSITIVE)

        assert [s.kind for s in compiled.segments] == [
            SegmentKind.LITERAL,
            SegmentKind.GLOBSTAR,
            SegmentKind.WILDCARD,
        ]

    def test_backslashes_normalized(self) -> None:
        """Backslash separators are accepted."""
        compiled = compile_glob("images\\*.jpg", CasePolicy.SENSITIVE)

        assert compiled.pattern == "images/*.jpg"
        assert len(compiled.segments) == 2

    def test_empty_segments_dropped(self) -> None:
        """Doubled, leading and trailing slashes do not create segments."""
        compiled = compile_glob("/a//b/", CasePolicy.SENSITIVE)

        assert compiled.pattern == "a/b"

    def test_no_segments_rejected(self) -> None:
        """A pattern made of separators only is a syntax error."""
        with pytest.raises(PatternSyntaxError):
            compile_glob("//")

    def test_anchor_stops_at_first_wildcard(self) -> None:
        """The anchor is the literal directory prefix."""
        compiled = compile_glob("a/b/*/c/*.txt", CasePolicy.SENSITIVE)

        assert compiled.anchor == ("a", "b")

    def test_anchor_excludes_final_segment(self) -> None:
        """A fully literal pattern anchors at its parent directory."""
        assert compile_glob("a/b/c.txt", CasePolicy.SENSITIVE).anchor == ("a", "b")
        assert compile_glob("c.txt", CasePolicy.SENSITIVE).anchor == ()

    def test_anchor_stops_at_relative_names(self) -> None:
        """. and .. never become part of the anchor."""
        assert compile_glob("a/../b/*.txt", CasePolicy.SENSITIVE).anchor == ("a",)

    def test_case_insensitive_pattern_has_no_anchor(self) -> None:
        """Insensitive patterns walk from the root."""
        assert compile_glob("a/b/*.txt", CasePolicy.INSENSITIVE).anchor == ()


class TestCommonAnchor:
    """Tests for common_anchor function."""

    def test_shared_prefix(self) -> None:
        """The longest prefix shared by all patterns is returned."""
        patterns = [
            compile_glob("a/b/c/*.txt", CasePolicy.SENSITIVE),
            compile_glob("a/b/d/*.txt", CasePolicy.SENSITIVE),
        ]

        assert common_anchor(patterns) == ("a", "b")

    def test_no_shared_prefix(self) -> None:
        """Patterns under different top directories share nothing."""
        patterns = [
            compile_glob("a/*.txt", CasePolicy.SENSITIVE),
            compile_glob("b/*.txt", CasePolicy.SENSITIVE),
        ]

        assert common_anchor(patterns) == ()

    def test_empty(self) -> None:
        """No patterns means no anchor."""
        assert common_anchor([]) == ()


class TestCompileRegex:
    """Tests for compile_regex function."""

    def test_valid_expression(self) -> None:
        """A valid expression compiles."""
        compiled = compile_regex(r".*\.jpg", CasePolicy.SENSITIVE)

        assert compiled.regex.fullmatch("animals/cat.jpg")

    def test_invalid_expression(self) -> None:
        """An invalid expression raises PatternSyntaxError."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            compile_regex("([a-z", CasePolicy.SENSITIVE)

        assert exc_info.value.pattern == "([a-z"
        assert isinstance(exc_info.value, WildpathsError)

    def test_case_insensitive(self) -> None:
        """Insensitive expressions ignore case."""
        compiled = compile_regex(r".*\.JPG", CasePolicy.INSENSITIVE)

        assert compiled.regex.fullmatch("cat.jpg")


def test_normalize_separators() -> None:
    """Backslashes become forward slashes."""
    assert normalize_separators("a\\b/c") == "a/b/c"
