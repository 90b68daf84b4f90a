"""Unit tests for the public scan entry points."""

from pathlib import Path

import pytest
from wildpaths.patterns.errors import PatternSyntaxError
from wildpaths.patterns.models import CasePolicy, ScanStats
from wildpaths.patterns.options import ScanOptions
from wildpaths.patterns.scan import parse_piped, scan_glob, scan_piped, scan_regex

SENSITIVE = ScanOptions(case=CasePolicy.SENSITIVE)


class TestScanGlob:
    """Tests for scan_glob function."""

    def test_jpg_scenario(self, assets_tree: Path) -> None:
        """Only the jpg files are collected, at any depth."""
        result = scan_glob(assets_tree, ["**/*.jpg"], options=SENSITIVE)

        assert sorted(result) == ["animals/cat.jpg", "animals/dog.jpg", "stuff.jpg"]

    def test_no_patterns_collects_everything(self, assets_tree: Path) -> None:
        """An empty pattern list behaves like **."""
        result = scan_glob(assets_tree, options=SENSITIVE)

        assert sorted(result) == [
            "animals",
            "animals/cat.jpg",
            "animals/dog.jpg",
            "animals/giraffe.tga",
            "otherstuff.gif",
            "stuff.jpg",
        ]

    def test_only_excludes_implies_everything(self, assets_tree: Path) -> None:
        """Excludes without includes apply to an implicit **."""
        result = scan_glob(assets_tree, ["!**/*.jpg"], options=SENSITIVE)

        assert sorted(result) == ["animals", "animals/giraffe.tga", "otherstuff.gif"]

    def test_single_star_stays_in_one_directory(self, assets_tree: Path) -> None:
        """*.jpg does not match files in subdirectories."""
        assert scan_glob(assets_tree, ["*.jpg"], options=SENSITIVE) == ["stuff.jpg"]

    def test_question_mark(self, assets_tree: Path) -> None:
        """? matches exactly one character."""
        result = scan_glob(assets_tree, ["animals/???.jpg"], options=SENSITIVE)

        assert sorted(result) == ["animals/cat.jpg", "animals/dog.jpg"]

    def test_question_mark_top_level(self, make_tree) -> None:
        """A lone ? collects only single-character top-level names."""
        root = make_tree(["a", "b/", "b/c", "dd", "e/f/", "gh/i"])

        result = scan_glob(root, ["?"], options=SENSITIVE)

        assert sorted(result) == ["a", "b", "e"]

    @pytest.mark.parametrize(
        "pattern",
        ["*", "*/*", "?/*.txt", "*/*/*", "b/?", "*/f/*.txt"],
    )
    def test_depth_follows_pattern(self, make_tree, pattern: str) -> None:
        """Without **, every match has as many segments as the pattern."""
        root = make_tree(["a", "b/c", "b/d.txt", "e/f/g.txt", "e/f/h/i.txt", "jk/l.txt"])

        result = scan_glob(root, [pattern], options=SENSITIVE)

        assert result
        assert all(len(p.split("/")) == len(pattern.split("/")) for p in result)

    def test_svn_excluded_at_any_depth(self, make_tree) -> None:
        """Files under .svn are excluded even nine levels deep."""
        nested = "/".join(f"d{i}" for i in range(9))
        root = make_tree(
            [
                "images/top.jpg",
                f"images/{nested}/deep.jpg",
                f"images/{nested}/.svn/text-base/deep.jpg",
                "images/.svn/top.jpg",
            ]
        )

        result = scan_glob(root, ["images/**/*.jpg", "!**/.svn/**"], options=SENSITIVE)

        assert sorted(result) == [f"images/{nested}/deep.jpg", "images/top.jpg"]

    def test_default_excludes_applied(self, make_tree) -> None:
        """Configured default excludes are added to every wildcard scan."""
        root = make_tree(["a.txt", ".git/config.txt"])
        options = ScanOptions(case=CasePolicy.SENSITIVE, default_excludes=["**/.git/**"])

        assert scan_glob(root, ["**/*.txt"], options=options) == ["a.txt"]

    def test_idempotent(self, assets_tree: Path) -> None:
        """Scanning an unchanged tree twice gives the same sequence."""
        first = scan_glob(assets_tree, ["**"], options=SENSITIVE)
        second = scan_glob(assets_tree, ["**"], options=SENSITIVE)

        assert first == second

    def test_case_insensitive(self, assets_tree: Path) -> None:
        """The INSENSITIVE policy ignores case in literals and wildcards."""
        options = ScanOptions(case=CasePolicy.INSENSITIVE)

        result = scan_glob(assets_tree, ["ANIMALS/*.JPG"], options=options)

        assert sorted(result) == ["animals/cat.jpg", "animals/dog.jpg"]

    def test_missing_root(self, tmp_path: Path) -> None:
        """A root that does not exist yields an empty result."""
        assert scan_glob(tmp_path / "absent", ["**"]) == []

    def test_invalid_pattern(self, assets_tree: Path) -> None:
        """A bare ! is rejected before scanning."""
        with pytest.raises(PatternSyntaxError):
            scan_glob(assets_tree, ["!"])

    def test_fills_stats(self, assets_tree: Path) -> None:
        """Statistics are recorded in the given ScanStats."""
        stats = ScanStats()

        scan_glob(assets_tree, ["**"], options=SENSITIVE, stats=stats)

        assert stats.dirs_opened == 2
        assert stats.entries_visited == 6
        assert stats.read_failures == 0


class TestScanRegex:
    """Tests for scan_regex function."""

    def test_matches(self, assets_tree: Path) -> None:
        """Expressions select whole relative paths."""
        result = scan_regex(assets_tree, [r".*\.jpg", r"!animals/d.*"], options=SENSITIVE)

        assert sorted(result) == ["animals/cat.jpg", "stuff.jpg"]

    def test_no_patterns_matches_nothing(self, assets_tree: Path) -> None:
        """Without include expressions nothing is collected."""
        assert scan_regex(assets_tree, []) == []
        assert scan_regex(assets_tree, ["!.*"]) == []

    def test_invalid_expression(self, tmp_path: Path) -> None:
        """An invalid expression fails before any directory is read."""
        with pytest.raises(PatternSyntaxError):
            scan_regex(tmp_path / "absent", ["([a-z"])

    def test_default_excludes_not_applied(self, make_tree) -> None:
        """Default excludes only apply to wildcard scans."""
        root = make_tree(["a.txt", ".git/config.txt"])
        options = ScanOptions(case=CasePolicy.SENSITIVE, default_excludes=["**/.git/**"])

        result = scan_regex(root, [r".*\.txt"], options=options)

        assert sorted(result) == [".git/config.txt", "a.txt"]


class TestPiped:
    """Tests for the pipe-delimited scan form."""

    def test_parse_piped(self) -> None:
        """The first field is the root, the rest are patterns."""
        assert parse_piped("assets|**/*.jpg|!**/.svn/**") == ("assets", ["**/*.jpg", "!**/.svn/**"])

    def test_parse_root_only(self) -> None:
        """A spec without patterns has an empty pattern list."""
        assert parse_piped("assets") == ("assets", [])

    def test_parse_empty_root(self) -> None:
        """An empty root means the current directory."""
        assert parse_piped("|*.txt") == (".", ["*.txt"])

    def test_scan_piped_equals_scan_glob(self, assets_tree: Path) -> None:
        """The piped form gives the same result as scan_glob."""
        piped = scan_piped(f"{assets_tree}|**/*.jpg|!animals/dog.jpg", options=SENSITIVE)
        direct = scan_glob(assets_tree, ["**/*.jpg", "!animals/dog.jpg"], options=SENSITIVE)

        assert piped == direct
        assert sorted(piped) == ["animals/cat.jpg", "stuff.jpg"]
