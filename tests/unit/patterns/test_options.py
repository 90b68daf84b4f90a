"""Unit tests for ScanOptions."""

import os

import pytest
from pydantic import ValidationError
from wildpaths.patterns.models import CasePolicy, ReadErrorPolicy
from wildpaths.patterns.options import ScanOptions


class TestScanOptions:
    """Tests for ScanOptions model."""

    def test_defaults(self) -> None:
        """Defaults follow the host case rules and skip unreadable directories."""
        options = ScanOptions()

        assert options.default_excludes == []
        assert options.case == CasePolicy.NATIVE
        assert options.read_errors == ReadErrorPolicy.SKIP
        assert options.follow_symlinks is True

    def test_exclude_marker_stripped(self) -> None:
        """Default excludes may be written with a leading !."""
        options = ScanOptions(default_excludes=["!**/.svn/**", "**/.git/**"])

        assert options.default_excludes == ["**/.svn/**", "**/.git/**"]

    def test_empty_exclude_rejected(self) -> None:
        """Empty default excludes are invalid."""
        with pytest.raises(ValidationError):
            ScanOptions(default_excludes=["!"])

    def test_unknown_field_rejected(self) -> None:
        """Unknown option names are rejected."""
        with pytest.raises(ValidationError):
            ScanOptions(recursive=True)  # type: ignore[call-arg]

    def test_enum_values_from_strings(self) -> None:
        """Policies can be given by their string value."""
        options = ScanOptions.model_validate({"case": "insensitive", "read_errors": "raise"})

        assert options.case == CasePolicy.INSENSITIVE
        assert options.read_errors == ReadErrorPolicy.RAISE

    def test_frozen(self) -> None:
        """Options cannot be changed after creation."""
        options = ScanOptions()

        with pytest.raises(ValidationError):
            options.follow_symlinks = False  # type: ignore[misc]


class TestCasePolicy:
    """Tests for CasePolicy.is_sensitive."""

    def test_explicit_policies(self) -> None:
        """SENSITIVE and INSENSITIVE resolve to themselves."""
        assert CasePolicy.SENSITIVE.is_sensitive() is True
        assert CasePolicy.INSENSITIVE.is_sensitive() is False

    def test_native_follows_normcase(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """NATIVE is insensitive where os.path.normcase folds case."""
        monkeypatch.setattr(os.path, "normcase", str.lower)
        assert CasePolicy.NATIVE.is_sensitive() is False

        monkeypatch.setattr(os.path, "normcase", lambda s: s)
        assert CasePolicy.NATIVE.is_sensitive() is True
