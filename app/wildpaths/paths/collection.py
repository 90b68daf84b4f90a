"""Ordered, immutable collection of collected paths.

A PathSet merges matches from one or more scans, possibly over
different roots, into a single ordered sequence of PathEntry values.
Duplicates are kept. Every operation returns a new PathSet.

Example:
    >>> paths = PathSet.from_glob("assets", ["**/*.jpg"])  # doctest: +SKIP
    >>> paths = paths.glob("docs", ["*.md"])  # doctest: +SKIP
    >>> paths.files_only().relative_paths()  # doctest: +SKIP
    ['stuff.jpg', 'animals/cat.jpg', 'README.md']
"""

import os
import threading
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from wildpaths.paths.models import PathEntry
from wildpaths.patterns.options import ScanOptions
from wildpaths.patterns.scan import parse_piped, scan_glob, scan_regex

EntryPredicate = Callable[[PathEntry], bool]


class PathSet:
    """Immutable ordered sequence of PathEntry values.

    Iterating a PathSet yields absolute path strings.

    Args:
        entries: Initial entries, in order.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[PathEntry] = ()) -> None:
        self._entries: tuple[PathEntry, ...] = tuple(entries)

    # === Construction ===

    @classmethod
    def from_relative(
        cls, root: str | os.PathLike[str], names: Iterable[str]
    ) -> "PathSet":
        """Build a PathSet from relative names under one root."""
        return cls(PathEntry.create(root, name) for name in names)

    @classmethod
    def from_glob(
        cls,
        root: str | os.PathLike[str],
        patterns: Iterable[str] = (),
        *,
        options: ScanOptions | None = None,
        cancel: threading.Event | None = None,
    ) -> "PathSet":
        """Collect paths under ``root`` matching wildcard patterns."""
        return cls().glob(root, patterns, options=options, cancel=cancel)

    @classmethod
    def from_regex(
        cls,
        root: str | os.PathLike[str],
        patterns: Iterable[str] = (),
        *,
        options: ScanOptions | None = None,
        cancel: threading.Event | None = None,
    ) -> "PathSet":
        """Collect paths under ``root`` matching regular expressions."""
        return cls().regex(root, patterns, options=options, cancel=cancel)

    @classmethod
    def from_piped(
        cls,
        spec: str,
        *,
        options: ScanOptions | None = None,
        cancel: threading.Event | None = None,
    ) -> "PathSet":
        """Collect paths from a ``"dir|pattern|pattern"`` string."""
        return cls().piped(spec, options=options, cancel=cancel)

    def glob(
        self,
        root: str | os.PathLike[str],
        patterns: Iterable[str] = (),
        *,
        options: ScanOptions | None = None,
        cancel: threading.Event | None = None,
    ) -> "PathSet":
        """Return a new PathSet with wildcard matches under ``root`` appended."""
        names = scan_glob(root, patterns, options=options, cancel=cancel)
        return self.merge(PathSet.from_relative(root, names))

    def regex(
        self,
        root: str | os.PathLike[str],
        patterns: Iterable[str] = (),
        *,
        options: ScanOptions | None = None,
        cancel: threading.Event | None = None,
    ) -> "PathSet":
        """Return a new PathSet with regex matches under ``root`` appended."""
        names = scan_regex(root, patterns, options=options, cancel=cancel)
        return self.merge(PathSet.from_relative(root, names))

    def piped(
        self,
        spec: str,
        *,
        options: ScanOptions | None = None,
        cancel: threading.Event | None = None,
    ) -> "PathSet":
        """Return a new PathSet with the matches of a piped spec appended."""
        root, patterns = parse_piped(spec)
        return self.glob(root, patterns, options=options, cancel=cancel)

    def merge(self, other: "PathSet") -> "PathSet":
        """Return a new PathSet with the entries of ``other`` appended."""
        return PathSet((*self._entries, *other._entries))

    def __add__(self, other: object) -> "PathSet":
        if not isinstance(other, PathSet):
            return NotImplemented
        return self.merge(other)

    # === Derived views ===

    def filter(self, predicate: EntryPredicate) -> "PathSet":
        """Return the entries for which ``predicate`` is true."""
        return PathSet(e for e in self._entries if predicate(e))

    def exclude(self, predicate: EntryPredicate) -> "PathSet":
        """Return the entries for which ``predicate`` is false."""
        return PathSet(e for e in self._entries if not predicate(e))

    def files_only(self) -> "PathSet":
        """Return the entries that currently exist as files."""
        return self.filter(PathEntry.is_file)

    def dirs_only(self) -> "PathSet":
        """Return the entries that currently exist as directories."""
        return self.filter(PathEntry.is_dir)

    def remove(self, entries: Iterable[PathEntry]) -> "PathSet":
        """Return a new PathSet without any of the given entries."""
        unwanted = set(entries)
        return self.exclude(lambda e: e in unwanted)

    def deletion_order(self) -> list[PathEntry]:
        """Entries sorted longest absolute path first.

        Deleting in this order removes children before their parents.
        """
        return sorted(self._entries, key=lambda e: len(e.absolute), reverse=True)

    # === Accessors ===

    @property
    def entries(self) -> tuple[PathEntry, ...]:
        """The entries, in order."""
        return self._entries

    def relative_paths(self) -> list[str]:
        """Relative names, in order."""
        return [e.name for e in self._entries]

    def absolute_paths(self) -> list[str]:
        """Root-joined paths, in order."""
        return [e.absolute for e in self._entries]

    def names(self) -> list[str]:
        """Final path components, in order."""
        return [e.basename for e in self._entries]

    def files(self) -> list[Path]:
        """Entries as pathlib Paths, in order."""
        return [e.path for e in self._entries]

    def to_string(self, delimiter: str = ", ") -> str:
        """Absolute paths joined by ``delimiter``."""
        return delimiter.join(self.absolute_paths())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"PathSet({list(self._entries)!r})"

    def __iter__(self) -> Iterator[str]:
        return (e.absolute for e in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathSet):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)
