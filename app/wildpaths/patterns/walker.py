"""Directory tree walking for wildcard and regex scans.

Scanners hold the compiled pattern set and the resolved root for one
scan call. They walk the tree depth first, reporting each selected
entry before its children, in the order the operating system lists
directory entries.

Wildcard scans prune directories that no include pattern can reach
and narrow the physical start directory to the literal prefix shared
by all include patterns. Regex scans always walk the full tree: a
regular expression cannot be decomposed per path segment, so there is
no cheap test telling whether a subtree can contain a match.
"""

import logging
import os
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from wildpaths.patterns.compiler import common_anchor, normalize_separators
from wildpaths.patterns.errors import DirectoryReadError, ScanCancelledError
from wildpaths.patterns.matcher import matches_regex
from wildpaths.patterns.models import GlobPattern, ReadErrorPolicy, RegexPattern, ScanStats
from wildpaths.patterns.planner import PlanState, TraversalPlanner

logger = logging.getLogger(__name__)


def _join(parent: str, name: str) -> str:
    return f"{parent}/{name}" if parent else name


class TreeScanner(ABC):
    """Base class for a single scan over one root directory.

    Args:
        root: Directory to scan. Matches are reported relative to it.
        read_errors: Policy for directories that cannot be listed.
        follow_symlinks: Whether symlinked directories are descended into.
        cancel: Optional event; the scan raises ScanCancelledError once
            it is set (checked once per directory entry).
        stats: Optional statistics record to fill in.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        *,
        read_errors: ReadErrorPolicy = ReadErrorPolicy.SKIP,
        follow_symlinks: bool = True,
        cancel: threading.Event | None = None,
        stats: ScanStats | None = None,
    ) -> None:
        self._root = Path(normalize_separators(os.fspath(root)))
        self._read_errors = read_errors
        self._follow_symlinks = follow_symlinks
        self._cancel = cancel
        self.stats = stats if stats is not None else ScanStats()
        self._active: set[tuple[int, int]] = set()

    @property
    def root(self) -> Path:
        """The scan root that relative paths refer to."""
        return self._root

    @abstractmethod
    def matches(self) -> list[str]:
        """Walk the tree and return the selected relative paths.

        Returns:
            Relative paths using ``/`` separators, in traversal order.

        Raises:
            DirectoryReadError: If a directory cannot be listed and the
                read error policy is RAISE.
            ScanCancelledError: If the cancellation event is set.
        """

    def _list_dir(self, directory: Path, relative: str) -> list[os.DirEntry[str]] | None:
        """List one directory, applying the read error policy.

        Entries are read eagerly so the directory handle is closed before
        the walk recurses.
        """
        try:
            with os.scandir(directory) as iterator:
                entries = list(iterator)
        except OSError as e:
            if self._read_errors == ReadErrorPolicy.RAISE:
                raise DirectoryReadError(relative, e) from e
            self.stats.read_failures += 1
            logger.warning("Skipping unreadable directory %s: %s", directory, e)
            return None
        self.stats.dirs_opened += 1
        return entries

    @contextmanager
    def _visiting(self, directory: Path) -> Iterator[bool]:
        """Mark a directory as being walked; yields False on a symlink cycle.

        Directories are identified by device and inode. Only needed when
        symlinks are followed, otherwise the tree cannot contain cycles.
        """
        if not self._follow_symlinks:
            yield True
            return
        try:
            st = directory.stat()
        except OSError:
            # Reported by _list_dir
            yield True
            return
        key = (st.st_dev, st.st_ino)
        if key in self._active:
            logger.warning("Skipping symlink cycle at %s", directory)
            yield False
            return
        self._active.add(key)
        try:
            yield True
        finally:
            self._active.discard(key)

    def _is_dir(self, entry: os.DirEntry[str]) -> bool:
        try:
            return entry.is_dir(follow_symlinks=self._follow_symlinks)
        except OSError:
            return False

    def _is_walkable(self, directory: Path) -> bool:
        """Path counterpart of _is_dir for directories reached by name."""
        if not self._follow_symlinks and directory.is_symlink():
            return False
        return directory.is_dir()

    def _check_cancelled(self) -> None:
        if self._cancel is not None and self._cancel.is_set():
            raise ScanCancelledError(f"Scan of {self._root} cancelled")


class GlobScanner(TreeScanner):
    """Scan selecting entries with compiled wildcard patterns.

    Args:
        root: Directory to scan.
        includes: Compiled include patterns (at least one).
        excludes: Compiled exclude patterns.
        read_errors: Policy for directories that cannot be listed.
        follow_symlinks: Whether symlinked directories are descended into.
        cancel: Optional cancellation event.
        stats: Optional statistics record to fill in.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        includes: Sequence[GlobPattern],
        excludes: Sequence[GlobPattern] = (),
        *,
        read_errors: ReadErrorPolicy = ReadErrorPolicy.SKIP,
        follow_symlinks: bool = True,
        cancel: threading.Event | None = None,
        stats: ScanStats | None = None,
    ) -> None:
        super().__init__(
            root,
            read_errors=read_errors,
            follow_symlinks=follow_symlinks,
            cancel=cancel,
            stats=stats,
        )
        if not includes:
            msg = "GlobScanner requires at least one include pattern"
            raise ValueError(msg)
        self._planner = TraversalPlanner(includes, excludes)
        self._anchor = common_anchor(includes)

    @property
    def anchor(self) -> tuple[str, ...]:
        """Literal directory prefix shared by all include patterns."""
        return self._anchor

    def matches(self) -> list[str]:
        """Walk the tree and return the selected relative paths.

        The walk starts physically at ``root/anchor``. The anchor
        directories themselves are evaluated as candidates first, so the
        result is the same as walking from ``root``.
        """
        results: list[str] = []
        if not self._root.is_dir():
            logger.debug("Scan root %s does not exist, nothing collected", self._root)
            return results

        state = self._planner.root_state()
        relative = ""
        directory = self._root
        for name in self._anchor:
            directory = directory / name
            if not os.path.lexists(directory):
                logger.debug("Anchor %s does not exist, nothing collected", directory)
                return results
            self._check_cancelled()
            self.stats.entries_visited += 1
            state = self._planner.enter(state, name)
            relative = _join(relative, name)
            if self._planner.is_selected(state):
                results.append(relative)
            if not self._is_walkable(directory):
                logger.debug("Anchor %s is not descended into", directory)
                return results

        if self._anchor:
            logger.debug("Narrowed scan of %s to %s", self._root, relative)
        self._walk(directory, relative, state, results)
        return results

    def _walk(self, directory: Path, relative: str, state: PlanState, results: list[str]) -> None:
        with self._visiting(directory) as fresh:
            if fresh:
                self._walk_entries(directory, relative, state, results)

    def _walk_entries(
        self, directory: Path, relative: str, state: PlanState, results: list[str]
    ) -> None:
        entries = self._list_dir(directory, relative)
        if entries is None:
            return
        for entry in entries:
            self._check_cancelled()
            self.stats.entries_visited += 1
            child = self._planner.enter(state, entry.name)
            child_relative = _join(relative, entry.name)
            if self._planner.is_selected(child):
                results.append(child_relative)
            if not self._is_dir(entry):
                continue
            if self._planner.should_descend(child):
                self._walk(Path(entry.path), child_relative, child, results)
            else:
                logger.debug("Pruned %s", child_relative)


class RegexScanner(TreeScanner):
    """Scan selecting entries with regular expressions.

    Every directory is visited; see the module docstring.

    Args:
        root: Directory to scan.
        includes: Compiled include expressions. With none, nothing matches.
        excludes: Compiled exclude expressions.
        read_errors: Policy for directories that cannot be listed.
        follow_symlinks: Whether symlinked directories are descended into.
        cancel: Optional cancellation event.
        stats: Optional statistics record to fill in.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        includes: Sequence[RegexPattern],
        excludes: Sequence[RegexPattern] = (),
        *,
        read_errors: ReadErrorPolicy = ReadErrorPolicy.SKIP,
        follow_symlinks: bool = True,
        cancel: threading.Event | None = None,
        stats: ScanStats | None = None,
    ) -> None:
        super().__init__(
            root,
            read_errors=read_errors,
            follow_symlinks=follow_symlinks,
            cancel=cancel,
            stats=stats,
        )
        self._includes = tuple(includes)
        self._excludes = tuple(excludes)

    def matches(self) -> list[str]:
        """Walk the full tree and return the selected relative paths."""
        results: list[str] = []
        if not self._includes or not self._root.is_dir():
            return results
        self._walk(self._root, "", results)
        return results

    def _is_selected(self, relative: str) -> bool:
        if not any(matches_regex(p, relative) for p in self._includes):
            return False
        return not any(matches_regex(p, relative) for p in self._excludes)

    def _walk(self, directory: Path, relative: str, results: list[str]) -> None:
        with self._visiting(directory) as fresh:
            if fresh:
                self._walk_entries(directory, relative, results)

    def _walk_entries(self, directory: Path, relative: str, results: list[str]) -> None:
        entries = self._list_dir(directory, relative)
        if entries is None:
            return
        for entry in entries:
            self._check_cancelled()
            self.stats.entries_visited += 1
            child_relative = _join(relative, entry.name)
            if self._is_selected(child_relative):
                results.append(child_relative)
            if self._is_dir(entry):
                self._walk(Path(entry.path), child_relative, results)
