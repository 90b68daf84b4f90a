"""Bulk operations over collected paths.

Copies, deletes and zips the entries of a PathSet with dry-run
support. Each entry is processed independently: a failure is recorded
in that entry's result and processing continues with the next entry.
"""

import logging
import os
import shutil
import zipfile
from dataclasses import dataclass, field
from pathlib import Path

from wildpaths.paths.collection import PathSet
from wildpaths.paths.models import PathActionResult, PathEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OperationReport:
    """Outcome of a bulk operation.

    Attributes:
        results: One result per processed entry, in processing order.
        paths: Paths produced by the operation (copies); empty otherwise.
    """

    results: tuple[PathActionResult, ...]
    paths: PathSet = field(default_factory=PathSet)

    @property
    def success(self) -> bool:
        """True if every entry was processed successfully."""
        return all(r.success for r in self.results)

    @property
    def failures(self) -> list[PathActionResult]:
        """Results of the entries that failed."""
        return [r for r in self.results if not r.success]


class PathOperator:
    """Copies, deletes and zips collected paths.

    Attributes:
        _dry_run: If True, report what would happen without touching the
            filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the PathOperator.

        Args:
            dry_run: If True, simulate operations without modifying anything.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether operations are simulated."""
        return self._dry_run

    def copy_to(self, paths: PathSet, dest_dir: str | os.PathLike[str]) -> OperationReport:
        """Copy every entry to ``dest_dir``, keeping relative names.

        Directory entries are created (not copied recursively); file
        entries are copied with their metadata and parent directories
        created as needed.

        Args:
            paths: Entries to copy.
            dest_dir: Destination root directory.

        Returns:
            OperationReport whose ``paths`` holds the successfully copied
            entries re-rooted at ``dest_dir``.
        """
        results: list[PathActionResult] = []
        copied: list[PathEntry] = []

        for entry in paths.entries:
            target = entry.rerooted(dest_dir)
            result = self._copy_single(entry, target)
            results.append(result)
            if result.success:
                copied.append(target)

        return OperationReport(results=tuple(results), paths=PathSet(copied))

    def delete(self, paths: PathSet) -> OperationReport:
        """Delete every entry, deepest paths first.

        Directories are removed with their contents. Duplicate entries,
        and entries already removed along with a directory earlier in the
        run, are reported as successful.

        Args:
            paths: Entries to delete.

        Returns:
            OperationReport with one result per entry.
        """
        results: list[PathActionResult] = []
        removed: set[str] = set()

        for entry in paths.deletion_order():
            results.append(self._delete_single(entry, removed))

        return OperationReport(results=tuple(results))

    def zip(self, paths: PathSet, dest_file: str | os.PathLike[str]) -> OperationReport:
        """Write the file entries into a new zip archive.

        Archive member names are the entries' relative names. Directory
        entries are skipped. When there are no file entries no archive
        is created.

        Args:
            paths: Entries to archive.
            dest_file: Path of the zip file to create.

        Returns:
            OperationReport with one result per archived file.
        """
        files = paths.files_only()
        if not files:
            logger.info("No files to archive, %s not created", dest_file)
            return OperationReport(results=())

        if self._dry_run:
            return OperationReport(
                results=tuple(
                    PathActionResult(path=e.absolute, success=True, dry_run=True)
                    for e in files.entries
                )
            )

        results: list[PathActionResult] = []
        destination = Path(dest_file)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                for entry in files.entries:
                    results.append(self._archive_single(archive, entry))
        except OSError as e:
            logger.warning("Cannot write archive %s: %s", destination, e)
            done = {r.path for r in results}
            results.extend(
                PathActionResult(path=entry.absolute, success=False, error=str(e))
                for entry in files.entries
                if entry.absolute not in done
            )

        return OperationReport(results=tuple(results))

    def _copy_single(self, source: PathEntry, target: PathEntry) -> PathActionResult:
        """Copy one entry to its re-rooted target."""
        if self._dry_run:
            logger.info("Dry-run: would copy %s to %s", source.absolute, target.absolute)
            return PathActionResult(path=source.absolute, success=True, dry_run=True)

        try:
            if source.is_dir():
                target.path.mkdir(parents=True, exist_ok=True)
            elif source.path.exists():
                target.path.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(source.path, target.path)
            else:
                return PathActionResult(
                    path=source.absolute,
                    success=False,
                    error=f"Path does not exist: {source.absolute}",
                )
        except OSError as e:
            return PathActionResult(path=source.absolute, success=False, error=str(e))

        return PathActionResult(path=source.absolute, success=True)

    def _delete_single(self, entry: PathEntry, removed: set[str]) -> PathActionResult:
        """Delete one entry.

        Args:
            entry: Entry to delete.
            removed: Absolute paths already removed in this run.
        """
        if self._dry_run:
            logger.info("Dry-run: would delete %s", entry.absolute)
            return PathActionResult(path=entry.absolute, success=True, dry_run=True)

        target = entry.path
        try:
            # Directories (but not symlinks to directories)
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
                removed.add(entry.absolute)
                return PathActionResult(path=entry.absolute, success=True)

            # Files, symlinks, and dead symlinks
            if target.exists() or target.is_symlink():
                target.unlink()
                removed.add(entry.absolute)
                return PathActionResult(path=entry.absolute, success=True)

            # Duplicate entry, or already removed together with its directory
            if entry.absolute in removed or any(
                entry.absolute.startswith(f"{parent}/") for parent in removed
            ):
                return PathActionResult(path=entry.absolute, success=True)

            return PathActionResult(
                path=entry.absolute,
                success=False,
                error=f"Path does not exist: {entry.absolute}",
            )

        except OSError as e:
            return PathActionResult(path=entry.absolute, success=False, error=str(e))

    @staticmethod
    def _archive_single(archive: zipfile.ZipFile, entry: PathEntry) -> PathActionResult:
        """Add one file entry to an open archive."""
        try:
            archive.write(entry.path, arcname=entry.name)
        except OSError as e:
            return PathActionResult(path=entry.absolute, success=False, error=str(e))
        return PathActionResult(path=entry.absolute, success=True)
