"""Path collection domain models.

This module defines the entries held by a PathSet and the per-item
results reported by bulk operations.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from wildpaths.patterns.compiler import normalize_separators


def normalize_root(root: str | os.PathLike[str]) -> str:
    """Normalize a root directory to forward slashes without a trailing slash.

    The filesystem root ``/`` is kept as is.
    """
    text = normalize_separators(os.fspath(root))
    stripped = text.rstrip("/")
    return stripped or ("/" if text.startswith("/") else ".")


@dataclass(frozen=True, slots=True)
class PathEntry:
    """A collected path, kept as a root directory plus a relative name.

    Keeping the two parts apart lets bulk operations re-root entries
    (copy) or reorder them (delete) without scanning again.

    Attributes:
        root: Root directory the entry was collected from, ``/``-separated.
        name: Path relative to ``root``, ``/``-separated.
    """

    root: str
    name: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)

    @classmethod
    def create(cls, root: str | os.PathLike[str], name: str) -> "PathEntry":
        """Build an entry, normalizing separators of both parts."""
        return cls(root=normalize_root(root), name=normalize_separators(name).strip("/"))

    @property
    def absolute(self) -> str:
        """Root and name joined with ``/``."""
        if self.root.endswith("/"):
            return f"{self.root}{self.name}"
        return f"{self.root}/{self.name}"

    @property
    def path(self) -> Path:
        """The entry as a pathlib Path."""
        return Path(self.root) / self.name

    @property
    def basename(self) -> str:
        """Final component of the relative name."""
        return self.name.rsplit("/", 1)[-1]

    @property
    def depth(self) -> int:
        """Number of components in the relative name."""
        return self.name.count("/") + 1

    def rerooted(self, root: str | os.PathLike[str]) -> "PathEntry":
        """Return the same relative name under another root directory."""
        return PathEntry.create(root, self.name)

    def is_file(self) -> bool:
        """Whether the entry currently exists as a file."""
        return self.path.is_file()

    def is_dir(self) -> bool:
        """Whether the entry currently exists as a directory."""
        return self.path.is_dir()


@dataclass(frozen=True, slots=True)
class PathActionResult:
    """Result of a bulk operation on a single entry.

    Attributes:
        path: Absolute path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (nothing was changed).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False
