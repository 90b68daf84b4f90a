"""Pattern domain models.

This module defines the data structures produced by the pattern
compiler and consumed by the matcher, planner and tree walker:
compiled wildcard and regex patterns, matching policies, and the
per-scan statistics record.
"""

import os
import re
from dataclasses import dataclass
from enum import Enum


class PatternMode(str, Enum):
    """Pattern language used by a scan.

    Attributes:
        GLOB: Wildcard patterns using ``?``, ``*`` and ``**``.
        REGEX: Regular expressions matched against whole relative paths.
    """

    GLOB = "glob"
    REGEX = "regex"


class CasePolicy(str, Enum):
    """Case comparison policy for matching names.

    Attributes:
        SENSITIVE: Names must match exactly.
        INSENSITIVE: Names are compared case-insensitively.
        NATIVE: Follow the host filesystem convention.
    """

    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"
    NATIVE = "native"

    def is_sensitive(self) -> bool:
        """Resolve the policy to a concrete case sensitivity.

        Returns:
            True if names must be compared case-sensitively.
        """
        if self == CasePolicy.NATIVE:
            return os.path.normcase("A") == "A"
        return self == CasePolicy.SENSITIVE


class ReadErrorPolicy(str, Enum):
    """What to do when a directory cannot be listed during a scan.

    Attributes:
        SKIP: Log, count and skip the directory.
        RAISE: Abort the scan with DirectoryReadError.
    """

    SKIP = "skip"
    RAISE = "raise"


class SegmentKind(str, Enum):
    """Kind of a compiled wildcard segment.

    Attributes:
        LITERAL: Plain name without wildcard characters.
        WILDCARD: Name containing ``?`` or ``*`` tokens.
        GLOBSTAR: A whole ``**`` segment spanning zero or more segments.
    """

    LITERAL = "literal"
    WILDCARD = "wildcard"
    GLOBSTAR = "globstar"


@dataclass(frozen=True, slots=True)
class Segment:
    """One ``/``-delimited component of a compiled wildcard pattern.

    Attributes:
        text: Raw segment text.
        kind: Segment kind.
        case_sensitive: Whether names are compared case-sensitively.
        regex: Compiled matcher for WILDCARD segments, None otherwise.
    """

    text: str
    kind: SegmentKind
    case_sensitive: bool = True
    regex: re.Pattern[str] | None = None


@dataclass(frozen=True, slots=True)
class GlobPattern:
    """A compiled wildcard pattern.

    Attributes:
        pattern: Normalized pattern text (forward slashes).
        segments: Compiled segments in order.
        anchor: Leading literal directory names usable to narrow the
            physical scan root.
    """

    pattern: str
    segments: tuple[Segment, ...]
    anchor: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RegexPattern:
    """A compiled regular expression pattern.

    Attributes:
        pattern: Raw expression text.
        regex: Compiled expression, matched against whole relative paths.
    """

    pattern: str
    regex: re.Pattern[str]


@dataclass(slots=True)
class ScanStats:
    """Counters collected during one scan.

    Attributes:
        dirs_opened: Number of directories listed.
        entries_visited: Number of directory entries evaluated.
        read_failures: Number of directories that could not be listed.
    """

    dirs_opened: int = 0
    entries_visited: int = 0
    read_failures: int = 0
