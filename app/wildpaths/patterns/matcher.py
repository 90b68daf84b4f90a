"""Segment matching for compiled wildcard patterns.

A wildcard pattern is matched against a path by walking the pattern
segments and the path segments together. Because ``**`` can absorb any
number of path segments, the walk keeps a set of pattern positions
("states") rather than a single one:

- a literal or wildcard segment at position ``j`` moves to ``j + 1``
  when it matches the next name;
- a ``**`` segment at position ``j`` stays at ``j`` when consuming a
  name, and also allows skipping to ``j + 1`` without consuming one.

A path matches when the position past the last segment is reachable
after consuming every path segment. The tree walker advances these
state sets incrementally, one directory level at a time.
"""

from collections.abc import Iterable, Sequence

from wildpaths.patterns.compiler import normalize_separators
from wildpaths.patterns.models import GlobPattern, RegexPattern, Segment, SegmentKind

States = frozenset[int]


def match_segment(segment: Segment, name: str) -> bool:
    """Check whether a single path name satisfies one pattern segment.

    Args:
        segment: Compiled pattern segment.
        name: One path component (no ``/``).

    Returns:
        True if the name matches the segment.
    """
    if segment.kind == SegmentKind.GLOBSTAR:
        return True
    if segment.kind == SegmentKind.LITERAL:
        if segment.case_sensitive:
            return segment.text == name
        return segment.text.casefold() == name.casefold()
    assert segment.regex is not None
    return segment.regex.fullmatch(name) is not None


def _closure(segments: Sequence[Segment], states: Iterable[int]) -> States:
    """Add every position reachable by letting ``**`` match nothing."""
    reached = set(states)
    pending = list(reached)
    while pending:
        j = pending.pop()
        if j < len(segments) and segments[j].kind == SegmentKind.GLOBSTAR and j + 1 not in reached:
            reached.add(j + 1)
            pending.append(j + 1)
    return frozenset(reached)


def start_states(segments: Sequence[Segment]) -> States:
    """Return the states before any path segment has been consumed."""
    return _closure(segments, (0,))


def advance(segments: Sequence[Segment], states: States, name: str) -> States:
    """Consume one path name from every state.

    Args:
        segments: Compiled pattern segments.
        states: Current pattern positions.
        name: Next path component.

    Returns:
        Positions reachable after consuming the name (may be empty).
    """
    following: set[int] = set()
    for j in states:
        if j >= len(segments):
            continue
        segment = segments[j]
        if segment.kind == SegmentKind.GLOBSTAR:
            following.add(j)
        elif match_segment(segment, name):
            following.add(j + 1)
    return _closure(segments, following)


def is_match(segments: Sequence[Segment], states: States) -> bool:
    """Whether the consumed path is matched in full."""
    return len(segments) in states


def can_continue(segments: Sequence[Segment], states: States) -> bool:
    """Whether some state still has pattern segments left to consume.

    When this is False no path below the consumed one can match.
    """
    return any(j < len(segments) for j in states)


def split_path(relative_path: str) -> list[str]:
    """Split a relative path into its names, normalizing separators."""
    return [part for part in normalize_separators(relative_path).split("/") if part]


def matches(pattern: GlobPattern, relative_path: str) -> bool:
    """Check whether a relative path matches a compiled wildcard pattern.

    Args:
        pattern: Compiled wildcard pattern.
        relative_path: Path relative to the scan root.

    Returns:
        True if the whole path matches the pattern.

    Example:
        >>> from wildpaths.patterns.compiler import compile_glob
        >>> matches(compile_glob("a/**"), "a")
        True
        >>> matches(compile_glob("*.jpg"), "animals/cat.jpg")
        False
    """
    segments = pattern.segments
    states = start_states(segments)
    for name in split_path(relative_path):
        states = advance(segments, states, name)
        if not states:
            return False
    return is_match(segments, states)


def matches_regex(pattern: RegexPattern, relative_path: str) -> bool:
    """Check whether a relative path fully matches a regex pattern."""
    return pattern.regex.fullmatch(normalize_separators(relative_path)) is not None

