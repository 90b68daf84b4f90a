"""Pattern compilation.

Turns raw pattern strings into compiled wildcard or regex patterns.
Wildcard patterns are split on ``/`` into segments; each segment is a
literal name, a name with ``?``/``*`` tokens, or a whole ``**``.
"""

import re
from collections.abc import Iterable, Sequence

from wildpaths.patterns.errors import PatternSyntaxError
from wildpaths.patterns.models import (
    CasePolicy,
    GlobPattern,
    RegexPattern,
    Segment,
    SegmentKind,
)

EXCLUDE_PREFIX = "!"
GLOBSTAR = "**"
MATCH_ALL = GLOBSTAR

_WILDCARD_CHARS = frozenset("?*")
# Literal segments that must never be used to narrow the physical root
_RELATIVE_NAMES = frozenset({".", ".."})


def normalize_separators(text: str) -> str:
    """Convert backslashes to forward slashes."""
    return text.replace("\\", "/")


def split_patterns(patterns: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split raw patterns into include and exclude lists.

    A leading ``!`` marks an exclude pattern. Empty strings are ignored.

    Args:
        patterns: Raw pattern strings.

    Returns:
        Tuple of (includes, excludes) with the ``!`` markers removed.

    Raises:
        PatternSyntaxError: If a pattern consists of ``!`` alone.
    """
    includes: list[str] = []
    excludes: list[str] = []
    for pattern in patterns:
        if not pattern:
            continue
        if pattern.startswith(EXCLUDE_PREFIX):
            exclude = pattern[len(EXCLUDE_PREFIX) :]
            if not exclude:
                raise PatternSyntaxError(pattern, "exclude marker without a pattern")
            excludes.append(exclude)
        else:
            includes.append(pattern)
    return includes, excludes


def _translate_wildcards(text: str) -> str:
    """Translate ``?`` and ``*`` tokens of one segment into a regex."""
    parts: list[str] = []
    for char in text:
        if char == "?":
            parts.append("[^/]")
        elif char == "*":
            # Collapse runs of stars; they all mean "any run within the segment"
            if parts and parts[-1] == "[^/]*":
                continue
            parts.append("[^/]*")
        else:
            parts.append(re.escape(char))
    return "".join(parts)


def compile_segment(text: str, case_sensitive: bool = True) -> Segment:
    """Compile a single pattern segment.

    Args:
        text: Segment text, without any ``/``.
        case_sensitive: Whether names are compared case-sensitively.

    Returns:
        Compiled Segment.
    """
    if text == GLOBSTAR:
        return Segment(text=text, kind=SegmentKind.GLOBSTAR, case_sensitive=case_sensitive)
    if not _WILDCARD_CHARS.intersection(text):
        return Segment(text=text, kind=SegmentKind.LITERAL, case_sensitive=case_sensitive)
    flags = 0 if case_sensitive else re.IGNORECASE
    return Segment(
        text=text,
        kind=SegmentKind.WILDCARD,
        case_sensitive=case_sensitive,
        regex=re.compile(_translate_wildcards(text), flags),
    )


def _anchor_of(segments: Sequence[Segment]) -> tuple[str, ...]:
    """Collect the literal directory prefix of a compiled pattern.

    The final segment is never part of the anchor: it names the entries
    to collect, not a directory to start from. Case-insensitive patterns
    have no anchor.
    """
    anchor: list[str] = []
    for segment in segments[:-1]:
        if segment.kind != SegmentKind.LITERAL or segment.text in _RELATIVE_NAMES:
            break
        if not segment.case_sensitive:
            break
        anchor.append(segment.text)
    return tuple(anchor)


def compile_glob(pattern: str, case: CasePolicy = CasePolicy.NATIVE) -> GlobPattern:
    """Compile a wildcard pattern.

    Backslashes are normalized to forward slashes and empty segments
    (from ``//`` or leading/trailing slashes) are dropped. ``.`` and
    ``..`` are treated as literal names.

    Args:
        pattern: Raw wildcard pattern (without a ``!`` marker).
        case: Case comparison policy.

    Returns:
        Compiled GlobPattern.

    Raises:
        PatternSyntaxError: If the pattern has no segments.
    """
    normalized = normalize_separators(pattern)
    texts = [part for part in normalized.split("/") if part]
    if not texts:
        raise PatternSyntaxError(pattern, "pattern has no path segments")

    sensitive = case.is_sensitive()
    segments = tuple(compile_segment(text, sensitive) for text in texts)
    return GlobPattern(
        pattern="/".join(texts),
        segments=segments,
        anchor=_anchor_of(segments),
    )


def compile_regex(pattern: str, case: CasePolicy = CasePolicy.NATIVE) -> RegexPattern:
    """Compile a regular expression pattern.

    Args:
        pattern: Raw expression (without a ``!`` marker).
        case: Case comparison policy.

    Returns:
        Compiled RegexPattern.

    Raises:
        PatternSyntaxError: If the expression is invalid.
    """
    flags = 0 if case.is_sensitive() else re.IGNORECASE
    try:
        compiled = re.compile(pattern, flags)
    except re.error as e:
        raise PatternSyntaxError(pattern, str(e)) from e
    return RegexPattern(pattern=pattern, regex=compiled)


def common_anchor(patterns: Sequence[GlobPattern]) -> tuple[str, ...]:
    """Return the longest literal directory prefix shared by all patterns.

    Args:
        patterns: Compiled include patterns.

    Returns:
        Shared anchor segments; empty when there is no common prefix.
    """
    if not patterns:
        return ()
    shared = list(patterns[0].anchor)
    for compiled in patterns[1:]:
        limit = 0
        for mine, theirs in zip(shared, compiled.anchor, strict=False):
            if mine != theirs:
                break
            limit += 1
        del shared[limit:]
        if not shared:
            break
    return tuple(shared)
