"""Public scan entry points.

Example:
    >>> scan_glob("assets", ["**/*.jpg", "!**/.svn/**"])  # doctest: +SKIP
    ['stuff.jpg', 'animals/cat.jpg', 'animals/dog.jpg']
"""

import logging
import os
import threading
from collections.abc import Iterable

from wildpaths.patterns.compiler import MATCH_ALL, compile_glob, compile_regex, split_patterns
from wildpaths.patterns.models import ScanStats
from wildpaths.patterns.options import ScanOptions
from wildpaths.patterns.walker import GlobScanner, RegexScanner

logger = logging.getLogger(__name__)

PIPE = "|"

_DEFAULT_OPTIONS = ScanOptions()


def scan_glob(
    root: str | os.PathLike[str],
    patterns: Iterable[str] = (),
    *,
    options: ScanOptions | None = None,
    cancel: threading.Event | None = None,
    stats: ScanStats | None = None,
) -> list[str]:
    """Collect relative paths under ``root`` matching wildcard patterns.

    Patterns starting with ``!`` exclude. When no include pattern is
    given (including when every pattern is an exclude), ``**`` is
    assumed. ``options.default_excludes`` are added to the excludes.

    Args:
        root: Directory to scan. A missing root yields an empty list.
        patterns: Wildcard patterns.
        options: Scan options; defaults apply when None.
        cancel: Optional cancellation event.
        stats: Optional statistics record to fill in.

    Returns:
        Relative ``/``-separated paths in traversal order.

    Raises:
        PatternSyntaxError: If a pattern has no path segments.
        DirectoryReadError: If a directory is unreadable and
            ``options.read_errors`` is RAISE.
        ScanCancelledError: If ``cancel`` is set during the scan.
    """
    opts = options or _DEFAULT_OPTIONS
    includes, excludes = split_patterns(patterns)
    if not includes:
        includes = [MATCH_ALL]
    excludes = [*excludes, *opts.default_excludes]

    scanner = GlobScanner(
        root,
        [compile_glob(p, opts.case) for p in includes],
        [compile_glob(p, opts.case) for p in excludes],
        read_errors=opts.read_errors,
        follow_symlinks=opts.follow_symlinks,
        cancel=cancel,
        stats=stats,
    )
    results = scanner.matches()
    logger.debug(
        "Glob scan of %s with %d include(s), %d exclude(s): %d match(es)",
        scanner.root,
        len(includes),
        len(excludes),
        len(results),
    )
    return results


def scan_regex(
    root: str | os.PathLike[str],
    patterns: Iterable[str] = (),
    *,
    options: ScanOptions | None = None,
    cancel: threading.Event | None = None,
    stats: ScanStats | None = None,
) -> list[str]:
    """Collect relative paths under ``root`` matching regular expressions.

    Each expression must match the whole ``/``-separated relative path.
    Patterns starting with ``!`` exclude. Without include patterns
    nothing is collected. Default excludes do not apply. Every
    directory under ``root`` is visited, so this is slower than
    :func:`scan_glob`.

    Args:
        root: Directory to scan. A missing root yields an empty list.
        patterns: Regular expressions.
        options: Scan options; defaults apply when None.
        cancel: Optional cancellation event.
        stats: Optional statistics record to fill in.

    Returns:
        Relative ``/``-separated paths in traversal order.

    Raises:
        PatternSyntaxError: If an expression is invalid.
    """
    opts = options or _DEFAULT_OPTIONS
    includes, excludes = split_patterns(patterns)
    # Compile everything up front so a bad expression fails before any I/O
    compiled_includes = [compile_regex(p, opts.case) for p in includes]
    compiled_excludes = [compile_regex(p, opts.case) for p in excludes]

    scanner = RegexScanner(
        root,
        compiled_includes,
        compiled_excludes,
        read_errors=opts.read_errors,
        follow_symlinks=opts.follow_symlinks,
        cancel=cancel,
        stats=stats,
    )
    results = scanner.matches()
    logger.debug("Regex scan of %s: %d match(es)", scanner.root, len(results))
    return results


def parse_piped(spec: str) -> tuple[str, list[str]]:
    """Split a ``"dir|pattern|pattern"`` string into root and patterns.

    Args:
        spec: Pipe-delimited scan description.

    Returns:
        Tuple of (root, patterns). An empty root means the current directory.
    """
    root, *patterns = spec.split(PIPE)
    return root or ".", patterns


def scan_piped(
    spec: str,
    *,
    options: ScanOptions | None = None,
    cancel: threading.Event | None = None,
    stats: ScanStats | None = None,
) -> list[str]:
    """Run :func:`scan_glob` from a ``"dir|pattern|pattern"`` string."""
    root, patterns = parse_piped(spec)
    return scan_glob(root, patterns, options=options, cancel=cancel, stats=stats)
