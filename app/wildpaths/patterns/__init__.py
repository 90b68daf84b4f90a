"""Pattern compilation, matching and tree walking.

This package implements the scan engine: wildcard and regex pattern
compilation, segment matching, traversal planning (pruning) and the
depth-first tree walkers.
"""

from wildpaths.patterns.compiler import compile_glob, compile_regex, split_patterns
from wildpaths.patterns.errors import (
    DirectoryReadError,
    PatternSyntaxError,
    ScanCancelledError,
    WildpathsError,
)
from wildpaths.patterns.matcher import matches, matches_regex
from wildpaths.patterns.models import (
    CasePolicy,
    GlobPattern,
    PatternMode,
    ReadErrorPolicy,
    RegexPattern,
    ScanStats,
)
from wildpaths.patterns.options import ScanOptions
from wildpaths.patterns.planner import TraversalPlanner
from wildpaths.patterns.scan import parse_piped, scan_glob, scan_piped, scan_regex
from wildpaths.patterns.walker import GlobScanner, RegexScanner

__all__ = [
    "CasePolicy",
    "DirectoryReadError",
    "GlobPattern",
    "GlobScanner",
    "PatternMode",
    "PatternSyntaxError",
    "ReadErrorPolicy",
    "RegexPattern",
    "RegexScanner",
    "ScanCancelledError",
    "ScanOptions",
    "ScanStats",
    "TraversalPlanner",
    "WildpathsError",
    "compile_glob",
    "compile_regex",
    "matches",
    "matches_regex",
    "parse_piped",
    "scan_glob",
    "scan_piped",
    "scan_regex",
]
