"""wildpaths - wildcard and regex path collection.

Collects files and directories under a root using compact wildcard
patterns or regular expressions, and copies, deletes or zips the
collected paths while preserving their relative structure.
"""

from wildpaths.paths.collection import PathSet
from wildpaths.paths.models import PathEntry
from wildpaths.patterns.scan import parse_piped, scan_glob, scan_piped, scan_regex

__version__ = "0.1.0"

__all__ = [
    "PathEntry",
    "PathSet",
    "__version__",
    "parse_piped",
    "scan_glob",
    "scan_piped",
    "scan_regex",
]
