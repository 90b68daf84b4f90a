"""Collected path sets and bulk operations.

This package provides the PathSet aggregator, which merges scan
results from one or more roots, and the PathOperator, which copies,
deletes and zips collected paths.
"""

from wildpaths.paths.collection import PathSet
from wildpaths.paths.models import PathActionResult, PathEntry
from wildpaths.paths.operator import OperationReport, PathOperator

__all__ = [
    "OperationReport",
    "PathActionResult",
    "PathEntry",
    "PathOperator",
    "PathSet",
]
