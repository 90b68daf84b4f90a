"""Traversal planning for wildcard scans.

The planner tracks, for every compiled pattern, which pattern positions
are still reachable for the path walked so far. From that it answers two
questions for each entry: is the entry itself selected, and can any
include pattern still match something below it. Directories for which
the second answer is no are never opened.

Exclude patterns are tracked for selection only. They never prune: an
exclude can be narrower than the directory it lives in (one file
excluded while its siblings must still be visited).
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from wildpaths.patterns.matcher import States, advance, can_continue, is_match, start_states
from wildpaths.patterns.models import GlobPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlanState:
    """Per-pattern matcher states for one path.

    Attributes:
        includes: State set per include pattern, in pattern order.
        excludes: State set per exclude pattern, in pattern order.
    """

    includes: tuple[States, ...]
    excludes: tuple[States, ...]


class TraversalPlanner:
    """Decides selection and descent for a compiled wildcard pattern set.

    Args:
        includes: Compiled include patterns (at least one).
        excludes: Compiled exclude patterns.
    """

    def __init__(self, includes: Sequence[GlobPattern], excludes: Sequence[GlobPattern]) -> None:
        self._includes = tuple(includes)
        self._excludes = tuple(excludes)

    @property
    def includes(self) -> tuple[GlobPattern, ...]:
        """Compiled include patterns."""
        return self._includes

    @property
    def excludes(self) -> tuple[GlobPattern, ...]:
        """Compiled exclude patterns."""
        return self._excludes

    def root_state(self) -> PlanState:
        """State for the scan root, before any name is consumed."""
        return PlanState(
            includes=tuple(start_states(p.segments) for p in self._includes),
            excludes=tuple(start_states(p.segments) for p in self._excludes),
        )

    def enter(self, state: PlanState, name: str) -> PlanState:
        """Return the state for the child ``name`` of the path in ``state``."""
        return PlanState(
            includes=tuple(
                advance(p.segments, s, name) if s else s
                for p, s in zip(self._includes, state.includes, strict=True)
            ),
            excludes=tuple(
                advance(p.segments, s, name) if s else s
                for p, s in zip(self._excludes, state.excludes, strict=True)
            ),
        )

    def is_selected(self, state: PlanState) -> bool:
        """Whether the path matches an include pattern and no exclude pattern."""
        included = any(
            is_match(p.segments, s) for p, s in zip(self._includes, state.includes, strict=True)
        )
        if not included:
            return False
        return not any(
            is_match(p.segments, s) for p, s in zip(self._excludes, state.excludes, strict=True)
        )

    def should_descend(self, state: PlanState) -> bool:
        """Whether some include pattern can match a path below this one."""
        return any(
            can_continue(p.segments, s) for p, s in zip(self._includes, state.includes, strict=True)
        )
