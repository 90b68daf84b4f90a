"""Scan options shared by every scan call.

ScanOptions replaces ambient process-wide settings: it is built once
(usually from the configuration file) and passed explicitly into each
scan.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wildpaths.patterns.models import CasePolicy, ReadErrorPolicy


class ScanOptions(BaseModel):
    """Options applied to every scan.

    Attributes:
        default_excludes: Wildcard patterns excluded from every wildcard
            scan, in addition to the scan's own ``!`` patterns.
        case: Case comparison policy for names.
        read_errors: Policy for directories that cannot be listed.
        follow_symlinks: Whether symlinked directories are descended into.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_excludes: Annotated[
        list[str],
        Field(default_factory=list, description="Excludes applied to every wildcard scan"),
    ]
    case: Annotated[CasePolicy, Field(description="Name comparison policy")] = CasePolicy.NATIVE
    read_errors: Annotated[
        ReadErrorPolicy,
        Field(description="Unreadable directory policy"),
    ] = ReadErrorPolicy.SKIP
    follow_symlinks: Annotated[
        bool,
        Field(description="Descend into symlinked directories"),
    ] = True

    @field_validator("default_excludes")
    @classmethod
    def strip_exclude_markers(cls, v: list[str]) -> list[str]:
        """Accept default excludes written with or without a leading ``!``."""
        cleaned: list[str] = []
        for pattern in v:
            pattern = pattern[1:] if pattern.startswith("!") else pattern
            if not pattern.strip():
                msg = "default_excludes cannot contain empty patterns"
                raise ValueError(msg)
            cleaned.append(pattern)
        return cleaned
