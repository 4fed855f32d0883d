"""Data models for heuristic action-item extraction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class OwnerSentinel(StrEnum):
    """Placeholder owners used when no name could be extracted."""

    UNASSIGNED = "Unassigned"
    SELF = "User (Self)"


class DateSentinel(StrEnum):
    """Placeholder due dates used when no calendar date was resolved."""

    NOT_FOUND = "Not Found"
    UPCOMING = "Upcoming"


@dataclass(frozen=True)
class FieldExtraction:
    """Fields pulled out of a single candidate line."""

    task: str
    owner: str | None = None
    due_date_raw: str | None = None  # substring captured from the line
    due_date: str | None = None  # normalized form of due_date_raw


@dataclass(frozen=True)
class ActionItemCandidate:
    """A single action item recognized in a transcript."""

    task: str
    owner: str = OwnerSentinel.UNASSIGNED
    due_date: str = DateSentinel.NOT_FOUND
