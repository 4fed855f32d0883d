"""Heuristic extraction of action items from free-text meeting transcripts."""

from __future__ import annotations

import logging
from datetime import date

from src.config import settings
from src.extraction.classifier import is_action_line
from src.extraction.dates import today_in_timezone
from src.extraction.fields import MIN_TASK_LENGTH, extract_fields
from src.extraction.models import ActionItemCandidate, DateSentinel, OwnerSentinel

logger = logging.getLogger(__name__)


def extract_action_items(
    transcript: str, today: date | None = None
) -> list[ActionItemCandidate]:
    """Extract action items from a transcript, one per qualifying line.

    Args:
        transcript: The raw meeting transcript text.
        today: Reference date for relative expressions such as "tomorrow".
            Read once from the clock in the configured timezone if omitted.

    Returns:
        Action items in the order their lines appear. An empty list means
        no line qualified; it is not an error.
    """
    if today is None:
        today = today_in_timezone(settings.timezone)

    items: list[ActionItemCandidate] = []

    # Only "\n" ends a line; splitlines() would also break on form feeds etc.
    for lineno, line in enumerate(transcript.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip() or not is_action_line(line):
            continue

        fields = extract_fields(line, today)
        if fields is None or len(fields.task) <= MIN_TASK_LENGTH:
            logger.debug("Dropped line %d: too little task text", lineno)
            continue

        items.append(
            ActionItemCandidate(
                task=fields.task,
                owner=fields.owner or OwnerSentinel.UNASSIGNED,
                due_date=fields.due_date or DateSentinel.NOT_FOUND,
            )
        )
        logger.debug("Line %d -> action item %r", lineno, fields.task)

    logger.info("Extracted %d action items (reference date %s)", len(items), today)
    return items
