"""Field extractor: pull owner, due date and task text out of a single line."""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date

from src.extraction.classifier import BULLET_RE
from src.extraction.dates import normalize_date
from src.extraction.models import FieldExtraction, OwnerSentinel

MIN_TASK_LENGTH = 5

# Common sentence starters that owner patterns tend to capture by mistake
OWNER_DENY_LIST = frozenset(
    {
        "sounds", "one", "will", "shall", "can", "could", "would", "should",
        "please", "great", "okay", "thanks", "yes", "no", "maybe", "alright",
        "make", "let", "check", "verify", "update", "test", "ensure", "create",
        "deploy", "run", "start", "stop", "open", "close",
    }
)


def _is_allowed_owner(name: str) -> bool:
    name = name.strip()
    return bool(name) and name.lower() not in OWNER_DENY_LIST


# ---------------------------------------------------------------------------
# Task derivation
# ---------------------------------------------------------------------------

LEADING_MARKER_RE = re.compile(
    r"^(?:(?:action item|action|todo|to do|task|follow up|followup|will do|needs to):|\[ ?\])\s*",
    re.IGNORECASE,
)
SPEAKER_PREFIX_RE = re.compile(r"^[A-Z][a-z]+:\s+")

EMPTY_PARENS_RE = re.compile(r"\(\s*\)")
TRAILING_PREPOSITION_RE = re.compile(r"\s+(?:by|at|on|due|for)$", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Owner patterns, evaluated in order against the trimmed line
# ---------------------------------------------------------------------------

OwnerRule = tuple[re.Pattern[str], Callable[[str], bool]]

OWNER_RULES: tuple[OwnerRule, ...] = (
    (re.compile(r"@(\w+)"), _is_allowed_owner),
    (re.compile(r"\(([^)]+)\)"), _is_allowed_owner),
    (re.compile(r"\bassigned to:\s*([^,.\n]+)", re.IGNORECASE), _is_allowed_owner),
    (re.compile(r"\bowner:\s*([^,.\n]+)", re.IGNORECASE), _is_allowed_owner),
    (re.compile(r"\bresponsible:\s*([^,.\n]+)", re.IGNORECASE), _is_allowed_owner),
    (re.compile(r"-\s*([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)\s+will\b"), _is_allowed_owner),
    (re.compile(r"^([A-Z][a-z]+),?\s+please\s+"), _is_allowed_owner),
    (re.compile(r"^([A-Z][a-z]+),?\s+(?i:can|could|would)\s+you\s+"), _is_allowed_owner),
)

SPEAKER_RE = re.compile(r"^([A-Z][a-z]+)\s*:")
ADDRESSEE_RE = re.compile(r"^(?:please\s+)?([A-Z][a-z]+),?\s+")
SELF_ASSIGNMENT_RE = re.compile(r"\bI\s+(?:will|shall|am)\b|\b(?:my|mine)\b", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Date patterns, evaluated in order; normalize_date acts as the validator
# ---------------------------------------------------------------------------

ISO_DATE_IN_LINE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_NUMERIC_DATE = r"([0-9]{1,2}[-/][0-9]{1,2}[-/][0-9]{2,4})"
_WEEKDAY = r"(monday|tuesday|wednesday|thursday|friday|saturday|sunday)"

DATE_RULES: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\bby\s+{_NUMERIC_DATE}", re.IGNORECASE),
    re.compile(rf"\bdue\s+{_NUMERIC_DATE}", re.IGNORECASE),
    re.compile(rf"\bdeadline:?\s*{_NUMERIC_DATE}", re.IGNORECASE),
    re.compile(rf"\bby\s+{_WEEKDAY}\b", re.IGNORECASE),
    re.compile(r"(?:\bby\s+)?\b(next\s+week|this\s+week|tomorrow)\b", re.IGNORECASE),
    re.compile(rf"\b{_NUMERIC_DATE}\b"),
)


def derive_task(line: str) -> str:
    """Strip bullets, action markers and a speaker prefix from *line*."""
    task = line.strip()
    task = BULLET_RE.sub("", task, count=1)
    task = LEADING_MARKER_RE.sub("", task, count=1)
    return SPEAKER_PREFIX_RE.sub("", task, count=1).strip()


def _remove_match(task: str, match: re.Match[str]) -> str:
    """Remove the text of *match* from *task*.

    The match was taken against the whole line, so a leading bullet or
    prefix may already be gone from *task*. In that case fall back to the
    span running from the captured group to the end of the match.
    """
    whole = match.group(0)
    if whole in task:
        return task.replace(whole, " ", 1)
    tail = match.string[match.start(1) : match.end()]
    if tail and tail in task:
        return task.replace(tail, " ", 1)
    return task


def clean_task(task: str) -> str:
    """Tidy task text left over after owner/date removal."""
    task = EMPTY_PARENS_RE.sub(" ", task)
    task = " ".join(task.split())
    task = TRAILING_PREPOSITION_RE.sub("", task)
    if task.endswith((",", ".")):
        task = task[:-1]
    return task.strip()


def _extract_owner(line: str, task: str) -> tuple[str | None, str]:
    for pattern, is_valid in OWNER_RULES:
        match = pattern.search(line)
        if match and is_valid(match.group(1)):
            return match.group(1).strip(), _remove_match(task, match)

    # A speaker instructing someone else: "Alice: Bob, send the notes".
    if SPEAKER_RE.match(line):
        match = ADDRESSEE_RE.match(task)
        if match and _is_allowed_owner(match.group(1)):
            return match.group(1), task[match.end() :]

    if SELF_ASSIGNMENT_RE.search(line):
        return OwnerSentinel.SELF, task

    return None, task


def _extract_due_date(
    line: str, task: str, today: date
) -> tuple[str | None, str | None, str]:
    iso_match = ISO_DATE_IN_LINE_RE.search(line)
    if iso_match:
        raw = iso_match.group(0)
        return raw, raw, task.replace(raw, " ", 1)

    for pattern in DATE_RULES:
        match = pattern.search(line)
        if not match:
            continue
        raw = match.group(1).strip()
        resolved = normalize_date(raw, today)
        if resolved is not None:
            return raw, resolved, _remove_match(task, match)

    return None, None, task


def extract_fields(line: str, today: date) -> FieldExtraction | None:
    """Extract task text, owner and due date from one action line.

    Args:
        line: A transcript line already classified as an action line.
        today: Reference date used to resolve relative date expressions.

    Returns:
        The extracted fields, or None if the line carries too little text
        to form a task. ``owner`` and ``due_date`` are None when nothing
        was found; the caller substitutes the sentinels.
    """
    task = derive_task(line)
    if len(task) < MIN_TASK_LENGTH:
        return None

    stripped = line.strip()
    owner, task = _extract_owner(stripped, task)
    due_date_raw, due_date, task = _extract_due_date(stripped, task, today)

    return FieldExtraction(
        task=clean_task(task),
        owner=owner,
        due_date_raw=due_date_raw,
        due_date=due_date,
    )
