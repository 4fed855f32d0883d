"""Line classifier: decide whether a transcript line describes an action item."""

from __future__ import annotations

import re

# Explicit markers that flag a line as an action item
ACTION_MARKERS: tuple[str, ...] = (
    "action item:",
    "action:",
    "todo:",
    "to do:",
    "task:",
    "follow up:",
    "followup:",
    "will do:",
    "needs to:",
    "responsible:",
    "assigned to:",
    "[ ]",
    "[]",
)

IMPERATIVE_VERBS: tuple[str, ...] = (
    "prepare",
    "create",
    "send",
    "book",
    "schedule",
    "review",
    "update",
    "write",
    "complete",
    "finish",
    "submit",
    "check",
    "fix",
    "deploy",
    "test",
    "build",
    "document",
    "call",
    "meet",
    "follow up",
    "reach out",
    "notify",
    "confirm",
    "verify",
    "validate",
    "analyze",
    "research",
)

BULLET_RE = re.compile(r"^[-*•]\s+")


def has_action_marker(line: str) -> bool:
    lower = line.lower()
    return any(marker in lower for marker in ACTION_MARKERS)


def is_bullet(line: str) -> bool:
    return BULLET_RE.match(line.strip()) is not None


def has_imperative(line: str) -> bool:
    lower = line.lower()
    return any(verb in lower for verb in IMPERATIVE_VERBS)


def is_action_line(line: str) -> bool:
    """Return True if *line* looks like an action item.

    A line qualifies when it carries an explicit marker ("Action:",
    "[ ]", ...), is a bullet point, or mentions an imperative verb in a
    ``Speaker: instruction`` shaped line. The colon requirement keeps plain
    narrative sentences that merely mention a verb from qualifying.
    """
    if has_action_marker(line) or is_bullet(line):
        return True
    return ":" in line and has_imperative(line)
