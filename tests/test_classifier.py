"""Tests for the action-line classifier."""

from __future__ import annotations

import pytest

from src.extraction.classifier import is_action_line


class TestActionMarkers:
    @pytest.mark.parametrize(
        "line",
        [
            "Action: Update the docs by Friday",
            "ACTION ITEM: circulate the minutes",
            "todo: rotate the API keys",
            "To do: renew the domain",
            "Task: draft the budget",
            "Follow up: vendor pricing",
            "followup: legal review",
            "Marcus will do: the handover notes",
            "Ops needs to: patch the cluster",
            "Responsible: Dana",
            "Assigned to: Lee",
            "[ ] book flights",
            "[] order badges",
        ],
    )
    def test_marker_lines(self, line: str) -> None:
        assert is_action_line(line)


class TestBullets:
    @pytest.mark.parametrize(
        "line",
        ["- buy cables", "* tidy the backlog", "• share the recording", "   - indented bullet"],
    )
    def test_bullet_lines(self, line: str) -> None:
        assert is_action_line(line)

    def test_dash_without_space_is_not_bullet(self) -> None:
        assert not is_action_line("-nothing here")


class TestImperativeWithColon:
    def test_speaker_instruction(self) -> None:
        assert is_action_line("Alice: please review the PR")

    def test_multiword_verb(self) -> None:
        assert is_action_line("Raj: let's reach out to the vendor")

    def test_imperative_without_colon_rejected(self) -> None:
        """Mentioning a verb in plain narrative is not enough."""
        assert not is_action_line("We should check the logs sometime")

    def test_colon_without_imperative_rejected(self) -> None:
        assert not is_action_line("Alice: Thanks everyone for joining.")


@pytest.mark.parametrize(
    "line",
    [
        "Let's circle back next sprint",
        "The weather was nice today",
        "",
        "   ",
    ],
)
def test_plain_prose_rejected(line: str) -> None:
    assert not is_action_line(line)
