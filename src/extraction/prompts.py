"""Prompt template for LLM-based action-item extraction.

Extraction currently runs on the local heuristics in
``src.extraction.extractor``; nothing here is sent to a model. The template
is kept so the request shape stays in step with ``ActionItemCandidate``.
"""

from __future__ import annotations

from typing import Any

from src.config import settings
from src.extraction.models import DateSentinel, OwnerSentinel

# Tool definition for structured output
EXTRACTION_TOOL: dict[str, Any] = {
    "name": "store_action_items",
    "description": (
        "Store action items extracted from a meeting transcript. "
        "Call this once with all extracted action items."
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "action_items": {
                "type": "array",
                "description": "Tasks someone needs to do.",
                "items": {
                    "type": "object",
                    "properties": {
                        "task": {
                            "type": "string",
                            "description": "The actionable task description, concise.",
                        },
                        "owner": {
                            "type": "string",
                            "description": (
                                f"The person assigned, or '{OwnerSentinel.UNASSIGNED}' "
                                "if not clear."
                            ),
                        },
                        "due_date": {
                            "type": "string",
                            "description": (
                                f"ISO date YYYY-MM-DD, or '{DateSentinel.NOT_FOUND}' "
                                "if not mentioned."
                            ),
                        },
                    },
                    "required": ["task", "owner", "due_date"],
                },
            },
        },
        "required": ["action_items"],
    },
}

SYSTEM_PROMPT = (
    "You are an expert project manager and data extractor. "
    "Analyze the meeting transcript provided and extract actionable tasks.\n\n"
    "For each action item give:\n"
    "1. **task**: the actionable task description, concise.\n"
    f"2. **owner**: the person assigned, or \"{OwnerSentinel.UNASSIGNED}\" if not clear.\n"
    f"3. **due_date**: ISO date YYYY-MM-DD, or \"{DateSentinel.NOT_FOUND}\" if not mentioned.\n\n"
    "Strict rules:\n"
    "- Use the store_action_items tool to return your results.\n"
    "- If no actionable items are found, return an empty array.\n"
    "- Infer owners from context where possible."
)


def build_extraction_request(transcript: str, model: str | None = None) -> dict[str, Any]:
    """Render the keyword arguments for a messages API extraction call.

    Args:
        transcript: The raw meeting transcript text.
        model: Model name; defaults to ``settings.llm_model``.

    Returns:
        A dict suitable for ``client.messages.create(**request)``.
    """
    return {
        "model": model or settings.llm_model,
        "max_tokens": 4096,
        "system": SYSTEM_PROMPT,
        "tools": [EXTRACTION_TOOL],
        "tool_choice": {"type": "tool", "name": EXTRACTION_TOOL["name"]},
        "messages": [
            {
                "role": "user",
                "content": (
                    f"Extract action items from this meeting transcript:\n\n{transcript}"
                ),
            }
        ],
    }
