"""Extraction endpoint: run heuristic action-item extraction on posted text."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from src.api.models import ActionItemResponse, ExtractRequest, ExtractResponse
from src.config import settings
from src.extraction.dates import today_in_timezone
from src.extraction.extractor import extract_action_items

logger = logging.getLogger(__name__)

router = APIRouter()

NO_ITEMS_HINT = (
    'No action items found. Try adding "Action:", "Task:", or "Todo:" before your items.'
)


@router.post("/api/extract", response_model=ExtractResponse)
async def extract(request: ExtractRequest) -> ExtractResponse:
    """Extract action items from a transcript.

    Nothing is stored; the caller owns persistence of the returned items.
    An empty result is a normal response carrying a formatting hint.
    """
    today = request.reference_date or today_in_timezone(settings.timezone)
    items = extract_action_items(request.transcript, today=today)
    logger.info("Extract request produced %d action items", len(items))

    return ExtractResponse(
        items_extracted=len(items),
        reference_date=today,
        action_items=[
            ActionItemResponse(task=i.task, owner=i.owner, due_date=i.due_date)
            for i in items
        ],
        message=None if items else NO_ITEMS_HINT,
    )
