"""Pydantic request/response schemas for the action-item extraction API."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel


class ExtractRequest(BaseModel):
    """Request body for the /api/extract endpoint."""

    transcript: str
    reference_date: dt.date | None = None


class ActionItemResponse(BaseModel):
    """A single extracted action item in API responses."""

    task: str
    owner: str
    due_date: str


class ExtractResponse(BaseModel):
    """Response body for the /api/extract endpoint."""

    items_extracted: int
    reference_date: dt.date
    action_items: list[ActionItemResponse] = []
    message: str | None = None
