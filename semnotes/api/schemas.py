"""API response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NoteSummaryResponse(BaseModel):
    """A note without its content."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    filename: str
    filepath: str
    created_at: datetime
    updated_at: datetime


class NoteResponse(NoteSummaryResponse):
    content: str


class IndexFailureResponse(BaseModel):
    path: str
    reason: str


class IndexReportResponse(BaseModel):
    directory: str
    indexed: int
    created: int
    updated: int
    failed: int
    failures: list[IndexFailureResponse]


class ModelResponse(BaseModel):
    id: str
    created: int
    owned_by: str
    object: str


class HealthResponse(BaseModel):
    status: str
    notes: int
