"""
API routes

- GET  /api/openai/models            - list OpenAI models
- GET  /api/openai/models/{model_id} - one OpenAI model
- POST /api/notes/index              - index the notes directory
- GET  /api/notes                    - list indexed notes
- GET  /api/notes/{note_id}          - one note with content
- GET  /health                       - liveness and note count
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from semnotes.errors import (
    ClientActivationError,
    ConfigurationError,
    DirectoryWalkError,
    IndexingInProgressError,
    ModelProviderError,
)
from semnotes.indexer import NoteIndexer
from semnotes.llm import ModelCatalog
from semnotes.storage import NoteRepository

from .schemas import (
    HealthResponse,
    IndexReportResponse,
    ModelResponse,
    NoteResponse,
    NoteSummaryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_repository(request: Request) -> NoteRepository:
    return request.app.state.repository


def get_indexer(request: Request) -> NoteIndexer:
    return request.app.state.indexer


def get_catalog(request: Request) -> ModelCatalog:
    return request.app.state.catalog


# ========== OpenAI models ==========


@router.get("/api/openai/models", response_model=list[ModelResponse])
def list_models(catalog: ModelCatalog = Depends(get_catalog)):
    logger.info("Fetching list of OpenAI models")
    try:
        models = catalog.list_models()
    except ClientActivationError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except ModelProviderError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
    return [m.to_dict() for m in models]


@router.get("/api/openai/models/{model_id}", response_model=ModelResponse)
def get_model(model_id: str, catalog: ModelCatalog = Depends(get_catalog)):
    logger.info(f"Fetching model: {model_id}")
    try:
        model = catalog.get_model(model_id)
    except ClientActivationError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except ModelProviderError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
    return model.to_dict()


# ========== Notes ==========


@router.post("/api/notes/index", response_model=IndexReportResponse)
def index_notes(indexer: NoteIndexer = Depends(get_indexer)):
    """Index the notes directory and report what happened."""
    try:
        report = indexer.index_notes()
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except IndexingInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except DirectoryWalkError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    return report.to_dict()


@router.get("/api/notes", response_model=list[NoteSummaryResponse])
def list_notes(repository: NoteRepository = Depends(get_repository)):
    return repository.list_all()


@router.get("/api/notes/{note_id}", response_model=NoteResponse)
def get_note(note_id: int, repository: NoteRepository = Depends(get_repository)):
    note = repository.get(note_id)
    if note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return note


@router.get("/health", response_model=HealthResponse)
def health(repository: NoteRepository = Depends(get_repository)):
    return HealthResponse(status="ok", notes=repository.count())
