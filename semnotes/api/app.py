"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from semnotes import __version__
from semnotes.config import Settings
from semnotes.indexer import NoteIndexer
from semnotes.llm import ModelCatalog
from semnotes.storage import (
    NoteRepository,
    create_db_engine,
    create_session_factory,
    init_database,
)

from .routes import router

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings,
    *,
    repository: NoteRepository | None = None,
    indexer: NoteIndexer | None = None,
    catalog: ModelCatalog | None = None,
) -> FastAPI:
    """Build the app, creating any collaborator that was not passed in."""
    if repository is None:
        engine = create_db_engine(settings.database_url)
        init_database(engine)
        repository = NoteRepository(create_session_factory(engine))
    if indexer is None:
        indexer = NoteIndexer(settings.notes_directory, repository)
    if catalog is None:
        catalog = ModelCatalog(settings.openai_api_key)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Without a key the model routes answer 503; a bad key stops startup
        if settings.openai_api_key and not catalog.is_active:
            catalog.activate()
        elif not catalog.is_active:
            logger.warning("OPENAI_API_KEY is not set, model routes are disabled")
        yield

    app = FastAPI(title="Semnotes", version=__version__, lifespan=lifespan)
    app.state.repository = repository
    app.state.indexer = indexer
    app.state.catalog = catalog
    app.include_router(router)
    return app
