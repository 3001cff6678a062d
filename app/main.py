"""FastAPI application entry point.

Configures CORS, structured logging, error handlers, lifespan events
(Elasticsearch client construction and index provisioning) and router
registration.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.error_handlers import register_error_handlers
from app.core.logging import setup_logging
from app.db.elasticsearch import create_es_client
from app.routers import subjects
from app.services.provisioning import provision_index

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks.

    Startup builds the Elasticsearch client (fatal on failure), then
    provisions the subject index (logged, non-fatal) before any request
    is served.
    """
    setup_logging()
    logger.info("Application starting up")

    try:
        client = create_es_client(settings.ELASTICSEARCH_URL)
    except Exception:
        logger.critical(
            "Error creating the Elasticsearch client",
            extra={"url": settings.ELASTICSEARCH_URL},
            exc_info=True,
        )
        raise

    result = provision_index(
        client,
        settings.ELASTICSEARCH_INDEX,
        recreate=settings.INDEX_RECREATE_ON_STARTUP,
    )
    if not result.ok:
        logger.warning(
            "Continuing with an unprovisioned index",
            extra={"index": result.index, "error_message": result.error},
        )

    application.state.es = client
    application.state.provisioning = result
    try:
        yield
    finally:
        client.close()
        logger.info("Application shutting down")


app = FastAPI(
    title="Subject Index API",
    description="CRUD facade over an Elasticsearch index of course subjects",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Error handlers and routers
# ---------------------------------------------------------------------------
register_error_handlers(app)

app.include_router(subjects.router, prefix="/subjects", tags=["Subjects"])


def run() -> None:
    """Serve the app with uvicorn on ``API_HOST:API_PORT``."""
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
