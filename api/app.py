"""FastAPI application factory.

Instantiate with:
    uvicorn api.app:app --reload --port 8000
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Mapping

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from api.records import ENTITY_SPECS
from api.router import router
from api.storage import InMemoryRepository, Repository
from core.errors import InvalidPayloadError, NotFoundError
from utils.logging_context import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the configured repositories once the server starts."""

    configure_logging(level=config.LOG_LEVEL)
    logger.info("Escrow API ready with repositories: %s", ", ".join(sorted(app.state.repositories)))
    yield


async def _not_found(_request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": str(exc)})


async def _invalid_payload(_request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=422, content={"message": str(exc)})


async def _invalid_request(_request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    detail = errors[0].get("msg") if errors else str(exc)
    return JSONResponse(status_code=422, content={"message": f"Invalid request body: {detail}"})


def create_app(repositories: Mapping[str, Repository] | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``repositories`` maps entity keys (``management_firm_budget``,
    ``master_budget``) to storage; missing entries get an in-memory store.
    """

    application = FastAPI(
        title="Escrow Central API",
        version="0.1.0",
        description="Budget CRUD and form options for the escrow wizards",
        lifespan=lifespan,
    )
    provided = dict(repositories or {})
    application.state.repositories = {
        spec.key: provided[spec.key] if spec.key in provided else InMemoryRepository() for spec in ENTITY_SPECS
    }

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(NotFoundError, _not_found)
    application.add_exception_handler(InvalidPayloadError, _invalid_payload)
    application.add_exception_handler(RequestValidationError, _invalid_request)

    application.include_router(router, prefix="/api")
    return application


# Module-level instance used by uvicorn.
app = create_app()
