"""CRUD route handlers, one router per entity.

Records are kept in the repository registered for the entity on
``app.state.repositories``; the routers themselves hold no state.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Request, status

from api.form_options import to_jsonable
from api.records import ENTITY_SPECS, EntitySpec, created_response, generate_id, merge_update, normalize_payload
from api.schemas import (
    CreatedResponse,
    DeletedResponse,
    FormOptionsResponse,
    MessageResponse,
    RecordListResponse,
    RecordResponse,
)
from api.storage import Repository
from core.errors import NotFoundError

logger = logging.getLogger(__name__)

_NOT_FOUND = {404: {"model": MessageResponse}}


def _repository(request: Request, spec: EntitySpec) -> Repository:
    return request.app.state.repositories[spec.key]


def build_entity_router(spec: EntitySpec) -> APIRouter:
    """Create the list/create/read/update/delete and form-options routes for ``spec``."""

    router = APIRouter(prefix=spec.path, tags=[spec.entity_name])

    @router.get("", response_model=RecordListResponse)
    async def list_records(request: Request) -> dict[str, Any]:
        return {"budgets": _repository(request, spec).list()}

    @router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
    async def create_record(request: Request, payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        record_id = generate_id()
        record = normalize_payload(spec, payload, record_id)
        stored = _repository(request, spec).put(record_id, record)
        logger.info("Created %s %s", spec.entity_name, record_id)
        return created_response(spec, stored)

    # Declared before ``/{record_id}`` so the literal path wins.
    @router.get("/form-options", response_model=FormOptionsResponse)
    async def form_options() -> dict[str, Any]:
        return {"options": to_jsonable(spec.form_options)}

    @router.get("/{record_id}", response_model=RecordResponse, responses=_NOT_FOUND)
    async def get_record(request: Request, record_id: str) -> dict[str, Any]:
        record = _repository(request, spec).get(record_id)
        if record is None:
            raise NotFoundError(spec.entity_name, record_id)
        return {"budget": record}

    @router.put("/{record_id}", response_model=RecordResponse, responses=_NOT_FOUND)
    async def update_record(
        request: Request,
        record_id: str,
        payload: dict[str, Any] = Body(...),
    ) -> dict[str, Any]:
        repository = _repository(request, spec)
        existing = repository.get(record_id)
        if existing is None:
            raise NotFoundError(spec.entity_name, record_id)
        updated = merge_update(spec, existing, payload)
        stored = repository.put(record_id, updated)
        logger.info("Updated %s %s", spec.entity_name, record_id)
        return {"budget": stored}

    @router.delete("/{record_id}", response_model=DeletedResponse, responses=_NOT_FOUND)
    async def delete_record(request: Request, record_id: str) -> dict[str, Any]:
        if not _repository(request, spec).delete(record_id):
            raise NotFoundError(spec.entity_name, record_id)
        logger.info("Deleted %s %s", spec.entity_name, record_id)
        return {"success": True}

    return router


router = APIRouter()
for _spec in ENTITY_SPECS:
    router.include_router(build_entity_router(_spec))


__all__ = ["build_entity_router", "router"]
