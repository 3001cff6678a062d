"""Subject CRUD endpoints.

POST   /subjects                -- create (201)
GET    /subjects/{subject_id}   -- read (200, 404 on any store failure)
PUT    /subjects/{subject_id}   -- full replacement (200)
DELETE /subjects/{subject_id}   -- delete (200)

Handlers are plain ``def`` so FastAPI runs each request on its threadpool
while the blocking Elasticsearch call is in flight.
"""

from __future__ import annotations

from elasticsearch import Elasticsearch
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from app.core.config import settings
from app.core.constants import MSG_CREATED, MSG_DELETED, MSG_UPDATED
from app.core.errors import SubjectStoreError
from app.db.elasticsearch import get_es_client
from app.models.subject import Subject, SubjectPayload
from app.services.subjects import (
    create_subject,
    delete_subject,
    get_subject,
    update_subject,
)

router = APIRouter()


def _http_error(exc: SubjectStoreError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@router.post("", status_code=201, response_class=PlainTextResponse)
def create_subject_endpoint(
    payload: SubjectPayload,
    client: Elasticsearch = Depends(get_es_client),
) -> str:
    """Create a subject; an existing code is silently overwritten."""
    try:
        create_subject(client, settings.ELASTICSEARCH_INDEX, payload)
    except SubjectStoreError as exc:
        raise _http_error(exc) from exc
    return MSG_CREATED


@router.get("/{subject_id}", response_model=Subject)
def get_subject_endpoint(
    subject_id: str,
    client: Elasticsearch = Depends(get_es_client),
) -> Subject:
    """Return the subject stored under ``subject_id``."""
    try:
        return get_subject(client, settings.ELASTICSEARCH_INDEX, subject_id)
    except SubjectStoreError as exc:
        raise _http_error(exc) from exc


@router.put("/{subject_id}", response_class=PlainTextResponse)
def update_subject_endpoint(
    subject_id: str,
    payload: SubjectPayload,
    client: Elasticsearch = Depends(get_es_client),
) -> str:
    """Replace the subject stored under ``subject_id`` with the request body."""
    try:
        update_subject(client, settings.ELASTICSEARCH_INDEX, subject_id, payload)
    except SubjectStoreError as exc:
        raise _http_error(exc) from exc
    return MSG_UPDATED


@router.delete("/{subject_id}", response_class=PlainTextResponse)
def delete_subject_endpoint(
    subject_id: str,
    client: Elasticsearch = Depends(get_es_client),
) -> str:
    """Delete the subject stored under ``subject_id``."""
    try:
        delete_subject(client, settings.ELASTICSEARCH_INDEX, subject_id)
    except SubjectStoreError as exc:
        raise _http_error(exc) from exc
    return MSG_DELETED
