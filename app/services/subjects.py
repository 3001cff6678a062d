"""Subject document operations against Elasticsearch.

Each operation performs exactly one store call with ``refresh=True`` on
writes, so a subsequent read sees the change. Store failures are turned
into ``SubjectStoreError`` subclasses; the router maps those to HTTP
responses.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from elasticsearch import ApiError, Elasticsearch, TransportError
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from app.core.constants import (
    MSG_DECODE_FAILED,
    MSG_DELETE_FAILED,
    MSG_ENCODE_FAILED,
    MSG_INDEX_FAILED,
    MSG_NOT_FOUND,
    MSG_UPDATE_FAILED,
)
from app.core.errors import (
    SubjectDecodeError,
    SubjectNotFoundError,
    SubjectWriteError,
)
from app.models.subject import Subject, SubjectPayload

logger = logging.getLogger(__name__)

_STORE_ERRORS = (ApiError, TransportError)


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------

def encode_subject(subject: Subject) -> dict[str, Any]:
    """Serialize a subject into the JSON document stored in the index."""
    try:
        return subject.model_dump(mode="json")
    except PydanticSerializationError as exc:
        raise SubjectWriteError(MSG_ENCODE_FAILED) from exc


def decode_subject(source: Any) -> Subject:
    """Decode an index ``_source`` back into a ``Subject``."""
    try:
        return Subject.model_validate(source)
    except ValidationError as exc:
        raise SubjectDecodeError(MSG_DECODE_FAILED) from exc


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def create_subject(
    client: Elasticsearch,
    index_name: str,
    payload: SubjectPayload,
    now: datetime | None = None,
) -> Subject:
    """Stamp ``created_at`` and index the subject under its own code.

    An existing document with the same code is overwritten. An empty code
    lets Elasticsearch assign the document id.
    """
    subject = Subject(
        **payload.model_dump(),
        created_at=now or datetime.now(timezone.utc),
    )
    document = encode_subject(subject)

    if not subject.ma_mh:
        logger.warning(
            "subject_created_without_code",
            extra={"index": index_name},
        )

    try:
        client.index(
            index=index_name,
            id=subject.ma_mh or None,
            document=document,
            refresh=True,
        )
    except _STORE_ERRORS as exc:
        logger.error(
            "subject_index_failed",
            extra={
                "index": index_name,
                "subject_id": subject.ma_mh,
                "error_message": str(exc),
            },
        )
        raise SubjectWriteError(MSG_INDEX_FAILED) from exc

    logger.info("subject_created", extra={"subject_id": subject.ma_mh})
    return subject


def get_subject(
    client: Elasticsearch,
    index_name: str,
    subject_id: str,
) -> Subject:
    """Fetch a subject by code.

    Any store failure, not only a missing document, is reported as
    ``SubjectNotFoundError``.
    """
    try:
        response = client.get(index=index_name, id=subject_id)
    except _STORE_ERRORS as exc:
        logger.info(
            "subject_get_failed",
            extra={"subject_id": subject_id, "error_message": str(exc)},
        )
        raise SubjectNotFoundError(MSG_NOT_FOUND) from exc

    try:
        source = response["_source"]
    except KeyError as exc:
        raise SubjectDecodeError(MSG_DECODE_FAILED) from exc

    return decode_subject(source)


def update_subject(
    client: Elasticsearch,
    index_name: str,
    subject_id: str,
    payload: SubjectPayload,
) -> Subject:
    """Replace every field of the subject stored under ``subject_id``.

    Fields missing from the payload are written as zero values and
    ``created_at`` is cleared, so nothing from the previous version
    survives. Updating an absent document fails in the store.
    """
    subject = Subject(**payload.model_dump(), created_at=None)
    document = encode_subject(subject)

    try:
        client.update(
            index=index_name,
            id=subject_id,
            doc=document,
            refresh=True,
        )
    except _STORE_ERRORS as exc:
        logger.error(
            "subject_update_failed",
            extra={
                "index": index_name,
                "subject_id": subject_id,
                "error_message": str(exc),
            },
        )
        raise SubjectWriteError(MSG_UPDATE_FAILED) from exc

    logger.info("subject_updated", extra={"subject_id": subject_id})
    return subject


def delete_subject(
    client: Elasticsearch,
    index_name: str,
    subject_id: str,
) -> None:
    """Delete the subject stored under ``subject_id``."""
    try:
        client.delete(index=index_name, id=subject_id, refresh=True)
    except _STORE_ERRORS as exc:
        logger.error(
            "subject_delete_failed",
            extra={
                "index": index_name,
                "subject_id": subject_id,
                "error_message": str(exc),
            },
        )
        raise SubjectWriteError(MSG_DELETE_FAILED) from exc

    logger.info("subject_deleted", extra={"subject_id": subject_id})
