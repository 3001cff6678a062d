"""Index provisioning, run once at startup before the listener accepts traffic.

Two modes, selected by ``settings.INDEX_RECREATE_ON_STARTUP``:

* recreate (default): delete the index if present, then create it with the
  subject mapping. Every start wipes all stored subjects.
* create-if-absent: leave an existing index untouched, create it otherwise.

Store failures are logged and returned in the ``ProvisioningResult``; they
never abort startup, so the API may end up serving against a missing or
stale index.
"""

from __future__ import annotations

import logging

from elasticsearch import ApiError, Elasticsearch, TransportError

from app.core.constants import SUBJECT_INDEX_MAPPINGS, SUBJECT_INDEX_SETTINGS
from app.models.provisioning import ProvisioningResult

logger = logging.getLogger(__name__)


def _create_index(client: Elasticsearch, index_name: str) -> None:
    client.indices.create(
        index=index_name,
        settings=SUBJECT_INDEX_SETTINGS,
        mappings=SUBJECT_INDEX_MAPPINGS,
    )


def provision_index(
    client: Elasticsearch,
    index_name: str,
    recreate: bool = True,
) -> ProvisioningResult:
    """Prepare ``index_name`` with the subject mapping.

    Parameters
    ----------
    client:
        Elasticsearch client owned by the application.
    index_name:
        Target index.
    recreate:
        When True, drop any existing index first (destructive). When
        False, only create the index if it does not exist.

    Returns
    -------
    ProvisioningResult describing what was deleted/created and the first
    error encountered, if any.
    """
    result = ProvisioningResult(index=index_name)

    try:
        if recreate:
            # Deleting an index that does not exist is not a failure
            client.options(ignore_status=404).indices.delete(index=index_name)
            result.deleted = True
            logger.info("index_deleted", extra={"index": index_name})
        elif client.indices.exists(index=index_name):
            logger.info("index_exists", extra={"index": index_name})
            return result

        _create_index(client, index_name)
        result.created = True
        logger.info("index_created", extra={"index": index_name})
    except (ApiError, TransportError) as exc:
        result.error = str(exc)
        logger.error(
            "index_provisioning_failed",
            extra={
                "index": index_name,
                "recreate": recreate,
                "error_message": str(exc),
            },
        )

    return result
