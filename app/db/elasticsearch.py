"""Elasticsearch client construction and request-scoped access.

The client is built once by the application lifespan and kept on
``app.state.es``; handlers receive it through the ``get_es_client``
dependency instead of importing a module-level singleton.
"""

from elasticsearch import Elasticsearch
from fastapi import Request

from app.core.config import settings


def create_es_client(url: str | None = None) -> Elasticsearch:
    """Build an Elasticsearch client for ``url`` (defaults to ``settings``).

    Raises whatever the client raises for an unusable address; callers
    treat that as fatal.
    """
    return Elasticsearch(hosts=[url or settings.ELASTICSEARCH_URL])


def get_es_client(request: Request) -> Elasticsearch:
    """FastAPI dependency returning the client owned by the running app."""
    return request.app.state.es
