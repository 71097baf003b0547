"""Document store connection.

The store is the only piece of process-wide state: mongoengine keeps one
pymongo client per alias, and documents resolve their collection through
it lazily on first use.
"""

from __future__ import annotations

import mongoengine
import structlog
from django.conf import settings

logger = structlog.get_logger(__name__)

DEFAULT_ALIAS = mongoengine.DEFAULT_CONNECTION_NAME


def connect_document_store(alias: str = DEFAULT_ALIAS, **client_kwargs):
    """Register the MongoDB connection used by every document.

    Extra keyword arguments go straight to ``mongoengine.connect`` (the
    test suite passes ``mongo_client_class`` here).
    """
    mongoengine.disconnect(alias=alias)
    client = mongoengine.connect(
        db=settings.MONGODB_NAME,
        host=settings.MONGODB_URI,
        alias=alias,
        **client_kwargs,
    )
    logger.info("document_store_connected", db=settings.MONGODB_NAME, alias=alias)
    return client


def ping_document_store(alias: str = DEFAULT_ALIAS) -> None:
    """Round-trip to the server; raises if it cannot be reached."""
    mongoengine.get_db(alias=alias).command("ping")
