"""Project-wide DRF exception handler.

Every error body has the shape ``{"error": "<message>"}``.  Exceptions DRF
does not know about are logged with their traceback and answered with a
generic 500; nothing from the original error reaches the client.
"""

from __future__ import annotations

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


def _flatten_detail(detail) -> str:
    if isinstance(detail, list):
        return _flatten_detail(detail[0]) if detail else ""
    if isinstance(detail, dict):
        for value in detail.values():
            return _flatten_detail(value)
        return ""
    return str(detail)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        message = _flatten_detail(getattr(exc, "detail", response.data))
        response.data = {"error": message}
        return response

    view = context.get("view")
    logger.exception(
        "unhandled_exception",
        view=view.__class__.__name__ if view else None,
        error=str(exc),
    )
    return Response(
        {"error": GENERIC_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
