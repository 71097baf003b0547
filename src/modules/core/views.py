import time
from typing import Any, Dict

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.database import ping_document_store

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check document store
    try:
        start = time.monotonic()
        ping_document_store()
        services["document_store"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["document_store"] = {"status": "down"}
        overall_healthy = False
        logger.exception("health_check_document_store_failure")

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


class PrincipalView(APIView):
    """Echo the principal decoded from the bearer token.

    * No token  -> 401
    * Bad token -> 401
    * Valid JWT -> 200 with ``sub`` and ``role``
    """

    permission_classes = [IsAuthenticated]

    def get(self, request: HttpRequest) -> Response:
        return Response(
            {
                "sub": request.user.sub,
                "role": request.user.role,
            }
        )
