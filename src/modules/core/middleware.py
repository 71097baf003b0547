import uuid
from typing import Callable

import structlog
from corsheaders.conf import conf as cors_conf
from django.http import HttpRequest, HttpResponse, JsonResponse

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Middleware that extracts or generates a correlation ID for each request.

    Reads X-Request-ID header from the incoming request. If absent,
    generates a new UUID4. The ID is bound to structlog contextvars so
    every log line carries it, and it is returned to the
    client via the X-Request-ID response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )

        response = self.get_response(request)

        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
        )

        response["X-Request-ID"] = cid
        return response


class CorsOriginGuardMiddleware:
    """Reject cross-origin requests from origins outside the CORS allow-list.

    ``CorsMiddleware`` only decides which headers to send back, leaving
    enforcement to the browser.  This middleware refuses the request with
    403 before it reaches any view, preflights included, so it must sit
    above ``CorsMiddleware``.  Requests without an ``Origin`` header and
    same-origin requests pass through.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        origin = request.headers.get("Origin")
        if origin and not self._is_allowed(request, origin):
            logger.warning("cors_origin_rejected", origin=origin)
            return JsonResponse({"error": "Origin not allowed"}, status=403)
        return self.get_response(request)

    @staticmethod
    def _is_allowed(request: HttpRequest, origin: str) -> bool:
        if cors_conf.CORS_ALLOW_ALL_ORIGINS:
            return True
        if origin in cors_conf.CORS_ALLOWED_ORIGINS:
            return True
        return origin == f"{request.scheme}://{request.get_host()}"
