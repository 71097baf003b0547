"""Bearer JWT authentication backend for Django REST Framework.

Tokens are HS256 JWTs signed with ``JWT_SIGNING_KEY`` (see
``modules.core.tokens``).  A verified token becomes a ``Principal`` on
``request.user``; the role claim it carries drives the permission classes
in ``modules.core.permissions``.

Security decisions
------------------
* **Fail Closed**: any decode / validation error returns 401.
* ``algorithms`` is hard-coded to the configured value (default HS256).
  Never derived from the incoming token.
* A request without an ``Authorization`` header is anonymous; whether that
  is acceptable is decided by the route's permission chain.
"""

import structlog
from jwt.exceptions import PyJWTError

from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from modules.core.tokens import decode_token

logger = structlog.get_logger(__name__)


class Principal:
    """Lightweight user object for requests authenticated via bearer token.

    The token is the source of truth; there is no local ``User`` row.
    Views and permissions read ``request.user.sub`` / ``.role``.
    """

    def __init__(self, payload: dict):
        self.payload = payload
        self.sub: str = payload.get("sub", "")
        self.role: str = payload.get("role", "")

    # DRF checks
    is_authenticated = True
    is_active = True

    def __str__(self) -> str:  # pragma: no cover
        return self.sub


class BearerTokenAuthentication(BaseAuthentication):
    """DRF authentication class that validates ``Bearer`` JWTs."""

    keyword = "Bearer"

    # ------------------------------------------------------------------
    # Public API (DRF contract)
    # ------------------------------------------------------------------

    def authenticate(self, request):
        """Return ``(Principal, token)`` or ``None`` (no credentials)."""
        header = request.META.get("HTTP_AUTHORIZATION", "")
        if not header:
            return None

        token = self._extract_token(header)
        payload = self._decode_token(token)
        principal = Principal(payload)
        logger.info(
            "jwt_authenticated",
            sub=principal.sub,
            role=principal.role,
        )
        return (principal, token)

    def authenticate_header(self, request):
        """Value for the ``WWW-Authenticate`` response header on 401."""
        return f'{self.keyword} realm="api"'

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @classmethod
    def _extract_token(cls, header: str) -> str:
        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != cls.keyword.lower():
            raise AuthenticationFailed("Invalid Authorization header format.")
        return parts[1]

    @staticmethod
    def _decode_token(token: str) -> dict:
        try:
            payload = decode_token(token)
        except PyJWTError as exc:
            logger.warning("jwt_validation_failed", error=str(exc))
            raise AuthenticationFailed(f"Token validation failed: {exc}") from exc
        return payload
