"""Bearer token issuance and verification (HS256 JWT).

Issuing tokens over HTTP is handled by the identity provider; this module
only mints tokens for local use (``manage.py issue_token``, tests) and
verifies the ones presented to the API.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
from django.conf import settings

REQUIRED_CLAIMS = ["sub", "role", "exp"]


def issue_token(sub: str, role: str, lifetime: timedelta | None = None) -> str:
    """Return a signed token for ``sub`` carrying ``role``."""
    if lifetime is None:
        lifetime = timedelta(minutes=settings.JWT_ACCESS_TOKEN_LIFETIME_MINUTES)
    now = datetime.now(tz=timezone.utc)
    payload = {
        "sub": sub,
        "role": role,
        "iat": now,
        "exp": now + lifetime,
    }
    return pyjwt.encode(
        payload, settings.JWT_SIGNING_KEY, algorithm=settings.JWT_ALGORITHM
    )


def decode_token(token: str) -> dict:
    """Verify signature, expiry and required claims.

    Raises ``jwt.PyJWTError`` on any failure. The accepted algorithm comes
    from settings, never from the token header.
    """
    return pyjwt.decode(
        token,
        settings.JWT_SIGNING_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )
