"""Role-based permission classes.

Authentication has already run by the time these are checked: an
anonymous request fails with 401 (DRF's ``NotAuthenticated``), an
authenticated principal with the wrong role fails with 403.
"""

from __future__ import annotations

from django.conf import settings
from rest_framework.permissions import BasePermission


class HasRole(BasePermission):
    """Allow only principals whose ``role`` claim is in ``allowed_roles``."""

    allowed_roles: frozenset[str] = frozenset()
    message = "You do not have permission to perform this action."

    def has_permission(self, request, view) -> bool:
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return getattr(user, "role", None) in self.allowed_roles


def require_roles(*roles: str) -> type[HasRole]:
    """Build a ``HasRole`` subclass bound to ``roles`` at route definition."""
    return type(
        "HasRole_" + "_".join(roles),
        (HasRole,),
        {"allowed_roles": frozenset(roles)},
    )


IsAdmin = require_roles(settings.ADMIN_ROLE)
