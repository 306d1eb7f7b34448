"""
Access-control predicates
"""
from rest_framework.permissions import BasePermission

from .exceptions import Forbidden


class IsAdmin(BasePermission):
    """
    Allows access only to users whose stored ``is_admin`` flag is set.

    ``request.user`` is loaded from the database per request by
    SafeJWTAuthentication, so a revoked admin is refused even while holding a
    token issued before the change.
    """

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if not user.is_admin:
            raise Forbidden()
        return True
