"""
Role-based authorization gate.

Each route declares the set of roles allowed through; the check itself is the
pure predicate `is_role_allowed`.
"""
from rest_framework.permissions import BasePermission

from users.models import Role


def is_role_allowed(user, allowed_roles):
    if user is None or not user.is_authenticated:
        return False
    return getattr(user, 'role', None) in allowed_roles


class RolePermission(BasePermission):
    allowed_roles = frozenset()
    message = 'You do not have permission to perform this action.'

    def has_permission(self, request, view):
        return is_role_allowed(request.user, self.allowed_roles)


def allow_roles(*roles):
    """Build a permission class letting through only the given roles."""
    name = 'Allow' + ''.join(str(role).title() for role in roles)
    return type(name, (RolePermission,), {'allowed_roles': frozenset(roles)})


IsAdmin  = allow_roles(Role.ADMIN)
IsMember = allow_roles(Role.USER, Role.ADMIN)


class IsSelfOrAdmin(BasePermission):
    """Per-user routes (`<user_id>` in the URL) belong to that user; admins may act on anyone."""
    message = 'You can only manage your own account.'

    def has_permission(self, request, view):
        if is_role_allowed(request.user, {Role.ADMIN}):
            return True
        user_id = view.kwargs.get('user_id')
        return request.user.is_authenticated and str(request.user.pk) == str(user_id)
