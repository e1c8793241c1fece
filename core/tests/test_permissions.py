from types import SimpleNamespace

from django.contrib.auth.models import AnonymousUser
from django.test import SimpleTestCase

from core.permissions import IsAdmin, IsMember, IsSelfOrAdmin, allow_roles, is_role_allowed
from users.models import Role


def make_user(role, pk=1):
    return SimpleNamespace(pk=pk, role=role, is_authenticated=True)


def make_request(user):
    return SimpleNamespace(user=user)


class IsRoleAllowedTest(SimpleTestCase):
    """Test the pure role predicate."""

    def test_role_in_allow_list(self):
        self.assertTrue(is_role_allowed(make_user(Role.ADMIN), {Role.ADMIN}))
        self.assertTrue(is_role_allowed(make_user('user'), {Role.USER, Role.ADMIN}))

    def test_role_not_in_allow_list(self):
        self.assertFalse(is_role_allowed(make_user(Role.USER), {Role.ADMIN}))

    def test_anonymous_never_allowed(self):
        self.assertFalse(is_role_allowed(AnonymousUser(), {Role.USER, Role.ADMIN}))
        self.assertFalse(is_role_allowed(None, {Role.USER}))


class RolePermissionTest(SimpleTestCase):

    def test_allow_roles_builds_named_class(self):
        permission = allow_roles(Role.USER)
        self.assertEqual(permission.__name__, 'AllowUser')
        self.assertEqual(permission.allowed_roles, frozenset({Role.USER}))

    def test_is_admin(self):
        view = SimpleNamespace(kwargs={})
        self.assertTrue(IsAdmin().has_permission(make_request(make_user(Role.ADMIN)), view))
        self.assertFalse(IsAdmin().has_permission(make_request(make_user(Role.USER)), view))

    def test_is_member_accepts_both_roles(self):
        view = SimpleNamespace(kwargs={})
        self.assertTrue(IsMember().has_permission(make_request(make_user(Role.USER)), view))
        self.assertTrue(IsMember().has_permission(make_request(make_user(Role.ADMIN)), view))


class IsSelfOrAdminTest(SimpleTestCase):

    def test_owner_passes(self):
        view = SimpleNamespace(kwargs={'user_id': 7})
        self.assertTrue(IsSelfOrAdmin().has_permission(make_request(make_user(Role.USER, pk=7)), view))

    def test_other_user_is_rejected(self):
        view = SimpleNamespace(kwargs={'user_id': 8})
        self.assertFalse(IsSelfOrAdmin().has_permission(make_request(make_user(Role.USER, pk=7)), view))

    def test_admin_passes_for_anyone(self):
        view = SimpleNamespace(kwargs={'user_id': 8})
        self.assertTrue(IsSelfOrAdmin().has_permission(make_request(make_user(Role.ADMIN, pk=1)), view))
