import unittest
from unittest.mock import MagicMock

from bson import ObjectId

from app.core.errors import Forbidden, Unauthenticated
from app.middleware.auth import (
    RequestContext,
    authenticated,
    bearer_token,
    ensure_owner_or_admin,
    has_role,
    is_active,
    require,
)
from app.models.entities.user import Role, User
from app.services.identity import VerifiedIdentity


def _user(role="customer", status="active"):
    return User(_id=ObjectId(), email="a@x.com", name="a", role=role, status=status)


def _request(authorization=None, resolver=None):
    request = MagicMock()
    request.headers = {"Authorization": authorization} if authorization else {}
    request.app.state.identity_resolver = resolver or MagicMock()
    return request


class TestBearerToken(unittest.TestCase):
    def test_parses_scheme_case_insensitively(self):
        self.assertEqual(bearer_token("Bearer abc"), "abc")
        self.assertEqual(bearer_token("bearer abc"), "abc")

    def test_rejects_missing_or_foreign_schemes(self):
        self.assertIsNone(bearer_token(None))
        self.assertIsNone(bearer_token("Basic abc"))
        self.assertIsNone(bearer_token("Bearer "))


class TestGuards(unittest.TestCase):
    def test_authenticated_attaches_identity_and_user(self):
        user = _user()
        identity = VerifiedIdentity(email="a@x.com", display_name="a", claims={})
        resolver = MagicMock()
        resolver.resolve.return_value = (identity, user)
        context = RequestContext()

        authenticated(_request("Bearer tok", resolver), context)

        resolver.resolve.assert_called_once_with("tok")
        self.assertIs(context.user, user)
        self.assertIs(context.identity, identity)

    def test_has_role_denies_other_roles(self):
        guard = has_role(Role.ADMIN)
        for role in ("customer", "merchant", "donor", "volunteer"):
            with self.assertRaises(Forbidden) as caught:
                guard(_request(), RequestContext(user=_user(role=role)))
            self.assertEqual(caught.exception.status_code, 403)

    def test_has_role_allows_expected_role(self):
        has_role(Role.ADMIN)(_request(), RequestContext(user=_user(role="admin")))

    def test_is_active_denies_pending_and_blocked_regardless_of_role(self):
        for role in ("admin", "merchant", "customer"):
            for status in ("pending", "blocked"):
                with self.assertRaises(Forbidden) as caught:
                    is_active(
                        _request(), RequestContext(user=_user(role=role, status=status))
                    )
                self.assertEqual(caught.exception.detail, "Account not approved yet")

    def test_role_and_status_messages_differ(self):
        with self.assertRaises(Forbidden) as role_error:
            has_role(Role.MERCHANT)(_request(), RequestContext(user=_user()))
        with self.assertRaises(Forbidden) as status_error:
            is_active(_request(), RequestContext(user=_user(status="pending")))
        self.assertNotEqual(role_error.exception.detail, status_error.exception.detail)

    def test_guards_without_user_fail_closed(self):
        with self.assertRaises(Unauthenticated):
            has_role(Role.ADMIN)(_request(), RequestContext())
        with self.assertRaises(Unauthenticated):
            is_active(_request(), RequestContext())


class TestRequire(unittest.TestCase):
    def test_chain_stops_at_first_failure(self):
        calls = []

        def first(request, context):
            calls.append("first")
            raise Forbidden("stop")

        def second(request, context):
            calls.append("second")

        with self.assertRaises(Forbidden):
            require(first, second)(_request())
        self.assertEqual(calls, ["first"])

    def test_chain_returns_context_and_stores_it_on_request(self):
        user = _user(role="merchant")

        def attach(request, context):
            context.user = user

        request = _request()
        context = require(attach, has_role(Role.MERCHANT), is_active)(request)
        self.assertIs(context.user, user)
        self.assertIs(request.state.auth, context)

    def test_role_guard_before_authentication_is_unauthenticated(self):
        with self.assertRaises(Unauthenticated):
            require(has_role(Role.ADMIN))(_request())


class TestOwnership(unittest.TestCase):
    def test_owner_and_admin_pass(self):
        owner = _user(role="merchant")
        ensure_owner_or_admin(owner.id, owner)
        ensure_owner_or_admin(ObjectId(), _user(role="admin"))

    def test_other_user_is_forbidden(self):
        with self.assertRaises(Forbidden):
            ensure_owner_or_admin(ObjectId(), _user(role="merchant"))

    def test_unowned_resource_is_admin_only(self):
        with self.assertRaises(Forbidden):
            ensure_owner_or_admin(None, _user(role="merchant"))
        ensure_owner_or_admin(None, _user(role="admin"))


if __name__ == "__main__":
    unittest.main()
