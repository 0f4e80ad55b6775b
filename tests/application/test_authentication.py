"""Tests for login, session restore, registration and the admin gate."""

import pytest

from storefront.application.authenticate_user import AuthenticateUserHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.session import (
    RestoreSessionHandler,
    Session,
    StartSessionHandler,
    require_admin,
)
from storefront.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ValidationError,
)
from storefront.domain.model.user import User, UserRole
from tests.fakes import FakeAuthenticationService, FakeUserRepository

pytestmark = pytest.mark.asyncio

ALICE = User(id="u1", email="alice@example.com", name="Alice")
ROOT = User(id="u2", email="root@example.com", name="Root", role=UserRole.ADMIN)
PASSWORD = "s3cret-pass"


def _setup() -> tuple[FakeUserRepository, FakeAuthenticationService]:
    return FakeUserRepository([ALICE, ROOT]), FakeAuthenticationService([ALICE, ROOT], PASSWORD)


class TestAuthenticateUser:

    async def test_returns_token(self):
        users, auth = _setup()
        token = await AuthenticateUserHandler(users, auth).handle("alice@example.com", PASSWORD)
        assert token == "token-u1"

    async def test_email_is_normalised_before_lookup(self):
        users, auth = _setup()
        token = await AuthenticateUserHandler(users, auth).handle(" Alice@Example.com ", PASSWORD)
        assert token == "token-u1"
        assert auth.authenticate_calls == ["alice@example.com"]

    async def test_unknown_email_never_reaches_auth_service(self):
        users, auth = _setup()
        with pytest.raises(AuthenticationError, match="User not found"):
            await AuthenticateUserHandler(users, auth).handle("bob@example.com", PASSWORD)
        assert auth.authenticate_calls == []

    async def test_wrong_password_rejected(self):
        users, auth = _setup()
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            await AuthenticateUserHandler(users, auth).handle("alice@example.com", "wrong-password")

    async def test_malformed_email_rejected(self):
        users, auth = _setup()
        with pytest.raises(ValidationError, match="Invalid email"):
            await AuthenticateUserHandler(users, auth).handle("alice", PASSWORD)
        assert auth.authenticate_calls == []

    async def test_short_password_rejected(self):
        users, auth = _setup()
        with pytest.raises(ValidationError, match="at least 8"):
            await AuthenticateUserHandler(users, auth).handle("alice@example.com", "abc")
        assert auth.authenticate_calls == []


class TestSessions:

    async def test_start_session_resolves_user(self):
        users, auth = _setup()
        session = await StartSessionHandler(users, auth).handle("root@example.com", PASSWORD)
        assert session == Session(user=ROOT, token="token-u2")

    async def test_session_repr_hides_token(self):
        assert "token-u1" not in repr(Session(user=ALICE, token="token-u1"))

    async def test_restore_session(self):
        _, auth = _setup()
        session = await RestoreSessionHandler(auth).handle("token-u1")
        assert session.user == ALICE

    @pytest.mark.parametrize("token", [None, ""])
    async def test_restore_without_token_requires_login(self, token):
        _, auth = _setup()
        with pytest.raises(AuthenticationError, match="Login required"):
            await RestoreSessionHandler(auth).handle(token)

    async def test_restore_with_bad_token_rejected(self):
        _, auth = _setup()
        with pytest.raises(AuthenticationError, match="invalid or expired"):
            await RestoreSessionHandler(auth).handle("token-nobody")


class TestRequireAdmin:

    async def test_admin_allowed(self):
        require_admin(Session(user=ROOT, token="t"))

    async def test_customer_refused(self):
        with pytest.raises(AuthorizationError, match="admin"):
            require_admin(Session(user=ALICE, token="t"))


class TestRegisterUser:

    async def test_registers_customer(self):
        users = FakeUserRepository()
        user = await RegisterUserHandler(users, id_factory=lambda: "u9").handle(
            "Bob@Example.com", " Bob "
        )
        assert user == User(id="u9", email="bob@example.com", name="Bob")
        assert await users.get_by_email("bob@example.com") == user

    async def test_registers_admin(self):
        user = await RegisterUserHandler(FakeUserRepository()).handle(
            "ops@example.com", "Ops", role="admin"
        )
        assert user.is_admin

    async def test_duplicate_email_rejected(self):
        users, _ = _setup()
        with pytest.raises(ValidationError, match="already exists"):
            await RegisterUserHandler(users).handle("alice@example.com", "Alice again")

    async def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError, match="Unknown role"):
            await RegisterUserHandler(FakeUserRepository()).handle("x@example.com", "X", role="owner")

    async def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            await RegisterUserHandler(FakeUserRepository()).handle("x@example.com", "  ")
