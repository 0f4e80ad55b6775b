"""Unit tests for the User entity."""

from storefront.domain.model.user import User, UserRole


def test_default_role_is_customer():
    user = User(id="u1", email="alice@example.com", name="Alice")
    assert user.role == UserRole.CUSTOMER
    assert not user.is_admin


def test_admin_role():
    user = User(id="u2", email="root@example.com", name="Root", role=UserRole.ADMIN)
    assert user.is_admin
