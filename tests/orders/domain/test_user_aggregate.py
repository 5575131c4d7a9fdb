"""Tests for the User aggregate."""

import pytest
from orders.account.user import User
from protean.exceptions import ValidationError


class TestUserRegistration:
    def test_register_sets_fields(self):
        user = User.register(name="Ada Lovelace", email="ada@example.com")
        assert user.name == "Ada Lovelace"
        assert user.email == "ada@example.com"
        assert user.created_at is not None

    def test_register_rejects_email_without_at_sign(self):
        with pytest.raises(ValidationError) as exc:
            User.register(name="Ada Lovelace", email="ada.example.com")
        assert "email" in exc.value.messages

    def test_register_requires_name(self):
        with pytest.raises(ValidationError):
            User.register(name=None, email="ada@example.com")
