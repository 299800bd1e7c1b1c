"""Unit tests for row/domain mappers and constraint mapping."""

from unittest.mock import MagicMock
from uuid import uuid4

from sqlalchemy.exc import IntegrityError

from tbn.domain.value import AuthProvider
from tbn.persistence.mappers import account_to_dict, row_to_account
from tbn.persistence.repository.account import _conflict_for
from tests.conftest import make_account


class TestAccountMapping:
    """Tests for account row mapping."""

    def test_provider_is_stored_as_string(self):
        account = make_account("map@example.com")

        data = account_to_dict(account)

        assert data["provider"] == "google"
        assert data["email"] == "map@example.com"

    def test_row_with_string_uuid_and_provider(self):
        account = make_account("row@example.com")
        row = account_to_dict(account)
        row["id"] = str(account.id)

        mapped = row_to_account(row)

        assert mapped.model_dump() == account.model_dump()
        assert mapped.provider == AuthProvider.GOOGLE

    def test_local_row_has_no_provider(self):
        account = make_account(
            "local@example.com", provider=None, password_hash="$argon2id$x"
        )

        mapped = row_to_account(account_to_dict(account))

        assert mapped.provider is None


def _integrity_error(constraint: str) -> IntegrityError:
    orig = MagicMock()
    orig.__str__.return_value = (
        f'duplicate key value violates unique constraint "{constraint}"'
    )
    return IntegrityError("INSERT INTO accounts ...", {}, orig)


class TestConflictMapping:
    """Tests for translating unique violations into ConflictError."""

    def test_username_constraint(self):
        account = make_account(username="dj", provider=None, password_hash="h")

        error = _conflict_for(account, _integrity_error("uq_accounts_username_active"))

        assert error.field == "username"
        assert error.value == "dj"

    def test_provider_constraint(self):
        account = make_account(provider_subject_id=str(uuid4()))

        error = _conflict_for(account, _integrity_error("uq_accounts_provider_identity"))

        assert error.field == "provider_subject_id"

    def test_email_is_the_fallback(self):
        account = make_account("dup@example.com")

        error = _conflict_for(account, _integrity_error("uq_accounts_email_active"))

        assert error.field == "email"
        assert error.value == "dup@example.com"
