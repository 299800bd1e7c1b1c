"""Test configuration and fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

from tbn.domain.model import Account
from tbn.domain.value import AccountId, AuthProvider


def make_account(
    email: str = "user@example.com",
    *,
    username: str | None = None,
    nickname: str | None = "user",
    display_name: str | None = None,
    password_hash: str | None = None,
    provider: AuthProvider | None = AuthProvider.GOOGLE,
    provider_subject_id: str | None = "google-sub-1",
    deleted: bool = False,
    deleted_at: datetime | None = None,
) -> Account:
    """Helper to build accounts for tests.

    Defaults to an active Google account; pass ``provider=None`` with a
    ``password_hash`` for a local one.
    """
    now = datetime.now(timezone.utc)
    if deleted and deleted_at is None:
        deleted_at = now
    return Account(
        id=AccountId(uuid4()),
        email=email,
        username=username,
        display_name=display_name,
        nickname=nickname,
        password_hash=password_hash,
        provider=provider,
        provider_subject_id=provider_subject_id if provider else None,
        deleted=deleted,
        deleted_at=deleted_at,
        created_at=now,
        updated_at=now,
    )
