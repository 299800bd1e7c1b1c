"""In-memory account repository for testing."""

from datetime import datetime, timezone
from typing import Iterable, Optional

from tbn.domain.error import ConflictError
from tbn.domain.model.account import Account
from tbn.domain.repository.account import AccountRepository
from tbn.domain.service.nickname import NICKNAME_MAX_LENGTH
from tbn.domain.value import AccountId, AuthProvider

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _prefer_active(accounts: Iterable[Account]) -> Optional[Account]:
    """Active account first, then the most recently deleted."""
    candidates = sorted(
        accounts,
        key=lambda a: (not a.deleted, a.deleted_at or _EPOCH),
        reverse=True,
    )
    return candidates[0] if candidates else None


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Enforces the same uniqueness rules as the database schema.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_email(
        self, email: str, include_deleted: bool = False
    ) -> Optional[Account]:
        """Find an account by email, preferring the active one."""
        return _prefer_active(
            a
            for a in self._accounts.values()
            if a.email == email and (include_deleted or not a.deleted)
        )

    async def find_by_username(self, username: str) -> Optional[Account]:
        """Find an active account by username."""
        for account in self._accounts.values():
            if account.username == username and not account.deleted:
                return account
        return None

    async def find_by_provider_identity(
        self, provider: AuthProvider, provider_subject_id: str
    ) -> Optional[Account]:
        """Find an account by its federated identity."""
        for account in self._accounts.values():
            if (
                account.provider == provider
                and account.provider_subject_id == provider_subject_id
            ):
                return account
        return None

    async def find_by_email_and_provider(
        self, email: str, provider: AuthProvider
    ) -> Optional[Account]:
        """Find an account by email and provider, preferring the active one."""
        return _prefer_active(
            a
            for a in self._accounts.values()
            if a.email == email and a.provider == provider
        )

    async def exists_by_email(self, email: str) -> bool:
        return await self.find_by_email(email) is not None

    async def exists_by_username(self, username: str) -> bool:
        return await self.find_by_username(username) is not None

    async def save(self, account: Account) -> Account:
        """Save or update an account, rejecting unique violations."""
        if account.nickname and len(account.nickname) > NICKNAME_MAX_LENGTH:
            # The nickname column is VARCHAR(50)
            raise ValueError(f"Nickname longer than {NICKNAME_MAX_LENGTH} characters")
        for other in self._accounts.values():
            if other.id == account.id:
                continue
            if not account.deleted and not other.deleted:
                if other.email == account.email:
                    raise ConflictError("Account", "email", account.email)
                if account.username and other.username == account.username:
                    raise ConflictError("Account", "username", account.username)
            if (
                account.provider is not None
                and account.provider_subject_id
                and other.provider == account.provider
                and other.provider_subject_id == account.provider_subject_id
            ):
                raise ConflictError(
                    "Account", "provider_subject_id", account.provider_subject_id
                )
        self._accounts[account.id] = account
        return account
