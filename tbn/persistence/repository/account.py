"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tbn.domain.error import ConflictError
from tbn.domain.model import Account
from tbn.domain.repository import AccountRepository
from tbn.domain.value import AccountId, AuthProvider
from tbn.persistence.mappers import account_to_dict, row_to_account
from tbn.persistence.tables import accounts_table

# Active first, then the most recently deleted
_PREFER_ACTIVE = (
    accounts_table.c.deleted.asc(),
    accounts_table.c.deleted_at.desc().nulls_last(),
)


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _first(self, stmt) -> Optional[Account]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: Account ID to look up

        Returns:
            Account if found, None otherwise
        """
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        return await self._first(stmt)

    async def find_by_email(
        self, email: str, include_deleted: bool = False
    ) -> Optional[Account]:
        """Find an account by email, preferring the active one."""
        stmt = select(accounts_table).where(accounts_table.c.email == email)
        if not include_deleted:
            stmt = stmt.where(accounts_table.c.deleted.is_(False))
        return await self._first(stmt.order_by(*_PREFER_ACTIVE).limit(1))

    async def find_by_username(self, username: str) -> Optional[Account]:
        """Find an active account by username."""
        stmt = (
            select(accounts_table)
            .where(accounts_table.c.username == username)
            .where(accounts_table.c.deleted.is_(False))
        )
        return await self._first(stmt)

    async def find_by_provider_identity(
        self, provider: AuthProvider, provider_subject_id: str
    ) -> Optional[Account]:
        """Find an account by its federated identity.

        Args:
            provider: The identity provider
            provider_subject_id: The subject ID on that provider

        Returns:
            Account if found, None otherwise
        """
        stmt = (
            select(accounts_table)
            .where(accounts_table.c.provider == provider.value)
            .where(accounts_table.c.provider_subject_id == provider_subject_id)
        )
        return await self._first(stmt)

    async def find_by_email_and_provider(
        self, email: str, provider: AuthProvider
    ) -> Optional[Account]:
        """Find an account by email and provider, preferring the active one."""
        stmt = (
            select(accounts_table)
            .where(accounts_table.c.email == email)
            .where(accounts_table.c.provider == provider.value)
            .order_by(*_PREFER_ACTIVE)
            .limit(1)
        )
        return await self._first(stmt)

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(
            exists().where(
                accounts_table.c.email == email,
                accounts_table.c.deleted.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def exists_by_username(self, username: str) -> bool:
        stmt = select(
            exists().where(
                accounts_table.c.username == username,
                accounts_table.c.deleted.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Runs in a savepoint so a unique violation leaves the request's
        transaction usable.

        Args:
            account: Account to save

        Returns:
            Saved account

        Raises:
            ConflictError: If a unique constraint rejects the write
        """
        account_dict = account_to_dict(account)

        try:
            async with self.session.begin_nested():
                existing = await self.find_by_id(account.id)
                if existing:
                    stmt = (
                        accounts_table.update()
                        .where(accounts_table.c.id == account.id)
                        .values(**account_dict)
                    )
                else:
                    stmt = accounts_table.insert().values(**account_dict)
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise _conflict_for(account, e) from e

        return account


def _conflict_for(account: Account, error: IntegrityError) -> ConflictError:
    """Name the field whose unique constraint rejected the write."""
    message = str(error.orig)
    if "uq_accounts_username_active" in message:
        return ConflictError("Account", "username", account.username or "")
    if "uq_accounts_provider_identity" in message:
        return ConflictError(
            "Account", "provider_subject_id", account.provider_subject_id or ""
        )
    return ConflictError("Account", "email", account.email)
