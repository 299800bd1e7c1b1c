"""Account lifecycle domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from tbn.domain.error import NotFoundError
from tbn.domain.model import Account, WithdrawalRecord
from tbn.domain.repository import AccountRepository, WithdrawalRecordRepository
from tbn.domain.value import WithdrawalRecordId

from .base import Service
from .nickname import SuffixFactory, compute_nickname, random_suffix


class AccountLifecycleService(Service):
    """Soft deletion and restoration of accounts.

    ACTIVE -> DELETED appends a withdrawal record; DELETED -> ACTIVE resets
    the nickname. Both writes of a withdrawal share the caller's session,
    so they commit or roll back together.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        withdrawal_repository: WithdrawalRecordRepository,
        suffix_factory: SuffixFactory = random_suffix,
    ) -> None:
        """Initialize account lifecycle service.

        Args:
            account_repository: Account repository
            withdrawal_repository: Withdrawal record repository
            suffix_factory: Suffix source for synthesized nicknames
        """
        self.account_repository = account_repository
        self.withdrawal_repository = withdrawal_repository
        self.suffix_factory = suffix_factory

    async def soft_delete(self, email: str) -> Account:
        """Withdraw the active account with this email.

        Args:
            email: Account email

        Returns:
            The account, now flagged deleted

        Raises:
            NotFoundError: If no active account uses the email
        """
        with logfire.span("lifecycle_service.soft_delete", email=email):
            account = await self.account_repository.find_by_email(email)
            if account is None:
                logfire.warn("Active account not found", email=email)
                raise NotFoundError("Account", email)

            now = datetime.now(timezone.utc)
            deleted = await self.account_repository.save(
                account.model_copy(
                    update={"deleted": True, "deleted_at": now, "updated_at": now}
                )
            )
            await self.withdrawal_repository.append(
                WithdrawalRecord.snapshot(WithdrawalRecordId(uuid4()), account, now)
            )
            logfire.info("Account withdrawn", account_id=str(account.id), email=email)
            return deleted

    async def restore(self, email: str) -> Account:
        """Re-activate an account and reset its nickname.

        An active account is preferred; otherwise the most recently deleted
        account with this email is restored. Hidden comments stay hidden.

        Args:
            email: Account email

        Returns:
            The active account

        Raises:
            NotFoundError: If no account uses the email
            ConflictError: If another active account took the email meanwhile
        """
        with logfire.span("lifecycle_service.restore", email=email):
            account = await self.account_repository.find_by_email(
                email, include_deleted=True
            )
            if account is None:
                logfire.warn("Account not found", email=email)
                raise NotFoundError("Account", email)

            restored = await self.account_repository.save(
                account.model_copy(
                    update={
                        "deleted": False,
                        "deleted_at": None,
                        "nickname": compute_nickname(
                            account.display_name, account.email, self.suffix_factory
                        ),
                        "updated_at": datetime.now(timezone.utc),
                    }
                )
            )
            logfire.info("Account restored", account_id=str(restored.id), email=email)
            return restored
