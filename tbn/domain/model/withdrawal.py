"""Withdrawal record entity.

Immutable snapshot of an account's identity fields taken at the moment it
was soft-deleted. Records outlive the account they were copied from.
"""

from datetime import datetime
from typing import Optional

from tbn.domain.model.account import Account
from tbn.domain.model.common import DomainModel
from tbn.domain.value import AccountId, AuthProvider, WithdrawalRecordId


class WithdrawalRecord(DomainModel):
    """Archival snapshot of a withdrawn account."""

    id: WithdrawalRecordId
    account_id: AccountId
    email: str
    display_name: Optional[str] = None
    nickname: Optional[str] = None
    avatar_url: Optional[str] = None
    provider: Optional[AuthProvider] = None
    provider_subject_id: Optional[str] = None
    withdrawn_at: datetime

    @classmethod
    def snapshot(
        cls, record_id: WithdrawalRecordId, account: Account, withdrawn_at: datetime
    ) -> "WithdrawalRecord":
        """Copy the identity fields of an account into a new record."""
        return cls(
            id=record_id,
            account_id=account.id,
            email=account.email,
            display_name=account.display_name,
            nickname=account.nickname,
            avatar_url=account.avatar_url,
            provider=account.provider,
            provider_subject_id=account.provider_subject_id,
            withdrawn_at=withdrawn_at,
        )
