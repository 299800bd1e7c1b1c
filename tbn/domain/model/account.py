"""Account aggregate root.

Accounts authenticate either locally (username + password) or through a
federated identity provider (Google), or both. Withdrawal is logical: the
row is flagged deleted and an archival WithdrawalRecord is written.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from tbn.domain.model.common import DomainModel
from tbn.domain.value import AccountId, AuthProvider


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Account(DomainModel):
    """Account aggregate root."""

    id: AccountId
    email: str = Field(min_length=1, max_length=255)
    username: Optional[str] = None  # Local login name
    display_name: Optional[str] = None  # Name asserted by the provider
    nickname: Optional[str] = None  # User-facing, independently settable
    avatar_url: Optional[str] = None
    password_hash: Optional[str] = None
    provider: Optional[AuthProvider] = None
    provider_subject_id: Optional[str] = None
    deleted: bool = False
    deleted_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def check_authenticable(self) -> "Account":
        """An account must be locally authenticable, federated, or both."""
        is_local = bool(self.password_hash)
        is_federated = self.provider is not None and bool(self.provider_subject_id)
        if not (is_local or is_federated):
            raise ValueError(
                "Account needs a password hash or a provider identity"
            )
        return self

    @property
    def is_active(self) -> bool:
        return not self.deleted
