"""Account profile shape shared by account use cases."""

from datetime import datetime

from pydantic import BaseModel

from tbn.domain.model import Account
from tbn.domain.value import AuthProvider


class AccountProfileResponse(BaseModel):
    """Public view of an account."""

    account_id: str
    email: str
    username: str | None
    nickname: str | None
    display_name: str | None
    avatar_url: str | None
    provider: AuthProvider | None
    created_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "AccountProfileResponse":
        return cls(
            account_id=str(account.id),
            email=account.email,
            username=account.username,
            nickname=account.nickname,
            display_name=account.display_name,
            avatar_url=account.avatar_url,
            provider=account.provider,
            created_at=account.created_at,
        )
