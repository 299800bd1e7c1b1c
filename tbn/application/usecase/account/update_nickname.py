"""Update nickname use case."""

from pydantic import BaseModel

from tbn.domain.service import AccountService

from .profile import AccountProfileResponse


class UpdateNicknameRequest(BaseModel):
    """Update nickname request."""

    email: str  # From authenticated token
    nickname: str


class UpdateNicknameUseCase:
    """Use case for changing the nickname of the authenticated account."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize update nickname use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: UpdateNicknameRequest) -> AccountProfileResponse:
        """Execute update nickname flow.

        Raises:
            NotFoundError: If no active account uses the email
            ValidationError: If the nickname is blank or too long
        """
        account = await self.account_service.update_nickname(
            request.email, request.nickname
        )
        return AccountProfileResponse.from_account(account)
