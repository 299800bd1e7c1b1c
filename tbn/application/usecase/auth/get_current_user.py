"""Get current user use case."""

from pydantic import BaseModel

from tbn.application.usecase.account.profile import AccountProfileResponse
from tbn.domain.service import AccountService, JWTService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase:
    """Use case for getting current authenticated account."""

    def __init__(
        self,
        jwt_service: JWTService,
        account_service: AccountService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            account_service: Account domain service
        """
        self.jwt_service = jwt_service
        self.account_service = account_service

    async def execute(self, request: GetCurrentUserRequest) -> AccountProfileResponse:
        """Execute get current user flow.

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the account was withdrawn or never existed
        """
        # Verify token (raises JWTError if invalid)
        email = self.jwt_service.extract_subject(request.token)

        account = await self.account_service.get_by_email(email)
        return AccountProfileResponse.from_account(account)
