"""Local login use case."""

import logfire
from pydantic import BaseModel

from tbn.domain.service import AccountService, JWTService


class LoginRequest(BaseModel):
    """Username and password login request."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response, shared by local and federated login."""

    token: str
    email: str
    nickname: str | None
    message: str


class LoginUseCase:
    """Use case for username/password login."""

    def __init__(
        self,
        account_service: AccountService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT token domain service
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute local login flow.

        Raises:
            NotFoundError: If no active account has the username
            AuthenticationError: If the password does not match
        """
        account = await self.account_service.authenticate(
            request.username, request.password
        )
        token = self.jwt_service.create_token(account.email)

        logfire.info("Local login succeeded", account_id=str(account.id))

        return LoginResponse(
            token=token,
            email=account.email,
            nickname=account.nickname,
            message="Login successful",
        )
