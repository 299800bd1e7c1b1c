"""Local registration use case."""

from pydantic import BaseModel, Field

from tbn.domain.service import AccountService


class RegisterRequest(BaseModel):
    """Registration request."""

    username: str = Field(min_length=3, max_length=50)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=8, max_length=128)
    name: str | None = Field(default=None, max_length=255)


class RegisterResponse(BaseModel):
    """Registration response."""

    email: str
    username: str
    nickname: str | None
    message: str


class RegisterUseCase:
    """Use case for creating a local account."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize register use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Raises:
            ConflictError: If the username or email is already in use
        """
        account = await self.account_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
            name=request.name,
        )
        return RegisterResponse(
            email=account.email,
            username=request.username,
            nickname=account.nickname,
            message="Registration successful",
        )
