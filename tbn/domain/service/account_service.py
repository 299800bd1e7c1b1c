"""Account domain service for local credentials and profile edits."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from tbn.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from tbn.domain.model import Account
from tbn.domain.repository import AccountRepository
from tbn.domain.value import AccountId

from .base import Service
from .nickname import (
    NICKNAME_MAX_LENGTH,
    SuffixFactory,
    compute_nickname,
    random_suffix,
)
from .password_service import PasswordService


class AccountService(Service):
    """Domain service for account operations."""

    def __init__(
        self,
        account_repository: AccountRepository,
        password_service: PasswordService,
        suffix_factory: SuffixFactory = random_suffix,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            password_service: Password hashing service
            suffix_factory: Suffix source for synthesized nicknames
        """
        self.account_repository = account_repository
        self.password_service = password_service
        self.suffix_factory = suffix_factory

    async def get_by_email(self, email: str) -> Account:
        """Get the active account for an email.

        Args:
            email: Account email

        Returns:
            Account entity

        Raises:
            NotFoundError: If no active account uses the email
        """
        with logfire.span("account_service.get_by_email", email=email):
            account = await self.account_repository.find_by_email(email)
            if not account:
                logfire.warn("Account not found", email=email)
                raise NotFoundError("Account", email)
            return account

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        name: str | None = None,
    ) -> Account:
        """Register a local account.

        Args:
            username: Login name
            email: Email address
            password: Plain text password
            name: Optional display name

        Returns:
            Created account

        Raises:
            ConflictError: If the username or email is already in use
        """
        with logfire.span(
            "account_service.register", username=username, email=email
        ):
            if await self.account_repository.exists_by_username(username):
                logfire.warn("Username already taken", username=username)
                raise ConflictError("Account", "username", username)
            if await self.account_repository.exists_by_email(email):
                logfire.warn("Email already registered", email=email)
                raise ConflictError("Account", "email", email)

            now = datetime.now(timezone.utc)
            account = Account(
                id=AccountId(uuid4()),
                email=email,
                username=username,
                display_name=name,
                nickname=compute_nickname(name, email, self.suffix_factory),
                password_hash=self.password_service.hash(password),
                created_at=now,
                updated_at=now,
            )
            saved = await self.account_repository.save(account)
            logfire.info("Account registered", account_id=str(saved.id))
            return saved

    async def authenticate(self, username: str, password: str) -> Account:
        """Check local credentials.

        Args:
            username: Login name
            password: Plain text password

        Returns:
            The authenticated account

        Raises:
            NotFoundError: If no active account has the username
            AuthenticationError: If the password does not match
        """
        with logfire.span("account_service.authenticate", username=username):
            account = await self.account_repository.find_by_username(username)
            if account is None:
                logfire.warn("Login for unknown username", username=username)
                raise NotFoundError("Account", username)

            if not account.password_hash or not self.password_service.verify(
                account.password_hash, password
            ):
                logfire.warn("Password rejected", username=username)
                raise AuthenticationError("Invalid username or password")

            logfire.info("Password accepted", account_id=str(account.id))
            return account

    async def update_nickname(self, email: str, nickname: str) -> Account:
        """Change the nickname of an active account.

        Args:
            email: Account email
            nickname: New nickname, surrounding whitespace is stripped

        Returns:
            Updated account

        Raises:
            NotFoundError: If no active account uses the email
            ValidationError: If the nickname is blank or too long
        """
        with logfire.span("account_service.update_nickname", email=email):
            nickname = nickname.strip()
            if not nickname or len(nickname) > NICKNAME_MAX_LENGTH:
                raise ValidationError(
                    f"Nickname must be 1 to {NICKNAME_MAX_LENGTH} characters"
                )

            account = await self.get_by_email(email)
            saved = await self.account_repository.save(
                account.model_copy(
                    update={
                        "nickname": nickname,
                        "updated_at": datetime.now(timezone.utc),
                    }
                )
            )
            logfire.info("Nickname updated", account_id=str(saved.id))
            return saved
