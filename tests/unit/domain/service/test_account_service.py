"""Unit tests for AccountService."""

import pytest

from tbn.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from tbn.domain.repository import AccountRepository
from tbn.domain.service import NICKNAME_MAX_LENGTH, AccountService, PasswordService
from tests.conftest import make_account
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_hashes_password_and_derives_nickname(self, unit_env):
        """New local account should store a hash, never the password."""
        # Arrange
        service = await unit_env.get(AccountService)
        password_service = await unit_env.get(PasswordService)

        # Act
        account = await service.register(
            "alice", "alice@example.com", "correct horse"
        )

        # Assert
        assert account.username == "alice"
        assert account.nickname == "alice"
        assert account.provider is None
        assert account.password_hash != "correct horse"
        assert password_service.verify(account.password_hash, "correct horse")

    @pytest.mark.asyncio
    async def test_register_uses_name_as_nickname(self, unit_env):
        """Given name should become the starting nickname."""
        service = await unit_env.get(AccountService)

        account = await service.register(
            "bob", "bob@example.com", "password123", name="Bobby"
        )

        assert account.display_name == "Bobby"
        assert account.nickname == "Bobby"

    @pytest.mark.asyncio
    async def test_register_long_name_is_cut_to_nickname_width(self, unit_env):
        """Names longer than the nickname column still register."""
        service = await unit_env.get(AccountService)

        account = await service.register(
            "marty", "marty@example.com", "password123", name="M" * 200
        )

        assert account.display_name == "M" * 200
        assert account.nickname == "M" * NICKNAME_MAX_LENGTH

    @pytest.mark.asyncio
    async def test_register_duplicate_username_raises(self, unit_env):
        """Taken username should raise ConflictError."""
        # Arrange
        service = await unit_env.get(AccountService)
        await service.register("carol", "carol@example.com", "password123")

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await service.register("carol", "other@example.com", "password123")
        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises(self, unit_env):
        """Email held by an active account should raise ConflictError."""
        # Arrange
        service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        await account_repo.save(make_account("dave@example.com"))

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await service.register("dave", "dave@example.com", "password123")
        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_register_reuses_email_of_withdrawn_account(self, unit_env):
        """Withdrawn accounts release their email."""
        # Arrange
        service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        await account_repo.save(make_account("erin@example.com", deleted=True))

        # Act
        account = await service.register("erin", "erin@example.com", "password123")

        # Assert
        assert account.deleted is False


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_authenticate_with_correct_password(self, unit_env):
        """Correct credentials should return the account."""
        # Arrange
        service = await unit_env.get(AccountService)
        registered = await service.register("frank", "frank@example.com", "s3cret!!")

        # Act
        account = await service.authenticate("frank", "s3cret!!")

        # Assert
        assert account.id == registered.id

    @pytest.mark.asyncio
    async def test_authenticate_wrong_password_raises(self, unit_env):
        """Wrong password should raise AuthenticationError."""
        service = await unit_env.get(AccountService)
        await service.register("grace", "grace@example.com", "s3cret!!")

        with pytest.raises(AuthenticationError):
            await service.authenticate("grace", "wrong-password")

    @pytest.mark.asyncio
    async def test_authenticate_unknown_username_raises(self, unit_env):
        """Unknown username should raise NotFoundError."""
        service = await unit_env.get(AccountService)

        with pytest.raises(NotFoundError):
            await service.authenticate("nobody", "whatever")

    @pytest.mark.asyncio
    async def test_authenticate_withdrawn_account_raises(self, unit_env):
        """Withdrawn accounts cannot log in."""
        # Arrange
        service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        account = await service.register("heidi", "heidi@example.com", "s3cret!!")
        await account_repo.save(account.model_copy(update={"deleted": True}))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.authenticate("heidi", "s3cret!!")


class TestUpdateNickname:
    """Tests for update_nickname method."""

    @pytest.mark.asyncio
    async def test_update_nickname_strips_whitespace(self, unit_env):
        """Nickname should be stored without surrounding whitespace."""
        # Arrange
        service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        await account_repo.save(make_account("ivan@example.com", nickname="ivan"))

        # Act
        account = await service.update_nickname("ivan@example.com", "  라디오팬  ")

        # Assert
        assert account.nickname == "라디오팬"
        saved = await account_repo.find_by_email("ivan@example.com")
        assert saved.nickname == "라디오팬"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("nickname", ["", "   ", "x" * 51])
    async def test_update_nickname_rejects_invalid(self, unit_env, nickname):
        """Blank or overlong nicknames should raise ValidationError."""
        service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        await account_repo.save(make_account("judy@example.com"))

        with pytest.raises(ValidationError):
            await service.update_nickname("judy@example.com", nickname)

    @pytest.mark.asyncio
    async def test_update_nickname_unknown_email_raises(self, unit_env):
        """Unknown account should raise NotFoundError."""
        service = await unit_env.get(AccountService)

        with pytest.raises(NotFoundError):
            await service.update_nickname("ghost@example.com", "ghost")
