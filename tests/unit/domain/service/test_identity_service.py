"""Unit tests for IdentityReconciliationService."""

import pytest

from tbn.domain.error import ConflictError
from tbn.domain.repository import AccountRepository
from tbn.domain.service import NICKNAME_MAX_LENGTH, IdentityReconciliationService
from tbn.domain.value import AuthProvider
from tbn.persistence.repository.inmemory import InMemoryAccountRepository
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestReconcileNewIdentity:
    """Tests for first-time federated logins."""

    @pytest.mark.asyncio
    async def test_creates_account_with_display_name_as_nickname(self, unit_env):
        """Unknown identity should create an active account."""
        # Arrange
        service = await unit_env.get(IdentityReconciliationService)
        account_repo = await unit_env.get(AccountRepository)

        # Act
        account = await service.reconcile(
            email="kim@example.com",
            display_name="  김철수  ",
            avatar_url="https://example.com/kim.png",
            provider=AuthProvider.GOOGLE,
            provider_subject_id="sub-kim",
        )

        # Assert
        assert account.deleted is False
        assert account.nickname == "김철수"
        assert account.display_name == "  김철수  "
        assert account.provider == AuthProvider.GOOGLE
        assert account.provider_subject_id == "sub-kim"

        saved = await account_repo.find_by_email("kim@example.com")
        assert saved is not None
        assert saved.id == account.id

    @pytest.mark.asyncio
    async def test_blank_display_name_falls_back_to_email_local_part(self, unit_env):
        """Blank display name should use the part before the @."""
        # Arrange
        service = await unit_env.get(IdentityReconciliationService)

        # Act
        account = await service.reconcile(
            email="lee@example.com",
            display_name="   ",
            avatar_url=None,
            provider=AuthProvider.GOOGLE,
            provider_subject_id="sub-lee",
        )

        # Assert
        assert account.nickname == "lee"

    @pytest.mark.asyncio
    async def test_long_display_name_fits_nickname_column(self, unit_env):
        """An 80 character Google name should still be storable."""
        # Arrange
        service = await unit_env.get(IdentityReconciliationService)
        account_repo = await unit_env.get(AccountRepository)

        # Act
        account = await service.reconcile(
            email="a@x.com",
            display_name="N" * 80,
            avatar_url=None,
            provider=AuthProvider.GOOGLE,
            provider_subject_id="sub-long",
        )

        # Assert
        assert account.display_name == "N" * 80
        assert len(account.nickname) == NICKNAME_MAX_LENGTH
        assert (await account_repo.find_by_email("a@x.com")).id == account.id


class TestReconcileExistingIdentity:
    """Tests for returning users."""

    @pytest.mark.asyncio
    async def test_active_account_updates_profile_and_keeps_nickname(self, unit_env):
        """Repeat login should refresh provider data but not the nickname."""
        # Arrange
        service = await unit_env.get(IdentityReconciliationService)
        account_repo = await unit_env.get(AccountRepository)

        existing = make_account(
            "park@example.com",
            nickname="custom-nick",
            display_name="Park",
            provider_subject_id="sub-park",
        )
        await account_repo.save(existing)

        # Act
        account = await service.reconcile(
            email="park@example.com",
            display_name="Park Jisoo",
            avatar_url="https://example.com/new.png",
            provider=AuthProvider.GOOGLE,
            provider_subject_id="sub-park",
        )

        # Assert
        assert account.id == existing.id
        assert account.nickname == "custom-nick"
        assert account.display_name == "Park Jisoo"
        assert account.avatar_url == "https://example.com/new.png"

    @pytest.mark.asyncio
    async def test_active_account_without_nickname_gets_one(self, unit_env):
        """Empty nickname on an active account should be filled in."""
        # Arrange
        service = await unit_env.get(IdentityReconciliationService)
        account_repo = await unit_env.get(AccountRepository)

        existing = make_account(
            "choi@example.com", nickname=None, provider_subject_id="sub-choi"
        )
        await account_repo.save(existing)

        # Act
        account = await service.reconcile(
            email="choi@example.com",
            display_name="Choi",
            avatar_url=None,
            provider=AuthProvider.GOOGLE,
            provider_subject_id="sub-choi",
        )

        # Assert
        assert account.id == existing.id
        assert account.nickname == "Choi"

    @pytest.mark.asyncio
    async def test_matches_by_email_when_subject_changed(self, unit_env):
        """Same email on the same provider should reuse the account."""
        # Arrange
        service = await unit_env.get(IdentityReconciliationService)
        account_repo = await unit_env.get(AccountRepository)

        existing = make_account("jung@example.com", provider_subject_id="old-sub")
        await account_repo.save(existing)

        # Act
        account = await service.reconcile(
            email="jung@example.com",
            display_name=None,
            avatar_url=None,
            provider=AuthProvider.GOOGLE,
            provider_subject_id="new-sub",
        )

        # Assert
        assert account.id == existing.id
        assert account.provider_subject_id == "new-sub"

    @pytest.mark.asyncio
    async def test_deleted_account_is_restored_with_fresh_nickname(self, unit_env):
        """Withdrawn account should be re-activated, not duplicated."""
        # Arrange
        service = await unit_env.get(IdentityReconciliationService)
        account_repo = await unit_env.get(AccountRepository)

        withdrawn = make_account(
            "han@example.com",
            nickname="old-nick",
            provider_subject_id="sub-han",
            deleted=True,
        )
        await account_repo.save(withdrawn)

        # Act
        account = await service.reconcile(
            email="han@example.com",
            display_name="Han",
            avatar_url=None,
            provider=AuthProvider.GOOGLE,
            provider_subject_id="sub-han",
        )

        # Assert
        assert account.id == withdrawn.id
        assert account.deleted is False
        assert account.deleted_at is None
        assert account.nickname == "Han"


class _RacingAccountRepository(InMemoryAccountRepository):
    """Simulates another request creating the same identity first."""

    def __init__(self) -> None:
        super().__init__()
        self.raced = False

    async def save(self, account):
        if not self.raced:
            self.raced = True
            await super().save(
                make_account(
                    account.email,
                    nickname="winner",
                    provider_subject_id=account.provider_subject_id,
                )
            )
            raise ConflictError("Account", "email", account.email)
        return await super().save(account)


class TestReconcileRace:
    """Tests for concurrent first logins."""

    @pytest.mark.asyncio
    async def test_conflict_retries_and_updates_winner(self):
        """A lost create race should fall back to updating the winner's row."""
        # Arrange
        repo = _RacingAccountRepository()
        service = IdentityReconciliationService(account_repository=repo)

        # Act
        account = await service.reconcile(
            email="race@example.com",
            display_name="Racer",
            avatar_url=None,
            provider=AuthProvider.GOOGLE,
            provider_subject_id="sub-race",
        )

        # Assert
        assert repo.raced is True
        assert account.nickname == "winner"
        assert account.display_name == "Racer"
        assert await repo.find_by_email("race@example.com") == account
