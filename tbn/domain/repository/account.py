"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tbn.domain.model.account import Account
from tbn.domain.value import AccountId, AuthProvider


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Uniqueness of email and username holds among non-deleted accounts only;
    the provider identity pair is unique across all accounts.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID, deleted or not.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(
        self, email: str, include_deleted: bool = False
    ) -> Optional[Account]:
        """Find an account by email.

        With ``include_deleted`` the active account is still preferred;
        otherwise the most recently deleted one is returned.

        Args:
            email: The account's email address
            include_deleted: Whether deleted accounts may be returned

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Account]:
        """Find an active account by its local login name."""
        pass

    @abstractmethod
    async def find_by_provider_identity(
        self, provider: AuthProvider, provider_subject_id: str
    ) -> Optional[Account]:
        """Find an account, deleted or not, by its federated identity.

        Args:
            provider: The identity provider
            provider_subject_id: The subject ID on that provider

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email_and_provider(
        self, email: str, provider: AuthProvider
    ) -> Optional[Account]:
        """Find an account by email and provider.

        The active account is preferred; otherwise the most recently
        deleted one is returned.
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether an active account uses this email."""
        pass

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Check whether an active account uses this username."""
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            ConflictError: If a uniqueness rule would be violated
        """
        pass
