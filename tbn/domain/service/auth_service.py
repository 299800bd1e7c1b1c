"""Authentication domain service."""

from abc import ABC, abstractmethod

from tbn.domain.value import AuthProvider, IdentityAssertion

from .base import Service


class IdentityVerifier(ABC):
    """Generic verifier interface for all identity providers."""

    @abstractmethod
    async def verify(self, credential: str) -> IdentityAssertion:
        """Verify a provider credential.

        Args:
            credential: Provider-issued credential (e.g. a Google ID token)

        Returns:
            Identity asserted by the provider

        Raises:
            ProviderError: If the credential is rejected
        """
        pass


class AuthService(Service):
    """Domain service for multi-provider authentication operations."""

    def __init__(self, verifiers: dict[AuthProvider, IdentityVerifier]) -> None:
        """Initialize auth service.

        Args:
            verifiers: Map of provider to verifier implementation
        """
        self.verifiers = verifiers

    async def verify_identity(
        self, provider: AuthProvider, credential: str
    ) -> IdentityAssertion:
        """Verify a credential with the matching provider.

        Args:
            provider: Identity provider that issued the credential
            credential: Provider-issued credential

        Returns:
            Identity asserted by the provider

        Raises:
            ValueError: If provider not supported
        """
        verifier = self.verifiers.get(provider)
        if not verifier:
            raise ValueError(f"Unsupported provider: {provider}")

        return await verifier.verify(credential)
