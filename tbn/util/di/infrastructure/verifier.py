"""Identity verifier provider for multi-provider authentication."""

from dishka import Scope, provide

from tbn.adapter.google.verifier import GoogleIdTokenVerifier
from tbn.domain.service.auth_service import IdentityVerifier
from tbn.domain.value import AuthProvider
from tbn.util.di.base import ProviderBase


class VerifierAggregatorProvider(ProviderBase):
    """Provider that aggregates all identity verifiers into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_verifiers(
        self, google_verifier: GoogleIdTokenVerifier
    ) -> dict[AuthProvider, IdentityVerifier]:
        """Provide dictionary of all identity verifiers by provider.

        Args:
            google_verifier: Google ID token verifier (specific type)

        Returns:
            Dictionary mapping AuthProvider to IdentityVerifier
        """
        return {AuthProvider.GOOGLE: google_verifier}
