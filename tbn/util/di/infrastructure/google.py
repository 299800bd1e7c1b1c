"""Google identity infrastructure providers."""

from dishka import Scope, provide

from tbn.adapter.google.verifier import GoogleIdTokenVerifier, RealGoogleIdTokenVerifier
from tbn.config import Settings
from tbn.util.di.base import ProviderBase


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_verifier(self, settings: Settings) -> GoogleIdTokenVerifier:
        """Provide Google ID token verifier.

        Raises:
            ValueError: If no client IDs are configured outside development
        """
        if not settings.auth.google_client_ids and settings.environment in (
            "staging",
            "production",
        ):
            raise ValueError("Google OAuth client IDs must be configured")

        return RealGoogleIdTokenVerifier(client_ids=settings.auth.google_client_ids)
