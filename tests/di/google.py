"""Mock Google providers for testing."""

from dishka import Scope, provide

from tbn.adapter.google.verifier import GoogleIdTokenVerifier, MockGoogleIdTokenVerifier
from tbn.util.di.infrastructure.google import GoogleProvider


class MockGoogleProvider(GoogleProvider):
    """Mock Google provider accepting ``mock:<sub>:<email>[:<name>]`` tokens."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_google_verifier(self) -> GoogleIdTokenVerifier:
        """Provide mock Google ID token verifier."""
        return MockGoogleIdTokenVerifier()
