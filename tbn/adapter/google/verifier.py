"""Google ID token verification.

The mobile client signs in with Google and posts the resulting ID token;
we check its signature, expiry and issuer against Google's public certs and
its audience against the configured OAuth client IDs.
"""

import asyncio
from contextlib import contextmanager
from threading import RLock
from typing import Iterator

import cachecontrol
import google.auth.exceptions
import google.auth.transport.requests
import google.oauth2.id_token
import logfire
import requests

from tbn.adapter.error import ProviderError
from tbn.domain.service.auth_service import IdentityVerifier
from tbn.domain.value import AuthProvider, IdentityAssertion


class GoogleTokenError(ProviderError):
    """Google ID token was rejected."""

    pass


class GoogleIdTokenVerifier(IdentityVerifier):
    """Base class for Google ID token verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleIdTokenVerifier(GoogleIdTokenVerifier):
    """Verifies ID tokens with google-auth.

    google-auth is synchronous, so verification runs in a worker thread.
    Google's certs are cached by a shared HTTP session.
    """

    def __init__(self, client_ids: list[str]) -> None:
        """Initialize verifier.

        Args:
            client_ids: Accepted audiences; empty accepts any audience
        """
        self.client_ids = list(client_ids)
        self._session: requests.Session | None = None
        self._lock = RLock()

    @contextmanager
    def _locked_session(self) -> Iterator[requests.Session]:
        """Get a session with caching of certs from Google."""
        with self._lock:
            if self._session is None:
                self._session = cachecontrol.CacheControl(requests.session())
            yield self._session

    def _verify_sync(self, token: str) -> dict:
        with self._locked_session() as session:
            request = google.auth.transport.requests.Request(session=session)
            return google.oauth2.id_token.verify_oauth2_token(token, request, None)

    async def verify(self, credential: str) -> IdentityAssertion:
        """Verify a Google ID token.

        Args:
            credential: Google ID token (JWT)

        Returns:
            Identity asserted by Google

        Raises:
            GoogleTokenError: If the token is invalid, expired, issued for
                another client, carries no verified email, or Google could not
                be reached
        """
        with logfire.span("google_verifier.verify"):
            try:
                idinfo = await asyncio.to_thread(self._verify_sync, credential)
            except (ValueError, google.auth.exceptions.GoogleAuthError) as e:
                logfire.warn("Google ID token rejected", error=str(e))
                raise GoogleTokenError(f"Invalid Google ID token: {e}")

            if self.client_ids and idinfo.get("aud") not in self.client_ids:
                logfire.warn("Google ID token audience mismatch", aud=idinfo.get("aud"))
                raise GoogleTokenError("Google ID token issued for another client")

            email = idinfo.get("email")
            if not email:
                raise GoogleTokenError("Google ID token carries no email")

            if not idinfo.get("email_verified"):
                logfire.warn("Google email not verified", sub=idinfo["sub"])
                raise GoogleTokenError("Google account email is not verified")

            logfire.info("Google ID token verified", sub=idinfo["sub"])

            return IdentityAssertion(
                provider=AuthProvider.GOOGLE,
                provider_subject_id=idinfo["sub"],
                email=email,
                display_name=idinfo.get("name"),
                avatar_url=idinfo.get("picture"),
                email_verified=True,
            )


class MockGoogleIdTokenVerifier(GoogleIdTokenVerifier):
    """Mock verifier for testing.

    Accepts tokens of the form ``mock:<sub>:<email>[:<name>]`` and rejects
    anything else, without calling Google.
    """

    def __init__(self):
        """Initialize mock verifier without real configuration."""
        pass

    async def verify(self, credential: str) -> IdentityAssertion:
        parts = credential.split(":")
        if len(parts) < 3 or parts[0] != "mock":
            raise GoogleTokenError("Invalid Google ID token: not a mock token")

        return IdentityAssertion(
            provider=AuthProvider.GOOGLE,
            provider_subject_id=parts[1],
            email=parts[2],
            display_name=parts[3] if len(parts) > 3 else None,
            avatar_url="https://example.com/avatar.jpg",
            email_verified=True,
        )
