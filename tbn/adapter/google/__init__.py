"""Google identity adapter."""

from .verifier import (
    GoogleIdTokenVerifier,
    GoogleTokenError,
    MockGoogleIdTokenVerifier,
    RealGoogleIdTokenVerifier,
)

__all__ = [
    "GoogleIdTokenVerifier",
    "GoogleTokenError",
    "MockGoogleIdTokenVerifier",
    "RealGoogleIdTokenVerifier",
]
