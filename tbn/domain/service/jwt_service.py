"""JWT token domain service."""

import logfire

from tbn.config import AuthSettings
from tbn.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, subject: str) -> str:
        """Create a session token bound to an account email.

        Args:
            subject: Account email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", subject=subject):
            token = create_token(subject, self.auth_settings)
            logfire.info("JWT token created", subject=subject)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", subject=payload.sub)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def extract_subject(self, token: str) -> str:
        """Return the subject of a valid token.

        Raises:
            JWTError: If token is invalid or expired
        """
        return self.verify_token(token).sub

    def get_subject_from_token(self, token: str | None) -> str | None:
        """Extract the subject without raising exceptions.

        For routes that authenticate optionally.

        Args:
            token: JWT token string (optional)

        Returns:
            Subject if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.extract_subject(token)
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
