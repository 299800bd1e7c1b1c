"""Google login use case."""

import logfire
from pydantic import BaseModel

from tbn.domain.service import (
    AuthService,
    IdentityReconciliationService,
    JWTService,
)
from tbn.domain.value import AuthProvider

from .login import LoginResponse


class GoogleLoginRequest(BaseModel):
    """Google login request from the mobile client."""

    id_token: str


class GoogleLoginUseCase:
    """Use case for login with a Google ID token."""

    def __init__(
        self,
        auth_service: AuthService,
        identity_service: IdentityReconciliationService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize Google login use case.

        Args:
            auth_service: Authentication domain service (handles all providers)
            identity_service: Identity reconciliation domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.identity_service = identity_service
        self.jwt_service = jwt_service

    async def execute(self, request: GoogleLoginRequest) -> LoginResponse:
        """Execute Google login flow.

        Steps:
        1. Verify the ID token with Google
        2. Find, create or restore the matching account
        3. Issue a session token bound to the account email

        Raises:
            ProviderError: If Google rejects the ID token
            ConflictError: If the identity collides with another account
        """
        assertion = await self.auth_service.verify_identity(
            AuthProvider.GOOGLE, request.id_token
        )

        with logfire.span(
            "google_login",
            email=assertion.email,
            provider_subject_id=assertion.provider_subject_id,
        ):
            account = await self.identity_service.reconcile(
                email=assertion.email,
                display_name=assertion.display_name,
                avatar_url=assertion.avatar_url,
                provider=assertion.provider,
                provider_subject_id=assertion.provider_subject_id,
            )
            token = self.jwt_service.create_token(account.email)

            return LoginResponse(
                token=token,
                email=account.email,
                nickname=account.nickname,
                message="Google login successful",
            )
