"""Domain layer DI providers."""

from types import MappingProxyType

from dishka import Scope, provide

from tbn.adapter.tbn.client import TbnPageClient
from tbn.adapter.tbn.parser import parse_broadcast_page
from tbn.config import AuthSettings, BroadcastSettings
from tbn.domain.repository import (
    AccountRepository,
    CommentRepository,
    WithdrawalRecordRepository,
)
from tbn.domain.service import (
    AccountLifecycleService,
    AccountService,
    AuthService,
    BroadcastService,
    CommentService,
    IdentityReconciliationService,
    IdentityVerifier,
    JWTService,
    PasswordService,
)
from tbn.domain.value import AuthProvider
from tbn.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    Stateless services without repositories live for the whole app.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, verifiers: dict[AuthProvider, IdentityVerifier]
    ) -> AuthService:
        """Provide multi-provider authentication domain service.

        Args:
            verifiers: Dictionary mapping providers to their identity verifiers

        Returns:
            AuthService configured with all available verifiers
        """
        return AuthService(verifiers=verifiers)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_password_service(self) -> PasswordService:
        """Provide argon2id password hashing service."""
        return PasswordService()

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        password_service: PasswordService,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository,
            password_service=password_service,
        )

    @provide
    def get_identity_service(
        self, account_repository: AccountRepository
    ) -> IdentityReconciliationService:
        """Provide identity reconciliation domain service."""
        return IdentityReconciliationService(account_repository=account_repository)

    @provide
    def get_lifecycle_service(
        self,
        account_repository: AccountRepository,
        withdrawal_repository: WithdrawalRecordRepository,
    ) -> AccountLifecycleService:
        """Provide account lifecycle domain service."""
        return AccountLifecycleService(
            account_repository=account_repository,
            withdrawal_repository=withdrawal_repository,
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide(scope=Scope.APP)
    def get_broadcast_service(
        self, page_client: TbnPageClient, broadcast_settings: BroadcastSettings
    ) -> BroadcastService:
        """Provide broadcast lookup service with a read-only region table."""
        return BroadcastService(
            page_client=page_client,
            parser=parse_broadcast_page,
            regions=MappingProxyType(dict(broadcast_settings.regions)),
        )
