"""Application layer DI providers."""

from dishka import Scope, provide

from tbn.application.usecase.account import (
    UpdateNicknameUseCase,
    WithdrawAccountUseCase,
)
from tbn.application.usecase.auth import (
    GetCurrentUserUseCase,
    GoogleLoginUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from tbn.application.usecase.broadcast import (
    GetBroadcastInfoUseCase,
    ListRegionsUseCase,
)
from tbn.application.usecase.comment import CreateCommentUseCase, ListCommentsUseCase
from tbn.domain.service import (
    AccountLifecycleService,
    AccountService,
    AuthService,
    BroadcastService,
    CommentService,
    IdentityReconciliationService,
    JWTService,
)
from tbn.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide local login use case."""
        return LoginUseCase(account_service=account_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, account_service: AccountService) -> RegisterUseCase:
        """Provide registration use case."""
        return RegisterUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_google_login_use_case(
        self,
        auth_service: AuthService,
        identity_service: IdentityReconciliationService,
        jwt_service: JWTService,
    ) -> GoogleLoginUseCase:
        """Provide Google login use case."""
        return GoogleLoginUseCase(
            auth_service=auth_service,
            identity_service=identity_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, account_service: AccountService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, account_service=account_service
        )

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_update_nickname_use_case(
        self, account_service: AccountService
    ) -> UpdateNicknameUseCase:
        """Provide update nickname use case."""
        return UpdateNicknameUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_withdraw_account_use_case(
        self,
        lifecycle_service: AccountLifecycleService,
        comment_service: CommentService,
    ) -> WithdrawAccountUseCase:
        """Provide withdraw account use case."""
        return WithdrawAccountUseCase(
            lifecycle_service=lifecycle_service, comment_service=comment_service
        )

    # Broadcast use cases
    @provide(scope=Scope.APP)
    def get_broadcast_info_use_case(
        self, broadcast_service: BroadcastService
    ) -> GetBroadcastInfoUseCase:
        """Provide get broadcast info use case."""
        return GetBroadcastInfoUseCase(broadcast_service=broadcast_service)

    @provide(scope=Scope.APP)
    def get_list_regions_use_case(
        self, broadcast_service: BroadcastService
    ) -> ListRegionsUseCase:
        """Provide list regions use case."""
        return ListRegionsUseCase(broadcast_service=broadcast_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, account_service: AccountService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            account_service=account_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)
