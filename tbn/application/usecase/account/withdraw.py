"""Withdraw account use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from tbn.domain.service import AccountLifecycleService, CommentService


class WithdrawAccountRequest(BaseModel):
    """Withdraw account request."""

    email: str


class WithdrawAccountResponse(BaseModel):
    """Withdraw account response."""

    email: str
    withdrawn_at: datetime
    hidden_comments: int
    message: str


class WithdrawAccountUseCase:
    """Use case for withdrawing an account.

    Soft-deletes the account, archives its identity and hides its comments.
    All writes go through the request's database session, so a failure in
    any step rolls back the others.
    """

    def __init__(
        self,
        lifecycle_service: AccountLifecycleService,
        comment_service: CommentService,
    ) -> None:
        """Initialize withdraw account use case.

        Args:
            lifecycle_service: Account lifecycle domain service
            comment_service: Comment domain service
        """
        self.lifecycle_service = lifecycle_service
        self.comment_service = comment_service

    async def execute(self, request: WithdrawAccountRequest) -> WithdrawAccountResponse:
        """Execute withdrawal flow.

        Steps:
        1. Soft-delete the active account and append a withdrawal record
        2. Hide all comments written by the account

        Raises:
            NotFoundError: If no active account uses the email
        """
        with logfire.span("withdraw_account", email=request.email):
            account = await self.lifecycle_service.soft_delete(request.email)
            hidden = await self.comment_service.hide_all_by_author(account.id)

            return WithdrawAccountResponse(
                email=account.email,
                withdrawn_at=account.deleted_at,
                hidden_comments=hidden,
                message="Account withdrawn",
            )
