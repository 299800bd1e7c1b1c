"""Account use cases."""

from .profile import AccountProfileResponse
from .update_nickname import UpdateNicknameRequest, UpdateNicknameUseCase
from .withdraw import (
    WithdrawAccountRequest,
    WithdrawAccountResponse,
    WithdrawAccountUseCase,
)

__all__ = [
    "AccountProfileResponse",
    "UpdateNicknameRequest",
    "UpdateNicknameUseCase",
    "WithdrawAccountRequest",
    "WithdrawAccountResponse",
    "WithdrawAccountUseCase",
]
