"""User account routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from tbn.application.usecase.account import (
    AccountProfileResponse,
    UpdateNicknameRequest,
    UpdateNicknameUseCase,
    WithdrawAccountRequest,
    WithdrawAccountResponse,
    WithdrawAccountUseCase,
)
from tbn.domain.error import NotFoundError, ValidationError
from tbn.domain.service import JWTService
from tbn.interface.api.dependencies import get_bearer_token
from tbn.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateNicknameAPIRequest(BaseModel):
    """API request for changing the nickname."""

    nickname: str = Field(min_length=1, max_length=50)


def _authenticated_email(jwt_service: JWTService, token: str) -> str:
    try:
        return jwt_service.extract_subject(token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


@router.patch("/me/nickname", response_model=AccountProfileResponse)
async def update_my_nickname(
    request: UpdateNicknameAPIRequest,
    update_nickname_use_case: FromDishka[UpdateNicknameUseCase],
    jwt_service: FromDishka[JWTService],
    token: str = Depends(get_bearer_token),
) -> AccountProfileResponse:
    """Change the current account's nickname.

    Example:
        PATCH /api/users/me/nickname
        Authorization: Bearer eyJhbGciOi...
        {"nickname": "새벽운전자"}
    """
    email = _authenticated_email(jwt_service, token)

    try:
        return await update_nickname_use_case.execute(
            UpdateNicknameRequest(email=email, nickname=request.nickname)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


@router.delete("/{email}", response_model=WithdrawAccountResponse)
async def withdraw_account(
    email: str,
    withdraw_account_use_case: FromDishka[WithdrawAccountUseCase],
    jwt_service: FromDishka[JWTService],
    token: str = Depends(get_bearer_token),
) -> WithdrawAccountResponse:
    """Withdraw (soft-delete) an account and hide its comments.

    Only the account owner may withdraw it.
    """
    if _authenticated_email(jwt_service, token) != email:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Cannot withdraw another user's account",
        )

    try:
        response = await withdraw_account_use_case.execute(
            WithdrawAccountRequest(email=email)
        )
        logger.info(f"Account withdrawn: {email}")
        return response
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
