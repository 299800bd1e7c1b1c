"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status

from tbn.adapter.error import ProviderError
from tbn.application.usecase.account import AccountProfileResponse
from tbn.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    GoogleLoginRequest,
    GoogleLoginUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from tbn.domain.error import AuthenticationError, ConflictError, NotFoundError
from tbn.interface.api.dependencies import get_bearer_token
from tbn.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Log in with username and password.

    Example:
        POST /api/auth/login
        {"username": "listener1", "password": "..."}

        Response:
        {
            "token": "eyJhbGciOi...",
            "email": "listener1@example.com",
            "nickname": "listener1",
            "message": "Login successful"
        }
    """
    try:
        return await login_use_case.execute(request)
    except NotFoundError:
        logger.info(f"Login for unknown username {request.username}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create a local account.

    Raises:
        HTTPException: 409 if the username or email is already in use
    """
    try:
        return await register_use_case.execute(request)
    except ConflictError as e:
        logger.info(f"Registration rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.post("/google", response_model=LoginResponse)
async def google_login(
    request: GoogleLoginRequest,
    google_login_use_case: FromDishka[GoogleLoginUseCase],
) -> LoginResponse:
    """Log in with a Google ID token obtained by the mobile client.

    Creates the account on first login and restores a withdrawn one.

    Example:
        POST /api/auth/google
        {"id_token": "eyJhbGciOiJSUzI1NiIs..."}
    """
    try:
        return await google_login_use_case.execute(request)
    except ProviderError as e:
        logger.warning(f"Google login rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except ConflictError as e:
        logger.error(f"Google login conflict: {e}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.get("/me", response_model=AccountProfileResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str = Depends(get_bearer_token),
) -> AccountProfileResponse:
    """Get the account behind the bearer token."""
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
