"""Region comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from tbn.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from tbn.domain.error import NotFoundError
from tbn.domain.service import JWTService
from tbn.interface.api.dependencies import get_bearer_token

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    text: str = Field(min_length=1, max_length=1000)


@router.get("/{region_code}", response_model=ListCommentsResponse)
async def list_comments(
    region_code: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListCommentsResponse:
    """List visible comments for a region, newest first."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(region_code=region_code, limit=limit, offset=offset)
    )


@router.post(
    "/{region_code}",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    region_code: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str = Depends(get_bearer_token),
) -> CommentResponse:
    """Comment on a region's broadcast.

    Requires authentication.
    """
    email = jwt_service.get_subject_from_token(token)
    if not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to create comments",
        )

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                region_code=region_code, author_email=email, text=request.text
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment creation failed - account not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
