"""List comments use case."""

from pydantic import BaseModel, Field

from tbn.domain.service import CommentService

from .create_comment import CommentResponse


class ListCommentsRequest(BaseModel):
    """List comments request."""

    region_code: str
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentResponse]


class ListCommentsUseCase:
    """Use case for listing visible comments of a region."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        comments = await self.comment_service.list_comments(
            request.region_code, limit=request.limit, offset=request.offset
        )
        return ListCommentsResponse(
            comments=[CommentResponse.from_comment(c) for c in comments]
        )
