"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from tbn.domain.model import Comment
from tbn.domain.service import AccountService, CommentService


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    region_code: str
    author_email: str  # From authenticated token
    text: str = Field(min_length=1, max_length=1000)


class CommentResponse(BaseModel):
    """Comment as shown to listeners."""

    comment_id: str
    region_code: str
    author_nickname: str
    text: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            region_code=comment.region_code,
            author_nickname=comment.author_nickname,
            text=comment.text,
            created_at=comment.created_at,
        )


class CreateCommentUseCase:
    """Use case for commenting on a region's broadcast."""

    def __init__(
        self,
        account_service: AccountService,
        comment_service: CommentService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            account_service: Account domain service
            comment_service: Comment domain service
        """
        self.account_service = account_service
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the author has no active account
        """
        author = await self.account_service.get_by_email(request.author_email)
        comment = await self.comment_service.create_comment(
            region_code=request.region_code,
            author=author,
            text=request.text,
        )
        return CommentResponse.from_comment(comment)
