"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from tbn.domain.model import Account, Comment
from tbn.domain.repository import CommentRepository
from tbn.domain.value import AccountId, CommentId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, region_code: str, author: Account, text: str
    ) -> Comment:
        """Create a comment on a region's page.

        Args:
            region_code: TBN area code
            author: Active account writing the comment
            text: Comment text

        Returns:
            Created comment

        Raises:
            ValueError: If the author has been withdrawn
        """
        with logfire.span(
            "comment_service.create_comment",
            region_code=region_code,
            author_id=str(author.id),
        ):
            if author.deleted:
                logfire.error(
                    "Withdrawn account tried to comment", author_id=str(author.id)
                )
                raise ValueError("Withdrawn accounts cannot comment")

            comment = Comment(
                id=CommentId(uuid4()),
                region_code=region_code,
                author_id=author.id,
                author_nickname=author.nickname or author.email,
                text=text,
                visible=True,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def list_comments(
        self, region_code: str, limit: int = 50, offset: int = 0
    ) -> list[Comment]:
        """List visible comments for a region, newest first."""
        with logfire.span(
            "comment_service.list_comments",
            region_code=region_code,
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_by_region(
                region_code, include_hidden=False, limit=limit, offset=offset
            )
            logfire.info("Comments listed", count=len(comments))
            return comments

    async def hide_all_by_author(self, author_id: AccountId) -> int:
        """Hide every comment written by an author.

        Args:
            author_id: Author's account ID

        Returns:
            Number of comments hidden
        """
        with logfire.span(
            "comment_service.hide_all_by_author", author_id=str(author_id)
        ):
            count = await self.comment_repository.hide_all_by_author(author_id)
            logfire.info("Comments hidden", author_id=str(author_id), count=count)
            return count
