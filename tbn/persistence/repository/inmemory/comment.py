"""In-memory comment repository for testing."""

from typing import List, Optional

from tbn.domain.model.comment import Comment
from tbn.domain.repository.comment import CommentRepository
from tbn.domain.value import AccountId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_region(
        self,
        region_code: str,
        include_hidden: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments for a region, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.region_code == region_code and (include_hidden or c.visible)
        ]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def hide_all_by_author(self, author_id: AccountId) -> int:
        """Hide every visible comment of an author."""
        hidden = 0
        for comment_id, comment in list(self._comments.items()):
            if comment.author_id == author_id and comment.visible:
                self._comments[comment_id] = comment.model_copy(
                    update={"visible": False}
                )
                hidden += 1
        return hidden
