"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tbn.domain.model.comment import Comment
from tbn.domain.value import AccountId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_region(
        self,
        region_code: str,
        include_hidden: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments for a region, newest first.

        Args:
            region_code: TBN area code
            include_hidden: Whether to include hidden comments
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def hide_all_by_author(self, author_id: AccountId) -> int:
        """Hide every visible comment written by an author.

        Args:
            author_id: The author's account ID

        Returns:
            Number of comments hidden
        """
        pass
