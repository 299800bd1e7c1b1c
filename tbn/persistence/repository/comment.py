"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tbn.domain.model import Comment
from tbn.domain.repository import CommentRepository
from tbn.domain.value import AccountId, CommentId
from tbn.persistence.mappers import comment_to_dict, row_to_comment
from tbn.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

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
        stmt = select(comments_table).where(
            comments_table.c.region_code == region_code
        )
        if not include_hidden:
            stmt = stmt.where(comments_table.c.visible.is_(True))
        stmt = (
            stmt.order_by(comments_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)

        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return comment

    async def hide_all_by_author(self, author_id: AccountId) -> int:
        """Hide every visible comment of an author in one statement."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.author_id == author_id)
            .where(comments_table.c.visible.is_(True))
            .values(visible=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
