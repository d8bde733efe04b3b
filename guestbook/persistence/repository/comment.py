"""PostgreSQL implementation of Comment repository."""

from typing import Any, Dict, List, Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from guestbook.domain.model import Comment
from guestbook.domain.repository import CommentRepository
from guestbook.domain.value import CommentId
from guestbook.persistence.error import storage_errors
from guestbook.persistence.mappers import comment_to_dict, row_to_comment
from guestbook.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Every write is a single statement committed before the method returns.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self) -> List[Comment]:
        """Find all comments, newest first."""
        stmt = select(comments_table).order_by(desc(comments_table.c.created_at))
        with storage_errors("find_all comments"):
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def create_one(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        with storage_errors("create_one comment"):
            await self.session.execute(stmt)
            await self.session.commit()
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        with storage_errors("find_by_id comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def update_by_id(
        self,
        comment_id: CommentId,
        name: Optional[str] = None,
        message: Optional[str] = None,
    ) -> Optional[Comment]:
        """Update name and/or message in a single statement."""
        values: Dict[str, Any] = {}
        if name is not None:
            values["name"] = name
        if message is not None:
            values["message"] = message
        if not values:
            return await self.find_by_id(comment_id)

        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(**values)
            .returning(comments_table)
        )
        with storage_errors("update_by_id comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.commit()
        return row_to_comment(row._asdict()) if row else None

    async def delete_by_id(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        stmt = (
            comments_table.delete()
            .where(comments_table.c.id == comment_id)
            .returning(comments_table.c.id)
        )
        with storage_errors("delete_by_id comment"):
            result = await self.session.execute(stmt)
            deleted = result.fetchone() is not None
            await self.session.commit()
        return deleted

    async def increment_likes(self, comment_id: CommentId) -> Optional[int]:
        """Atomically increment likes by 1."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(likes=func.coalesce(comments_table.c.likes, 0) + 1)
            .returning(comments_table.c.likes)
        )
        with storage_errors("increment_likes comment"):
            result = await self.session.execute(stmt)
            likes = result.scalar_one_or_none()
            await self.session.commit()
        return likes

    async def count(self) -> int:
        """Count stored comments."""
        stmt = select(func.count()).select_from(comments_table)
        with storage_errors("count comments"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0
