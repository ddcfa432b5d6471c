"""PostgreSQL implementation of Comment repository."""

from datetime import date, datetime
from typing import List, Optional, Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qalam.domain.model import Comment
from qalam.domain.repository import CommentFilter, CommentRepository
from qalam.domain.value import BlogId, CommentId, CommentStatus, UserId
from qalam.persistence.mappers import comment_to_dict, row_to_comment
from qalam.persistence.tables import comments_table

# Columns an existing comment may change; ids, blog, parent and author are fixed
_MUTABLE_COLUMNS = ("content", "status", "is_read", "admin_note", "updated_at")


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_filters(stmt, filters: CommentFilter):
        if filters.status is not None:
            stmt = stmt.where(comments_table.c.status == filters.status.value)
        if filters.blog_id is not None:
            stmt = stmt.where(comments_table.c.blog_id == filters.blog_id)
        if filters.is_read is not None:
            stmt = stmt.where(comments_table.c.is_read == filters.is_read)
        if filters.search:
            stmt = stmt.where(comments_table.c.content.ilike(f"%{filters.search}%"))
        return stmt

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID, optionally locking the row."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(
        self, comment_ids: Sequence[CommentId], for_update: bool = False
    ) -> List[Comment]:
        """Find all existing comments among the given IDs, optionally locking them."""
        if not comment_ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.id.in_(list(comment_ids)))
            .order_by(comments_table.c.created_at)
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies_of(self, parent_id: CommentId) -> List[Comment]:
        """Find the replies of a top-level comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies_of_many(
        self, parent_ids: Sequence[CommentId]
    ) -> List[Comment]:
        """Find the replies of several top-level comments."""
        if not parent_ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(list(parent_ids)))
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_approved_by_blog(self, blog_id: BlogId) -> List[Comment]:
        """Find all approved comments of a blog, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.blog_id == blog_id)
            .where(comments_table.c.status == CommentStatus.APPROVED.value)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_filtered(
        self, filters: CommentFilter, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find comments matching admin filters, newest first."""
        stmt = self._apply_filters(select(comments_table), filters)
        stmt = (
            stmt.order_by(desc(comments_table.c.created_at)).limit(limit).offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_filtered(self, filters: CommentFilter) -> int:
        """Count comments matching admin filters."""
        stmt = self._apply_filters(
            select(func.count()).select_from(comments_table), filters
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_status(self) -> dict[CommentStatus, int]:
        """Count comments per status."""
        stmt = select(comments_table.c.status, func.count()).group_by(
            comments_table.c.status
        )
        result = await self.session.execute(stmt)
        counts = {status: 0 for status in CommentStatus}
        for status, count in result.fetchall():
            counts[CommentStatus(status)] = count
        return counts

    async def count_unread(self) -> int:
        """Count comments not yet read by an admin."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.is_read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def top_blogs(self, limit: int = 5) -> List[tuple[BlogId, int]]:
        """Blogs with the most comments, most first."""
        count = func.count(comments_table.c.id).label("comment_count")
        stmt = (
            select(comments_table.c.blog_id, count)
            .group_by(comments_table.c.blog_id)
            .order_by(desc(count))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(BlogId(row.blog_id), row.comment_count) for row in result.fetchall()]

    async def top_authors(self, limit: int = 5) -> List[tuple[UserId, int]]:
        """Authors with the most comments, most first."""
        count = func.count(comments_table.c.id).label("comment_count")
        stmt = (
            select(comments_table.c.author_id, count)
            .group_by(comments_table.c.author_id)
            .order_by(desc(count))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [
            (UserId(row.author_id), row.comment_count) for row in result.fetchall()
        ]

    async def count_by_day(self, since: datetime) -> List[tuple[date, int]]:
        """Number of comments created per day since a point in time."""
        day = func.date(comments_table.c.created_at).label("day")
        stmt = (
            select(day, func.count(comments_table.c.id).label("comment_count"))
            .where(comments_table.c.created_at >= since)
            .group_by(day)
            .order_by(day)
        )
        result = await self.session.execute(stmt)
        return [(row.day, row.comment_count) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        data = comment_to_dict(comment)
        stmt = (
            insert(comments_table)
            .values(**data)
            .on_conflict_do_update(
                index_elements=[comments_table.c.id],
                set_={column: data[column] for column in _MUTABLE_COLUMNS},
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Hard delete comments, returning the rows actually removed."""
        if not comment_ids:
            return []
        stmt = (
            comments_table.delete()
            .where(comments_table.c.id.in_(list(comment_ids)))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        removed = [row_to_comment(row._asdict()) for row in result.fetchall()]
        await self.session.flush()
        return removed

    async def mark_read_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Set is_read on comments in one batch."""
        if not comment_ids:
            return 0
        stmt = (
            comments_table.update()
            .where(comments_table.c.id.in_(list(comment_ids)))
            .values(is_read=True)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        updated = len(result.fetchall())
        await self.session.flush()
        return updated
