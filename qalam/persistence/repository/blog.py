"""PostgreSQL implementation of Blog repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qalam.domain.model import Blog
from qalam.domain.repository import BlogRepository
from qalam.domain.value import BlogId
from qalam.persistence.mappers import blog_to_dict, row_to_blog
from qalam.persistence.tables import blogs_table


class PostgresBlogRepository(BlogRepository):
    """PostgreSQL implementation of BlogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        stmt = select(blogs_table).where(blogs_table.c.id == blog_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update).

        comment_count is written only on insert; afterwards it is owned by
        the atomic increment/decrement statements.
        """
        data = blog_to_dict(blog)
        stmt = (
            insert(blogs_table)
            .values(**data)
            .on_conflict_do_update(
                index_elements=[blogs_table.c.id],
                set_={"title": data["title"]},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(blog.id) or blog

    async def increment_comment_count(self, blog_id: BlogId) -> None:
        """Atomically increment comment_count by 1."""
        stmt = (
            blogs_table.update()
            .where(blogs_table.c.id == blog_id)
            .values(comment_count=blogs_table.c.comment_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_comment_count(self, blog_id: BlogId) -> None:
        """Atomically decrement comment_count by 1 (minimum 0)."""
        stmt = (
            blogs_table.update()
            .where(blogs_table.c.id == blog_id)
            .where(blogs_table.c.comment_count > 0)  # Don't go below 0
            .values(comment_count=blogs_table.c.comment_count - 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
