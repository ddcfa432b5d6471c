"""In-memory blog repository for testing."""

from typing import Optional

from qalam.domain.model.blog import Blog
from qalam.domain.repository.blog import BlogRepository
from qalam.domain.value import BlogId


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing."""

    def __init__(self) -> None:
        self._blogs: dict[BlogId, Blog] = {}

    def snapshot(self) -> dict[BlogId, Blog]:
        """Copy of the stored state."""
        return dict(self._blogs)

    def restore(self, state: dict[BlogId, Blog]) -> None:
        """Replace the stored state with a snapshot."""
        self._blogs = dict(state)

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        return self._blogs.get(blog_id)

    async def save(self, blog: Blog) -> Blog:
        """Save or update a blog."""
        self._blogs[blog.id] = blog
        return blog

    async def increment_comment_count(self, blog_id: BlogId) -> None:
        """Increment comment_count by 1."""
        blog = self._blogs.get(blog_id)
        if blog:
            self._blogs[blog_id] = blog.model_copy(
                update={"comment_count": blog.comment_count + 1}
            )

    async def decrement_comment_count(self, blog_id: BlogId) -> None:
        """Decrement comment_count by 1 (minimum 0)."""
        blog = self._blogs.get(blog_id)
        if blog and blog.comment_count > 0:
            self._blogs[blog_id] = blog.model_copy(
                update={"comment_count": blog.comment_count - 1}
            )
