"""Blog repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qalam.domain.model.blog import Blog
from qalam.domain.value import BlogId


class BlogRepository(ABC):
    """Repository for the parts of Blog that moderation touches."""

    @abstractmethod
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID.

        Args:
            blog_id: The blog's unique identifier

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update).

        Args:
            blog: The blog to save

        Returns:
            The saved blog
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, blog_id: BlogId) -> None:
        """Atomically increment the approved comment count by 1.

        Args:
            blog_id: The blog's unique identifier
        """
        pass

    @abstractmethod
    async def decrement_comment_count(self, blog_id: BlogId) -> None:
        """Atomically decrement the approved comment count by 1 (minimum 0).

        Args:
            blog_id: The blog's unique identifier
        """
        pass
