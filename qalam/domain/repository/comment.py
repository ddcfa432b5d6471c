"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List, Optional, Sequence

from qalam.domain.model.comment import Comment
from qalam.domain.value import BlogId, CommentId, CommentStatus, UserId
from qalam.domain.value.common import ValueObject


class CommentFilter(ValueObject):
    """Filters for the admin comment listing. None means no filter."""

    status: Optional[CommentStatus] = None
    blog_id: Optional[BlogId] = None
    is_read: Optional[bool] = None
    search: Optional[str] = None  # Case-insensitive substring of content


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self, comment_ids: Sequence[CommentId], for_update: bool = False
    ) -> List[Comment]:
        """Find all existing comments among the given IDs.

        Unknown IDs are ignored.

        Args:
            comment_ids: Comment IDs to load
            for_update: Lock the rows until the current transaction ends

        Returns:
            Comments that exist
        """
        pass

    @abstractmethod
    async def find_replies_of(self, parent_id: CommentId) -> List[Comment]:
        """Find the replies of a top-level comment, oldest first.

        Args:
            parent_id: The top-level comment ID

        Returns:
            List of replies
        """
        pass

    @abstractmethod
    async def find_replies_of_many(
        self, parent_ids: Sequence[CommentId]
    ) -> List[Comment]:
        """Find the replies of several top-level comments.

        Args:
            parent_ids: Top-level comment IDs

        Returns:
            List of replies across all parents
        """
        pass

    @abstractmethod
    async def find_approved_by_blog(self, blog_id: BlogId) -> List[Comment]:
        """Find all approved comments (top-level and replies) of a blog.

        Args:
            blog_id: The blog ID

        Returns:
            Approved comments, oldest first
        """
        pass

    @abstractmethod
    async def find_filtered(
        self, filters: CommentFilter, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find comments matching admin filters, newest first.

        Args:
            filters: Listing filters
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Matching comments
        """
        pass

    @abstractmethod
    async def count_filtered(self, filters: CommentFilter) -> int:
        """Count comments matching admin filters.

        Args:
            filters: Listing filters

        Returns:
            Number of matching comments
        """
        pass

    @abstractmethod
    async def count_by_status(self) -> dict[CommentStatus, int]:
        """Count comments per status. Statuses with no comments map to 0."""
        pass

    @abstractmethod
    async def count_unread(self) -> int:
        """Count comments not yet read by an admin."""
        pass

    @abstractmethod
    async def top_blogs(self, limit: int = 5) -> List[tuple[BlogId, int]]:
        """Blogs with the most comments (any status), most first."""
        pass

    @abstractmethod
    async def top_authors(self, limit: int = 5) -> List[tuple[UserId, int]]:
        """Authors with the most comments (any status), most first."""
        pass

    @abstractmethod
    async def count_by_day(self, since: datetime) -> List[tuple[date, int]]:
        """Number of comments created per day since a point in time.

        Args:
            since: Lower bound on created_at (inclusive)

        Returns:
            (day, count) pairs in ascending day order, days without comments omitted
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
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Hard delete comments in one batch.

        Args:
            comment_ids: Comment IDs to delete

        Returns:
            The comments this call actually removed, as they were before
            deletion. Rows already gone are not returned.
        """
        pass

    @abstractmethod
    async def mark_read_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Set is_read on comments in one batch.

        Args:
            comment_ids: Comment IDs to update

        Returns:
            Number of comments updated
        """
        pass
