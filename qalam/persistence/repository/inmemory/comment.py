"""In-memory comment repository for testing."""

from collections import Counter
from datetime import date, datetime
from typing import Optional, Sequence

from qalam.domain.model.comment import Comment
from qalam.domain.repository.comment import CommentFilter, CommentRepository
from qalam.domain.value import BlogId, CommentId, CommentStatus, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def snapshot(self) -> dict[CommentId, Comment]:
        """Copy of the stored state."""
        return dict(self._comments)

    def restore(self, state: dict[CommentId, Comment]) -> None:
        """Replace the stored state with a snapshot."""
        self._comments = dict(state)

    def _matching(self, filters: CommentFilter) -> list[Comment]:
        comments = list(self._comments.values())
        if filters.status is not None:
            comments = [c for c in comments if c.status == filters.status]
        if filters.blog_id is not None:
            comments = [c for c in comments if c.blog_id == filters.blog_id]
        if filters.is_read is not None:
            comments = [c for c in comments if c.is_read == filters.is_read]
        if filters.search:
            needle = filters.search.lower()
            comments = [c for c in comments if needle in c.content.lower()]
        return comments

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(
        self, comment_ids: Sequence[CommentId], for_update: bool = False
    ) -> list[Comment]:
        """Find all existing comments among the given IDs."""
        found = [self._comments[i] for i in comment_ids if i in self._comments]
        found.sort(key=lambda c: c.created_at)
        return found

    async def find_replies_of(self, parent_id: CommentId) -> list[Comment]:
        """Find the replies of a top-level comment, oldest first."""
        replies = [c for c in self._comments.values() if c.parent_id == parent_id]
        replies.sort(key=lambda c: c.created_at)
        return replies

    async def find_replies_of_many(
        self, parent_ids: Sequence[CommentId]
    ) -> list[Comment]:
        """Find the replies of several top-level comments."""
        wanted = set(parent_ids)
        replies = [c for c in self._comments.values() if c.parent_id in wanted]
        replies.sort(key=lambda c: c.created_at)
        return replies

    async def find_approved_by_blog(self, blog_id: BlogId) -> list[Comment]:
        """Find all approved comments of a blog, oldest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.blog_id == blog_id and c.status == CommentStatus.APPROVED
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_filtered(
        self, filters: CommentFilter, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find comments matching admin filters, newest first."""
        comments = self._matching(filters)
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def count_filtered(self, filters: CommentFilter) -> int:
        """Count comments matching admin filters."""
        return len(self._matching(filters))

    async def count_by_status(self) -> dict[CommentStatus, int]:
        """Count comments per status."""
        counts = {status: 0 for status in CommentStatus}
        for comment in self._comments.values():
            counts[comment.status] += 1
        return counts

    async def count_unread(self) -> int:
        """Count comments not yet read by an admin."""
        return sum(1 for c in self._comments.values() if not c.is_read)

    async def top_blogs(self, limit: int = 5) -> list[tuple[BlogId, int]]:
        """Blogs with the most comments, most first."""
        return Counter(c.blog_id for c in self._comments.values()).most_common(limit)

    async def top_authors(self, limit: int = 5) -> list[tuple[UserId, int]]:
        """Authors with the most comments, most first."""
        return Counter(c.author_id for c in self._comments.values()).most_common(limit)

    async def count_by_day(self, since: datetime) -> list[tuple[date, int]]:
        """Number of comments created per day since a point in time."""
        days = Counter(
            c.created_at.date()
            for c in self._comments.values()
            if c.created_at >= since
        )
        return sorted(days.items())

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Delete comments, returning the ones that were present."""
        removed = []
        for comment_id in comment_ids:
            comment = self._comments.pop(comment_id, None)
            if comment:
                removed.append(comment)
        return removed

    async def mark_read_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Set is_read on comments."""
        updated = 0
        for comment_id in comment_ids:
            comment = self._comments.get(comment_id)
            if comment:
                self._comments[comment_id] = comment.model_copy(update={"is_read": True})
                updated += 1
        return updated
