"""Read-side comment queries for blog pages and the admin dashboard."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

import logfire

from qalam.domain.error import NotFoundError
from qalam.domain.model.comment import Comment
from qalam.domain.repository import BlogRepository, CommentFilter, CommentRepository
from qalam.domain.value import BlogId, CommentId, CommentStatus, UserId

from .base import Service


@dataclass
class CommentThread:
    """A top-level comment with its replies."""

    comment: Comment
    replies: list[Comment] = field(default_factory=list)


@dataclass
class CommentCounts:
    """Comment totals per status, plus unread."""

    pending: int
    approved: int
    rejected: int
    spam: int
    unread: int

    @property
    def total(self) -> int:
        return self.pending + self.approved + self.rejected + self.spam


@dataclass
class CommentStats:
    """Moderation dashboard statistics."""

    counts: CommentCounts
    approval_rate: float
    top_blogs: list[tuple[BlogId, int]]
    top_authors: list[tuple[UserId, int]]
    by_day: list[tuple[date, int]]


class CommentQueryService(Service):
    """Domain service for comment reads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
    ) -> None:
        """Initialize comment query service.

        Args:
            comment_repository: Comment repository
            blog_repository: Blog repository
        """
        self.comment_repository = comment_repository
        self.blog_repository = blog_repository

    async def get_blog_thread(self, blog_id: BlogId) -> list[CommentThread]:
        """Get the public comment thread of a blog.

        Only approved comments are visible. Top-level comments come newest
        first; replies under each come oldest first.

        Args:
            blog_id: Blog ID

        Returns:
            Threads of approved comments

        Raises:
            NotFoundError: If the blog does not exist
        """
        with logfire.span("comment_query_service.get_blog_thread", blog_id=str(blog_id)):
            blog = await self.blog_repository.find_by_id(blog_id)
            if not blog:
                raise NotFoundError("Blog", str(blog_id))

            approved = await self.comment_repository.find_approved_by_blog(blog_id)

            replies: dict[CommentId, list[Comment]] = {}
            top_level: list[Comment] = []
            for comment in approved:
                if comment.parent_id:
                    replies.setdefault(comment.parent_id, []).append(comment)
                else:
                    top_level.append(comment)

            top_level.sort(key=lambda c: c.created_at, reverse=True)
            threads = [CommentThread(c, replies.get(c.id, [])) for c in top_level]

            logfire.info(
                "Blog comments retrieved",
                blog_id=str(blog_id),
                threads=len(threads),
                total=len(approved),
            )
            return threads

    async def list_comments(
        self, filters: CommentFilter, limit: int = 10, offset: int = 0
    ) -> tuple[list[Comment], int]:
        """List comments for moderation, newest first.

        Args:
            filters: Status, blog, read flag and content search filters
            limit: Page size
            offset: Number of comments to skip

        Returns:
            The page of comments and the total number of matches
        """
        with logfire.span(
            "comment_query_service.list_comments",
            status=filters.status.value if filters.status else None,
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_filtered(
                filters, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_filtered(filters)
            return comments, total

    async def count_by_status(self) -> CommentCounts:
        """Count comments per status and unread comments."""
        with logfire.span("comment_query_service.count_by_status"):
            by_status = await self.comment_repository.count_by_status()
            unread = await self.comment_repository.count_unread()
            return CommentCounts(
                pending=by_status.get(CommentStatus.PENDING, 0),
                approved=by_status.get(CommentStatus.APPROVED, 0),
                rejected=by_status.get(CommentStatus.REJECTED, 0),
                spam=by_status.get(CommentStatus.SPAM, 0),
                unread=unread,
            )

    async def get_stats(self, days: int = 7, top: int = 5) -> CommentStats:
        """Collect dashboard statistics.

        Args:
            days: Window for the per-day breakdown
            top: Number of blogs and authors to rank

        Returns:
            Comment statistics
        """
        with logfire.span("comment_query_service.get_stats", days=days, top=top):
            counts = await self.count_by_status()
            approval_rate = (
                round(counts.approved / counts.total * 100, 2) if counts.total else 0.0
            )
            since = datetime.now() - timedelta(days=days)

            return CommentStats(
                counts=counts,
                approval_rate=approval_rate,
                top_blogs=await self.comment_repository.top_blogs(limit=top),
                top_authors=await self.comment_repository.top_authors(limit=top),
                by_day=await self.comment_repository.count_by_day(since),
            )
