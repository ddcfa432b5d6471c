"""Blog comment counter synchronization."""

import logfire

from qalam.domain.repository import BlogRepository
from qalam.domain.value import BlogId, CommentStatus

from .base import Service


class CommentCounterService(Service):
    """Keeps Blog.comment_count equal to the blog's approved comment count.

    Called by the comment services at every status change, creation and
    deletion. None stands for "no row": previous=None on create, new=None
    on delete.
    """

    def __init__(self, blog_repository: BlogRepository) -> None:
        """Initialize counter service.

        Args:
            blog_repository: Blog repository
        """
        self.blog_repository = blog_repository

    async def sync_on_transition(
        self,
        blog_id: BlogId,
        previous: CommentStatus | None,
        new: CommentStatus | None,
    ) -> int:
        """Apply the counter change for one comment transition.

        Args:
            blog_id: Blog the comment belongs to
            previous: Status before the change (None if the comment is new)
            new: Status after the change (None if the comment was deleted)

        Returns:
            Delta applied to the counter: 1, -1 or 0
        """
        was_approved = previous == CommentStatus.APPROVED
        is_approved = new == CommentStatus.APPROVED

        if is_approved and not was_approved:
            await self.blog_repository.increment_comment_count(blog_id)
            logfire.info(
                "Blog comment count incremented",
                blog_id=str(blog_id),
                previous=previous.value if previous else None,
            )
            return 1

        if was_approved and not is_approved:
            await self.blog_repository.decrement_comment_count(blog_id)
            logfire.info(
                "Blog comment count decremented",
                blog_id=str(blog_id),
                new=new.value if new else None,
            )
            return -1

        return 0
