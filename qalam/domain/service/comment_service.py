"""Comment domain service.

Owns the comment lifecycle: creation and replies with automatic status
assignment, author edits, admin moderation, deletion with reply cascade.
Every status change is routed through the counter service so the blog's
approved comment count never drifts.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from qalam.domain.error import AuthorizationError, NotFoundError, ValidationError
from qalam.domain.model.comment import MAX_CONTENT_LENGTH, Comment
from qalam.domain.repository import BlogRepository, CommentRepository
from qalam.domain.value import (
    MODERATION_STATUSES,
    Actor,
    BlogId,
    CommentId,
    CommentStatus,
    UserId,
)

from .base import Service
from .content_filter import ContentFilter
from .counter_service import CommentCounterService
from .trust_service import TrustService


class CommentService(Service):
    """Domain service for the comment state machine."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
        content_filter: ContentFilter,
        trust_service: TrustService,
        counter_service: CommentCounterService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            blog_repository: Blog repository
            content_filter: Forbidden word / spam detection
            trust_service: Trust ledger
            counter_service: Blog comment counter synchronization
        """
        self.comment_repository = comment_repository
        self.blog_repository = blog_repository
        self.content_filter = content_filter
        self.trust_service = trust_service
        self.counter_service = counter_service

    @staticmethod
    def validate_content(content: str) -> None:
        """Reject empty (after trim) or oversized content.

        Raises:
            ValidationError: If the content is invalid
        """
        if not content or not content.strip():
            raise ValidationError("Comment content cannot be empty")
        if len(content) > MAX_CONTENT_LENGTH:
            raise ValidationError(
                f"Comment content cannot exceed {MAX_CONTENT_LENGTH} characters"
            )

    async def _initial_status(self, author_id: UserId, content: str) -> CommentStatus:
        """Status for a new comment or reply.

        Spam always wins over trust; forbidden words alone hold the comment
        for review even for trusted users.
        """
        forbidden = self.content_filter.contains_forbidden_words(content)
        spammy = self.content_filter.is_likely_spam(content)
        trusted = await self.trust_service.is_trusted(author_id)

        status = CommentStatus.APPROVED if trusted else CommentStatus.PENDING
        if spammy:
            status = CommentStatus.SPAM
        elif forbidden:
            status = CommentStatus.PENDING
        return status

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def _insert(
        self,
        blog_id: BlogId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None,
    ) -> Comment:
        status = await self._initial_status(author_id, content)
        now = datetime.now()
        comment = Comment(
            id=CommentId(uuid4()),
            blog_id=blog_id,
            author_id=author_id,
            content=content,
            parent_id=parent_id,
            status=status,
            is_read=False,
            admin_note=None,
            created_at=now,
            updated_at=now,
        )
        saved = await self.comment_repository.save(comment)
        await self.counter_service.sync_on_transition(blog_id, None, saved.status)

        logfire.info(
            "Comment created",
            comment_id=str(saved.id),
            blog_id=str(blog_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
            status=saved.status.value,
        )
        return saved

    async def create_comment(
        self, blog_id: BlogId, author_id: UserId, content: str
    ) -> Comment:
        """Create a top-level comment on a blog.

        Args:
            blog_id: Blog ID
            author_id: Author user ID
            content: Comment text

        Returns:
            Created comment with its initial status

        Raises:
            NotFoundError: If the blog does not exist
            ValidationError: If the content is invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            blog_id=str(blog_id),
            author_id=str(author_id),
        ):
            blog = await self.blog_repository.find_by_id(blog_id)
            if not blog:
                logfire.warn("Comment on non-existent blog", blog_id=str(blog_id))
                raise NotFoundError("Blog", str(blog_id))

            self.validate_content(content)
            return await self._insert(blog_id, author_id, content, parent_id=None)

    async def reply_to_comment(
        self, parent_id: CommentId, author_id: UserId, content: str
    ) -> Comment:
        """Reply to a top-level comment.

        The reply belongs to the parent's blog.

        Args:
            parent_id: Top-level comment being replied to
            author_id: Author user ID
            content: Reply text

        Returns:
            Created reply with its initial status

        Raises:
            NotFoundError: If the parent comment does not exist
            ValidationError: If the parent is itself a reply, or content is invalid
        """
        with logfire.span(
            "comment_service.reply_to_comment",
            parent_id=str(parent_id),
            author_id=str(author_id),
        ):
            parent = await self.comment_repository.find_by_id(parent_id)
            if not parent:
                logfire.warn("Reply to non-existent comment", parent_id=str(parent_id))
                raise NotFoundError("Parent comment", str(parent_id))

            if parent.is_reply:
                logfire.warn(
                    "Reply to a reply rejected",
                    parent_id=str(parent_id),
                    grandparent_id=str(parent.parent_id),
                )
                raise ValidationError("Cannot reply to a reply")

            self.validate_content(content)
            return await self._insert(
                parent.blog_id, author_id, content, parent_id=parent.id
            )

    async def update_comment(
        self, comment_id: CommentId, author_id: UserId, content: str
    ) -> Comment:
        """Edit one's own comment and re-evaluate its status.

        The edit lands on spam, pending or approved depending on the new
        content and the author's current trust. It never touches the
        trust ledger.

        Args:
            comment_id: Comment ID
            author_id: Requesting user, must be the author
            content: New text

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            AuthorizationError: If the requester is not the author
            ValidationError: If the content is invalid
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            comment = await self.get_comment(comment_id)

            if comment.author_id != author_id:
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    user_id=str(author_id),
                )
                raise AuthorizationError(
                    str(author_id), "edit", "comment", str(comment_id)
                )

            self.validate_content(content)
            status = await self._initial_status(author_id, content)

            updated = await self.comment_repository.save(
                comment.model_copy(
                    update={
                        "content": content,
                        "status": status,
                        "is_read": False,
                        "updated_at": datetime.now(),
                    }
                )
            )
            await self.counter_service.sync_on_transition(
                comment.blog_id, comment.status, updated.status
            )

            logfire.info(
                "Comment edited",
                comment_id=str(comment_id),
                previous_status=comment.status.value,
                status=updated.status.value,
            )
            return updated

    async def apply_status(
        self,
        comment: Comment,
        status: CommentStatus,
        admin_note: str | None = None,
        keep_existing_note: bool = False,
    ) -> tuple[Comment, CommentStatus]:
        """Write an admin status decision and sync the blog counter.

        Does not touch the trust ledger; callers decide how trust changes
        are applied.

        Args:
            comment: Comment as loaded before the change
            status: New status
            admin_note: Note to store
            keep_existing_note: Keep the stored note when admin_note is empty

        Returns:
            Updated comment and its previous status
        """
        previous = comment.status
        note = admin_note or (comment.admin_note if keep_existing_note else None)
        updated = await self.comment_repository.save(
            comment.model_copy(
                update={
                    "status": status,
                    "admin_note": note,
                    "is_read": True,
                    "updated_at": datetime.now(),
                }
            )
        )
        await self.counter_service.sync_on_transition(
            comment.blog_id, previous, status
        )
        return updated, previous

    async def moderate_comment(
        self,
        comment_id: CommentId,
        status: CommentStatus,
        admin_note: str | None = None,
    ) -> Comment:
        """Apply an admin decision to one comment.

        Re-applying the current status changes nothing but the note and
        read flag: no trust change, no counter change.

        Args:
            comment_id: Comment ID
            status: approved, rejected or spam
            admin_note: Optional note; replaces any existing note

        Returns:
            Updated comment

        Raises:
            ValidationError: If the status cannot be assigned by an admin
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.moderate_comment",
            comment_id=str(comment_id),
            status=status.value,
        ):
            if status not in MODERATION_STATUSES:
                raise ValidationError(
                    f"Invalid status '{status.value}'. Use approved, rejected, or spam"
                )

            comment = await self.comment_repository.find_by_id(
                comment_id, for_update=True
            )
            if not comment:
                logfire.warn("Moderation of non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            updated, previous = await self.apply_status(comment, status, admin_note)

            if previous != status:
                if status == CommentStatus.APPROVED:
                    await self.trust_service.on_approved(comment.author_id)
                else:
                    await self.trust_service.on_rejected(comment.author_id)

            logfire.info(
                "Comment moderated",
                comment_id=str(comment_id),
                previous_status=previous.value,
                status=status.value,
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, actor: Actor) -> int:
        """Delete a comment; top-level comments take their replies with them.

        Args:
            comment_id: Comment ID
            actor: Requesting user, must be the author or an admin

        Returns:
            Number of rows removed (the comment plus cascaded replies)

        Raises:
            NotFoundError: If the comment does not exist
            AuthorizationError: If the requester is neither author nor admin
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(actor.user_id),
        ):
            comment = await self.get_comment(comment_id)

            if comment.author_id != actor.user_id and not actor.is_admin:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    user_id=str(actor.user_id),
                )
                raise AuthorizationError(
                    str(actor.user_id), "delete", "comment", str(comment_id)
                )

            removed: list[Comment] = []
            if not comment.is_reply:
                replies = await self.comment_repository.find_replies_of(comment.id)
                if replies:
                    removed.extend(
                        await self.comment_repository.delete_many(
                            [r.id for r in replies]
                        )
                    )
            removed.extend(await self.comment_repository.delete_many([comment.id]))

            for row in removed:
                await self.counter_service.sync_on_transition(
                    row.blog_id, row.status, None
                )

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                rows_removed=len(removed),
            )
            return len(removed)

    async def mark_as_read(self, comment_id: CommentId) -> Comment:
        """Mark a comment as read by an admin.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.mark_as_read", comment_id=str(comment_id)):
            comment = await self.get_comment(comment_id)
            if comment.is_read:
                return comment
            return await self.comment_repository.save(
                comment.model_copy(update={"is_read": True})
            )
