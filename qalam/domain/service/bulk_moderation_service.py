"""Bulk comment moderation domain service."""

from dataclasses import dataclass
from typing import Sequence

import logfire

from qalam.domain.error import NotFoundError, ValidationError
from qalam.domain.model.comment import Comment
from qalam.domain.repository import CommentRepository, TransactionScope
from qalam.domain.value import BulkAction, CommentId, CommentStatus, UserId

from .base import Service
from .comment_service import CommentService
from .counter_service import CommentCounterService
from .trust_service import TrustService


@dataclass
class BulkActionSummary:
    """Outcome of a bulk action.

    total_processed counts the requested comments that existed.
    cascaded_replies counts replies removed along with deleted parents
    that were not themselves in the request.
    """

    success_count: int
    error_count: int
    total_processed: int
    cascaded_replies: int = 0


class BulkModerationService(Service):
    """Applies one admin action to a batch of comments."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_service: CommentService,
        trust_service: TrustService,
        counter_service: CommentCounterService,
        transaction: TransactionScope,
    ) -> None:
        """Initialize bulk moderation service.

        Args:
            comment_repository: Comment repository
            comment_service: Comment state machine (per-item status path)
            trust_service: Trust ledger
            counter_service: Blog comment counter synchronization
            transaction: Savepoints isolating each item's writes
        """
        self.comment_repository = comment_repository
        self.comment_service = comment_service
        self.trust_service = trust_service
        self.counter_service = counter_service
        self.transaction = transaction

    async def execute(
        self,
        comment_ids: Sequence[CommentId],
        action: BulkAction,
        admin_note: str | None = None,
    ) -> BulkActionSummary:
        """Apply an action to every existing comment among comment_ids.

        Args:
            comment_ids: Comments to act on; unknown IDs are ignored
            action: Action to apply
            admin_note: Note for status actions; existing notes kept when None

        Returns:
            Summary of the batch

        Raises:
            ValidationError: If no IDs were given
            NotFoundError: If none of the IDs exist
        """
        with logfire.span(
            "bulk_moderation_service.execute",
            action=action.value,
            requested=len(comment_ids),
        ):
            if not comment_ids:
                raise ValidationError("Provide at least one comment ID")

            comments = await self.comment_repository.find_by_ids(
                list(dict.fromkeys(comment_ids)), for_update=True
            )
            if not comments:
                logfire.warn("Bulk action matched no comments", action=action.value)
                raise NotFoundError("Comments", ", ".join(str(i) for i in comment_ids))

            if action == BulkAction.DELETE:
                summary = await self._delete(comments)
            elif action == BulkAction.MARK_AS_READ:
                updated = await self.comment_repository.mark_read_many(
                    [c.id for c in comments]
                )
                summary = BulkActionSummary(
                    success_count=updated,
                    error_count=0,
                    total_processed=len(comments),
                )
            else:
                summary = await self._moderate(comments, action, admin_note)

            logfire.info(
                "Bulk action completed",
                action=action.value,
                success_count=summary.success_count,
                error_count=summary.error_count,
                total_processed=summary.total_processed,
            )
            return summary

    async def _delete(self, comments: list[Comment]) -> BulkActionSummary:
        selected = {c.id for c in comments}
        parent_ids = [c.id for c in comments if not c.is_reply]

        replies: list[Comment] = []
        if parent_ids:
            replies = [
                r
                for r in await self.comment_repository.find_replies_of_many(parent_ids)
                if r.id not in selected
            ]

        removed = await self.comment_repository.delete_many(
            [r.id for r in replies] + [c.id for c in comments]
        )
        for row in removed:
            await self.counter_service.sync_on_transition(row.blog_id, row.status, None)

        removed_selected = sum(1 for row in removed if row.id in selected)
        return BulkActionSummary(
            success_count=removed_selected,
            error_count=0,
            total_processed=len(comments),
            cascaded_replies=len(removed) - removed_selected,
        )

    async def _moderate(
        self,
        comments: list[Comment],
        action: BulkAction,
        admin_note: str | None,
    ) -> BulkActionSummary:
        status = action.target_status
        if status is None:
            raise ValidationError(f"Invalid bulk action: {action.value}")

        success_count = 0
        error_count = 0
        # Last transition per author wins; each author's ledger moves once per batch
        trust_updates: dict[UserId, tuple[CommentStatus, CommentStatus]] = {}

        for comment in comments:
            try:
                # A failed item leaves neither its comment row nor its counter changed
                async with self.transaction.savepoint():
                    _, previous = await self.comment_service.apply_status(
                        comment, status, admin_note, keep_existing_note=True
                    )
                if previous != status:
                    trust_updates[comment.author_id] = (status, previous)
                success_count += 1
            except Exception as e:
                error_count += 1
                logfire.error(
                    "Bulk moderation failed for comment",
                    comment_id=str(comment.id),
                    action=action.value,
                    error=str(e),
                )

        for user_id, (new_status, _previous) in trust_updates.items():
            try:
                async with self.transaction.savepoint():
                    if new_status == CommentStatus.APPROVED:
                        await self.trust_service.on_approved(user_id)
                    else:
                        await self.trust_service.on_rejected(user_id)
            except Exception as e:
                logfire.error(
                    "Trust update failed after bulk moderation",
                    user_id=str(user_id),
                    error=str(e),
                )

        return BulkActionSummary(
            success_count=success_count,
            error_count=error_count,
            total_processed=len(comments),
        )
