"""Bulk comment action use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from qalam.application.usecase.base import BaseUseCase
from qalam.domain.service import BulkModerationService
from qalam.domain.value import BulkAction, CommentId

from .common import AdminRequest, require_admin


class BulkActionRequest(AdminRequest):
    """Bulk action request."""

    comment_ids: list[str] = Field(min_length=1)
    action: BulkAction
    admin_note: str | None = None


class BulkActionResponse(BaseModel):
    """Bulk action response."""

    action: BulkAction
    success_count: int
    error_count: int
    total_processed: int
    cascaded_replies: int


class BulkActionUseCase(BaseUseCase):
    """Use case for applying one admin action to many comments."""

    def __init__(self, bulk_moderation_service: BulkModerationService) -> None:
        """Initialize bulk action use case.

        Args:
            bulk_moderation_service: Bulk moderation domain service
        """
        self.bulk_moderation_service = bulk_moderation_service

    async def execute(self, request: BulkActionRequest) -> BulkActionResponse:
        """Execute bulk action flow.

        Args:
            request: Comment IDs, action and optional admin note

        Returns:
            Per-batch counts

        Raises:
            AuthorizationError: If the caller is not an admin
            NotFoundError: If none of the comments exist
        """
        require_admin(request, request.action.value, "comments")
        summary = await self.bulk_moderation_service.execute(
            comment_ids=[CommentId(UUID(i)) for i in request.comment_ids],
            action=request.action,
            admin_note=request.admin_note,
        )
        return BulkActionResponse(
            action=request.action,
            success_count=summary.success_count,
            error_count=summary.error_count,
            total_processed=summary.total_processed,
            cascaded_replies=summary.cascaded_replies,
        )
