"""Moderate comment use case."""

from uuid import UUID

from qalam.application.usecase.base import BaseUseCase
from qalam.application.usecase.comment.common import CommentResponse
from qalam.domain.service import CommentService
from qalam.domain.value import CommentId, CommentStatus

from .common import AdminRequest, require_admin


class ModerateCommentRequest(AdminRequest):
    """Moderate comment request."""

    comment_id: str
    status: CommentStatus
    admin_note: str | None = None


class ModerateCommentUseCase(BaseUseCase):
    """Use case for an admin decision on a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize moderate comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ModerateCommentRequest) -> CommentResponse:
        """Execute moderation flow.

        Args:
            request: Target comment, new status and optional note

        Returns:
            Moderated comment

        Raises:
            AuthorizationError: If the caller is not an admin
            ValidationError: If the status is pending
            NotFoundError: If the comment doesn't exist
        """
        require_admin(request, "moderate", "comment", request.comment_id)
        comment = await self.comment_service.moderate_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            status=request.status,
            admin_note=request.admin_note,
        )
        return CommentResponse.from_comment(comment)
