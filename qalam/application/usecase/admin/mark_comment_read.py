"""Mark comment as read use case."""

from uuid import UUID

from qalam.application.usecase.base import BaseUseCase
from qalam.application.usecase.comment.common import CommentResponse
from qalam.domain.service import CommentService
from qalam.domain.value import CommentId

from .common import AdminRequest, require_admin


class MarkCommentReadRequest(AdminRequest):
    """Mark comment as read request."""

    comment_id: str


class MarkCommentReadUseCase(BaseUseCase):
    """Use case for marking a comment as read by an admin."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: MarkCommentReadRequest) -> CommentResponse:
        require_admin(request, "mark_read", "comment", request.comment_id)
        comment = await self.comment_service.mark_as_read(
            CommentId(UUID(request.comment_id))
        )
        return CommentResponse.from_comment(comment)
