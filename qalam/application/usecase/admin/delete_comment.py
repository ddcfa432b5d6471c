"""Admin delete comment use case."""

from uuid import UUID

from qalam.application.usecase.base import BaseUseCase
from qalam.application.usecase.comment.delete_comment import DeleteCommentResponse
from qalam.domain.service import CommentService
from qalam.domain.value import Actor, CommentId, UserId

from .common import AdminRequest, require_admin


class AdminDeleteCommentRequest(AdminRequest):
    """Admin delete comment request."""

    comment_id: str


class AdminDeleteCommentUseCase(BaseUseCase):
    """Use case for an admin removing any comment, replies included."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: AdminDeleteCommentRequest) -> DeleteCommentResponse:
        """Execute admin delete flow.

        Raises:
            AuthorizationError: If the caller is not an admin
            NotFoundError: If the comment doesn't exist
        """
        require_admin(request, "delete", "comment", request.comment_id)
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        deleted = await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), actor
        )
        return DeleteCommentResponse(
            comment_id=request.comment_id, deleted_count=deleted
        )
