"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from qalam.domain.service import CommentService
from qalam.domain.value import Actor, CommentId, UserId, UserRole


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str
    role: UserRole = UserRole.USER


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted_count: int  # The comment plus any replies removed with it


class DeleteCommentUseCase:
    """Use case for deleting a comment (author or admin)."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            AuthorizationError: If the user is neither author nor admin
        """
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        deleted = await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), actor
        )
        return DeleteCommentResponse(
            comment_id=request.comment_id, deleted_count=deleted
        )
