"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from qalam.domain.service import CommentService
from qalam.domain.value import CommentId, UserId

from .common import CommentResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str  # New content


class UpdateCommentUseCase:
    """Use case for editing one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        An edit goes back through the content filter, so a previously
        approved comment can fall back to pending or spam.

        Args:
            request: Update comment request with comment ID, user ID and new content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            AuthorizationError: If the user doesn't own the comment
            ValidationError: If the content is invalid
        """
        updated = await self.comment_service.update_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            author_id=UserId(UUID(request.user_id)),
            content=request.content,
        )
        return CommentResponse.from_comment(updated)
