"""Reply to comment use case."""

from uuid import UUID

from pydantic import BaseModel

from qalam.domain.service import CommentService
from qalam.domain.value import CommentId, UserId

from .common import CommentResponse


class ReplyCommentRequest(BaseModel):
    """Reply to comment request."""

    parent_id: str  # Top-level comment UUID string
    author_id: str
    content: str


class ReplyCommentUseCase:
    """Use case for replying to a top-level comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ReplyCommentRequest) -> CommentResponse:
        """Execute reply flow.

        Raises:
            NotFoundError: If the parent comment doesn't exist
            ValidationError: If the parent is a reply, or content is invalid
        """
        reply = await self.comment_service.reply_to_comment(
            parent_id=CommentId(UUID(request.parent_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
        )
        return CommentResponse.from_comment(reply)
