"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from qalam.domain.service import CommentService
from qalam.domain.value import BlogId, UserId

from .common import CommentResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    blog_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str


class CreateCommentUseCase:
    """Use case for commenting on a blog."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        The comment's status is decided by the author's trust level and
        the content filter; the blog counter follows if it lands approved.

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the blog doesn't exist
            ValidationError: If the content is empty or too long
        """
        comment = await self.comment_service.create_comment(
            blog_id=BlogId(UUID(request.blog_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
        )
        return CommentResponse.from_comment(comment)
