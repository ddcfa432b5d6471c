"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from qalam.domain.service import CommentQueryService
from qalam.domain.value import BlogId

from .common import CommentResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    blog_id: str  # UUID string


class CommentThreadResponse(CommentResponse):
    """Top-level comment with its replies."""

    replies: list[CommentResponse]


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    blog_id: str
    comments: list[CommentThreadResponse]
    total: int  # Approved comments shown, replies included


class GetCommentsUseCase:
    """Use case for reading a blog's public comment thread."""

    def __init__(self, comment_query_service: CommentQueryService) -> None:
        """Initialize get comments use case.

        Args:
            comment_query_service: Comment query service
        """
        self.comment_query_service = comment_query_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Only approved comments are returned: top-level newest first, each
        with its approved replies oldest first.

        Args:
            request: Get comments request with blog ID

        Returns:
            Comment threads

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        threads = await self.comment_query_service.get_blog_thread(
            BlogId(UUID(request.blog_id))
        )

        comments = [
            CommentThreadResponse(
                **CommentResponse.from_comment(thread.comment).model_dump(),
                replies=[CommentResponse.from_comment(r) for r in thread.replies],
            )
            for thread in threads
        ]
        total = sum(1 + len(thread.replies) for thread in threads)

        return GetCommentsResponse(
            blog_id=request.blog_id, comments=comments, total=total
        )
