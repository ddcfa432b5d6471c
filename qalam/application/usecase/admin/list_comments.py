"""Admin comment listing use case."""

import math
from uuid import UUID

from pydantic import BaseModel, Field

from qalam.application.usecase.base import BaseUseCase
from qalam.application.usecase.comment.common import CommentResponse
from qalam.domain.repository import CommentFilter
from qalam.domain.service import CommentQueryService
from qalam.domain.value import BlogId, CommentStatus

from .common import AdminRequest, require_admin


class ListCommentsRequest(AdminRequest):
    """Admin comment listing request."""

    status: CommentStatus | None = None
    blog_id: str | None = None
    is_read: bool | None = None
    search: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListCommentsResponse(BaseModel):
    """Admin comment listing response."""

    comments: list[CommentResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class ListCommentsUseCase(BaseUseCase):
    """Use case for the admin moderation queue."""

    def __init__(self, comment_query_service: CommentQueryService) -> None:
        self.comment_query_service = comment_query_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute listing flow, newest comments first.

        Raises:
            AuthorizationError: If the caller is not an admin
        """
        require_admin(request, "list", "comments")
        filters = CommentFilter(
            status=request.status,
            blog_id=BlogId(UUID(request.blog_id)) if request.blog_id else None,
            is_read=request.is_read,
            search=request.search or None,
        )
        comments, total = await self.comment_query_service.list_comments(
            filters,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )
        return ListCommentsResponse(
            comments=[CommentResponse.from_comment(c) for c in comments],
            total=total,
            page=request.page,
            limit=request.limit,
            total_pages=math.ceil(total / request.limit),
        )
