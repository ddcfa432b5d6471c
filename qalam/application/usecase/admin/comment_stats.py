"""Comment statistics use case."""

from datetime import date

from pydantic import BaseModel, Field

from qalam.application.usecase.base import BaseUseCase
from qalam.domain.service import CommentQueryService

from .comment_counts import CommentCountsResponse
from .common import AdminRequest, require_admin


class GetCommentStatsRequest(AdminRequest):
    """Comment statistics request."""

    days: int = Field(default=7, ge=1, le=90)


class BlogCommentCount(BaseModel):
    blog_id: str
    comment_count: int


class AuthorCommentCount(BaseModel):
    user_id: str
    comment_count: int


class DailyCommentCount(BaseModel):
    day: date
    comment_count: int


class CommentStatsResponse(BaseModel):
    """Moderation dashboard statistics."""

    status_counts: CommentCountsResponse
    approval_rate: float  # Percentage of all comments, 2 decimals
    comments_by_blog: list[BlogCommentCount]
    comments_by_date: list[DailyCommentCount]
    active_users: list[AuthorCommentCount]


class GetCommentStatsUseCase(BaseUseCase):
    """Use case for moderation dashboard statistics."""

    def __init__(self, comment_query_service: CommentQueryService) -> None:
        self.comment_query_service = comment_query_service

    async def execute(self, request: GetCommentStatsRequest) -> CommentStatsResponse:
        """Execute statistics flow.

        Raises:
            AuthorizationError: If the caller is not an admin
        """
        require_admin(request, "stats", "comments")
        stats = await self.comment_query_service.get_stats(days=request.days)
        return CommentStatsResponse(
            status_counts=CommentCountsResponse.from_counts(stats.counts),
            approval_rate=stats.approval_rate,
            comments_by_blog=[
                BlogCommentCount(blog_id=str(blog_id), comment_count=count)
                for blog_id, count in stats.top_blogs
            ],
            comments_by_date=[
                DailyCommentCount(day=day, comment_count=count)
                for day, count in stats.by_day
            ],
            active_users=[
                AuthorCommentCount(user_id=str(user_id), comment_count=count)
                for user_id, count in stats.top_authors
            ],
        )
