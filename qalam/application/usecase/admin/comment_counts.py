"""Comment counts use case."""

from pydantic import BaseModel

from qalam.application.usecase.base import BaseUseCase
from qalam.domain.service import CommentCounts, CommentQueryService

from .common import AdminRequest, require_admin


class GetCommentCountsRequest(AdminRequest):
    """Comment counts request."""


class CommentCountsResponse(BaseModel):
    """Comments per status, for dashboard badges."""

    pending: int
    approved: int
    rejected: int
    spam: int
    unread: int
    total: int

    @classmethod
    def from_counts(cls, counts: CommentCounts) -> "CommentCountsResponse":
        return cls(
            pending=counts.pending,
            approved=counts.approved,
            rejected=counts.rejected,
            spam=counts.spam,
            unread=counts.unread,
            total=counts.total,
        )


class GetCommentCountsUseCase(BaseUseCase):
    """Use case for per-status comment counts."""

    def __init__(self, comment_query_service: CommentQueryService) -> None:
        self.comment_query_service = comment_query_service

    async def execute(self, request: GetCommentCountsRequest) -> CommentCountsResponse:
        require_admin(request, "count", "comments")
        counts = await self.comment_query_service.count_by_status()
        return CommentCountsResponse.from_counts(counts)
