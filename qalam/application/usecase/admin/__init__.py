"""Admin moderation use cases."""

from .bulk_action import BulkActionRequest, BulkActionResponse, BulkActionUseCase
from .comment_counts import (
    CommentCountsResponse,
    GetCommentCountsRequest,
    GetCommentCountsUseCase,
)
from .comment_stats import (
    CommentStatsResponse,
    GetCommentStatsRequest,
    GetCommentStatsUseCase,
)
from .common import AdminRequest, require_admin
from .delete_comment import AdminDeleteCommentRequest, AdminDeleteCommentUseCase
from .get_user_trust import GetUserTrustRequest, GetUserTrustUseCase, UserTrustResponse
from .list_comments import ListCommentsRequest, ListCommentsResponse, ListCommentsUseCase
from .mark_comment_read import MarkCommentReadRequest, MarkCommentReadUseCase
from .moderate_comment import ModerateCommentRequest, ModerateCommentUseCase

__all__ = [
    "AdminDeleteCommentRequest",
    "AdminDeleteCommentUseCase",
    "AdminRequest",
    "BulkActionRequest",
    "BulkActionResponse",
    "BulkActionUseCase",
    "CommentCountsResponse",
    "CommentStatsResponse",
    "GetCommentCountsRequest",
    "GetCommentCountsUseCase",
    "GetCommentStatsRequest",
    "GetCommentStatsUseCase",
    "GetUserTrustRequest",
    "GetUserTrustUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "MarkCommentReadRequest",
    "MarkCommentReadUseCase",
    "ModerateCommentRequest",
    "ModerateCommentUseCase",
    "UserTrustResponse",
    "require_admin",
]
