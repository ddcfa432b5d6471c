"""Domain services."""

from .base import Service
from .bulk_moderation_service import BulkActionSummary, BulkModerationService
from .comment_query_service import (
    CommentCounts,
    CommentQueryService,
    CommentStats,
    CommentThread,
)
from .comment_service import CommentService
from .content_filter import ContentFilter
from .counter_service import CommentCounterService
from .jwt_service import JWTService
from .trust_service import TrustService

__all__ = [
    "BulkActionSummary",
    "BulkModerationService",
    "CommentCounterService",
    "CommentCounts",
    "CommentQueryService",
    "CommentService",
    "CommentStats",
    "CommentThread",
    "ContentFilter",
    "JWTService",
    "Service",
    "TrustService",
]
