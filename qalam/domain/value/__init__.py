"""Domain value objects for Qalam."""

from qalam.domain.value.identifiers import BlogId, CommentId, UserId, UserTrustId
from qalam.domain.value.types import (
    MODERATION_STATUSES,
    Actor,
    BulkAction,
    CommentStatus,
    TrustLevel,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "BlogId",
    "CommentId",
    "UserTrustId",
    # Types
    "Actor",
    "BulkAction",
    "CommentStatus",
    "MODERATION_STATUSES",
    "TrustLevel",
    "UserRole",
]
