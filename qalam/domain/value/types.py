"""Domain value objects for Qalam.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from qalam.domain.value.common import ValueObject
from qalam.domain.value.identifiers import UserId


class CommentStatus(str, Enum):
    """Moderation status of a comment.

    Any status may move to any other; only crossings of APPROVED have
    side effects on the blog's comment count.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SPAM = "spam"


# Statuses an admin may assign directly
MODERATION_STATUSES = frozenset(
    {CommentStatus.APPROVED, CommentStatus.REJECTED, CommentStatus.SPAM}
)


class TrustLevel(str, Enum):
    """Trust classification controlling comment auto-approval."""

    NEW = "new"
    TRUSTED = "trusted"


class UserRole(str, Enum):
    """Role of an authenticated user."""

    ADMIN = "admin"
    USER = "user"


class BulkAction(str, Enum):
    """Action applied to a batch of comments by an admin."""

    APPROVE = "approve"
    REJECT = "reject"
    SPAM = "spam"
    DELETE = "delete"
    MARK_AS_READ = "markAsRead"

    @property
    def target_status(self) -> CommentStatus | None:
        """Status assigned by this action, None for non-status actions."""
        return {
            BulkAction.APPROVE: CommentStatus.APPROVED,
            BulkAction.REJECT: CommentStatus.REJECTED,
            BulkAction.SPAM: CommentStatus.SPAM,
        }.get(self)


class Actor(ValueObject):
    """Authenticated caller, as established by the HTTP layer."""

    user_id: UserId
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
