"""Repository interfaces for Qalam domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from qalam.domain.repository.blog import BlogRepository
from qalam.domain.repository.comment import CommentFilter, CommentRepository
from qalam.domain.repository.transaction import TransactionScope
from qalam.domain.repository.user_trust import UserTrustRepository

__all__ = [
    "BlogRepository",
    "CommentFilter",
    "CommentRepository",
    "TransactionScope",
    "UserTrustRepository",
]
