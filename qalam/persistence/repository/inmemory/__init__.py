"""In-memory repository implementations for testing."""

from .blog import InMemoryBlogRepository
from .comment import InMemoryCommentRepository
from .transaction import InMemoryTransactionScope
from .user_trust import InMemoryUserTrustRepository

__all__ = [
    "InMemoryBlogRepository",
    "InMemoryCommentRepository",
    "InMemoryTransactionScope",
    "InMemoryUserTrustRepository",
]
