"""PostgreSQL repository implementations."""

from qalam.persistence.repository.blog import PostgresBlogRepository
from qalam.persistence.repository.comment import PostgresCommentRepository
from qalam.persistence.repository.transaction import PostgresTransactionScope
from qalam.persistence.repository.user_trust import PostgresUserTrustRepository

__all__ = [
    "PostgresBlogRepository",
    "PostgresCommentRepository",
    "PostgresTransactionScope",
    "PostgresUserTrustRepository",
]
