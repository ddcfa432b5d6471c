"""In-memory transaction scope for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from qalam.domain.repository.transaction import TransactionScope

from .blog import InMemoryBlogRepository
from .comment import InMemoryCommentRepository
from .user_trust import InMemoryUserTrustRepository


class InMemoryTransactionScope(TransactionScope):
    """Savepoints over in-memory repositories by snapshot and restore."""

    def __init__(
        self,
        blogs: InMemoryBlogRepository,
        comments: InMemoryCommentRepository,
        trusts: InMemoryUserTrustRepository,
    ) -> None:
        self.repositories = (blogs, comments, trusts)

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Restore every repository's state if the block raises."""
        snapshots = [repository.snapshot() for repository in self.repositories]
        try:
            yield
        except Exception:
            for repository, state in zip(self.repositories, snapshots):
                repository.restore(state)
            raise
