"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionScope(ABC):
    """Nested transaction boundary over the repositories of one request.

    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Open a savepoint.

        Writes made through the request's repositories inside the block are
        undone if the block raises. The exception still propagates.

        Usage:
            async with transaction.savepoint():
                await comment_repository.save(comment)
                await blog_repository.increment_comment_count(blog_id)
        """
        pass
