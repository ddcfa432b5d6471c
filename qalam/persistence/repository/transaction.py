"""PostgreSQL implementation of the transaction scope."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from qalam.domain.repository import TransactionScope


class PostgresTransactionScope(TransactionScope):
    """Savepoints on the request's database session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the session the request's repositories share.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """SAVEPOINT on entry; RELEASE on success, ROLLBACK TO on error."""
        async with self.session.begin_nested():
            yield
