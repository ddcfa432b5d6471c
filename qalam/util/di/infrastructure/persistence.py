"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from qalam.config import Settings
from qalam.domain.repository import (
    BlogRepository,
    CommentRepository,
    TransactionScope,
    UserTrustRepository,
)
from qalam.persistence.database import create_engine, create_session_factory
from qalam.persistence.repository import (
    PostgresBlogRepository,
    PostgresCommentRepository,
    PostgresTransactionScope,
    PostgresUserTrustRepository,
)
from qalam.util.di.base import ProviderBase
from qalam.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. A comment write, its
        counter update and any trust update therefore land together.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_blog_repository(self, session: AsyncSession) -> BlogRepository:
        """Provide Blog repository."""
        return PostgresBlogRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_trust_repository(self, session: AsyncSession) -> UserTrustRepository:
        """Provide UserTrust repository."""
        return PostgresUserTrustRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_transaction_scope(self, session: AsyncSession) -> TransactionScope:
        """Provide savepoints on the request session."""
        return PostgresTransactionScope(session)
