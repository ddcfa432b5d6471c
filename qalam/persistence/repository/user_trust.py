"""PostgreSQL implementation of UserTrust repository."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qalam.domain.model import UserTrust
from qalam.domain.repository import UserTrustRepository
from qalam.domain.value import TrustLevel, UserId
from qalam.persistence.mappers import row_to_user_trust
from qalam.persistence.tables import user_trusts_table


class PostgresUserTrustRepository(UserTrustRepository):
    """PostgreSQL implementation of UserTrustRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: UserId) -> Optional[UserTrust]:
        """Find the trust record of a user."""
        stmt = select(user_trusts_table).where(user_trusts_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user_trust(row._asdict()) if row else None

    async def get_or_create(self, user_id: UserId, lock: bool = False) -> UserTrust:
        """Return the user's trust record, creating a fresh one if missing.

        INSERT ... ON CONFLICT DO NOTHING followed by a SELECT, so two
        requests creating the same record concurrently both see one row.
        """
        now = datetime.now()
        insert_stmt = (
            insert(user_trusts_table)
            .values(
                id=uuid4(),
                user_id=user_id,
                trust_level=TrustLevel.NEW.value,
                approved_comments=0,
                rejected_comments=0,
                last_status_change=None,
                created_at=now,
                updated_at=now,
            )
            .on_conflict_do_nothing(index_elements=[user_trusts_table.c.user_id])
        )
        await self.session.execute(insert_stmt)

        stmt = select(user_trusts_table).where(user_trusts_table.c.user_id == user_id)
        if lock:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return row_to_user_trust(result.one()._asdict())

    async def save(self, trust: UserTrust) -> UserTrust:
        """Persist counters and trust level of an existing record."""
        stmt = (
            user_trusts_table.update()
            .where(user_trusts_table.c.user_id == trust.user_id)
            .values(
                trust_level=trust.trust_level.value,
                approved_comments=trust.approved_comments,
                rejected_comments=trust.rejected_comments,
                last_status_change=trust.last_status_change,
                updated_at=trust.updated_at,
            )
            .returning(user_trusts_table)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return row_to_user_trust(row._asdict())
