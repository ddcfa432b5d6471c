"""In-memory user trust repository for testing."""

from typing import Optional
from uuid import uuid4

from qalam.domain.model.user_trust import UserTrust
from qalam.domain.repository.user_trust import UserTrustRepository
from qalam.domain.value import UserId, UserTrustId


class InMemoryUserTrustRepository(UserTrustRepository):
    """In-memory implementation of UserTrustRepository for testing."""

    def __init__(self) -> None:
        self._trusts: dict[UserId, UserTrust] = {}

    def snapshot(self) -> dict[UserId, UserTrust]:
        """Copy of the stored state."""
        return dict(self._trusts)

    def restore(self, state: dict[UserId, UserTrust]) -> None:
        """Replace the stored state with a snapshot."""
        self._trusts = dict(state)

    async def find_by_user(self, user_id: UserId) -> Optional[UserTrust]:
        """Find the trust record of a user."""
        return self._trusts.get(user_id)

    async def get_or_create(self, user_id: UserId, lock: bool = False) -> UserTrust:
        """Return the user's trust record, creating a fresh one if missing."""
        trust = self._trusts.get(user_id)
        if trust is None:
            trust = UserTrust(id=UserTrustId(uuid4()), user_id=user_id)
            self._trusts[user_id] = trust
        return trust

    async def save(self, trust: UserTrust) -> UserTrust:
        """Save a trust record."""
        self._trusts[trust.user_id] = trust
        return trust
