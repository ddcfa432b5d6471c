"""User trust repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qalam.domain.model.user_trust import UserTrust
from qalam.domain.value import UserId


class UserTrustRepository(ABC):
    """Repository for UserTrust records, keyed by user."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[UserTrust]:
        """Find the trust record of a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            The trust record if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def get_or_create(self, user_id: UserId, lock: bool = False) -> UserTrust:
        """Return the user's trust record, creating a fresh one if missing.

        Creation is race-free: concurrent callers end up with the same row.

        Args:
            user_id: The user's unique identifier
            lock: Lock the row until the current transaction ends

        Returns:
            The existing or newly created record
        """
        pass

    @abstractmethod
    async def save(self, trust: UserTrust) -> UserTrust:
        """Persist counters and trust level of an existing record.

        Args:
            trust: The updated record

        Returns:
            The saved record
        """
        pass
