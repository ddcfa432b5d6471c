"""User trust domain service."""

from datetime import datetime

import logfire

from qalam.domain.model.user_trust import UserTrust
from qalam.domain.repository import UserTrustRepository
from qalam.domain.value import UserId

from .base import Service


class TrustService(Service):
    """Trust ledger: decides whether a user's comments are auto-approved.

    Callers invoke on_approved/on_rejected only for admin decisions that
    change a comment's status; this service does not look at comment history.
    """

    def __init__(
        self,
        user_trust_repository: UserTrustRepository,
        trust_threshold: int = 3,
        distrust_threshold: int = 2,
    ) -> None:
        """Initialize trust service.

        Args:
            user_trust_repository: User trust repository
            trust_threshold: Approved comments needed to become trusted
            distrust_threshold: Rejections that demote a trusted user
        """
        self.user_trust_repository = user_trust_repository
        self.trust_threshold = trust_threshold
        self.distrust_threshold = distrust_threshold

    async def get_or_create(self, user_id: UserId) -> UserTrust:
        """Get a user's trust record, creating a new/0/0 record if missing.

        Args:
            user_id: User ID

        Returns:
            Trust record
        """
        with logfire.span("trust_service.get_or_create", user_id=str(user_id)):
            return await self.user_trust_repository.get_or_create(user_id)

    async def is_trusted(self, user_id: UserId) -> bool:
        """Check whether a user's comments are auto-approved.

        Args:
            user_id: User ID

        Returns:
            True if the user's trust level is trusted
        """
        trust = await self.get_or_create(user_id)
        return trust.is_trusted

    async def on_approved(self, user_id: UserId) -> UserTrust:
        """Record that an admin approved one of the user's comments.

        Args:
            user_id: Author of the approved comment

        Returns:
            Updated trust record
        """
        with logfire.span("trust_service.on_approved", user_id=str(user_id)):
            trust = await self.user_trust_repository.get_or_create(user_id, lock=True)
            updated = trust.record_approval(self.trust_threshold, datetime.now())
            saved = await self.user_trust_repository.save(updated)

            if saved.trust_level != trust.trust_level:
                logfire.info(
                    "User promoted to trusted",
                    user_id=str(user_id),
                    approved_comments=saved.approved_comments,
                )
            return saved

    async def on_rejected(self, user_id: UserId) -> UserTrust:
        """Record that an admin rejected (or marked as spam) one of the user's comments.

        Args:
            user_id: Author of the rejected comment

        Returns:
            Updated trust record
        """
        with logfire.span("trust_service.on_rejected", user_id=str(user_id)):
            trust = await self.user_trust_repository.get_or_create(user_id, lock=True)
            updated = trust.record_rejection(self.distrust_threshold, datetime.now())
            saved = await self.user_trust_repository.save(updated)

            if saved.trust_level != trust.trust_level:
                logfire.warn(
                    "Trusted user demoted, counters reset",
                    user_id=str(user_id),
                    rejected_comments=trust.rejected_comments + 1,
                )
            return saved
