"""User trust record.

One record per user that has had a moderation decision recorded.
Trusted users have their clean comments approved without review.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qalam.domain.model.common import DomainModel
from qalam.domain.value import TrustLevel, UserId, UserTrustId


class UserTrust(DomainModel):
    """Per-user moderation counters and derived trust level.

    Transitions are only produced by record_approval/record_rejection,
    which the trust service calls on admin moderation decisions.
    """

    id: UserTrustId
    user_id: UserId
    trust_level: TrustLevel = TrustLevel.NEW
    approved_comments: int = Field(default=0, ge=0)
    rejected_comments: int = Field(default=0, ge=0)
    last_status_change: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_trusted(self) -> bool:
        return self.trust_level == TrustLevel.TRUSTED

    def record_approval(self, threshold: int, now: datetime) -> "UserTrust":
        """Count an approved comment, escalating new users at the threshold.

        Escalation is one-way here; rejected_comments is left untouched.
        """
        approved = self.approved_comments + 1
        update: dict = {"approved_comments": approved, "updated_at": now}
        if approved >= threshold and self.trust_level == TrustLevel.NEW:
            update["trust_level"] = TrustLevel.TRUSTED
            update["last_status_change"] = now
        return self.model_copy(update=update)

    def record_rejection(self, threshold: int, now: datetime) -> "UserTrust":
        """Count a rejected comment, demoting trusted users at the threshold.

        Demotion resets both counters so trust has to be earned again.
        """
        rejected = self.rejected_comments + 1
        if rejected >= threshold and self.trust_level == TrustLevel.TRUSTED:
            return self.model_copy(
                update={
                    "trust_level": TrustLevel.NEW,
                    "approved_comments": 0,
                    "rejected_comments": 0,
                    "last_status_change": now,
                    "updated_at": now,
                }
            )
        return self.model_copy(
            update={"rejected_comments": rejected, "updated_at": now}
        )
