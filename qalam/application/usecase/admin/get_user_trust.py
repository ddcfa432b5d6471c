"""Get user trust use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qalam.application.usecase.base import BaseUseCase
from qalam.domain.service import TrustService
from qalam.domain.value import TrustLevel, UserId

from .common import AdminRequest, require_admin


class GetUserTrustRequest(AdminRequest):
    """Get user trust request."""

    target_user_id: str


class UserTrustResponse(BaseModel):
    """A user's trust record."""

    user_id: str
    trust_level: TrustLevel
    approved_comments: int
    rejected_comments: int
    last_status_change: datetime | None


class GetUserTrustUseCase(BaseUseCase):
    """Use case for inspecting a user's trust record."""

    def __init__(self, trust_service: TrustService) -> None:
        self.trust_service = trust_service

    async def execute(self, request: GetUserTrustRequest) -> UserTrustResponse:
        """Execute get user trust flow.

        Users without a record get a fresh new/0/0 record.

        Raises:
            AuthorizationError: If the caller is not an admin
        """
        require_admin(request, "read", "user_trust", request.target_user_id)
        trust = await self.trust_service.get_or_create(
            UserId(UUID(request.target_user_id))
        )
        return UserTrustResponse(
            user_id=str(trust.user_id),
            trust_level=trust.trust_level,
            approved_comments=trust.approved_comments,
            rejected_comments=trust.rejected_comments,
            last_status_change=trust.last_status_change,
        )
