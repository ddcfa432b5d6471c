"""Helpers shared by admin use cases."""

import logfire
from pydantic import BaseModel

from qalam.domain.error import AuthorizationError
from qalam.domain.value import UserRole


class AdminRequest(BaseModel):
    """Fields every admin request carries: who is asking."""

    user_id: str
    role: UserRole = UserRole.USER


def require_admin(
    request: AdminRequest, action: str, resource: str, resource_id: str = "*"
) -> None:
    """Reject non-admin callers.

    Raises:
        AuthorizationError: If the caller is not an admin
    """
    if request.role != UserRole.ADMIN:
        logfire.warn(
            "Admin action attempted by non-admin",
            user_id=request.user_id,
            action=action,
            resource=resource,
        )
        raise AuthorizationError(request.user_id, action, resource, resource_id)
