"""JWT token domain service."""

from uuid import UUID

import logfire

from qalam.config import AuthSettings
from qalam.domain.value import Actor, UserId
from qalam.util.jwt import TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for verifying session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info(
                    "JWT token verified",
                    user_id=payload.user_id,
                    role=payload.role.value,
                )
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_actor_from_token(self, token: str | None) -> Actor | None:
        """Resolve the calling user from a JWT token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Actor if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Actor(user_id=UserId(UUID(payload.user_id)), role=payload.role)
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
