"""JWT token utilities."""

from datetime import datetime

import jwt
from pydantic import BaseModel

from qalam.config import AuthSettings
from qalam.domain.value import UserRole


class TokenPayload(BaseModel):
    """JWT token payload, as issued by the auth service."""

    user_id: str
    role: UserRole = UserRole.USER
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValueError:
        raise JWTError("Malformed token payload")
