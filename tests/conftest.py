"""Test configuration and shared builders."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from qalam.config import AuthSettings, Settings
from qalam.domain.model import Blog, Comment, UserTrust
from qalam.domain.value import (
    BlogId,
    CommentId,
    CommentStatus,
    TrustLevel,
    UserId,
    UserRole,
    UserTrustId,
)


def make_blog(comment_count: int = 0) -> Blog:
    """Build a blog with a fresh ID."""
    return Blog(
        id=BlogId(uuid4()),
        title="Ramadan reflections",
        author_id=UserId(uuid4()),
        comment_count=comment_count,
        created_at=datetime.now(),
    )


def make_comment(
    blog_id: BlogId,
    author_id: UserId | None = None,
    status: CommentStatus = CommentStatus.PENDING,
    parent_id: CommentId | None = None,
    content: str = "Jazakallah khair for sharing",
    created_at: datetime | None = None,
    is_read: bool = False,
    admin_note: str | None = None,
) -> Comment:
    """Build a comment directly, bypassing the service's status rules."""
    now = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        blog_id=blog_id,
        author_id=author_id or UserId(uuid4()),
        content=content,
        parent_id=parent_id,
        status=status,
        is_read=is_read,
        admin_note=admin_note,
        created_at=now,
        updated_at=now,
    )


def make_trust(
    user_id: UserId,
    trust_level: TrustLevel = TrustLevel.NEW,
    approved: int = 0,
    rejected: int = 0,
) -> UserTrust:
    """Build a trust record in a given state."""
    return UserTrust(
        id=UserTrustId(uuid4()),
        user_id=user_id,
        trust_level=trust_level,
        approved_comments=approved,
        rejected_comments=rejected,
    )


def make_token(
    user_id: UserId | str,
    role: UserRole = UserRole.USER,
    settings: AuthSettings | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Encode a session token the way the auth service issues them."""
    settings = settings or Settings().auth
    payload = {
        "user_id": str(user_id),
        "role": role.value,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
