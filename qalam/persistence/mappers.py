"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from qalam.domain.model import Blog, Comment, UserTrust
from qalam.domain.value import (
    BlogId,
    CommentId,
    CommentStatus,
    TrustLevel,
    UserId,
    UserTrustId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_blog(row: Dict[str, Any]) -> Blog:
    """Convert database row to Blog domain model.

    Args:
        row: Database row as dict

    Returns:
        Blog domain model
    """
    return Blog(
        id=BlogId(_uuid(row["id"])),
        title=row["title"],
        author_id=UserId(_uuid(row["author_id"])),
        comment_count=row["comment_count"],
        created_at=row["created_at"],
    )


def blog_to_dict(blog: Blog) -> Dict[str, Any]:
    """Convert Blog domain model to database dict."""
    return blog.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        blog_id=BlogId(_uuid(row["blog_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        status=CommentStatus(row["status"]),
        is_read=row["is_read"],
        admin_note=row.get("admin_note"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    data["status"] = comment.status.value
    return data


def row_to_user_trust(row: Dict[str, Any]) -> UserTrust:
    """Convert database row to UserTrust domain model."""
    return UserTrust(
        id=UserTrustId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        trust_level=TrustLevel(row["trust_level"]),
        approved_comments=row["approved_comments"],
        rejected_comments=row["rejected_comments"],
        last_status_change=row.get("last_status_change"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_trust_to_dict(trust: UserTrust) -> Dict[str, Any]:
    """Convert UserTrust domain model to database dict."""
    data = trust.model_dump()
    data["trust_level"] = trust.trust_level.value
    return data
