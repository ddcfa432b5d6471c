"""Response models shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from qalam.domain.model import Comment
from qalam.domain.value import CommentStatus


class CommentResponse(BaseModel):
    """A comment as returned to clients."""

    comment_id: str
    blog_id: str
    author_id: str
    content: str
    parent_id: str | None
    status: CommentStatus
    is_read: bool
    admin_note: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            blog_id=str(comment.blog_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            status=comment.status,
            is_read=comment.is_read,
            admin_note=comment.admin_note,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
