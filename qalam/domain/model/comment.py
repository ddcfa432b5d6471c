"""Comment entity.

Comments are two levels deep: a top-level comment on a blog, and replies
to that comment. Replies cannot be replied to.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qalam.domain.model.common import DomainModel
from qalam.domain.value import BlogId, CommentId, CommentStatus, UserId

MAX_CONTENT_LENGTH = 1000


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a blog or a reply to a top-level comment.

    - parent_id: Top-level comment being replied to (None for top-level)
    - status: Moderation status; only approved comments are public
    - is_read: Whether an admin has seen the comment since its last change
    """

    id: CommentId
    blog_id: BlogId
    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_id: Optional[CommentId] = None
    status: CommentStatus = CommentStatus.PENDING
    is_read: bool = False
    admin_note: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @property
    def is_approved(self) -> bool:
        return self.status == CommentStatus.APPROVED
