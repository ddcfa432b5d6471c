"""Blog entity.

Blogs are owned by the content module; moderation only reads them and
keeps their approved comment count current.
"""

from datetime import datetime

from pydantic import Field

from qalam.domain.model.common import DomainModel
from qalam.domain.value import BlogId, UserId


class Blog(DomainModel):
    """Blog post that comments attach to.

    comment_count is denormalized: it always equals the number of approved
    comments (top-level and replies) on the blog.
    """

    id: BlogId
    title: str = Field(min_length=1, max_length=255)
    author_id: UserId
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
