"""Domain model entities for Qalam."""

from qalam.domain.model.blog import Blog
from qalam.domain.model.comment import Comment
from qalam.domain.model.user_trust import UserTrust

__all__ = [
    "Blog",
    "Comment",
    "UserTrust",
]
