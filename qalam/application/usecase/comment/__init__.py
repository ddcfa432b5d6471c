"""Comment use cases."""

from .common import CommentResponse
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    CommentThreadResponse,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .reply_comment import ReplyCommentRequest, ReplyCommentUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentResponse",
    "CommentThreadResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ReplyCommentRequest",
    "ReplyCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
