"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from qalam.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    ReplyCommentRequest,
    ReplyCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from qalam.domain.error import DomainError
from qalam.domain.service import JWTService
from qalam.interface.error import to_http_exception, unauthenticated

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentContentAPIRequest(BaseModel):
    """API request carrying comment content.

    Length and blank checks happen in the domain so they read the same
    for every entry point.
    """

    content: str = Field(max_length=10000)


@router.get("/blogs/{blog_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    blog_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the approved comments of a blog, with replies.

    Public: no authentication needed.

    Args:
        blog_id: Blog UUID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Approved top-level comments, newest first, each with approved replies
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(blog_id=blog_id))
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post(
    "/blogs/{blog_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    blog_id: str,
    request: CommentContentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Comment on a blog.

    Requires authentication. The response carries the assigned status:
    approved for trusted users with clean content, otherwise pending or spam.

    Args:
        blog_id: Blog UUID
        request: Comment content
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment

    Raises:
        HTTPException: If not authenticated, blog missing or content invalid
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise unauthenticated("Authentication required to comment")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                blog_id=blog_id,
                author_id=str(actor.user_id),
                content=request.content,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post(
    "/comments/{comment_id}/replies",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    comment_id: str,
    request: CommentContentAPIRequest,
    reply_comment_use_case: FromDishka[ReplyCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Reply to a top-level comment. Replies to replies are rejected."""
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise unauthenticated("Authentication required to reply")

    try:
        return await reply_comment_use_case.execute(
            ReplyCommentRequest(
                parent_id=comment_id,
                author_id=str(actor.user_id),
                content=request.content,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.patch("/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: str,
    request: CommentContentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Edit a comment's content.

    Only the comment author can edit. The edited comment is re-screened
    and may change status.

    Args:
        comment_id: Comment UUID
        request: New content
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated comment

    Raises:
        HTTPException: If not authenticated, not authorized, or validation fails
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise unauthenticated("Authentication required to edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id,
                user_id=str(actor.user_id),
                content=request.content,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and, for top-level comments, its replies.

    Allowed for the comment author and for admins.
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise unauthenticated("Authentication required to delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                comment_id=comment_id,
                user_id=str(actor.user_id),
                role=actor.role,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
