"""Admin comment moderation routes.

Every route requires a session token; the use cases reject non-admins
with 403.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel, Field

from qalam.application.usecase.admin import (
    AdminDeleteCommentRequest,
    AdminDeleteCommentUseCase,
    BulkActionRequest,
    BulkActionResponse,
    BulkActionUseCase,
    CommentCountsResponse,
    CommentStatsResponse,
    GetCommentCountsRequest,
    GetCommentCountsUseCase,
    GetCommentStatsRequest,
    GetCommentStatsUseCase,
    GetUserTrustRequest,
    GetUserTrustUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    MarkCommentReadRequest,
    MarkCommentReadUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
    UserTrustResponse,
)
from qalam.application.usecase.comment import CommentResponse, DeleteCommentResponse
from qalam.domain.error import DomainError
from qalam.domain.service import JWTService
from qalam.domain.value import Actor, BulkAction, CommentStatus
from qalam.interface.error import to_http_exception, unauthenticated

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


def _require_actor(jwt_service: JWTService, auth_token: str | None) -> Actor:
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise unauthenticated("Admin access requires authentication")
    return actor


class ModerateCommentAPIRequest(BaseModel):
    """API request for an admin status decision."""

    status: CommentStatus
    admin_note: str | None = Field(default=None, max_length=1000)


class BulkActionAPIRequest(BaseModel):
    """API request for a bulk action."""

    comment_ids: list[str]
    action: BulkAction
    admin_note: str | None = Field(default=None, max_length=1000)


@router.get("/comments", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    status: CommentStatus | None = Query(default=None),
    blog_id: str | None = Query(default=None),
    is_read: bool | None = Query(default=None),
    search: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
) -> ListCommentsResponse:
    """List comments for moderation, newest first.

    Args:
        list_comments_use_case: Listing use case from DI
        jwt_service: JWT service for token verification (injected)
        status: Only comments with this status
        blog_id: Only comments on this blog
        is_read: Only read (true) or unread (false) comments
        search: Case-insensitive substring of the content
        page: 1-based page number
        limit: Page size
        auth_token: JWT token from cookie

    Returns:
        One page of comments with pagination totals
    """
    actor = _require_actor(jwt_service, auth_token)
    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(
                user_id=str(actor.user_id),
                role=actor.role,
                status=status,
                blog_id=blog_id,
                is_read=is_read,
                search=search,
                page=page,
                limit=limit,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/comments/counts", response_model=CommentCountsResponse)
async def comment_counts(
    comment_counts_use_case: FromDishka[GetCommentCountsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentCountsResponse:
    """Comment totals per status plus unread, for dashboard badges."""
    actor = _require_actor(jwt_service, auth_token)
    try:
        return await comment_counts_use_case.execute(
            GetCommentCountsRequest(user_id=str(actor.user_id), role=actor.role)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/comments/stats", response_model=CommentStatsResponse)
async def comment_stats(
    comment_stats_use_case: FromDishka[GetCommentStatsUseCase],
    jwt_service: FromDishka[JWTService],
    days: int = Query(default=7, ge=1, le=90),
    auth_token: str | None = Cookie(default=None),
) -> CommentStatsResponse:
    """Moderation statistics: counts, approval rate, top blogs and users, per-day volume."""
    actor = _require_actor(jwt_service, auth_token)
    try:
        return await comment_stats_use_case.execute(
            GetCommentStatsRequest(user_id=str(actor.user_id), role=actor.role, days=days)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/comments/bulk", response_model=BulkActionResponse)
async def bulk_action(
    request: BulkActionAPIRequest,
    bulk_action_use_case: FromDishka[BulkActionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BulkActionResponse:
    """Apply approve, reject, spam, delete or markAsRead to many comments.

    Unknown IDs are skipped; 404 if none of the IDs exist.
    """
    actor = _require_actor(jwt_service, auth_token)
    try:
        return await bulk_action_use_case.execute(
            BulkActionRequest(
                user_id=str(actor.user_id),
                role=actor.role,
                comment_ids=request.comment_ids,
                action=request.action,
                admin_note=request.admin_note,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.patch("/comments/{comment_id}/status", response_model=CommentResponse)
async def moderate_comment(
    comment_id: str,
    request: ModerateCommentAPIRequest,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Approve, reject or mark a comment as spam.

    Args:
        comment_id: Comment UUID
        request: New status and optional admin note
        moderate_comment_use_case: Moderation use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Moderated comment

    Raises:
        HTTPException: 401/403 for non-admins, 400 for pending, 404 if missing
    """
    actor = _require_actor(jwt_service, auth_token)
    try:
        return await moderate_comment_use_case.execute(
            ModerateCommentRequest(
                user_id=str(actor.user_id),
                role=actor.role,
                comment_id=comment_id,
                status=request.status,
                admin_note=request.admin_note,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.patch("/comments/{comment_id}/read", response_model=CommentResponse)
async def mark_comment_read(
    comment_id: str,
    mark_comment_read_use_case: FromDishka[MarkCommentReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Mark a comment as read."""
    actor = _require_actor(jwt_service, auth_token)
    try:
        return await mark_comment_read_use_case.execute(
            MarkCommentReadRequest(
                user_id=str(actor.user_id), role=actor.role, comment_id=comment_id
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    admin_delete_comment_use_case: FromDishka[AdminDeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete any comment, replies included."""
    actor = _require_actor(jwt_service, auth_token)
    try:
        return await admin_delete_comment_use_case.execute(
            AdminDeleteCommentRequest(
                user_id=str(actor.user_id), role=actor.role, comment_id=comment_id
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/users/{user_id}/trust", response_model=UserTrustResponse)
async def get_user_trust(
    user_id: str,
    get_user_trust_use_case: FromDishka[GetUserTrustUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserTrustResponse:
    """Read a user's trust level and moderation counters."""
    actor = _require_actor(jwt_service, auth_token)
    try:
        return await get_user_trust_use_case.execute(
            GetUserTrustRequest(
                user_id=str(actor.user_id), role=actor.role, target_user_id=user_id
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
