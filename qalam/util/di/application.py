"""Application layer DI providers."""

from dishka import Scope, provide

from qalam.application.usecase.admin import (
    AdminDeleteCommentUseCase,
    BulkActionUseCase,
    GetCommentCountsUseCase,
    GetCommentStatsUseCase,
    GetUserTrustUseCase,
    ListCommentsUseCase,
    MarkCommentReadUseCase,
    ModerateCommentUseCase,
)
from qalam.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ReplyCommentUseCase,
    UpdateCommentUseCase,
)
from qalam.domain.service import (
    BulkModerationService,
    CommentQueryService,
    CommentService,
    TrustService,
)
from qalam.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_reply_comment_use_case(
        self, comment_service: CommentService
    ) -> ReplyCommentUseCase:
        """Provide reply comment use case."""
        return ReplyCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_query_service: CommentQueryService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_query_service=comment_query_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_moderate_comment_use_case(
        self, comment_service: CommentService
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_comment_read_use_case(
        self, comment_service: CommentService
    ) -> MarkCommentReadUseCase:
        """Provide mark comment read use case."""
        return MarkCommentReadUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_admin_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> AdminDeleteCommentUseCase:
        """Provide admin delete comment use case."""
        return AdminDeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_bulk_action_use_case(
        self, bulk_moderation_service: BulkModerationService
    ) -> BulkActionUseCase:
        """Provide bulk action use case."""
        return BulkActionUseCase(bulk_moderation_service=bulk_moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_query_service: CommentQueryService
    ) -> ListCommentsUseCase:
        """Provide admin comment listing use case."""
        return ListCommentsUseCase(comment_query_service=comment_query_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_counts_use_case(
        self, comment_query_service: CommentQueryService
    ) -> GetCommentCountsUseCase:
        """Provide comment counts use case."""
        return GetCommentCountsUseCase(comment_query_service=comment_query_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_stats_use_case(
        self, comment_query_service: CommentQueryService
    ) -> GetCommentStatsUseCase:
        """Provide comment statistics use case."""
        return GetCommentStatsUseCase(comment_query_service=comment_query_service)

    @provide(scope=Scope.REQUEST)
    def get_user_trust_use_case(self, trust_service: TrustService) -> GetUserTrustUseCase:
        """Provide get user trust use case."""
        return GetUserTrustUseCase(trust_service=trust_service)
