"""Domain layer DI providers."""

from dishka import Scope, provide

from qalam.config import AuthSettings, ModerationSettings
from qalam.domain.repository import (
    BlogRepository,
    CommentRepository,
    TransactionScope,
    UserTrustRepository,
)
from qalam.domain.service import (
    BulkModerationService,
    CommentCounterService,
    CommentQueryService,
    CommentService,
    ContentFilter,
    JWTService,
    TrustService,
)
from qalam.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_content_filter(self, moderation: ModerationSettings) -> ContentFilter:
        """Provide content filter configured with the forbidden word list."""
        return ContentFilter(
            forbidden_words=moderation.forbidden_words,
            max_links=moderation.max_links,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_trust_service(
        self,
        user_trust_repository: UserTrustRepository,
        moderation: ModerationSettings,
    ) -> TrustService:
        """Provide trust ledger domain service."""
        return TrustService(
            user_trust_repository=user_trust_repository,
            trust_threshold=moderation.trust_threshold,
            distrust_threshold=moderation.distrust_threshold,
        )

    @provide
    def get_counter_service(
        self, blog_repository: BlogRepository
    ) -> CommentCounterService:
        """Provide blog comment counter service."""
        return CommentCounterService(blog_repository=blog_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
        content_filter: ContentFilter,
        trust_service: TrustService,
        counter_service: CommentCounterService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            blog_repository=blog_repository,
            content_filter=content_filter,
            trust_service=trust_service,
            counter_service=counter_service,
        )

    @provide
    def get_bulk_moderation_service(
        self,
        comment_repository: CommentRepository,
        comment_service: CommentService,
        trust_service: TrustService,
        counter_service: CommentCounterService,
        transaction: TransactionScope,
    ) -> BulkModerationService:
        """Provide bulk moderation domain service."""
        return BulkModerationService(
            comment_repository=comment_repository,
            comment_service=comment_service,
            trust_service=trust_service,
            counter_service=counter_service,
            transaction=transaction,
        )

    @provide
    def get_comment_query_service(
        self,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
    ) -> CommentQueryService:
        """Provide comment query domain service."""
        return CommentQueryService(
            comment_repository=comment_repository,
            blog_repository=blog_repository,
        )
