"""Mock persistence providers for testing."""

from dishka import Provider, Scope, provide

from qalam.domain.repository import (
    BlogRepository,
    CommentRepository,
    TransactionScope,
    UserTrustRepository,
)
from qalam.persistence.repository.inmemory import (
    InMemoryBlogRepository,
    InMemoryCommentRepository,
    InMemoryTransactionScope,
    InMemoryUserTrustRepository,
)
from qalam.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_blog_repository(self) -> BlogRepository:
        """Provide in-memory blog repository."""
        return InMemoryBlogRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.REQUEST)
    def get_user_trust_repository(self) -> UserTrustRepository:
        """Provide in-memory user trust repository."""
        return InMemoryUserTrustRepository()

    @provide(scope=Scope.REQUEST)
    def get_transaction_scope(
        self,
        blogs: BlogRepository,
        comments: CommentRepository,
        trusts: UserTrustRepository,
    ) -> TransactionScope:
        """Provide savepoints over this request's in-memory repositories."""
        return InMemoryTransactionScope(blogs, comments, trusts)


class SharedInMemoryPersistenceProvider(Provider):
    """In-memory repositories that live as long as the container.

    For end-to-end flows spanning several HTTP requests. Tests seed data
    through the instance attributes.
    """

    scope = Scope.APP

    def __init__(self) -> None:
        super().__init__()
        self.blogs = InMemoryBlogRepository()
        self.comments = InMemoryCommentRepository()
        self.trusts = InMemoryUserTrustRepository()

    @provide
    def get_blog_repository(self) -> BlogRepository:
        return self.blogs

    @provide
    def get_comment_repository(self) -> CommentRepository:
        return self.comments

    @provide
    def get_user_trust_repository(self) -> UserTrustRepository:
        return self.trusts

    @provide
    def get_transaction_scope(self) -> TransactionScope:
        return InMemoryTransactionScope(self.blogs, self.comments, self.trusts)
