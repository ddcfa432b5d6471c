"""Unit tests for CommentCounterService."""

from uuid import uuid4

import pytest

from qalam.domain.repository import BlogRepository
from qalam.domain.service import CommentCounterService
from qalam.domain.value import BlogId, CommentStatus
from tests.conftest import make_blog
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

APPROVED = CommentStatus.APPROVED
PENDING = CommentStatus.PENDING
REJECTED = CommentStatus.REJECTED
SPAM = CommentStatus.SPAM


class TestSyncOnTransition:
    """Tests for sync_on_transition method."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "previous,new,delta",
        [
            (None, APPROVED, 1),
            (None, PENDING, 0),
            (None, SPAM, 0),
            (PENDING, APPROVED, 1),
            (REJECTED, APPROVED, 1),
            (APPROVED, APPROVED, 0),
            (APPROVED, REJECTED, -1),
            (APPROVED, SPAM, -1),
            (APPROVED, PENDING, -1),
            (APPROVED, None, -1),
            (PENDING, None, 0),
            (SPAM, REJECTED, 0),
        ],
    )
    async def test_delta(self, unit_env, previous, new, delta):
        """Only crossings of approved move the counter."""
        # Arrange
        counter_service = await unit_env.get(CommentCounterService)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog(comment_count=5))

        # Act
        applied = await counter_service.sync_on_transition(blog.id, previous, new)

        # Assert
        assert applied == delta
        stored = await blog_repo.find_by_id(blog.id)
        assert stored.comment_count == 5 + delta

    @pytest.mark.asyncio
    async def test_never_negative(self, unit_env):
        """Decrementing an empty counter leaves it at zero."""
        # Arrange
        counter_service = await unit_env.get(CommentCounterService)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog(comment_count=0))

        # Act
        await counter_service.sync_on_transition(blog.id, APPROVED, REJECTED)

        # Assert
        stored = await blog_repo.find_by_id(blog.id)
        assert stored.comment_count == 0

    @pytest.mark.asyncio
    async def test_missing_blog_is_ignored(self, unit_env):
        counter_service = await unit_env.get(CommentCounterService)

        applied = await counter_service.sync_on_transition(
            BlogId(uuid4()), PENDING, APPROVED
        )

        assert applied == 1
