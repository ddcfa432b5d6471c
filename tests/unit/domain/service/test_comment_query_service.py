"""Unit tests for CommentQueryService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from qalam.domain.error import NotFoundError
from qalam.domain.repository import BlogRepository, CommentFilter, CommentRepository
from qalam.domain.service import CommentQueryService
from qalam.domain.value import BlogId, CommentStatus, UserId
from tests.conftest import make_blog, make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetBlogThread:
    """Tests for get_blog_thread method."""

    @pytest.mark.asyncio
    async def test_only_approved_visible_and_ordered(self, unit_env):
        # Arrange
        query_service = await unit_env.get(CommentQueryService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        base = datetime.now() - timedelta(hours=1)

        older = await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED, created_at=base)
        )
        newer = await comment_repo.save(
            make_comment(
                blog.id,
                status=CommentStatus.APPROVED,
                created_at=base + timedelta(minutes=10),
            )
        )
        await comment_repo.save(
            make_comment(blog.id, created_at=base + timedelta(minutes=20))
        )
        late_reply = await comment_repo.save(
            make_comment(
                blog.id,
                status=CommentStatus.APPROVED,
                parent_id=older.id,
                created_at=base + timedelta(minutes=30),
            )
        )
        early_reply = await comment_repo.save(
            make_comment(
                blog.id,
                status=CommentStatus.APPROVED,
                parent_id=older.id,
                created_at=base + timedelta(minutes=5),
            )
        )
        await comment_repo.save(
            make_comment(
                blog.id,
                status=CommentStatus.SPAM,
                parent_id=older.id,
                created_at=base + timedelta(minutes=6),
            )
        )

        # Act
        threads = await query_service.get_blog_thread(blog.id)

        # Assert
        assert [t.comment.id for t in threads] == [newer.id, older.id]
        assert threads[0].replies == []
        assert [r.id for r in threads[1].replies] == [early_reply.id, late_reply.id]

    @pytest.mark.asyncio
    async def test_approved_reply_of_hidden_parent_not_shown(self, unit_env):
        # Arrange
        query_service = await unit_env.get(CommentQueryService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        parent = await comment_repo.save(make_comment(blog.id))
        await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED, parent_id=parent.id)
        )

        # Act
        threads = await query_service.get_blog_thread(blog.id)

        # Assert
        assert threads == []

    @pytest.mark.asyncio
    async def test_missing_blog(self, unit_env):
        query_service = await unit_env.get(CommentQueryService)

        with pytest.raises(NotFoundError):
            await query_service.get_blog_thread(BlogId(uuid4()))


class TestListComments:
    """Tests for list_comments method."""

    @pytest.mark.asyncio
    async def test_filters_and_pagination(self, unit_env):
        # Arrange
        query_service = await unit_env.get(CommentQueryService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        other_blog = await blog_repo.save(make_blog())
        base = datetime.now() - timedelta(hours=1)
        pending = [
            await comment_repo.save(
                make_comment(blog.id, created_at=base + timedelta(minutes=i))
            )
            for i in range(5)
        ]
        await comment_repo.save(make_comment(blog.id, status=CommentStatus.APPROVED))
        await comment_repo.save(make_comment(other_blog.id))

        # Act
        page, total = await query_service.list_comments(
            CommentFilter(status=CommentStatus.PENDING, blog_id=blog.id),
            limit=2,
            offset=2,
        )

        # Assert
        assert total == 5
        assert [c.id for c in page] == [pending[2].id, pending[1].id]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, unit_env):
        # Arrange
        query_service = await unit_env.get(CommentQueryService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        match = await comment_repo.save(make_comment(blog.id, content="Hadith of Jibril"))
        await comment_repo.save(make_comment(blog.id, content="Unrelated"))

        # Act
        page, total = await query_service.list_comments(CommentFilter(search="jibril"))

        # Assert
        assert total == 1
        assert page[0].id == match.id

    @pytest.mark.asyncio
    async def test_unread_filter(self, unit_env):
        query_service = await unit_env.get(CommentQueryService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        await comment_repo.save(make_comment(blog.id, is_read=True))
        unread = await comment_repo.save(make_comment(blog.id))

        page, total = await query_service.list_comments(CommentFilter(is_read=False))

        assert total == 1
        assert page[0].id == unread.id


class TestCountsAndStats:
    """Tests for count_by_status and get_stats."""

    @pytest.mark.asyncio
    async def test_counts(self, unit_env):
        # Arrange
        query_service = await unit_env.get(CommentQueryService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        await comment_repo.save(make_comment(blog.id))
        await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED, is_read=True)
        )
        await comment_repo.save(make_comment(blog.id, status=CommentStatus.SPAM))

        # Act
        counts = await query_service.count_by_status()

        # Assert
        assert counts.pending == 1
        assert counts.approved == 1
        assert counts.rejected == 0
        assert counts.spam == 1
        assert counts.unread == 2
        assert counts.total == 3

    @pytest.mark.asyncio
    async def test_stats(self, unit_env):
        # Arrange
        query_service = await unit_env.get(CommentQueryService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        busy_blog = await blog_repo.save(make_blog())
        quiet_blog = await blog_repo.save(make_blog())
        regular = UserId(uuid4())
        for _ in range(2):
            await comment_repo.save(
                make_comment(busy_blog.id, author_id=regular, status=CommentStatus.APPROVED)
            )
        await comment_repo.save(make_comment(busy_blog.id, author_id=regular))
        await comment_repo.save(
            make_comment(
                quiet_blog.id,
                status=CommentStatus.REJECTED,
                created_at=datetime.now() - timedelta(days=30),
            )
        )

        # Act
        stats = await query_service.get_stats(days=7)

        # Assert
        assert stats.approval_rate == 50.0
        assert stats.top_blogs[0] == (busy_blog.id, 3)
        assert stats.top_authors[0] == (regular, 3)
        assert sum(count for _, count in stats.by_day) == 3

    @pytest.mark.asyncio
    async def test_stats_without_comments(self, unit_env):
        query_service = await unit_env.get(CommentQueryService)

        stats = await query_service.get_stats()

        assert stats.approval_rate == 0.0
        assert stats.top_blogs == []
        assert stats.by_day == []
