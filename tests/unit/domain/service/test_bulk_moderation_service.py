"""Unit tests for BulkModerationService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from qalam.domain.error import NotFoundError, ValidationError
from qalam.domain.repository import (
    BlogRepository,
    CommentRepository,
    UserTrustRepository,
)
from qalam.domain.service import BulkModerationService
from qalam.domain.value import BulkAction, CommentId, CommentStatus, TrustLevel, UserId
from tests.conftest import make_blog, make_comment, make_trust
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestBulkStatusActions:
    """Tests for approve, reject and spam."""

    @pytest.mark.asyncio
    async def test_approve_mixed_statuses(self, unit_env):
        """Only comments not already approved move the counter."""
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog(comment_count=1))
        pending = await comment_repo.save(make_comment(blog.id))
        spam = await comment_repo.save(make_comment(blog.id, status=CommentStatus.SPAM))
        approved = await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED)
        )

        # Act
        summary = await service.execute(
            [pending.id, spam.id, approved.id], BulkAction.APPROVE
        )

        # Assert
        assert summary.success_count == 3
        assert summary.error_count == 0
        assert summary.total_processed == 3
        stored = await blog_repo.find_by_id(blog.id)
        assert stored.comment_count == 3
        for comment_id in (pending.id, spam.id, approved.id):
            comment = await comment_repo.find_by_id(comment_id)
            assert comment.status == CommentStatus.APPROVED
            assert comment.is_read is True

    @pytest.mark.asyncio
    async def test_unknown_ids_skipped(self, unit_env):
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        comment = await comment_repo.save(make_comment(blog.id))

        # Act
        summary = await service.execute(
            [comment.id, CommentId(uuid4()), CommentId(uuid4())], BulkAction.SPAM
        )

        # Assert
        assert summary.total_processed == 1
        assert summary.success_count == 1

    @pytest.mark.asyncio
    async def test_existing_note_kept_without_new_note(self, unit_env):
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        noted = await comment_repo.save(make_comment(blog.id, admin_note="Off topic"))

        # Act
        await service.execute([noted.id], BulkAction.REJECT)

        # Assert
        stored = await comment_repo.find_by_id(noted.id)
        assert stored.admin_note == "Off topic"

    @pytest.mark.asyncio
    async def test_new_note_overrides(self, unit_env):
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        noted = await comment_repo.save(make_comment(blog.id, admin_note="Off topic"))

        await service.execute([noted.id], BulkAction.REJECT, admin_note="Duplicate")

        stored = await comment_repo.find_by_id(noted.id)
        assert stored.admin_note == "Duplicate"

    @pytest.mark.asyncio
    async def test_trust_updated_once_per_author(self, unit_env):
        """Rejecting two approved comments of a trusted author counts once.

        The author starts with one rejection, so that single update demotes
        them; a second update would have been needed without it.
        """
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        trust_repo = await unit_env.get(UserTrustRepository)
        blog = await blog_repo.save(make_blog(comment_count=2))
        author_id = UserId(uuid4())
        await trust_repo.save(
            make_trust(author_id, TrustLevel.TRUSTED, approved=5, rejected=1)
        )
        first = await comment_repo.save(
            make_comment(blog.id, author_id=author_id, status=CommentStatus.APPROVED)
        )
        second = await comment_repo.save(
            make_comment(blog.id, author_id=author_id, status=CommentStatus.APPROVED)
        )

        # Act
        await service.execute([first.id, second.id], BulkAction.REJECT)

        # Assert
        trust = await trust_repo.find_by_user(author_id)
        assert trust.trust_level == TrustLevel.NEW
        assert trust.approved_comments == 0
        assert trust.rejected_comments == 0
        stored = await blog_repo.find_by_id(blog.id)
        assert stored.comment_count == 0

    @pytest.mark.asyncio
    async def test_single_trust_update_does_not_double_count(self, unit_env):
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        trust_repo = await unit_env.get(UserTrustRepository)
        blog = await blog_repo.save(make_blog())
        author_id = UserId(uuid4())
        comments = [
            await comment_repo.save(make_comment(blog.id, author_id=author_id))
            for _ in range(3)
        ]

        # Act
        await service.execute([c.id for c in comments], BulkAction.APPROVE)

        # Assert
        trust = await trust_repo.find_by_user(author_id)
        assert trust.approved_comments == 1
        assert trust.trust_level == TrustLevel.NEW

    @pytest.mark.asyncio
    async def test_no_trust_change_when_status_unchanged(self, unit_env):
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        trust_repo = await unit_env.get(UserTrustRepository)
        blog = await blog_repo.save(make_blog())
        comment = await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.SPAM)
        )

        await service.execute([comment.id], BulkAction.SPAM)

        assert await trust_repo.find_by_user(comment.author_id) is None


class TestBulkDelete:
    """Tests for the delete action."""

    @pytest.mark.asyncio
    async def test_delete_cascades_replies(self, unit_env):
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog(comment_count=3))
        parent = await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED)
        )
        reply = await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED, parent_id=parent.id)
        )
        survivor = await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED)
        )

        # Act
        summary = await service.execute([parent.id], BulkAction.DELETE)

        # Assert
        assert summary.success_count == 1
        assert summary.cascaded_replies == 1
        assert summary.total_processed == 1
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(survivor.id) is not None
        stored = await blog_repo.find_by_id(blog.id)
        assert stored.comment_count == 1

    @pytest.mark.asyncio
    async def test_parent_and_reply_both_selected(self, unit_env):
        """A reply listed alongside its parent is removed once."""
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog(comment_count=2))
        parent = await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED)
        )
        reply = await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED, parent_id=parent.id)
        )

        # Act
        summary = await service.execute([reply.id, parent.id], BulkAction.DELETE)

        # Assert
        assert summary.success_count == 2
        assert summary.cascaded_replies == 0
        stored = await blog_repo.find_by_id(blog.id)
        assert stored.comment_count == 0


class TestBulkMarkAsRead:
    """Tests for the markAsRead action."""

    @pytest.mark.asyncio
    async def test_marks_read_only(self, unit_env):
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        older = datetime.now() - timedelta(minutes=5)
        comments = [
            await comment_repo.save(make_comment(blog.id, created_at=older)),
            await comment_repo.save(make_comment(blog.id)),
        ]

        # Act
        summary = await service.execute([c.id for c in comments], BulkAction.MARK_AS_READ)

        # Assert
        assert summary.success_count == 2
        for comment in comments:
            stored = await comment_repo.find_by_id(comment.id)
            assert stored.is_read is True
            assert stored.status == CommentStatus.PENDING


class TestBulkItemFailures:
    """Tests for items that fail partway through a batch."""

    @pytest.mark.asyncio
    async def test_failed_item_rolled_back(self, unit_env, monkeypatch):
        """A counter failure undoes that item's status write; the rest proceed."""
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        now = datetime.now()
        first = await comment_repo.save(
            make_comment(blog.id, created_at=now - timedelta(minutes=2))
        )
        second = await comment_repo.save(
            make_comment(blog.id, created_at=now - timedelta(minutes=1))
        )

        increment = blog_repo.increment_comment_count
        calls = []

        async def fail_first_increment(blog_id):
            calls.append(blog_id)
            if len(calls) == 1:
                raise RuntimeError("connection reset")
            await increment(blog_id)

        monkeypatch.setattr(blog_repo, "increment_comment_count", fail_first_increment)

        # Act
        summary = await service.execute([first.id, second.id], BulkAction.APPROVE)

        # Assert
        assert summary.success_count == 1
        assert summary.error_count == 1
        assert summary.total_processed == 2
        failed = await comment_repo.find_by_id(first.id)
        assert failed.status == CommentStatus.PENDING
        assert failed.is_read is False
        done = await comment_repo.find_by_id(second.id)
        assert done.status == CommentStatus.APPROVED
        stored = await blog_repo.find_by_id(blog.id)
        approved = await comment_repo.find_approved_by_blog(blog.id)
        assert stored.comment_count == len(approved) == 1

    @pytest.mark.asyncio
    async def test_failed_item_leaves_trust_untouched(self, unit_env, monkeypatch):
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        trust_repo = await unit_env.get(UserTrustRepository)
        blog = await blog_repo.save(make_blog())
        failing_author = UserId(uuid4())
        other_author = UserId(uuid4())
        now = datetime.now()
        first = await comment_repo.save(
            make_comment(
                blog.id, author_id=failing_author, created_at=now - timedelta(minutes=2)
            )
        )
        second = await comment_repo.save(
            make_comment(
                blog.id, author_id=other_author, created_at=now - timedelta(minutes=1)
            )
        )

        increment = blog_repo.increment_comment_count

        async def fail_for_first(blog_id):
            stored = await comment_repo.find_by_id(first.id)
            if stored.status == CommentStatus.APPROVED:
                raise RuntimeError("deadlock detected")
            await increment(blog_id)

        monkeypatch.setattr(blog_repo, "increment_comment_count", fail_for_first)

        # Act
        summary = await service.execute([first.id, second.id], BulkAction.APPROVE)

        # Assert
        assert summary.error_count == 1
        assert await trust_repo.find_by_user(failing_author) is None
        trust = await trust_repo.find_by_user(other_author)
        assert trust.approved_comments == 1

    @pytest.mark.asyncio
    async def test_trust_failure_keeps_status_changes(self, unit_env, monkeypatch):
        """A failed ledger update is logged; the moderation itself stands."""
        # Arrange
        service = await unit_env.get(BulkModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        trust_repo = await unit_env.get(UserTrustRepository)
        blog = await blog_repo.save(make_blog())
        comment = await comment_repo.save(make_comment(blog.id))

        async def broken_save(trust):
            raise RuntimeError("disk full")

        monkeypatch.setattr(trust_repo, "save", broken_save)

        # Act
        summary = await service.execute([comment.id], BulkAction.APPROVE)

        # Assert
        assert summary.success_count == 1
        assert summary.error_count == 0
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.status == CommentStatus.APPROVED
        assert (await blog_repo.find_by_id(blog.id)).comment_count == 1
        assert await trust_repo.find_by_user(comment.author_id) is None


class TestBulkErrors:
    """Tests for invalid batches."""

    @pytest.mark.asyncio
    async def test_empty_list(self, unit_env):
        service = await unit_env.get(BulkModerationService)

        with pytest.raises(ValidationError):
            await service.execute([], BulkAction.APPROVE)

    @pytest.mark.asyncio
    async def test_none_found(self, unit_env):
        service = await unit_env.get(BulkModerationService)

        with pytest.raises(NotFoundError):
            await service.execute([CommentId(uuid4())], BulkAction.DELETE)
