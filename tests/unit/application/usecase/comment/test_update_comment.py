"""Unit tests for UpdateCommentUseCase."""

from uuid import uuid4

import pytest

from qalam.application.usecase.comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from qalam.domain.error import AuthorizationError, NotFoundError
from qalam.domain.repository import BlogRepository, CommentRepository
from qalam.domain.value import CommentStatus
from tests.conftest import make_blog, make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_comment_success(self, unit_env):
        """The author can edit; the comment returns to the review queue."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog(comment_count=1))
        comment = await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED, is_read=True)
        )

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment.id),
                user_id=str(comment.author_id),
                content="Updated reflection",
            )
        )

        # Assert
        assert response.content == "Updated reflection"
        assert response.status == CommentStatus.PENDING
        assert response.is_read is False
        stored_blog = await blog_repo.find_by_id(blog.id)
        assert stored_blog.comment_count == 0

    @pytest.mark.asyncio
    async def test_update_by_other_user(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog())
        comment = await comment_repo.save(make_comment(blog.id))

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id),
                    user_id=str(uuid4()),
                    content="Not mine",
                )
            )

    @pytest.mark.asyncio
    async def test_update_missing_comment(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(uuid4()), user_id=str(uuid4()), content="Edit"
                )
            )
