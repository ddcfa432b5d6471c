"""Unit tests for AdminDeleteCommentUseCase."""

from uuid import uuid4

import pytest

from qalam.application.usecase.admin import (
    AdminDeleteCommentRequest,
    AdminDeleteCommentUseCase,
)
from qalam.domain.error import NotFoundError
from qalam.domain.repository import BlogRepository, CommentRepository
from qalam.domain.value import CommentStatus, UserRole
from tests.conftest import make_blog, make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAdminDeleteCommentUseCase:
    """Tests for AdminDeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_deletes_any_comment(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AdminDeleteCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await blog_repo.save(make_blog(comment_count=1))
        comment = await comment_repo.save(
            make_comment(blog.id, status=CommentStatus.APPROVED)
        )

        # Act
        response = await use_case.execute(
            AdminDeleteCommentRequest(
                user_id=str(uuid4()), role=UserRole.ADMIN, comment_id=str(comment.id)
            )
        )

        # Assert
        assert response.deleted_count == 1
        assert await comment_repo.find_by_id(comment.id) is None
        stored_blog = await blog_repo.find_by_id(blog.id)
        assert stored_blog.comment_count == 0

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        use_case = await unit_env.get(AdminDeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AdminDeleteCommentRequest(
                    user_id=str(uuid4()), role=UserRole.ADMIN, comment_id=str(uuid4())
                )
            )
