"""Unit tests for TrustService."""

from uuid import uuid4

import pytest

from qalam.domain.repository import UserTrustRepository
from qalam.domain.service import TrustService
from qalam.domain.value import TrustLevel, UserId
from tests.conftest import make_trust
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetOrCreate:
    """Tests for get_or_create and is_trusted."""

    @pytest.mark.asyncio
    async def test_unknown_user_gets_fresh_record(self, unit_env):
        # Arrange
        trust_service = await unit_env.get(TrustService)
        user_id = UserId(uuid4())

        # Act
        trust = await trust_service.get_or_create(user_id)

        # Assert
        assert trust.user_id == user_id
        assert trust.trust_level == TrustLevel.NEW
        assert trust.approved_comments == 0
        assert trust.rejected_comments == 0
        assert trust.last_status_change is None

    @pytest.mark.asyncio
    async def test_repeated_calls_return_same_record(self, unit_env):
        trust_service = await unit_env.get(TrustService)
        user_id = UserId(uuid4())

        first = await trust_service.get_or_create(user_id)
        second = await trust_service.get_or_create(user_id)

        assert first.id == second.id

    @pytest.mark.asyncio
    async def test_is_trusted(self, unit_env):
        # Arrange
        trust_service = await unit_env.get(TrustService)
        trust_repo = await unit_env.get(UserTrustRepository)
        trusted_id = UserId(uuid4())
        await trust_repo.save(make_trust(trusted_id, TrustLevel.TRUSTED, approved=4))

        # Act & Assert
        assert await trust_service.is_trusted(trusted_id)
        assert not await trust_service.is_trusted(UserId(uuid4()))


class TestOnApproved:
    """Tests for on_approved method."""

    @pytest.mark.asyncio
    async def test_promotes_on_third_approval(self, unit_env):
        # Arrange
        trust_service = await unit_env.get(TrustService)
        user_id = UserId(uuid4())

        # Act
        first = await trust_service.on_approved(user_id)
        second = await trust_service.on_approved(user_id)
        third = await trust_service.on_approved(user_id)

        # Assert
        assert first.trust_level == TrustLevel.NEW
        assert second.trust_level == TrustLevel.NEW
        assert second.last_status_change is None
        assert third.trust_level == TrustLevel.TRUSTED
        assert third.approved_comments == 3
        assert third.last_status_change is not None

    @pytest.mark.asyncio
    async def test_persists_changes(self, unit_env):
        trust_service = await unit_env.get(TrustService)
        trust_repo = await unit_env.get(UserTrustRepository)
        user_id = UserId(uuid4())

        await trust_service.on_approved(user_id)

        stored = await trust_repo.find_by_user(user_id)
        assert stored.approved_comments == 1


class TestOnRejected:
    """Tests for on_rejected method."""

    @pytest.mark.asyncio
    async def test_new_user_never_demoted(self, unit_env):
        # Arrange
        trust_service = await unit_env.get(TrustService)
        user_id = UserId(uuid4())

        # Act
        for _ in range(5):
            trust = await trust_service.on_rejected(user_id)

        # Assert
        assert trust.trust_level == TrustLevel.NEW
        assert trust.rejected_comments == 5
        assert trust.last_status_change is None

    @pytest.mark.asyncio
    async def test_trusted_user_demoted_on_second_rejection(self, unit_env):
        # Arrange
        trust_service = await unit_env.get(TrustService)
        trust_repo = await unit_env.get(UserTrustRepository)
        user_id = UserId(uuid4())
        await trust_repo.save(make_trust(user_id, TrustLevel.TRUSTED, approved=6))

        # Act
        first = await trust_service.on_rejected(user_id)
        second = await trust_service.on_rejected(user_id)

        # Assert
        assert first.trust_level == TrustLevel.TRUSTED
        assert first.rejected_comments == 1
        assert second.trust_level == TrustLevel.NEW
        assert second.approved_comments == 0
        assert second.rejected_comments == 0
        assert second.last_status_change is not None

    @pytest.mark.asyncio
    async def test_demoted_user_must_earn_trust_again(self, unit_env):
        # Arrange
        trust_service = await unit_env.get(TrustService)
        trust_repo = await unit_env.get(UserTrustRepository)
        user_id = UserId(uuid4())
        await trust_repo.save(
            make_trust(user_id, TrustLevel.TRUSTED, approved=3, rejected=1)
        )
        await trust_service.on_rejected(user_id)

        # Act
        await trust_service.on_approved(user_id)
        await trust_service.on_approved(user_id)
        after_two = await trust_service.get_or_create(user_id)
        after_three = await trust_service.on_approved(user_id)

        # Assert
        assert after_two.trust_level == TrustLevel.NEW
        assert after_three.trust_level == TrustLevel.TRUSTED
