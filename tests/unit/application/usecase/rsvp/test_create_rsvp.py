"""Unit tests for CreateRsvpUseCase."""

import pytest

from guestbook.application.usecase.rsvp import CreateRsvpRequest, CreateRsvpUseCase
from guestbook.domain.error import ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateRsvpUseCase:
    """Tests for CreateRsvpUseCase."""

    @pytest.mark.asyncio
    async def test_explicit_null_presence_is_accepted(self, unit_env):
        """A presence sent as null is an answer, not a missing field."""
        use_case = await unit_env.get(CreateRsvpUseCase)

        result = await use_case.execute(CreateRsvpRequest(name="Ana", presence=None))

        assert result.presence is None
        assert result.guests == 1

    @pytest.mark.asyncio
    async def test_unset_presence_is_rejected(self, unit_env):
        """A request built without presence should fail validation."""
        use_case = await unit_env.get(CreateRsvpUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(CreateRsvpRequest(name="Ana", guests=2))

    @pytest.mark.asyncio
    async def test_guest_string_is_normalized(self, unit_env):
        """Guest counts arrive as any JSON value and are normalized."""
        use_case = await unit_env.get(CreateRsvpUseCase)

        result = await use_case.execute(
            CreateRsvpRequest(name="Ana", presence=1, guests="3")
        )

        assert result.guests == 3
