"""Unit tests for CommentService."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from guestbook.domain.error import MissingFieldsError, NotFoundError, ValidationError
from guestbook.domain.repository import CommentRepository
from guestbook.domain.service import CommentService
from guestbook.domain.value import CommentId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_starts_with_zero_likes(self, unit_env):
        """New comment should be stored with zero likes."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        before = datetime.now(timezone.utc)

        # Act
        result = await comment_service.create_comment(
            name="Ana", message="¡Felicidades!", presence=1
        )

        # Assert
        assert result.likes == 0
        assert result.name == "Ana"
        assert result.message == "¡Felicidades!"
        assert result.presence == 1
        assert result.created_at.tzinfo is not None
        assert before <= result.created_at <= datetime.now(timezone.utc)

        # Verify it was saved in repository
        saved = await comment_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_create_comment_defaults_presence_to_zero(self, unit_env):
        """Missing presence should be stored as 0."""
        comment_service = await unit_env.get(CommentService)

        result = await comment_service.create_comment(name="Ana", message="Hola")

        assert result.presence == 0

    @pytest.mark.asyncio
    async def test_create_comment_trims_name_and_message(self, unit_env):
        """Surrounding whitespace should be removed before saving."""
        comment_service = await unit_env.get(CommentService)

        result = await comment_service.create_comment(
            name="  Ana ", message="\tHola\n"
        )

        assert result.name == "Ana"
        assert result.message == "Hola"

    @pytest.mark.asyncio
    async def test_create_comment_keeps_presence_as_given(self, unit_env):
        """Presence codes outside 0-2 are stored unchanged."""
        comment_service = await unit_env.get(CommentService)

        result = await comment_service.create_comment(
            name="Ana", message="Hola", presence="maybe"
        )

        assert result.presence == "maybe"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,message",
        [
            (None, "Hola"),
            ("Ana", None),
            ("", "Hola"),
            ("Ana", "   "),
            (42, "Hola"),
        ],
    )
    async def test_create_comment_missing_fields_fails(self, unit_env, name, message):
        """Missing, blank or non-string name/message should be rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act & Assert
        with pytest.raises(MissingFieldsError) as exc_info:
            await comment_service.create_comment(name=name, message=message)

        assert exc_info.value.fields == ("name", "message")

        assert await comment_repo.count() == 0

    @pytest.mark.asyncio
    async def test_create_comment_rejects_structured_presence(self, unit_env):
        """Presence must be a scalar, not a list or object."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                name="Ana", message="Hola", presence={"attending": True}
            )


class TestListComments:
    """Tests for list_comments method."""

    @pytest.mark.asyncio
    async def test_list_comments_empty(self, unit_env):
        """No comments should give an empty list."""
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.list_comments() == []

    @pytest.mark.asyncio
    async def test_list_comments_newest_first(self, unit_env):
        """Comments should be ordered by creation time descending."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        older = make_comment(minutes=0, name="Primero")
        newer = make_comment(minutes=5, name="Segundo")
        await comment_repo.create_one(newer)
        await comment_repo.create_one(older)

        # Act
        result = await comment_service.list_comments()

        # Assert
        assert [c.name for c in result] == ["Segundo", "Primero"]


class TestLikeComment:
    """Tests for like_comment method."""

    @pytest.mark.asyncio
    async def test_like_comment_increments_by_one(self, unit_env):
        """Each like should add exactly one."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(likes=2)
        await comment_repo.create_one(comment)

        # Act
        first = await comment_service.like_comment(comment.id)
        second = await comment_service.like_comment(comment.id)

        # Assert
        assert first == 3
        assert second == 4
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.likes == 4

    @pytest.mark.asyncio
    async def test_like_missing_comment_fails(self, unit_env):
        """Liking an unknown comment should raise NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.like_comment(CommentId(uuid4()))


class TestEditComment:
    """Tests for edit_comment method."""

    @pytest.mark.asyncio
    async def test_edit_message_only_keeps_name(self, unit_env):
        """Editing only the message should leave name and likes unchanged."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(name="Ana", message="Hola", likes=7)
        await comment_repo.create_one(comment)

        # Act
        result = await comment_service.edit_comment(comment.id, message=" Adiós ")

        # Assert
        assert result.name == "Ana"
        assert result.message == "Adiós"
        assert result.likes == 7
        assert result.created_at == comment.created_at
        assert result.presence == comment.presence

    @pytest.mark.asyncio
    async def test_edit_both_fields(self, unit_env):
        """Both name and message can be replaced at once."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment()
        await comment_repo.create_one(comment)

        result = await comment_service.edit_comment(
            comment.id, name="Luis", message="Nos vemos"
        )

        assert result.name == "Luis"
        assert result.message == "Nos vemos"

    @pytest.mark.asyncio
    async def test_edit_with_blank_values_changes_nothing(self, unit_env):
        """Blank or non-string values should be ignored."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(name="Ana", message="Hola")
        await comment_repo.create_one(comment)

        result = await comment_service.edit_comment(comment.id, name="  ", message=5)

        assert result == comment

    @pytest.mark.asyncio
    async def test_edit_missing_comment_fails(self, unit_env):
        """Editing an unknown comment should raise NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.edit_comment(CommentId(uuid4()), message="Hola")

    @pytest.mark.asyncio
    async def test_empty_edit_of_missing_comment_fails(self, unit_env):
        """An edit with nothing to change still requires the comment to exist."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.edit_comment(CommentId(uuid4()))


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_comment_removes_it(self, unit_env):
        """Deleted comment should no longer be listed."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        keep = make_comment(minutes=0)
        remove = make_comment(minutes=1)
        await comment_repo.create_one(keep)
        await comment_repo.create_one(remove)

        # Act
        await comment_service.delete_comment(remove.id)

        # Assert
        remaining = await comment_service.list_comments()
        assert [c.id for c in remaining] == [keep.id]

    @pytest.mark.asyncio
    async def test_delete_missing_comment_fails(self, unit_env):
        """Deleting an unknown comment should raise and keep the others."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.create_one(make_comment())

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(uuid4()))

        assert await comment_repo.count() == 1

    @pytest.mark.asyncio
    async def test_delete_twice_fails_second_time(self, unit_env):
        """A comment can only be deleted once."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment()
        await comment_repo.create_one(comment)

        await comment_service.delete_comment(comment.id)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(comment.id)
