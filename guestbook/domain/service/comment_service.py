"""Comment domain service."""

from typing import Any
from uuid import uuid4

import logfire

from guestbook.domain.error import (
    MissingFieldsError,
    NotFoundError,
    ValidationError,
)
from guestbook.domain.model.comment import Comment
from guestbook.domain.model.common import utcnow
from guestbook.domain.repository import CommentRepository
from guestbook.domain.value import (
    DEFAULT_PRESENCE,
    CommentId,
    Presence,
    clean_text,
    is_presence,
)

from .base import Service


class CommentService(Service):
    """Domain service for guestbook comments."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def list_comments(self) -> list[Comment]:
        """Get all comments, newest first."""
        with logfire.span("comment_service.list_comments"):
            comments = await self.comment_repository.find_all()
            logfire.info("Comments retrieved", count=len(comments))
            return comments

    async def create_comment(
        self,
        name: Any,
        message: Any,
        presence: Presence = None,
    ) -> Comment:
        """Create a comment.

        Args:
            name: Author name, must be a non-blank string
            message: Comment body, must be a non-blank string
            presence: Presence code, DEFAULT_PRESENCE when None

        Returns:
            Created comment with zero likes

        Raises:
            ValidationError: If name or message is missing or blank
        """
        with logfire.span("comment_service.create_comment"):
            clean_name = clean_text(name)
            clean_message = clean_text(message)
            if not clean_name or not clean_message:
                logfire.warn(
                    "Comment rejected - missing fields",
                    has_name=clean_name is not None,
                    has_message=clean_message is not None,
                )
                raise MissingFieldsError(("name", "message"))

            if not is_presence(presence):
                raise ValidationError("presence must be a string, number or boolean")

            comment = Comment(
                id=CommentId(uuid4()),
                name=clean_name,
                presence=DEFAULT_PRESENCE if presence is None else presence,
                message=clean_message,
                likes=0,
                created_at=utcnow(),
            )

            saved = await self.comment_repository.create_one(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def like_comment(self, comment_id: CommentId) -> int:
        """Add one like to a comment.

        Uses the repository's atomic increment so concurrent likes are not lost.

        Args:
            comment_id: Comment ID

        Returns:
            The new like count

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.like_comment", comment_id=str(comment_id)):
            likes = await self.comment_repository.increment_likes(comment_id)
            if likes is None:
                logfire.warn("Comment not found for like", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment liked", comment_id=str(comment_id), likes=likes)
            return likes

    async def edit_comment(
        self,
        comment_id: CommentId,
        name: Any = None,
        message: Any = None,
    ) -> Comment:
        """Edit a comment's name and/or message.

        Only non-blank strings replace the stored values; anything else
        leaves the field as it is.

        Args:
            comment_id: Comment ID
            name: New author name
            message: New message body

        Returns:
            The comment after the edit

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.edit_comment", comment_id=str(comment_id)):
            new_name = clean_text(name)
            new_message = clean_text(message)

            if new_name is None and new_message is None:
                updated = await self.comment_repository.find_by_id(comment_id)
            else:
                updated = await self.comment_repository.update_by_id(
                    comment_id, name=new_name, message=new_message
                )

            if updated is None:
                logfire.warn("Comment not found for edit", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment edited",
                comment_id=str(comment_id),
                name_changed=new_name is not None,
                message_changed=new_message is not None,
            )
            return updated

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment permanently.

        Args:
            comment_id: Comment ID

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            deleted = await self.comment_repository.delete_by_id(comment_id)
            if not deleted:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment deleted", comment_id=str(comment_id))
