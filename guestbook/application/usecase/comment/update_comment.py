"""Update comment use case."""

from typing import Any

from pydantic import BaseModel

from guestbook.application.usecase.base import BaseUseCase
from guestbook.application.usecase.comment.ids import parse_comment_id
from guestbook.application.usecase.comment.list_comments import CommentItem
from guestbook.domain.service import CommentService


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string from the URL
    name: Any = None  # Replaces the name only if a non-blank string
    message: Any = None  # Replaces the message only if a non-blank string


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's name and message."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The full comment after the edit

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment_id = parse_comment_id(request.comment_id)
        comment = await self.comment_service.edit_comment(
            comment_id,
            name=request.name,
            message=request.message,
        )
        return CommentItem.from_comment(comment)
