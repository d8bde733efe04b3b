"""Create comment use case."""

from typing import Any

from pydantic import BaseModel

from guestbook.application.usecase.base import BaseUseCase
from guestbook.application.usecase.comment.list_comments import CommentItem
from guestbook.domain.service import CommentService


class CreateCommentRequest(BaseModel):
    """Create comment request.

    Fields are left untyped so that missing or malformed values reach the
    domain service, which rejects them with a ValidationError.
    """

    name: Any = None
    presence: Any = None
    message: Any = None


class CreateCommentUseCase(BaseUseCase):
    """Use case for leaving a comment in the guestbook."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If name or message is missing or blank
        """
        comment = await self.comment_service.create_comment(
            name=request.name,
            message=request.message,
            presence=request.presence,
        )
        return CommentItem.from_comment(comment)
