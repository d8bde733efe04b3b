"""List comments use case."""

from datetime import datetime

from guestbook.application.usecase.base import BaseUseCase, ResponseModel
from guestbook.domain.model import Comment
from guestbook.domain.service import CommentService
from guestbook.domain.value import Presence


class CommentItem(ResponseModel):
    """Comment as returned by the API."""

    id: str
    name: str
    presence: Presence
    message: str
    likes: int
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=str(comment.id),
            name=comment.name,
            presence=comment.presence,
            message=comment.message,
            likes=comment.likes,
            created_at=comment.created_at,
        )


class ListCommentsUseCase(BaseUseCase):
    """Use case for listing every comment, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: None = None) -> list[CommentItem]:
        """Execute list comments flow.

        Returns:
            All comments ordered by creation time descending
        """
        comments = await self.comment_service.list_comments()
        return [CommentItem.from_comment(comment) for comment in comments]
