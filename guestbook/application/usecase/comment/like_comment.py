"""Like comment use case."""

from pydantic import BaseModel

from guestbook.application.usecase.base import BaseUseCase
from guestbook.application.usecase.comment.ids import parse_comment_id
from guestbook.domain.service import CommentService


class LikeCommentRequest(BaseModel):
    """Like comment request."""

    comment_id: str  # UUID string from the URL


class LikeCommentResponse(BaseModel):
    """Like comment response."""

    id: str
    likes: int


class LikeCommentUseCase(BaseUseCase):
    """Use case for adding one like to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize like comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like comment flow.

        Args:
            request: Like comment request

        Returns:
            Comment ID and its new like count

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment_id = parse_comment_id(request.comment_id)
        likes = await self.comment_service.like_comment(comment_id)
        return LikeCommentResponse(id=str(comment_id), likes=likes)
