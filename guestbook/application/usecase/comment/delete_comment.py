"""Delete comment use case."""

from pydantic import BaseModel

from guestbook.application.usecase.base import BaseUseCase
from guestbook.application.usecase.comment.ids import parse_comment_id
from guestbook.domain.service import CommentService


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string from the URL


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted: bool
    id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for permanently removing a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment_id = parse_comment_id(request.comment_id)
        await self.comment_service.delete_comment(comment_id)
        return DeleteCommentResponse(deleted=True, id=str(comment_id))
