"""Comment routes."""

from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from guestbook.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from guestbook.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Presence of name and message is checked by the domain service so that
    a missing field answers 400, not 422.
    """

    name: Any = None
    presence: Any = None
    message: Any = None


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    name: Any = None
    message: Any = None


@router.get("", response_model=list[CommentItem])
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> list[CommentItem]:
    """Get every comment, newest first."""
    return await list_comments_use_case.execute()


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Leave a comment in the guestbook.

    Args:
        request: Comment data (name, message, optional presence)
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment

    Raises:
        HTTPException: 400 if name or message is missing or blank
    """
    try:
        use_case_request = CreateCommentRequest(
            **request.model_dump(exclude_unset=True)
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/{comment_id}/like", response_model=LikeCommentResponse)
async def like_comment(
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
) -> LikeCommentResponse:
    """Add one like to a comment.

    Args:
        comment_id: Comment UUID
        like_comment_use_case: Like comment use case from DI

    Returns:
        Comment ID and new like count

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    try:
        request = LikeCommentRequest(comment_id=comment_id)
        return await like_comment_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.put("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    request: Optional[UpdateCommentAPIRequest] = None,
) -> CommentItem:
    """Edit a comment's name and/or message.

    Blank or missing fields keep their current value.

    Args:
        comment_id: Comment UUID
        update_comment_use_case: Update comment use case from DI
        request: New name and/or message

    Returns:
        Updated comment

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    request = request or UpdateCommentAPIRequest()
    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            name=request.name,
            message=request.message,
        )
        return await update_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment update failed - not found", comment_id=comment_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete a comment permanently.

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    try:
        request = DeleteCommentRequest(comment_id=comment_id)
        return await delete_comment_use_case.execute(request)
    except NotFoundError as e:
        logfire.warn("Comment delete failed - not found", comment_id=comment_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
