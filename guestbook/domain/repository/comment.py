"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from guestbook.domain.model.comment import Comment
from guestbook.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Find all comments, newest first.

        Returns:
            List of comments ordered by creation time descending
        """
        pass

    @abstractmethod
    async def create_one(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_by_id(
        self,
        comment_id: CommentId,
        name: Optional[str] = None,
        message: Optional[str] = None,
    ) -> Optional[Comment]:
        """Update the name and/or message of a comment.

        Fields passed as None are left unchanged.

        Args:
            comment_id: The comment ID
            name: New author name
            message: New message body

        Returns:
            The updated comment, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete_by_id(self, comment_id: CommentId) -> bool:
        """Delete a comment permanently.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def increment_likes(self, comment_id: CommentId) -> Optional[int]:
        """Atomically add one like to a comment.

        A missing counter is treated as zero before incrementing.

        Args:
            comment_id: The comment ID

        Returns:
            The new like count, None if the comment does not exist
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count stored comments."""
        pass
