"""In-memory comment repository for testing."""

from typing import Optional

from guestbook.domain.model.comment import Comment
from guestbook.domain.repository.comment import CommentRepository
from guestbook.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_all(self) -> list[Comment]:
        """Find all comments, newest first."""
        # Reversed insertion order breaks ties between equal timestamps
        newest_inserted_first = list(reversed(self._comments.values()))
        return sorted(newest_inserted_first, key=lambda c: c.created_at, reverse=True)

    async def create_one(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def update_by_id(
        self,
        comment_id: CommentId,
        name: Optional[str] = None,
        message: Optional[str] = None,
    ) -> Optional[Comment]:
        """Update name and/or message."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        changes = {}
        if name is not None:
            changes["name"] = name
        if message is not None:
            changes["message"] = message

        # Comments are immutable, store a modified copy
        updated = comment.model_copy(update=changes)
        self._comments[comment_id] = updated
        return updated

    async def delete_by_id(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def increment_likes(self, comment_id: CommentId) -> Optional[int]:
        """Increment likes by 1."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(update={"likes": (comment.likes or 0) + 1})
        self._comments[comment_id] = updated
        return updated.likes

    async def count(self) -> int:
        """Count stored comments."""
        return len(self._comments)
