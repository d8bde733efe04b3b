"""Path identifier parsing for comment use cases."""

from uuid import UUID

from guestbook.domain.error import NotFoundError
from guestbook.domain.value import CommentId


def parse_comment_id(raw_id: str) -> CommentId:
    """Parse a comment ID from a URL path segment.

    An ID that is not a UUID cannot name any stored comment, so it is
    reported as not found rather than as a bad request.

    Raises:
        NotFoundError: If raw_id is not a valid UUID
    """
    try:
        return CommentId(UUID(raw_id))
    except ValueError:
        raise NotFoundError("Comment", raw_id)
