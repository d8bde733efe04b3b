"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from guestbook.domain.model import Comment, Rsvp
from guestbook.domain.value import CommentId, RsvpId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        name=row["name"],
        presence=row.get("presence"),
        message=row["message"],
        likes=row.get("likes") or 0,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_rsvp(row: Dict[str, Any]) -> Rsvp:
    """Convert database row to Rsvp domain model."""
    return Rsvp(
        id=RsvpId(_as_uuid(row["id"])),
        name=row["name"],
        presence=row.get("presence"),
        guests=row["guests"],
        created_at=row["created_at"],
    )


def rsvp_to_dict(rsvp: Rsvp) -> Dict[str, Any]:
    """Convert Rsvp domain model to database dict."""
    return rsvp.model_dump()
