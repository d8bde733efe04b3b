"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from guestbook.domain.model import Comment, Rsvp
from guestbook.domain.value import CommentId, RsvpId

BASE_TIME = datetime(2025, 6, 14, 18, 0, tzinfo=timezone.utc)


def make_comment(minutes: int = 0, **overrides) -> Comment:
    """Build a comment created `minutes` after BASE_TIME.

    Args:
        minutes: Offset from BASE_TIME, so tests can control ordering
        **overrides: Field values to replace the defaults

    Returns:
        Comment domain model
    """
    fields = {
        "id": CommentId(uuid4()),
        "name": "Ana",
        "presence": 1,
        "message": "¡Felicidades!",
        "likes": 0,
        "created_at": BASE_TIME + timedelta(minutes=minutes),
    }
    fields.update(overrides)
    return Comment(**fields)


def make_rsvp(minutes: int = 0, **overrides) -> Rsvp:
    """Build an RSVP created `minutes` after BASE_TIME."""
    fields = {
        "id": RsvpId(uuid4()),
        "name": "Ana",
        "presence": 1,
        "guests": 1,
        "created_at": BASE_TIME + timedelta(minutes=minutes),
    }
    fields.update(overrides)
    return Rsvp(**fields)
