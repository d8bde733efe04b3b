"""Domain value objects for the guestbook."""

from guestbook.domain.value.identifiers import CommentId, RsvpId
from guestbook.domain.value.types import (
    DEFAULT_GUESTS,
    DEFAULT_PRESENCE,
    MAX_GUESTS,
    Presence,
    clean_text,
    coerce_guests,
    is_presence,
)

__all__ = [
    # Identifiers
    "CommentId",
    "RsvpId",
    # Types
    "Presence",
    "DEFAULT_GUESTS",
    "MAX_GUESTS",
    "DEFAULT_PRESENCE",
    "clean_text",
    "coerce_guests",
    "is_presence",
]
