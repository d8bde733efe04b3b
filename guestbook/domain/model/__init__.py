"""Domain model entities for the guestbook."""

from guestbook.domain.model.comment import Comment
from guestbook.domain.model.rsvp import Rsvp

__all__ = [
    "Comment",
    "Rsvp",
]
