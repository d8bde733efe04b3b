"""Repository interfaces for the guestbook domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from guestbook.domain.repository.comment import CommentRepository
from guestbook.domain.repository.rsvp import RsvpRepository

__all__ = [
    "CommentRepository",
    "RsvpRepository",
]
