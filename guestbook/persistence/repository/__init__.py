"""PostgreSQL repository implementations."""

from guestbook.persistence.repository.comment import PostgresCommentRepository
from guestbook.persistence.repository.rsvp import PostgresRsvpRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresRsvpRepository",
]
