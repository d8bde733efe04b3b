"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .rsvp import InMemoryRsvpRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryRsvpRepository",
]
