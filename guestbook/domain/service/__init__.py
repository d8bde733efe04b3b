"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .rsvp_service import RsvpService

__all__ = [
    "CommentService",
    "RsvpService",
    "Service",
]
