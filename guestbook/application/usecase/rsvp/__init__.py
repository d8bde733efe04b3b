"""RSVP use cases."""

from .create_rsvp import CreateRsvpRequest, CreateRsvpUseCase
from .list_rsvps import ListRsvpsUseCase, RsvpItem

__all__ = [
    "CreateRsvpRequest",
    "CreateRsvpUseCase",
    "ListRsvpsUseCase",
    "RsvpItem",
]
