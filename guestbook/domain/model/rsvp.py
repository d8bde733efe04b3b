"""RSVP entity.

An RSVP is a one-shot attendance confirmation. It is never updated or
deleted once recorded.
"""

from datetime import datetime

from pydantic import Field

from guestbook.domain.model.common import DomainModel, utcnow
from guestbook.domain.value import DEFAULT_GUESTS, MAX_GUESTS, Presence, RsvpId


class Rsvp(DomainModel):
    """Attendance confirmation."""

    id: RsvpId
    name: str = Field(min_length=1)
    presence: Presence
    guests: int = Field(default=DEFAULT_GUESTS, ge=1, le=MAX_GUESTS)
    created_at: datetime = Field(default_factory=utcnow)
