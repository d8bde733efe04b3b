"""RSVP domain service."""

from typing import Any
from uuid import uuid4

import logfire

from guestbook.domain.error import MissingFieldsError, ValidationError
from guestbook.domain.model.common import utcnow
from guestbook.domain.model.rsvp import Rsvp
from guestbook.domain.repository import RsvpRepository
from guestbook.domain.value import (
    Presence,
    RsvpId,
    clean_text,
    coerce_guests,
    is_presence,
)

from .base import Service


class RsvpService(Service):
    """Domain service for attendance confirmations."""

    def __init__(self, rsvp_repository: RsvpRepository) -> None:
        """Initialize RSVP service.

        Args:
            rsvp_repository: RSVP repository
        """
        self.rsvp_repository = rsvp_repository

    async def list_rsvps(self) -> list[Rsvp]:
        """Get all RSVPs, newest first."""
        with logfire.span("rsvp_service.list_rsvps"):
            rsvps = await self.rsvp_repository.find_all()
            logfire.info("RSVPs retrieved", count=len(rsvps))
            return rsvps

    async def create_rsvp(
        self,
        name: Any,
        presence: Presence,
        guests: Any = None,
        *,
        has_presence: bool = True,
    ) -> Rsvp:
        """Record an attendance confirmation.

        A presence of 0, False or None is a valid answer; only a presence
        that was never sent is rejected, which callers signal with
        has_presence=False.

        Args:
            name: Guest name, must be a non-blank string
            presence: Presence code
            guests: Party size, normalized by coerce_guests
            has_presence: Whether the client sent a presence value at all

        Returns:
            Created RSVP

        Raises:
            ValidationError: If name or presence is missing
        """
        with logfire.span("rsvp_service.create_rsvp"):
            clean_name = clean_text(name)
            if not clean_name or not has_presence:
                logfire.warn(
                    "RSVP rejected - missing fields",
                    has_name=clean_name is not None,
                    has_presence=has_presence,
                )
                raise MissingFieldsError(("name", "presence"))

            if not is_presence(presence):
                raise ValidationError("presence must be a string, number or boolean")

            rsvp = Rsvp(
                id=RsvpId(uuid4()),
                name=clean_name,
                presence=presence,
                guests=coerce_guests(guests),
                created_at=utcnow(),
            )

            saved = await self.rsvp_repository.create_one(rsvp)
            logfire.info(
                "RSVP created",
                rsvp_id=str(saved.id),
                presence=saved.presence,
                guests=saved.guests,
            )
            return saved
