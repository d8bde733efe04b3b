"""Create RSVP use case."""

from typing import Any

from pydantic import BaseModel

from guestbook.application.usecase.base import BaseUseCase
from guestbook.application.usecase.rsvp.list_rsvps import RsvpItem
from guestbook.domain.service import RsvpService


class CreateRsvpRequest(BaseModel):
    """Create RSVP request.

    Build it from only the fields the client sent: a presence that was
    never set is a missing field, while an explicit null is an answer.
    """

    name: Any = None
    presence: Any = None
    guests: Any = None


class CreateRsvpUseCase(BaseUseCase):
    """Use case for confirming attendance."""

    def __init__(self, rsvp_service: RsvpService) -> None:
        """Initialize create RSVP use case.

        Args:
            rsvp_service: RSVP domain service
        """
        self.rsvp_service = rsvp_service

    async def execute(self, request: CreateRsvpRequest) -> RsvpItem:
        """Execute create RSVP flow.

        Args:
            request: Create RSVP request

        Returns:
            The created RSVP

        Raises:
            ValidationError: If name or presence is missing
        """
        rsvp = await self.rsvp_service.create_rsvp(
            name=request.name,
            presence=request.presence,
            guests=request.guests,
            has_presence="presence" in request.model_fields_set,
        )
        return RsvpItem.from_rsvp(rsvp)
