"""List RSVPs use case."""

from datetime import datetime

from guestbook.application.usecase.base import BaseUseCase, ResponseModel
from guestbook.domain.model import Rsvp
from guestbook.domain.service import RsvpService
from guestbook.domain.value import Presence


class RsvpItem(ResponseModel):
    """RSVP as returned by the API."""

    id: str
    name: str
    presence: Presence
    guests: int
    created_at: datetime

    @classmethod
    def from_rsvp(cls, rsvp: Rsvp) -> "RsvpItem":
        return cls(
            id=str(rsvp.id),
            name=rsvp.name,
            presence=rsvp.presence,
            guests=rsvp.guests,
            created_at=rsvp.created_at,
        )


class ListRsvpsUseCase(BaseUseCase):
    """Use case for listing every RSVP, newest first."""

    def __init__(self, rsvp_service: RsvpService) -> None:
        self.rsvp_service = rsvp_service

    async def execute(self, request: None = None) -> list[RsvpItem]:
        rsvps = await self.rsvp_service.list_rsvps()
        return [RsvpItem.from_rsvp(rsvp) for rsvp in rsvps]
