"""In-memory RSVP repository for testing."""

from guestbook.domain.model.rsvp import Rsvp
from guestbook.domain.repository.rsvp import RsvpRepository
from guestbook.domain.value import RsvpId


class InMemoryRsvpRepository(RsvpRepository):
    """In-memory implementation of RsvpRepository for testing."""

    def __init__(self) -> None:
        self._rsvps: dict[RsvpId, Rsvp] = {}

    async def find_all(self) -> list[Rsvp]:
        """Find all RSVPs, newest first."""
        newest_inserted_first = list(reversed(self._rsvps.values()))
        return sorted(newest_inserted_first, key=lambda r: r.created_at, reverse=True)

    async def create_one(self, rsvp: Rsvp) -> Rsvp:
        """Insert a new RSVP."""
        self._rsvps[rsvp.id] = rsvp
        return rsvp

    async def count(self) -> int:
        """Count stored RSVPs."""
        return len(self._rsvps)
