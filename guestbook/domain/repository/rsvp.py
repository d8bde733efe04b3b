"""RSVP repository interface."""

from abc import ABC, abstractmethod
from typing import List

from guestbook.domain.model.rsvp import Rsvp


class RsvpRepository(ABC):
    """Repository for Rsvp entity.

    RSVPs are append-only: there is no update or delete.
    """

    @abstractmethod
    async def find_all(self) -> List[Rsvp]:
        """Find all RSVPs, newest first."""
        pass

    @abstractmethod
    async def create_one(self, rsvp: Rsvp) -> Rsvp:
        """Insert a new RSVP.

        Args:
            rsvp: The RSVP to insert

        Returns:
            The stored RSVP
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count stored RSVPs."""
        pass
