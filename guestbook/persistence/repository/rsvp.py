"""PostgreSQL implementation of RSVP repository."""

from typing import List

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from guestbook.domain.model import Rsvp
from guestbook.domain.repository import RsvpRepository
from guestbook.persistence.error import storage_errors
from guestbook.persistence.mappers import row_to_rsvp, rsvp_to_dict
from guestbook.persistence.tables import rsvps_table


class PostgresRsvpRepository(RsvpRepository):
    """PostgreSQL implementation of RsvpRepository.

    Inserts are committed before the method returns.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> List[Rsvp]:
        """Find all RSVPs, newest first."""
        stmt = select(rsvps_table).order_by(desc(rsvps_table.c.created_at))
        with storage_errors("find_all rsvps"):
            result = await self.session.execute(stmt)
            return [row_to_rsvp(row._asdict()) for row in result.fetchall()]

    async def create_one(self, rsvp: Rsvp) -> Rsvp:
        """Insert a new RSVP."""
        stmt = rsvps_table.insert().values(**rsvp_to_dict(rsvp))
        with storage_errors("create_one rsvp"):
            await self.session.execute(stmt)
            await self.session.commit()
        return rsvp

    async def count(self) -> int:
        """Count stored RSVPs."""
        stmt = select(func.count()).select_from(rsvps_table)
        with storage_errors("count rsvps"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0
