"""Mock persistence providers for testing."""

from dishka import Scope, provide

from guestbook.domain.repository import CommentRepository, RsvpRepository
from guestbook.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryRsvpRepository,
)
from guestbook.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that data survives across HTTP requests
    made against one app; every test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_rsvp_repository(self) -> RsvpRepository:
        """Provide in-memory RSVP repository."""
        return InMemoryRsvpRepository()
