"""Domain layer DI providers."""

from dishka import Scope, provide

from guestbook.domain.repository import CommentRepository, RsvpRepository
from guestbook.domain.service import CommentService, RsvpService
from guestbook.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_rsvp_service(self, rsvp_repository: RsvpRepository) -> RsvpService:
        """Provide RSVP domain service."""
        return RsvpService(rsvp_repository=rsvp_repository)
