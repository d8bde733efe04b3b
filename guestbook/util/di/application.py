"""Application layer DI providers."""

from dishka import Scope, provide

from guestbook.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    LikeCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from guestbook.application.usecase.rsvp import CreateRsvpUseCase, ListRsvpsUseCase
from guestbook.domain.service import CommentService, RsvpService
from guestbook.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self, comment_service: CommentService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # RSVP use cases
    @provide(scope=Scope.REQUEST)
    def get_list_rsvps_use_case(self, rsvp_service: RsvpService) -> ListRsvpsUseCase:
        """Provide list RSVPs use case."""
        return ListRsvpsUseCase(rsvp_service=rsvp_service)

    @provide(scope=Scope.REQUEST)
    def get_create_rsvp_use_case(self, rsvp_service: RsvpService) -> CreateRsvpUseCase:
        """Provide create RSVP use case."""
        return CreateRsvpUseCase(rsvp_service=rsvp_service)
