"""Comment entity.

A guestbook comment is a free-text message left by a guest. Other guests
can like it; the author can edit its name and message or delete it.
"""

from datetime import datetime

from pydantic import Field

from guestbook.domain.model.common import DomainModel, utcnow
from guestbook.domain.value import DEFAULT_PRESENCE, CommentId, Presence


class Comment(DomainModel):
    """Guestbook comment.

    The like counter only ever grows, one like at a time.
    """

    id: CommentId
    name: str = Field(min_length=1)
    presence: Presence = DEFAULT_PRESENCE
    message: str = Field(min_length=1)
    likes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
