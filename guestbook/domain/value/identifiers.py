"""Strongly typed identifiers for guestbook entities."""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
RsvpId = NewType("RsvpId", UUID)
