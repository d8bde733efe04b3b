"""SQLAlchemy table definitions for the guestbook.

Tables are created on startup with metadata.create_all; there are no
migrations.
"""

from sqlalchemy import CheckConstraint, Column, Index, Integer, MetaData, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", Text, nullable=False),
    Column("presence", JSONB, nullable=True),  # Opaque presence code
    Column("message", Text, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
)

Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# RSVPS TABLE
# ============================================================================
rsvps_table = Table(
    "rsvps",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", Text, nullable=False),
    Column("presence", JSONB, nullable=True),
    Column("guests", Integer, nullable=False, server_default="1"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("guests >= 1", name="guests_positive"),
)

Index("idx_rsvps_created_at", rsvps_table.c.created_at)
