"""SQLAlchemy table definitions for Qalam.

These table definitions are used with SQLAlchemy Core and manual row
mappers. They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the auth service; referenced here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False, unique=True),
    Column(
        "role",
        Enum("admin", "user", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# BLOGS TABLE (only the columns moderation touches)
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(255), nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
)

Index("idx_blogs_author_id", blogs_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("blog_id", UUID, ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False),
    # No ON DELETE CASCADE: replies are deleted explicitly so the blog
    # counter sees every removed approved row
    Column("parent_id", UUID, ForeignKey("comments.id"), nullable=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "status",
        Enum(
            "pending",
            "approved",
            "rejected",
            "spam",
            name="comment_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("admin_note", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(content) <= 1000", name="content_max_length"),
)

Index("idx_comments_blog_id_status", comments_table.c.blog_id, comments_table.c.status)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_status", comments_table.c.status)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# USER TRUSTS TABLE (one row per user)
# ============================================================================
user_trusts_table = Table(
    "user_trusts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column(
        "trust_level",
        Enum("new", "trusted", name="trust_level", create_type=False),
        nullable=False,
        server_default="new",
    ),
    Column("approved_comments", Integer, nullable=False, server_default="0"),
    Column("rejected_comments", Integer, nullable=False, server_default="0"),
    Column("last_status_change", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("approved_comments >= 0", name="approved_comments_non_negative"),
    CheckConstraint("rejected_comments >= 0", name="rejected_comments_non_negative"),
)
