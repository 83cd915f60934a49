"""SQLAlchemy table definitions for the blog.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()

# SQLite only autoincrements INTEGER PRIMARY KEY columns
Identifier = BigInteger().with_variant(Integer, "sqlite")

# ============================================================================
# ARTICLES TABLE (owned by the content service, read here for existence checks)
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", Identifier, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

# ============================================================================
# USERS TABLE (owned by the account service, read here for author profiles)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Identifier, primary_key=True, autoincrement=True),
    Column("username", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column("profile_url", Text, nullable=True),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Identifier, primary_key=True, autoincrement=True),
    Column("content", Text, nullable=False),
    Column("article_id", Identifier, nullable=False),
    Column("user_id", Identifier, nullable=False),
    # No ON DELETE CASCADE: subtree deletes are driven by the application
    Column("parent_id", Identifier, ForeignKey("comments.id"), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    CheckConstraint("length(content) > 0", name="content_not_empty"),
)

Index("idx_comments_article_id", comments_table.c.article_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)
Index("idx_comments_created_at", comments_table.c.created_at)
