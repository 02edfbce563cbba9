"""SQLAlchemy table definitions for the identity store.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# GIT USERS TABLE (one row per canonical identity, scoped by namespace)
# ============================================================================
git_users_table = Table(
    "git_users",
    metadata,
    Column("namespace", String(63), nullable=False),
    Column("name", String(63), nullable=False),  # Immutable record name
    Column("labels", JSONB, nullable=False, server_default="{}"),
    Column("login", String(255), nullable=False, server_default=""),
    Column("display_name", String(255), nullable=False, server_default=""),
    Column("email", String(255), nullable=False, server_default=""),
    Column("url", Text, nullable=False, server_default=""),
    Column("avatar_url", Text, nullable=False, server_default=""),
    Column("accounts", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("namespace", "name", name="pk_git_users"),
)

Index("idx_git_users_email", git_users_table.c.namespace, git_users_table.c.email)
Index(
    "idx_git_users_labels",
    git_users_table.c.labels,
    postgresql_using="gin",
)
