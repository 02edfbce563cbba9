"""initial_schema

Create the identity store schema:
- Git users (one canonical record per contributor, scoped by namespace)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 10:12:44.512093

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "git_users",
        sa.Column("namespace", sa.String(length=63), nullable=False),
        sa.Column("name", sa.String(length=63), nullable=False),
        sa.Column(
            "labels",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("login", sa.String(length=255), nullable=False, server_default=""),
        sa.Column(
            "display_name", sa.String(length=255), nullable=False, server_default=""
        ),
        sa.Column("email", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("url", sa.Text(), nullable=False, server_default=""),
        sa.Column("avatar_url", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "accounts",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            server_default="[]",
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("namespace", "name", name="pk_git_users"),
    )

    # Email correlation scans the namespace by email
    op.create_index(
        "idx_git_users_email", "git_users", ["namespace", "email"], unique=False
    )
    # Label selector uses JSONB containment
    op.create_index(
        "idx_git_users_labels",
        "git_users",
        ["labels"],
        unique=False,
        postgresql_using="gin",
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_git_users_labels", table_name="git_users")
    op.drop_index("idx_git_users_email", table_name="git_users")
    op.drop_table("git_users")
