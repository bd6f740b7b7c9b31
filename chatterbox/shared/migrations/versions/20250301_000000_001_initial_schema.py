# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2025-03-01 00:00:00

Tables created:
- users: User accounts
- passports: Authentication methods, one row per passport
  (single table, discriminated by "type": local, facebook, google)
- messages: Posted messages with a snapshot of their creator
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(31), nullable=False, unique=True, index=True),
        sa.Column("name", sa.String(63), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=False),
        *_timestamps(),
    )

    # Create passports table
    op.create_table(
        "passports",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("type", sa.String(16), nullable=False),
        # local
        sa.Column("password_hash", sa.Text(), nullable=True),
        # facebook / google
        sa.Column("access_token", sa.Text(), nullable=True),
        sa.Column("profile_id", sa.String(255), nullable=True),
    )

    # Create messages table
    op.create_table(
        "messages",
        sa.Column("id", sa.Uuid(), primary_key=True),
        # Creator snapshot taken at posting time, not a foreign key
        sa.Column("creator_id", sa.Uuid(), nullable=False, index=True),
        sa.Column("creator_name", sa.String(255), nullable=False),
        sa.Column("creator_avatar_url", sa.Text(), nullable=True),
        sa.Column("text", sa.String(255), nullable=False),
        sa.Column("geo_country_name", sa.String(255), nullable=True),
        sa.Column("geo_region_name", sa.String(255), nullable=True),
        sa.Column("geo_city", sa.String(255), nullable=True),
        sa.Column("geo_time_zone", sa.String(255), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("messages")
    op.drop_table("passports")
    op.drop_table("users")
