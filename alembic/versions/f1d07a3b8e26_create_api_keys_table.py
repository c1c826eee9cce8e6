"""create_api_keys_table

Revision ID: f1d07a3b8e26
Revises: e93b16d4c5f8
Create Date: 2026-03-03 09:31:18.092714

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# revision identifiers, used by Alembic.
revision: str = "f1d07a3b8e26"
down_revision: str | Sequence[str] | None = "e93b16d4c5f8"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create api_keys table holding bcrypt hashes of client keys."""
    op.create_table(
        "api_keys",
        sa.Column(
            "id",
            UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("name", sa.String(255), unique=True, nullable=False),
        sa.Column("key_hash", sa.String(255), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("revoked_at", TIMESTAMP(timezone=True), nullable=True),
        sa.Column("revoked_by", sa.String(255), nullable=True),
        sa.Column(
            "created_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column("last_used_at", TIMESTAMP(timezone=True), nullable=True),
    )

    # Authentication only ever scans active keys
    op.create_index(
        "ix_api_keys_active",
        "api_keys",
        ["id"],
        postgresql_where=sa.text("is_active = true"),
    )


def downgrade() -> None:
    """Drop api_keys table."""
    op.drop_index("ix_api_keys_active", table_name="api_keys")
    op.drop_table("api_keys")
