"""create_metric_history_tables

Revision ID: e93b16d4c5f8
Revises: c5e82f0a7d34
Create Date: 2026-03-03 09:05:52.774310

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "e93b16d4c5f8"
down_revision: str | Sequence[str] | None = "c5e82f0a7d34"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create append-only kri_measurements and incident_logs tables."""
    op.create_table(
        "kri_measurements",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("org_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("kri_name", sa.String(255), nullable=False),
        sa.Column("measurement_date", sa.Date, nullable=False),
        sa.Column("actual_value", sa.Float, nullable=False),
        sa.Column(
            "threshold_breached", sa.String(20), nullable=False, server_default="none"
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint(
            "threshold_breached IN ('none', 'warning', 'critical')",
            name="ck_threshold_breached",
        ),
    )

    # Lookback window scans
    op.create_index(
        "ix_kri_measurements_org_date", "kri_measurements", ["org_id", "measurement_date"]
    )

    op.create_table(
        "incident_logs",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("org_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("severity", sa.String(20), nullable=False, server_default="medium"),
        sa.Column(
            "reported_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint(
            "severity IN ('low', 'medium', 'high', 'critical')",
            name="ck_incident_severity",
        ),
    )

    op.create_index(
        "ix_incident_logs_org_reported", "incident_logs", ["org_id", "reported_at"]
    )


def downgrade() -> None:
    """Drop metric history tables."""
    op.drop_index("ix_incident_logs_org_reported", table_name="incident_logs")
    op.drop_table("incident_logs")
    op.drop_index("ix_kri_measurements_org_date", table_name="kri_measurements")
    op.drop_table("kri_measurements")
