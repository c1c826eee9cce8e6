"""create_dependencies_tables

Revision ID: a41c7e9d2b10
Revises:
Create Date: 2026-03-02 10:12:41.503128

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "a41c7e9d2b10"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Create dependencies and dependency_relationships tables with triggers."""
    op.create_table(
        "dependencies",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("org_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("dependency_type", sa.String(20), nullable=False),
        sa.Column("criticality", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("business_function_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="operational"),
        sa.Column("maximum_tolerable_downtime_hours", sa.Float, nullable=True),
        sa.Column("recovery_time_objective_hours", sa.Float, nullable=True),
        sa.Column("redundancy_level", sa.String(20), nullable=False, server_default="none"),
        sa.Column(
            "monitoring_status", sa.String(30), nullable=False, server_default="unknown"
        ),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("geographic_location", sa.String(255), nullable=True),
        sa.Column("sla_requirements", sa.Text, nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "dependency_type IN ('vendor', 'system', 'staff', 'data', 'location')",
            name="ck_dependency_type",
        ),
        sa.CheckConstraint(
            "criticality IN ('critical', 'high', 'medium', 'low')",
            name="ck_dependency_criticality",
        ),
        sa.CheckConstraint(
            "status IN ('operational', 'degraded', 'failed', 'maintenance')",
            name="ck_dependency_status",
        ),
        sa.CheckConstraint(
            "redundancy_level IN ('none', 'basic', 'full', 'distributed')",
            name="ck_redundancy_level",
        ),
        sa.CheckConstraint(
            "maximum_tolerable_downtime_hours IS NULL OR maximum_tolerable_downtime_hours > 0",
            name="ck_mtd_positive",
        ),
        sa.CheckConstraint(
            "recovery_time_objective_hours IS NULL OR recovery_time_objective_hours > 0",
            name="ck_rto_positive",
        ),
        sa.CheckConstraint(
            "recovery_time_objective_hours IS NULL "
            "OR maximum_tolerable_downtime_hours IS NULL "
            "OR recovery_time_objective_hours <= maximum_tolerable_downtime_hours",
            name="ck_rto_within_mtd",
        ),
    )

    op.create_index("ix_dependencies_org_id", "dependencies", ["org_id"])
    op.create_index(
        "ix_dependencies_business_function_id",
        "dependencies",
        ["business_function_id"],
        postgresql_where=sa.text("business_function_id IS NOT NULL"),
    )

    op.create_table(
        "dependency_relationships",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("org_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            "source_dependency_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("dependencies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "target_dependency_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("dependencies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "relationship_type", sa.String(20), nullable=False, server_default="depends_on"
        ),
        sa.Column(
            "relationship_strength", sa.String(20), nullable=False, server_default="medium"
        ),
        sa.Column("failure_propagation_likelihood", sa.Float, nullable=True),
        sa.Column("propagation_delay_minutes", sa.Float, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        *_timestamps(),
        sa.UniqueConstraint(
            "source_dependency_id",
            "target_dependency_id",
            "relationship_type",
            name="uq_relationship_per_type",
        ),
        sa.CheckConstraint(
            "source_dependency_id != target_dependency_id",
            name="ck_no_self_loops",
        ),
        sa.CheckConstraint(
            "relationship_type IN "
            "('depends_on', 'supports', 'feeds_into', 'backed_by', 'redundant_with')",
            name="ck_relationship_type",
        ),
        sa.CheckConstraint(
            "relationship_strength IN ('weak', 'medium', 'strong', 'critical')",
            name="ck_relationship_strength",
        ),
        sa.CheckConstraint(
            "failure_propagation_likelihood IS NULL "
            "OR (failure_propagation_likelihood >= 0.0 AND failure_propagation_likelihood <= 1.0)",
            name="ck_propagation_likelihood_bounds",
        ),
        sa.CheckConstraint(
            "propagation_delay_minutes IS NULL OR propagation_delay_minutes >= 0",
            name="ck_propagation_delay_non_negative",
        ),
    )

    op.create_index(
        "ix_dependency_relationships_org_id", "dependency_relationships", ["org_id"]
    )
    op.create_index(
        "ix_dependency_relationships_source_dependency_id",
        "dependency_relationships",
        ["source_dependency_id"],
    )
    op.create_index(
        "ix_dependency_relationships_target_dependency_id",
        "dependency_relationships",
        ["target_dependency_id"],
    )

    # Create trigger function for updated_at
    op.execute(
        """
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
        """
    )

    for table in ("dependencies", "dependency_relationships"):
        op.execute(
            f"""
            CREATE TRIGGER update_{table}_updated_at
                BEFORE UPDATE ON {table}
                FOR EACH ROW
                EXECUTE FUNCTION update_updated_at_column();
            """
        )


def downgrade() -> None:
    """Drop dependency map tables, triggers, and the shared trigger function."""
    for table in ("dependency_relationships", "dependencies"):
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")

    op.drop_table("dependency_relationships")
    op.drop_table("dependencies")

    # First migration owns the shared trigger function
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")
