"""create_scenarios_and_risks_tables

Revision ID: c5e82f0a7d34
Revises: a41c7e9d2b10
Create Date: 2026-03-02 11:40:07.218845

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "c5e82f0a7d34"
down_revision: str | Sequence[str] | None = "a41c7e9d2b10"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create failure_scenarios and dependency_risks tables."""
    op.create_table(
        "failure_scenarios",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("org_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "trigger_dependency_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("dependencies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "scenario_type", sa.String(30), nullable=False, server_default="operational"
        ),
        sa.Column("severity_level", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("estimated_duration_hours", sa.Float, nullable=True),
        sa.Column("business_impact_description", sa.Text, nullable=True),
        # Most recent simulation run, overwritten on re-run
        sa.Column("simulation_results", postgresql.JSONB, nullable=True),
        sa.Column("last_simulated_at", sa.TIMESTAMP(timezone=True), nullable=True),
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
        sa.CheckConstraint(
            "scenario_type IN "
            "('operational', 'cyber', 'natural_disaster', 'vendor_failure', 'data_breach')",
            name="ck_scenario_type",
        ),
        sa.CheckConstraint(
            "severity_level IN ('low', 'medium', 'high', 'critical')",
            name="ck_scenario_severity",
        ),
        sa.CheckConstraint(
            "estimated_duration_hours IS NULL OR estimated_duration_hours > 0",
            name="ck_scenario_duration_positive",
        ),
    )

    op.create_index("ix_failure_scenarios_org_id", "failure_scenarios", ["org_id"])
    op.create_index(
        "ix_failure_scenarios_trigger_dependency_id",
        "failure_scenarios",
        ["trigger_dependency_id"],
    )

    op.create_table(
        "dependency_risks",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("org_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            "dependency_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("dependencies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("risk_category", sa.String(20), nullable=False),
        sa.Column("likelihood_score", sa.Integer, nullable=False),
        sa.Column("impact_score", sa.Integer, nullable=False),
        sa.Column("mitigation_strategy", sa.Text, nullable=True),
        sa.Column("contingency_plan", sa.Text, nullable=True),
        sa.Column("assessor_name", sa.String(255), nullable=True),
        sa.Column("last_assessment_date", sa.Date, nullable=False),
        sa.Column("next_assessment_date", sa.Date, nullable=True),
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
        sa.CheckConstraint(
            "risk_category IN "
            "('operational', 'financial', 'reputational', 'compliance', 'strategic')",
            name="ck_risk_category",
        ),
        sa.CheckConstraint(
            "likelihood_score >= 1 AND likelihood_score <= 5",
            name="ck_likelihood_score_range",
        ),
        sa.CheckConstraint(
            "impact_score >= 1 AND impact_score <= 5",
            name="ck_impact_score_range",
        ),
        sa.CheckConstraint(
            "next_assessment_date IS NULL OR next_assessment_date >= last_assessment_date",
            name="ck_next_assessment_after_last",
        ),
    )

    op.create_index("ix_dependency_risks_org_id", "dependency_risks", ["org_id"])
    op.create_index(
        "ix_dependency_risks_dependency_id", "dependency_risks", ["dependency_id"]
    )

    for table in ("failure_scenarios", "dependency_risks"):
        op.execute(
            f"""
            CREATE TRIGGER update_{table}_updated_at
                BEFORE UPDATE ON {table}
                FOR EACH ROW
                EXECUTE FUNCTION update_updated_at_column();
            """
        )


def downgrade() -> None:
    """Drop failure_scenarios and dependency_risks tables."""
    for table in ("dependency_risks", "failure_scenarios"):
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")

    op.drop_table("dependency_risks")
    op.drop_table("failure_scenarios")
