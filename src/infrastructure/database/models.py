"""SQLAlchemy models for the operational dependency map and risk analytics.

These models map domain entities to PostgreSQL tables using SQLAlchemy ORM.
All tables use UUIDs as primary keys and include audit timestamps. Every
domain table carries org_id; queries are always scoped to one organization.
"""

from datetime import date, datetime, timezone
from typing import Any
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(AsyncAttrs, DeclarativeBase):
    """Base class for all SQLAlchemy models with async support."""

    pass


class DependencyModel(Base):
    """SQLAlchemy model for the dependencies table.

    Represents a node of the operational dependency map.
    """

    __tablename__ = "dependencies"

    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid4
    )
    org_id: Mapped[UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    dependency_type: Mapped[str] = mapped_column(String(20), nullable=False)
    criticality: Mapped[str] = mapped_column(String(20), nullable=False, default="medium")
    business_function_id: Mapped[UUID | None] = mapped_column(
        UUID(as_uuid=True), nullable=True, index=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="operational")

    # Resilience attributes
    maximum_tolerable_downtime_hours: Mapped[float | None] = mapped_column(
        Float, nullable=True
    )
    recovery_time_objective_hours: Mapped[float | None] = mapped_column(
        Float, nullable=True
    )
    redundancy_level: Mapped[str] = mapped_column(String(20), nullable=False, default="none")
    monitoring_status: Mapped[str] = mapped_column(
        String(30), nullable=False, default="unknown"
    )

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    geographic_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sla_requirements: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Audit timestamps
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (
        CheckConstraint(
            "dependency_type IN ('vendor', 'system', 'staff', 'data', 'location')",
            name="ck_dependency_type",
        ),
        CheckConstraint(
            "criticality IN ('critical', 'high', 'medium', 'low')",
            name="ck_dependency_criticality",
        ),
        CheckConstraint(
            "status IN ('operational', 'degraded', 'failed', 'maintenance')",
            name="ck_dependency_status",
        ),
        CheckConstraint(
            "redundancy_level IN ('none', 'basic', 'full', 'distributed')",
            name="ck_redundancy_level",
        ),
        CheckConstraint(
            "maximum_tolerable_downtime_hours IS NULL OR maximum_tolerable_downtime_hours > 0",
            name="ck_mtd_positive",
        ),
        CheckConstraint(
            "recovery_time_objective_hours IS NULL OR recovery_time_objective_hours > 0",
            name="ck_rto_positive",
        ),
        CheckConstraint(
            "recovery_time_objective_hours IS NULL "
            "OR maximum_tolerable_downtime_hours IS NULL "
            "OR recovery_time_objective_hours <= maximum_tolerable_downtime_hours",
            name="ck_rto_within_mtd",
        ),
    )


class DependencyRelationshipModel(Base):
    """SQLAlchemy model for the dependency_relationships table.

    Represents a directed edge from source dependency to target dependency.
    """

    __tablename__ = "dependency_relationships"

    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid4
    )
    org_id: Mapped[UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)

    source_dependency_id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("dependencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    target_dependency_id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("dependencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    relationship_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="depends_on"
    )
    relationship_strength: Mapped[str] = mapped_column(
        String(20), nullable=False, default="medium"
    )

    # Propagation parameters (NULL = simulator default / immediate)
    failure_propagation_likelihood: Mapped[float | None] = mapped_column(
        Float, nullable=True
    )
    propagation_delay_minutes: Mapped[float | None] = mapped_column(Float, nullable=True)

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (
        UniqueConstraint(
            "source_dependency_id",
            "target_dependency_id",
            "relationship_type",
            name="uq_relationship_per_type",
        ),
        CheckConstraint(
            "source_dependency_id != target_dependency_id",
            name="ck_no_self_loops",
        ),
        CheckConstraint(
            "relationship_type IN "
            "('depends_on', 'supports', 'feeds_into', 'backed_by', 'redundant_with')",
            name="ck_relationship_type",
        ),
        CheckConstraint(
            "relationship_strength IN ('weak', 'medium', 'strong', 'critical')",
            name="ck_relationship_strength",
        ),
        CheckConstraint(
            "failure_propagation_likelihood IS NULL "
            "OR (failure_propagation_likelihood >= 0.0 AND failure_propagation_likelihood <= 1.0)",
            name="ck_propagation_likelihood_bounds",
        ),
        CheckConstraint(
            "propagation_delay_minutes IS NULL OR propagation_delay_minutes >= 0",
            name="ck_propagation_delay_non_negative",
        ),
    )


class FailureScenarioModel(Base):
    """SQLAlchemy model for the failure_scenarios table.

    The most recent simulation run is stored inline as JSONB.
    """

    __tablename__ = "failure_scenarios"

    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid4
    )
    org_id: Mapped[UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    trigger_dependency_id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("dependencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    scenario_type: Mapped[str] = mapped_column(
        String(30), nullable=False, default="operational"
    )
    severity_level: Mapped[str] = mapped_column(String(20), nullable=False, default="medium")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    estimated_duration_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    business_impact_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Most recent simulation run (overwritten on re-run)
    simulation_results: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    last_simulated_at: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (
        CheckConstraint(
            "scenario_type IN "
            "('operational', 'cyber', 'natural_disaster', 'vendor_failure', 'data_breach')",
            name="ck_scenario_type",
        ),
        CheckConstraint(
            "severity_level IN ('low', 'medium', 'high', 'critical')",
            name="ck_scenario_severity",
        ),
        CheckConstraint(
            "estimated_duration_hours IS NULL OR estimated_duration_hours > 0",
            name="ck_scenario_duration_positive",
        ),
    )


class DependencyRiskModel(Base):
    """SQLAlchemy model for the dependency_risks table."""

    __tablename__ = "dependency_risks"

    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid4
    )
    org_id: Mapped[UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)
    dependency_id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("dependencies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    risk_category: Mapped[str] = mapped_column(String(20), nullable=False)
    likelihood_score: Mapped[int] = mapped_column(Integer, nullable=False)
    impact_score: Mapped[int] = mapped_column(Integer, nullable=False)

    mitigation_strategy: Mapped[str | None] = mapped_column(Text, nullable=True)
    contingency_plan: Mapped[str | None] = mapped_column(Text, nullable=True)
    assessor_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_assessment_date: Mapped[date] = mapped_column(Date, nullable=False)
    next_assessment_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (
        CheckConstraint(
            "risk_category IN "
            "('operational', 'financial', 'reputational', 'compliance', 'strategic')",
            name="ck_risk_category",
        ),
        CheckConstraint(
            "likelihood_score >= 1 AND likelihood_score <= 5",
            name="ck_likelihood_score_range",
        ),
        CheckConstraint(
            "impact_score >= 1 AND impact_score <= 5",
            name="ck_impact_score_range",
        ),
        CheckConstraint(
            "next_assessment_date IS NULL OR next_assessment_date >= last_assessment_date",
            name="ck_next_assessment_after_last",
        ),
    )


class KriMeasurementModel(Base):
    """SQLAlchemy model for the kri_measurements table (append-only)."""

    __tablename__ = "kri_measurements"

    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid4
    )
    org_id: Mapped[UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    kri_name: Mapped[str] = mapped_column(String(255), nullable=False)
    measurement_date: Mapped[date] = mapped_column(Date, nullable=False)
    actual_value: Mapped[float] = mapped_column(Float, nullable=False)
    threshold_breached: Mapped[str] = mapped_column(String(20), nullable=False, default="none")

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow
    )

    __table_args__ = (
        Index("ix_kri_measurements_org_date", "org_id", "measurement_date"),
        CheckConstraint(
            "threshold_breached IN ('none', 'warning', 'critical')",
            name="ck_threshold_breached",
        ),
    )


class IncidentLogModel(Base):
    """SQLAlchemy model for the incident_logs table (append-only)."""

    __tablename__ = "incident_logs"

    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid4
    )
    org_id: Mapped[UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    severity: Mapped[str] = mapped_column(String(20), nullable=False, default="medium")
    reported_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow
    )

    __table_args__ = (
        Index("ix_incident_logs_org_reported", "org_id", "reported_at"),
        CheckConstraint(
            "severity IN ('low', 'medium', 'high', 'critical')",
            name="ck_incident_severity",
        ),
    )


class ApiKeyModel(Base):
    """SQLAlchemy model for the api_keys table.

    Stores API keys for authenticating API clients.
    Keys are stored as bcrypt hashes for security.
    """

    __tablename__ = "api_keys"

    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid4
    )

    # Key identifier (human-readable name)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    # Bcrypt hash of the API key
    key_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_by: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    revoked_at: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True), nullable=True
    )
    revoked_by: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, default=_utcnow
    )
    last_used_at: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True), nullable=True
    )
