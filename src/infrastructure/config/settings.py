"""Environment-driven settings for the resilience API.

Each concern reads its own prefix (DB_, RATE_LIMIT_, OTEL_, SIMULATION_,
FORECAST_); DATABASE_URL and ENVIRONMENT are read unprefixed.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    model_config = SettingsConfigDict(env_prefix="DB_", case_sensitive=False)

    url: str | None = Field(
        default=None,
        alias="DATABASE_URL",
        description="PostgreSQL connection URL (required to start the API)",
    )
    pool_size: int = Field(
        default=20,
        description="Connection pool size",
    )
    max_overflow: int = Field(
        default=10,
        description="Maximum number of connections to create above pool_size",
    )
    echo: bool = Field(
        default=False,
        description="Enable SQL query logging (development only)",
    )


class RateLimitSettings(BaseSettings):
    """Rate limiting configuration settings."""

    model_config = SettingsConfigDict(env_prefix="RATE_LIMIT_", case_sensitive=False)

    simulation: int = Field(
        default=20,
        description="Simulation endpoint rate limit (requests per minute)",
    )
    write: int = Field(
        default=30,
        description="Create/update endpoint rate limit (requests per minute)",
    )
    query: int = Field(
        default=60,
        description="Query endpoint rate limit (requests per minute)",
    )


class ObservabilitySettings(BaseSettings):
    """Observability configuration settings (OpenTelemetry, logging, metrics)."""

    model_config = SettingsConfigDict(env_prefix="OTEL_", case_sensitive=False)

    # OpenTelemetry Tracing
    exporter_otlp_endpoint: str = Field(
        default="http://localhost:4317",
        description="OTLP exporter endpoint (gRPC)",
    )
    service_name: str = Field(
        default="dependency-resilience",
        description="Service name for traces and metrics",
    )
    trace_sample_rate: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Trace sampling rate (0.0 to 1.0)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json_format: bool = Field(
        default=True,
        description="Enable JSON structured logging",
    )


class SimulationSettings(BaseSettings):
    """Failure propagation simulator configuration."""

    model_config = SettingsConfigDict(env_prefix="SIMULATION_", case_sensitive=False)

    severity_multipliers: dict[str, float] = Field(
        default_factory=lambda: {
            "low": 0.3,
            "medium": 0.6,
            "high": 0.8,
            "critical": 1.0,
        },
        description="Propagation likelihood multiplier per scenario severity (JSON)",
    )
    severity_decay_probability: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Chance a propagated failure steps down one severity level",
    )
    default_propagation_likelihood: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Likelihood used for relationships that leave it unspecified",
    )
    default_downtime_hours: float = Field(
        default=1.0,
        gt=0.0,
        description="Downtime used for dependencies without a maximum tolerable downtime",
    )
    max_visited_dependencies: int = Field(
        default=10_000,
        ge=1,
        description="Maximum dependencies a single run may visit",
    )
    max_queue_operations: int = Field(
        default=100_000,
        ge=1,
        description="Maximum queue operations a single run may perform",
    )
    strict_missing_dependencies: bool = Field(
        default=True,
        description="Fail the run when it reaches an unknown dependency instead of skipping it",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for reproducible runs (unset = nondeterministic)",
    )

    @field_validator("severity_multipliers")
    @classmethod
    def validate_severity_keys(cls, value: dict[str, float]) -> dict[str, float]:
        """Normalize severity keys to lowercase."""
        return {k.lower(): v for k, v in value.items()}


class ForecastSettings(BaseSettings):
    """Predictive analytics configuration."""

    model_config = SettingsConfigDict(env_prefix="FORECAST_", case_sensitive=False)

    lookback_days: int = Field(
        default=90,
        ge=1,
        le=730,
        description="History window used for predictive analytics (days)",
    )
    short_horizon_days: int = Field(
        default=30,
        ge=1,
        description="Short forecast horizon (steps)",
    )
    long_horizon_days: int = Field(
        default=90,
        ge=1,
        description="Long forecast horizon (steps)",
    )
    max_confidence: float = Field(
        default=0.9,
        ge=0.0,
        le=1.0,
        description="Upper bound of the forecast confidence signal",
    )
    confidence_sample_size: int = Field(
        default=10,
        ge=1,
        description="Sample count at which confidence reaches its upper bound",
    )


class Settings(BaseSettings):
    """Every settings group, loaded once from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    rate_limit: RateLimitSettings = Field(default_factory=RateLimitSettings)
    observability: ObservabilitySettings = Field(
        default_factory=ObservabilitySettings
    )
    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide Settings, loading it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
