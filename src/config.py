"""Configuration for the application."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SimulationConfig(BaseSettings):
    """Configuration for the periodic reading simulation."""

    model_config = SettingsConfigDict(env_prefix="SIMULATION_", env_file=".env", extra="ignore")

    enabled: bool = Field(default=True, description="Run the periodic simulation tick")
    interval_seconds: float = Field(default=30.0, gt=0, description="Period between ticks")
    initial_delay_seconds: float = Field(default=2.0, ge=0, description="Delay before the first tick")
    seed: int | None = Field(default=None, description="Seed for the random source (None = OS entropy)")
    alert_probability: float = Field(default=0.1, ge=0.0, le=1.0, description="Chance of raising a nitrate alert")
    alert_nitrate_threshold: float = Field(default=3.5, description="Nitrates (mg/L) above which an alert may fire")
    alert_confidence: int = Field(default=92, ge=0, le=100, description="Confidence attached to raised alerts")


class RealtimeConfig(BaseSettings):
    """Configuration for the real-time channel."""

    model_config = SettingsConfigDict(env_prefix="REALTIME_", env_file=".env", extra="ignore")

    path: str = Field(default="/ws", description="WebSocket endpoint path")


class ClientConfig(BaseSettings):
    """Configuration for the real-time client connection manager."""

    model_config = SettingsConfigDict(env_prefix="CLIENT_", env_file=".env", extra="ignore")

    url: str = Field(default="ws://localhost:8000/ws", description="WebSocket URL to connect to")
    base_delay_seconds: float = Field(default=3.0, gt=0, description="Base reconnect delay (linear backoff)")
    max_reconnect_attempts: int = Field(default=5, ge=0, description="Reconnect attempts before giving up")


class QueryConfig(BaseSettings):
    """Configuration for API query limits."""

    model_config = SettingsConfigDict(env_prefix="QUERY_", env_file=".env", extra="ignore")

    default_readings_limit: int = Field(default=50, ge=1, description="Default number of readings to return")
    max_readings_limit: int = Field(default=1000, ge=1, description="Maximum number of readings that can be requested")


class LoggingConfig(BaseSettings):
    """Configuration for logging sinks."""

    model_config = SettingsConfigDict(env_prefix="LOG_", env_file=".env", extra="ignore")

    level: str = Field(default="INFO", description="Minimum log level for the console sink")
    file: str | None = Field(default=None, description="Optional path of a rotating log file")


class SeedConfig(BaseSettings):
    """Configuration for the startup seed data."""

    model_config = SettingsConfigDict(env_prefix="SEED_", env_file=".env", extra="ignore")

    enabled: bool = Field(default=True, description="Load the fixed monitoring sites and alerts at startup")


class AppConfig(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    realtime: RealtimeConfig = Field(default_factory=RealtimeConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
