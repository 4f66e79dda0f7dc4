"""Application settings and configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorkerSettings(BaseModel):
    """Periodic worker configuration."""

    name: str = Field(default="time_tracker", description="Registered worker name", min_length=1)
    message: str = Field(default="Hello World", description="Initialization message")
    interval_seconds: float = Field(
        default=5.0, description="Delay between timestamp lines", gt=0
    )
    autostart: bool = Field(
        default=True, description="Start the worker and its loop when the server boots"
    )
    on_conflict: Literal["reject", "return_existing"] = Field(
        default="reject", description="Policy when a worker name is already taken"
    )


class NodeSettings(BaseModel):
    """Deployment role of this process."""

    role: Literal["server", "client"] = Field(
        default="server", description="Host the worker (server) or drive a remote one (client)"
    )
    server_url: str = Field(
        default="http://localhost:8000", description="Base URL of the server node"
    )
    request_timeout: float = Field(
        default=5.0, description="Timeout for calls to the server node", gt=0
    )


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port", ge=0, le=65535)


class MonitoringSettings(BaseModel):
    """Monitoring and observability configuration."""

    metrics_enabled: bool = Field(default=True, description="Enable Prometheus metrics")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "text"] = Field(default="json", description="Log format")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TIMETRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    worker: WorkerSettings = Field(default_factory=WorkerSettings)
    node: NodeSettings = Field(default_factory=NodeSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)


# Global settings instance
settings = Settings()
