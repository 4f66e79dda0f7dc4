"""Pydantic models for API responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Response model for a message query."""

    name: str = Field(..., description="Worker name")
    message: str = Field(..., description="Initialization message")

    model_config = {
        "json_schema_extra": {
            "example": {"name": "time_tracker", "message": "Hello World"},
        }
    }


class DoneResponse(BaseModel):
    """Response model for a done notification."""

    name: str = Field(..., description="Worker name")
    status: str = Field(default="accepted", description="Notification status")


class WorkerInfo(BaseModel):
    """Summary of a registered worker."""

    name: str = Field(..., description="Worker name")
    running: bool = Field(..., description="Whether the timestamp loop is alive")
    interval_seconds: float = Field(..., description="Delay between timestamp lines")


class WorkerListResponse(BaseModel):
    """Response model for listing workers."""

    workers: list[WorkerInfo] = Field(default_factory=list, description="Registered workers")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(..., description="Current timestamp")
    components: dict[str, str] = Field(..., description="Component health status")

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "timestamp": "2026-02-07T10:30:00Z",
                "components": {"api": "healthy", "worker:time_tracker": "running"},
            }
        }
    }
