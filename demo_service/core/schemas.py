"""Shared response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details response body."""

    type: str = Field(default="about:blank", description="Problem type identifier")
    title: str = Field(description="Short summary of the problem type")
    status: int = Field(ge=400, le=599, description="HTTP status code")
    detail: str | None = Field(default=None, description="Explanation of this occurrence")
    instance: str | None = Field(default=None, description="URI of this occurrence")
    correlation_id: str | None = Field(default=None, description="Request correlation ID")


class HealthStatus(BaseModel):
    """Liveness payload returned by the health endpoint."""

    status: str = Field(default="ok", description="Overall service status")
    service: str = Field(description="Service name")
    version: str = Field(description="Service version")
    users: int = Field(ge=0, description="Users currently held in memory")
    movies: int = Field(ge=0, description="Movies currently held in memory")
