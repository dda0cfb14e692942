"""Uniform JSON body for every error response."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_serializer

from app.models.enums import BusinessErrorCode


class ErrorResponse(BaseModel):
    """Error payload shared by exception handlers and the auth dependency."""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: int
    error: str
    message: str
    code: BusinessErrorCode | None = None

    @field_serializer("timestamp")
    def _format_timestamp(self, value: datetime) -> str:
        return value.strftime("%Y-%m-%d %H:%M:%S")
