"""
Taste of Aloha Backend — Shared Response Schemas
=================================================

What:  Response shapes that are not tied to one resource: delete
       confirmations, errors and the health probe.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MessageResponse(BaseModel):
    """Confirmation body, e.g. {"message": "Menu item deleted"}."""
    message: str


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every exception handler.

    Example:
        {
            "error": "not_found",
            "message": "Menu item not found",
            "details": {"resource": "Menu item", "resource_id": 42},
            "requestId": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """
    What:  Liveness payload for GET /health.

    status is "ok" when the item store answers and "degraded" otherwise.
    """
    status: str
    timestamp: datetime
    version: str
    store: str = Field(description="Store backend state: connected, disconnected, memory")
    uptime_seconds: float

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
