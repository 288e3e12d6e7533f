"""
Taste of Aloha Backend — Menu Item Schemas
===========================================

What:  Pydantic models describing menu item payloads in both directions.
How:   Inbound payloads are parsed leniently (every field optional, strings
       coerced to numbers/booleans); the mapping layer in
       aloha.services.mapping decides defaults and required fields.
       Outbound records use camelCase keys (isAvailable, createdAt), the
       shape the web frontend already consumes.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class MenuItemFields(BaseModel):
    """
    Loosely-typed item payload as sent by clients.

    Accepts both camelCase and snake_case keys. Unknown keys (including id
    and createdAt, which are never writable) are dropped.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
    image: Optional[str] = None
    category: Optional[str] = None
    is_available: Optional[bool] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )


class MenuItemResponse(BaseModel):
    """
    What:  Full representation of a stored menu item.
    Who:   Returned by every menu and snack endpoint that yields an item.
    """
    id: int = Field(description="Identifier assigned by the store")
    name: str
    description: str = ""
    price: float = 0.0
    image: Optional[str] = None
    category: str
    is_available: bool = True
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        """SQLite hands back naive datetimes; they were written in UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
