"""
Shared schema bases.

Wire names are camelCase aliases; Python code uses snake_case field names.
Both are accepted on input and responses are rendered by alias.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BaseSchema",
    "TimestampMixin",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
]


class BaseSchema(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class TimestampMixin(BaseModel):
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class BaseCreateSchema(BaseSchema):
    # unknown keys in a create payload are dropped rather than rejected
    model_config = ConfigDict(extra="ignore")


class BaseUpdateSchema(BaseSchema):
    """Partial update payload; every field is optional."""

    def changes(self) -> Dict[str, Any]:
        """Fields the client sent with a non-null value, keyed by attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True, by_alias=False)


class BaseResponseSchema(BaseSchema, TimestampMixin):
    id: int
