"""
Pydantic schemas for items.

``ItemCreate`` is the request body accepted by the create and update
endpoints; it never carries an identifier.  ``Item`` is the stored
record: ``id`` is ``None`` until the repository assigns one on insert.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Display name of the item")
    description: Optional[str] = Field(None, description="Free-form description")
    quantity: int = Field(0, ge=0, description="Units in stock")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class ItemCreate(ItemBase):
    """Schema for creating or replacing an item."""

    model_config = ConfigDict(extra="forbid")


class Item(ItemBase):
    """Schema for a stored item."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[UUID] = Field(None, description="Assigned by storage on insert")

    @classmethod
    def from_input(cls, data: ItemCreate, key: Optional[UUID] = None) -> "Item":
        return cls(id=key, **data.model_dump())
