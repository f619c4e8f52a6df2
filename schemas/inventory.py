from pydantic import BaseModel
from typing import Any, Optional, Union
from datetime import datetime


class ItemFields(BaseModel):
    """Typed create/update input, produced by utils.forms from raw values."""
    name: Optional[str] = None
    quantity: Optional[Union[int, float]] = None
    description: Optional[str] = None


class InventoryItemPayload(BaseModel):
    name: Optional[str] = None
    # Left untyped so utils.forms.parse_quantity decides what counts as a number.
    quantity: Optional[Any] = None
    description: Optional[str] = None


class InventoryItem(BaseModel):
    id: str
    name: str
    quantity: int
    description: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
