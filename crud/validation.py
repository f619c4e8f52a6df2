import math
from typing import Optional

from exceptions import ValidationError
from schemas.inventory import ItemFields

# Upper bound of the BIGINT quantity column.
MAX_QUANTITY = 2 ** 63 - 1


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_item_fields(fields: ItemFields) -> None:
    # Order matters: presence, then numeric, then sign.
    if _blank(fields.name) or fields.quantity is None or _blank(fields.description):
        raise ValidationError("all fields are required")

    quantity = fields.quantity
    if isinstance(quantity, float) and (math.isnan(quantity) or math.isinf(quantity)):
        raise ValidationError("quantity must be numeric")

    if quantity < 0:
        raise ValidationError("quantity must be non-negative")

    if isinstance(quantity, float) and not quantity.is_integer():
        raise ValidationError("quantity must be a whole number")

    if quantity > MAX_QUANTITY:
        raise ValidationError("quantity is too large")


def validate_id(item_id: Optional[str]) -> None:
    if item_id is None or not str(item_id).strip():
        raise ValidationError("id is required")
