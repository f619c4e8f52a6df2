import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from schemas.inventory import ItemFields

# Anything with this many integer digits is out of the column's range.
_MAX_DIGITS = 20
_OUT_OF_RANGE = 10 ** _MAX_DIGITS


def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _from_decimal(value: Decimal) -> Union[int, float]:
    if not value.is_finite():
        return math.nan
    if value.adjusted() >= _MAX_DIGITS:
        return _OUT_OF_RANGE if value > 0 else -_OUT_OF_RANGE
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def parse_quantity(raw: Any) -> Optional[Union[int, float]]:
    """Turn a raw quantity into a number.

    Whole numbers come back as exact ints, fractions as floats. Blank input
    is ``None`` (missing). Anything that is not a number comes back as NaN
    so the validator can report it.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else raw
    if not isinstance(raw, str):
        return math.nan
    text = raw.strip()
    if not text:
        return None
    try:
        return _from_decimal(Decimal(text))
    except InvalidOperation:
        return math.nan


def parse_item_form(name: Any = None, quantity: Any = None, description: Any = None) -> ItemFields:
    return ItemFields(
        name=_clean_text(name),
        quantity=parse_quantity(quantity),
        description=_clean_text(description),
    )


def parse_item_id(raw: Any) -> Optional[str]:
    return _clean_text(raw)
