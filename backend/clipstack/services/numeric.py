"""
Decimal coercion between API floats and fixed-precision columns.

Numeric columns keep a declared scale (e.g. ``Numeric(5, 2)`` for frame
rate). Inbound floats are quantized to that scale with round-half-up,
which matches how PostgreSQL rounds ``numeric`` input, so SQLite and
PostgreSQL store the same value:

    >>> to_decimal(23.976, 2)
    Decimal('23.98')
    >>> to_float(Decimal('23.98'))
    23.98
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Type, Union

from sqlalchemy import Numeric

from clipstack.core.database import Base
from clipstack.core.errors import ValidationError


Number = Union[int, float, Decimal]


def to_decimal(value: Optional[Number], places: int) -> Optional[Decimal]:
    """Quantize a number to ``places`` decimal places; ``None`` passes through."""
    if value is None:
        return None
    if not isinstance(value, Decimal):
        # str() gives the shortest repr, so 0.1 becomes Decimal('0.1') and not its binary expansion
        value = Decimal(str(value))
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def to_float(value: Optional[Number]) -> Optional[float]:
    """Surface a stored decimal as a float; ``None`` passes through."""
    if value is None:
        return None
    return float(value)


def column_scale(model: Type[Base], field: str) -> Optional[int]:
    """Declared scale of a Numeric column, or None for any other column type."""
    column_type = model.__table__.c[field].type
    if isinstance(column_type, Numeric):
        return column_type.scale
    return None


def integer_digits(model: Type[Base], field: str) -> Optional[int]:
    """Digits left of the decimal point that a Numeric column can hold."""
    column_type = model.__table__.c[field].type
    if isinstance(column_type, Numeric) and column_type.precision is not None:
        return column_type.precision - (column_type.scale or 0)
    return None


def to_storage(model: Type[Base], field: str, value: Any) -> Any:
    """
    Convert an API value for assignment to ``model.field``.

    Raises:
        ValidationError: If rounding pushes the value past the column precision,
            e.g. a frame rate of 999.996 becomes 1000.00 in a Numeric(5, 2)
    """
    scale = column_scale(model, field)
    if scale is None:
        return value

    stored = to_decimal(value, scale)
    digits = integer_digits(model, field)
    if stored is not None and digits is not None and abs(stored) >= Decimal(10) ** digits:
        raise ValidationError(
            f"{field} is out of range after rounding to {scale} decimal places",
            field=field,
        )
    return stored
