"""Native value to query-parameter encoding.

Each supported Python value maps to a ``(wire_value, wire_type)`` pair.
Values of any other kind fall back to their string form with wire type
STRING rather than raising.

Timestamps:
    Zone-aware datetimes are converted to UTC and sent as TIMESTAMP in
    ``YYYY-MM-DD HH:MM:SS.ffffff`` form without an offset suffix.
    Microseconds are kept. Values whose UTC instant falls outside years
    1..9999 keep their original offset instead. Naive datetimes are sent
    as DATETIME.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from decimal import Decimal
from typing import Any, NamedTuple

from ..core.enums import FieldType


class EncodedValue(NamedTuple):
    """Wire form of a single parameter value."""

    value: Any
    type: FieldType


def encode(value: Any) -> EncodedValue:
    """Encode a native value into its wire value and wire type.

    Args:
        value: Native Python value

    Returns:
        EncodedValue with the JSON-ready value and its wire type

    Examples:
        >>> encode(10.4)
        EncodedValue(value=10.4, type=<FieldType.FLOAT: 'FLOAT'>)
        >>> encode(Decimal("1.10")).value
        '1.1'
    """
    if value is None:
        return EncodedValue(None, FieldType.STRING)

    # datetime subclasses date and bool subclasses int: order matters
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            try:
                utc = value.astimezone(UTC).replace(tzinfo=None)
            except OverflowError:
                # UTC instant falls outside year 1..9999: keep the offset
                return EncodedValue(
                    value.isoformat(sep=" ", timespec="microseconds"), FieldType.TIMESTAMP
                )
            return EncodedValue(utc.isoformat(sep=" ", timespec="microseconds"), FieldType.TIMESTAMP)
        return EncodedValue(value.isoformat(), FieldType.DATETIME)

    if isinstance(value, date):
        return EncodedValue(value.isoformat(), FieldType.DATE)

    if isinstance(value, time):
        return EncodedValue(value.isoformat(), FieldType.TIME)

    if isinstance(value, Decimal):
        return EncodedValue(_decimal_to_str(value), FieldType.BIGNUMERIC)

    if isinstance(value, bool):
        return EncodedValue(value, FieldType.BOOL)

    if isinstance(value, float):
        return EncodedValue(value, FieldType.FLOAT)

    if isinstance(value, int):
        return EncodedValue(value, FieldType.INTEGER)

    return EncodedValue(str(value), FieldType.STRING)


def encode_parameter(value: Any) -> dict[str, Any]:
    """Encode a value as one positional ``queryParameters`` entry."""
    encoded = encode(value)
    return {
        "parameterType": {"type": encoded.type.value},
        "parameterValue": {"value": encoded.value},
    }


def _decimal_to_str(value: Decimal) -> str:
    """Plain (non-exponent) string without trailing fractional zeros."""
    if not value.is_finite():
        return str(value)
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
