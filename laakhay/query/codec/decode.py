"""Wire cell to native value decoding.

The service returns every cell as a string (or null), nested records as
``{"f": [{"v": ...}, ...]}`` and repeated values as ``[{"v": ...}, ...]``.
``decode`` turns one such cell into a Python value using its field
descriptor, recursing through RECORD and REPEATED fields.

Dispatch order:
    1. null -> None
    2. REPEATED mode -> list, each element decoded as a single value
    3. type-specific conversion (see ``decode``)
    4. unknown type -> raw value unchanged

Failure policy:
    Only non-finite FLOAT sentinels raise (UnsupportedValueError). A value
    that fails to parse for its declared type is returned raw, so schema
    additions on the service side never break row decoding.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import UTC, date, datetime, time, timedelta
from decimal import ROUND_FLOOR, Decimal, InvalidOperation
from typing import Any

from ..core.enums import FieldType
from ..core.exceptions import DecodeError, UnsupportedValueError
from ..models import FieldSchema

logger = logging.getLogger(__name__)

NON_FINITE_SENTINELS = frozenset({"NaN", "Infinity", "-Infinity"})

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MICROS = Decimal(1_000_000)


def decode(raw: Any, field: FieldSchema) -> Any:
    """Decode one wire cell against its field descriptor.

    Args:
        raw: Cell value as found under ``"v"`` in the response
        field: Field descriptor for the cell's column

    Returns:
        Native value: None, bool, int, float, Decimal, str, date, time,
        datetime (naive for DATETIME, UTC for TIMESTAMP), dict for RECORD,
        or list for REPEATED fields

    Raises:
        UnsupportedValueError: FLOAT cell whose value is not finite
            ("NaN", "Infinity", "-Infinity" and any other spelling)
    """
    if raw is None:
        return None

    if field.is_repeated:
        element = field.element()
        return [decode(_cell_value(item), element) for item in _as_list(raw)]

    field_type = field.field_type

    if field_type is FieldType.FLOAT:
        if isinstance(raw, str) and raw in NON_FINITE_SENTINELS:
            raise UnsupportedValueError(raw, field.name)
        value = _parse(float, raw, field)
        if isinstance(value, float) and not math.isfinite(value):
            raise UnsupportedValueError(raw, field.name)
        return value

    if field_type is FieldType.INTEGER:
        return _parse(int, raw, field)

    if field_type in (FieldType.NUMERIC, FieldType.BIGNUMERIC):
        return _parse(_to_decimal, raw, field)

    if field_type is FieldType.BOOLEAN:
        return _decode_bool(raw)

    if field_type is FieldType.RECORD:
        return _decode_record(raw, field)

    if field_type is FieldType.DATE:
        return _parse(date.fromisoformat, raw, field)

    if field_type is FieldType.DATETIME:
        return _parse(datetime.fromisoformat, raw, field)

    if field_type is FieldType.TIME:
        return _parse(time.fromisoformat, raw, field)

    if field_type is FieldType.TIMESTAMP:
        return _parse(_to_timestamp, raw, field)

    return raw


def decode_row(raw_row: Any, schema: Sequence[FieldSchema]) -> list[Any]:
    """Decode one ``{"f": [...]}`` row into a list aligned with ``schema``.

    Raises:
        DecodeError: Row cell count differs from the schema field count
    """
    cells = raw_row.get("f", []) if isinstance(raw_row, dict) else raw_row
    if len(cells) != len(schema):
        raise DecodeError(f"Row has {len(cells)} cells but schema has {len(schema)} fields")
    return [decode(_cell_value(cell), field) for cell, field in zip(cells, schema)]


def _cell_value(cell: Any) -> Any:
    if isinstance(cell, dict) and "v" in cell:
        return cell["v"]
    return cell


def _as_list(raw: Any) -> list[Any]:
    if isinstance(raw, list):
        return raw
    return [raw]


def _parse(parser, raw: Any, field: FieldSchema) -> Any:
    try:
        return parser(raw)
    except (ValueError, TypeError, OverflowError, InvalidOperation):
        logger.debug(
            "cell_passthrough",
            extra={"field": field.name, "field_type": field.type_name},
        )
        return raw


def _to_decimal(raw: Any) -> Decimal:
    if isinstance(raw, float):
        raw = repr(raw)
    return Decimal(raw)


def _decode_bool(raw: Any) -> Any:
    if isinstance(raw, bool):
        return raw
    if raw == "true":
        return True
    if raw == "false":
        return False
    return raw


def _decode_record(raw: Any, field: FieldSchema) -> Any:
    if isinstance(raw, dict) and "f" in raw:
        return _record_from_cells(raw["f"], field)
    if isinstance(raw, list):
        if raw and all(isinstance(item, dict) and "f" in item for item in raw):
            return [_record_from_cells(item["f"], field) for item in raw]
        return _record_from_cells(raw, field)
    return raw


def _record_from_cells(cells: list[Any], field: FieldSchema) -> dict[str, Any]:
    return {
        nested.name: decode(_cell_value(cell), nested)
        for cell, nested in zip(cells, field.nested_fields)
    }


def _to_timestamp(raw: Any) -> datetime:
    """Epoch seconds (floored to the microsecond) or ISO string, as UTC."""
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        raw = repr(raw)
    try:
        seconds = Decimal(raw)
    except InvalidOperation:
        parsed = datetime.fromisoformat(raw)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        return parsed.astimezone(UTC)
    if not seconds.is_finite():
        raise ValueError(f"Non-finite timestamp: {raw}")
    micros = (seconds * _MICROS).to_integral_value(rounding=ROUND_FLOOR)
    return _EPOCH + timedelta(microseconds=int(micros))
