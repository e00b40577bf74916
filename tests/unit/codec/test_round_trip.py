"""Round-trip law: decoding an encoded parameter yields the original value."""

from datetime import UTC, date, datetime, time, timedelta, timezone
from decimal import Decimal

import pytest

from laakhay.query.codec import decode, encode
from laakhay.query.models import FieldSchema

VALUES = [
    True,
    False,
    0,
    -42,
    2**62,
    10.4,
    -0.5,
    Decimal("1.10"),
    Decimal("-12345678901234567890.000000001"),
    "Wojtek",
    "",
    date(2024, 2, 29),
    time(23, 59, 59, 999999),
    datetime(2024, 1, 2, 3, 4, 5),
    datetime(2024, 1, 2, 3, 4, 5, 678901),
    datetime(2024, 1, 2, 3, 4, 5, 1, tzinfo=UTC),
    datetime(1999, 12, 31, 23, 0, tzinfo=timezone(timedelta(hours=-5))),
]


@pytest.mark.parametrize("value", VALUES, ids=repr)
def test_round_trip(value):
    encoded = encode(value)
    field = FieldSchema(name="p", type=encoded.type.value)
    assert decode(encoded.value, field) == value


def test_decimal_compares_by_value_not_string():
    """Test trailing zeros are not preserved but the value is."""
    encoded = encode(Decimal("1.10"))
    decoded = decode(encoded.value, FieldSchema(name="p", type=encoded.type.value))
    assert decoded == Decimal("1.1")
    assert str(decoded) == "1.1"


def test_zoned_timestamp_decodes_as_utc():
    value = datetime(2024, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    encoded = encode(value)
    decoded = decode(encoded.value, FieldSchema(name="p", type=encoded.type.value))
    assert decoded == value
    assert decoded.utcoffset() == timedelta(0)
