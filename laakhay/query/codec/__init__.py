"""Value codec: native values to query parameters and wire cells to native values."""

from .decode import NON_FINITE_SENTINELS, decode, decode_row
from .encode import EncodedValue, encode, encode_parameter

__all__ = [
    "EncodedValue",
    "NON_FINITE_SENTINELS",
    "decode",
    "decode_row",
    "encode",
    "encode_parameter",
]
