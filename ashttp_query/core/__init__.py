"""Core primitives for ashttp-query."""

from .decoder import (
    InvalidDeviceIdLengthError,
    InvalidPolicyKeyLengthError,
    QueryDecodeError,
    TooShortError,
    TruncatedDeviceIdError,
    TruncatedDeviceTypeError,
    decode_query,
)
from .models import DecodedQuery

__all__ = [
    "DecodedQuery",
    "InvalidDeviceIdLengthError",
    "InvalidPolicyKeyLengthError",
    "QueryDecodeError",
    "TooShortError",
    "TruncatedDeviceIdError",
    "TruncatedDeviceTypeError",
    "decode_query",
]
