"""Decoder for base64-encoded ActiveSync HTTP queries."""

from .command_names import COMMAND_NAMES, CommandCodes, command_name
from .core import (
    DecodedQuery,
    InvalidDeviceIdLengthError,
    InvalidPolicyKeyLengthError,
    QueryDecodeError,
    TooShortError,
    TruncatedDeviceIdError,
    TruncatedDeviceTypeError,
    decode_query,
)
from .render import query_to_dict, render_json
from .transport import InvalidQueryUrlError, parse_base64_query, parse_query_url

__all__ = [
    "COMMAND_NAMES",
    "CommandCodes",
    "DecodedQuery",
    "InvalidDeviceIdLengthError",
    "InvalidPolicyKeyLengthError",
    "InvalidQueryUrlError",
    "QueryDecodeError",
    "TooShortError",
    "TruncatedDeviceIdError",
    "TruncatedDeviceTypeError",
    "command_name",
    "decode_query",
    "parse_base64_query",
    "parse_query_url",
    "query_to_dict",
    "render_json",
]
