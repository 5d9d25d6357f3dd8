"""Decoder for the base64-encoded ActiveSync HTTP query.

Wire layout, all multi-byte integers little-endian::

    [1B version][1B command][2B locale]
    [1B device id len][device id]
    [1B policy key len][0 or 4B policy key]     optional
    [1B device type len][device type]           optional
    [command parameters ...]                    remainder

Field boundaries come only from the embedded length prefixes, so every
prefix is checked against the bytes left before its payload is sliced.
"""

from __future__ import annotations

import logging
import struct
from typing import Optional, Union

from .models import DecodedQuery

LOGGER = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 5
POLICY_KEY_LENGTH = 4

_HEADER = struct.Struct("<BBH")
_POLICY_KEY = struct.Struct("<I")

BytesLike = Union[bytes, bytearray, memoryview]


class QueryDecodeError(ValueError):
    """Raised when a query byte sequence does not follow the wire layout."""

    code = "DecodeError"

    def __init__(self, message: str, *, offset: int) -> None:
        super().__init__(message)
        self.offset = offset


class TooShortError(QueryDecodeError):
    code = "TooShort"


class InvalidDeviceIdLengthError(QueryDecodeError):
    code = "InvalidDeviceIdLength"


class TruncatedDeviceIdError(QueryDecodeError):
    code = "TruncatedDeviceId"


class InvalidPolicyKeyLengthError(QueryDecodeError):
    code = "InvalidPolicyKeyLength"


class TruncatedDeviceTypeError(QueryDecodeError):
    code = "TruncatedDeviceType"


def _fail(error: QueryDecodeError) -> QueryDecodeError:
    LOGGER.debug("Query decode failed (%s at offset %d): %s", error.code, error.offset, error)
    return error


def decode_query(data: BytesLike) -> DecodedQuery:
    """Decode a raw query into a :class:`DecodedQuery`.

    Args:
        data: Query bytes, already reversed from their base64 transport form.

    Returns:
        The decoded query.

    Raises:
        QueryDecodeError: One of its subclasses, naming the violated field.
    """

    buffer = bytes(data)
    size = len(buffer)

    if size < MIN_QUERY_LENGTH:
        raise _fail(
            TooShortError(
                f"query is {size} bytes, at least {MIN_QUERY_LENGTH} required",
                offset=0,
            )
        )

    protocol_version, command_code, locale = _HEADER.unpack_from(buffer, 0)
    offset = _HEADER.size

    device_id_length = buffer[offset]
    if device_id_length == 0:
        raise _fail(
            InvalidDeviceIdLengthError("device id length must be non-zero", offset=offset)
        )
    offset += 1
    if size - offset < device_id_length:
        raise _fail(
            TruncatedDeviceIdError(
                f"device id declares {device_id_length} bytes, {size - offset} remain",
                offset=offset,
            )
        )
    device_id = buffer[offset : offset + device_id_length]
    offset += device_id_length

    policy_key: Optional[int] = None
    if offset < size:
        policy_key_length = buffer[offset]
        if policy_key_length == POLICY_KEY_LENGTH and size - offset - 1 >= POLICY_KEY_LENGTH:
            (policy_key,) = _POLICY_KEY.unpack_from(buffer, offset + 1)
            offset += 1 + POLICY_KEY_LENGTH
        elif policy_key_length == 0:
            offset += 1
        else:
            raise _fail(
                InvalidPolicyKeyLengthError(
                    f"policy key length {policy_key_length} with "
                    f"{size - offset - 1} bytes remaining",
                    offset=offset,
                )
            )

    device_type = b""
    if offset < size:
        device_type_length = buffer[offset]
        offset += 1
        if size - offset < device_type_length:
            raise _fail(
                TruncatedDeviceTypeError(
                    f"device type declares {device_type_length} bytes, "
                    f"{size - offset} remain",
                    offset=offset,
                )
            )
        device_type = buffer[offset : offset + device_type_length]
        offset += device_type_length

    return DecodedQuery(
        protocol_version=protocol_version,
        command_code=command_code,
        locale=locale,
        device_id=device_id,
        policy_key=policy_key,
        device_type=device_type,
        command_params=buffer[offset:],
    )
