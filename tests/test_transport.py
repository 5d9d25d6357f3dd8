import base64
import binascii

import pytest

from ashttp_query.constants import EXAMPLE_QUERY
from ashttp_query.core import TooShortError, TruncatedDeviceIdError
from ashttp_query.transport import (
    InvalidQueryUrlError,
    decode_base64_query,
    extract_query_string,
    parse_base64_query,
    parse_query_url,
)

REFERENCE_BYTES = bytes(
    [141, 1, 0x09, 0x04, 5]
    + list(b"test1")
    + [4, 1, 0, 0, 0, 5]
    + list(b"phone")
    + list(b"params")
)


def test_parse_base64_query_reference():
    query = parse_base64_query(base64.b64encode(REFERENCE_BYTES).decode("ascii"))

    assert query.protocol_version == 141
    assert query.command_name == "SendMail"
    assert query.locale == 1033
    assert query.device_id == b"test1"
    assert query.policy_key == 1
    assert query.device_type == b"phone"
    assert query.command_params == b"params"


def test_parse_example_query():
    query = parse_base64_query(EXAMPLE_QUERY)

    assert query.protocol_version == 161
    assert query.command_name == "FolderSync"
    assert query.locale == 2052
    assert query.device_id_hex == "9e0c42ba363b9358a2e38141f6582c5d"
    assert query.policy_key == 2828802690
    assert query.device_type == b"WindowsMail"
    assert query.command_params == b""


def test_decode_base64_query_strips_url_quoting():
    quoted = EXAMPLE_QUERY.replace("=", "%3D")

    assert decode_base64_query(f"  {quoted}\n") == base64.b64decode(EXAMPLE_QUERY)


def test_decode_base64_query_rejects_malformed_input():
    with pytest.raises(binascii.Error):
        decode_base64_query("not base64!")


def test_parse_base64_query_propagates_decode_errors():
    with pytest.raises(TooShortError):
        parse_base64_query(base64.b64encode(b"\x8d\x01").decode("ascii"))

    with pytest.raises(TruncatedDeviceIdError):
        parse_base64_query(base64.b64encode(b"\x8d\x01\x09\x04\x09ab").decode("ascii"))


def test_parse_query_url():
    url = f"https://mail.example.com/Microsoft-Server-ActiveSync?{EXAMPLE_QUERY}"

    assert extract_query_string(url) == EXAMPLE_QUERY
    assert parse_query_url(url) == parse_base64_query(EXAMPLE_QUERY)


def test_parse_query_url_requires_query():
    with pytest.raises(InvalidQueryUrlError):
        parse_query_url("https://mail.example.com/Microsoft-Server-ActiveSync")
