"""Base64 transport for queries carried in the request URL."""

from __future__ import annotations

import base64
import logging
from urllib.parse import unquote, urlparse

from .core.decoder import decode_query
from .core.models import DecodedQuery

LOGGER = logging.getLogger(__name__)


class InvalidQueryUrlError(ValueError):
    """Raised when a request URL carries no query string."""


def decode_base64_query(text: str) -> bytes:
    """Decode the base64 query string to raw bytes.

    Percent-escapes are removed first since ``+``, ``/`` and ``=`` are often
    quoted by clients. Malformed base64 raises :class:`binascii.Error`.
    """

    cleaned = unquote(text.strip())
    return base64.b64decode(cleaned, validate=True)


def extract_query_string(url: str) -> str:
    """Return the raw query part of ``url``."""

    query = urlparse(url).query
    if not query:
        raise InvalidQueryUrlError(f"URL has no query string: {url}")
    return query


def parse_base64_query(text: str) -> DecodedQuery:
    data = decode_base64_query(text)
    LOGGER.debug("Decoding %d byte query", len(data))
    return decode_query(data)


def parse_query_url(url: str) -> DecodedQuery:
    return parse_base64_query(extract_query_string(url))
