"""JSON rendering of decoded queries for display."""

from __future__ import annotations

import base64
import json
from typing import Any, Dict, Optional

from .constants import DEFAULT_JSON_INDENT
from .core.models import DecodedQuery


def query_to_dict(query: DecodedQuery) -> Dict[str, Any]:
    """Build a JSON-ready payload, with the device id as hex and the command name resolved."""

    command_params: Optional[str] = None
    if query.command_params:
        command_params = base64.b64encode(query.command_params).decode("ascii")

    return {
        "protocolVersion": query.protocol_version,
        "commandCode": query.command_code,
        "commandName": query.command_name,
        "locale": query.locale,
        "deviceId": query.device_id_hex,
        "policyKey": query.policy_key,
        "deviceType": query.device_type.decode("utf-8", errors="replace"),
        "commandParams": command_params,
    }


def render_json(query: DecodedQuery, *, indent: Optional[int] = DEFAULT_JSON_INDENT) -> str:
    return json.dumps(query_to_dict(query), indent=indent)
