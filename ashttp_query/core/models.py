"""Domain models for decoded queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..command_names import command_name


@dataclass(frozen=True, slots=True)
class DecodedQuery:
    protocol_version: int
    command_code: int
    locale: int
    device_id: bytes
    policy_key: Optional[int] = None
    device_type: bytes = b""
    command_params: bytes = b""

    @property
    def command_name(self) -> str:
        return command_name(self.command_code)

    @property
    def device_id_hex(self) -> str:
        return self.device_id.hex()

    @property
    def has_policy_key(self) -> bool:
        return self.policy_key is not None
