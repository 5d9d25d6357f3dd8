"""Command codes carried in the base64-encoded ActiveSync query.

The second byte of a decoded query selects the requested operation:

    https://host/Microsoft-Server-ActiveSync?<base64 query>

Codes 5-8 are unassigned in the protocol and render as ``Unknown(<code>)``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


class CommandCodes:
    """Numeric command codes of the ActiveSync HTTP query."""

    # -------------------------------------------------------------------------
    # Mail
    # -------------------------------------------------------------------------

    SYNC = 0
    """Synchronise changes in a folder."""

    SEND_MAIL = 1
    SMART_FORWARD = 2
    SMART_REPLY = 3
    GET_ATTACHMENT = 4

    # -------------------------------------------------------------------------
    # Folder hierarchy
    # -------------------------------------------------------------------------

    FOLDER_SYNC = 9
    """Synchronise the folder hierarchy."""

    FOLDER_CREATE = 10
    FOLDER_DELETE = 11
    FOLDER_UPDATE = 12
    """Move or rename a folder."""

    # -------------------------------------------------------------------------
    # Items and server state
    # -------------------------------------------------------------------------

    MOVE_ITEMS = 13
    GET_ITEM_ESTIMATE = 14
    MEETING_RESPONSE = 15
    SEARCH = 16
    SETTINGS = 17
    PING = 18
    """Long-poll for folder changes."""

    ITEM_OPERATIONS = 19
    PROVISION = 20
    """Fetch the security policy settings."""

    RESOLVE_RECIPIENTS = 21


COMMAND_NAMES: Mapping[int, str] = MappingProxyType(
    {
        CommandCodes.SYNC: "Sync",
        CommandCodes.SEND_MAIL: "SendMail",
        CommandCodes.SMART_FORWARD: "SmartForward",
        CommandCodes.SMART_REPLY: "SmartReply",
        CommandCodes.GET_ATTACHMENT: "GetAttachment",
        CommandCodes.FOLDER_SYNC: "FolderSync",
        CommandCodes.FOLDER_CREATE: "FolderCreate",
        CommandCodes.FOLDER_DELETE: "FolderDelete",
        CommandCodes.FOLDER_UPDATE: "FolderUpdate",
        CommandCodes.MOVE_ITEMS: "MoveItems",
        CommandCodes.GET_ITEM_ESTIMATE: "GetItemEstimate",
        CommandCodes.MEETING_RESPONSE: "MeetingResponse",
        CommandCodes.SEARCH: "Search",
        CommandCodes.SETTINGS: "Settings",
        CommandCodes.PING: "Ping",
        CommandCodes.ITEM_OPERATIONS: "ItemOperations",
        CommandCodes.PROVISION: "Provision",
        CommandCodes.RESOLVE_RECIPIENTS: "ResolveRecipients",
    }
)


def command_name(code: int) -> str:
    """Return the display name for ``code``, or ``Unknown(<code>)``."""

    name = COMMAND_NAMES.get(code)
    if name is None:
        return f"Unknown({code})"
    return name
