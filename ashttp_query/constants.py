"""Constants used across the ashttp-query package."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "ashttp-query"
DEFAULT_CONFIG_FILENAME = f"{APP_NAME}.cfg"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / APP_NAME / DEFAULT_CONFIG_FILENAME

DEFAULT_JSON_INDENT = 2

# Windows Mail issuing FolderSync with a policy key.
EXAMPLE_QUERY = "oQkECBCeDEK6NjuTWKLjgUH2WCxdBIIanKgLV2luZG93c01haWw="
