"""Configuration loader for ashttp-query."""

from __future__ import annotations

from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import constants


@dataclass(slots=True)
class LoggingConfig:
    level: str = "INFO"
    path: Optional[Path] = None  # Console only when unset


@dataclass(slots=True)
class OutputConfig:
    indent: int = constants.DEFAULT_JSON_INDENT


@dataclass(slots=True)
class QueryConfig:
    logging: LoggingConfig
    output: OutputConfig
    raw: ConfigParser
    path: Path


def load_config(path: Optional[Path] = None) -> QueryConfig:
    """Load configuration from disk, applying defaults where necessary."""

    config_path = path or constants.DEFAULT_CONFIG_PATH
    parser = ConfigParser()
    parser.read_dict(
        {
            "logging": {
                "level": "INFO",
                "path": "",
            },
            "output": {
                "indent": str(constants.DEFAULT_JSON_INDENT),
            },
        }
    )

    if config_path.exists():
        parser.read(config_path)

    log_path_value = parser.get("logging", "path", fallback="").strip()
    logging_config = LoggingConfig(
        level=parser.get("logging", "level", fallback="INFO"),
        path=Path(log_path_value).expanduser() if log_path_value else None,
    )

    try:
        indent_value = parser.getint(
            "output", "indent", fallback=constants.DEFAULT_JSON_INDENT
        )
    except ValueError:
        indent_value = constants.DEFAULT_JSON_INDENT

    output = OutputConfig(indent=max(0, indent_value))

    return QueryConfig(
        logging=logging_config,
        output=output,
        raw=parser,
        path=config_path,
    )
