"""Logging utilities for privilegecore.

This module provides:
- Logging configuration from PrivilegeConfig
- Safe, length-bounded previews of logged values
- Structured (JSON) or plain formatting with principal_id propagation
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import LogLevel, PrivilegeConfig

PACKAGE_LOGGER = "privilegecore"

_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName", "principal_id",
    }
)


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a single-line, length-bounded preview of a value for logging.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A truncated string representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list, tuple)):
        try:
            s = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


class PrivilegeLogFormatter(logging.Formatter):
    """Formatter that includes principal_id and supports JSON output."""

    def __init__(self, json_format: bool = True, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        principal_id = getattr(record, "principal_id", None)

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if principal_id:
            log_data["principal_id"] = principal_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = safe_preview(value)

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            f"{log_data['level']}",
            f"{log_data['logger']}",
        ]
        if principal_id:
            parts.append(f"principal_id={principal_id}")
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class PrincipalLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds principal_id to every record.

    Usage:
        logger = get_principal_logger(__name__, principal_id="user-1")
        logger.info("Loaded privileges")
        logger.info("Switched", principal_id="user-2")
    """

    def __init__(self, logger: logging.Logger, principal_id: Optional[str] = None):
        super().__init__(logger, {})
        self.principal_id = principal_id

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        principal_id = kwargs.pop("principal_id", self.principal_id)

        extra = dict(kwargs.get("extra") or {})
        if principal_id:
            extra["principal_id"] = principal_id
        kwargs["extra"] = extra

        return msg, kwargs


def setup_logging(config: Optional[PrivilegeConfig] = None) -> None:
    """Configure the ``privilegecore`` logger from config.

    Attaches a single stream handler with :class:`PrivilegeLogFormatter`.
    Calling it again replaces the handler instead of stacking another one.

    Args:
        config: PrivilegeConfig instance (if None, loads from environment)
    """
    if config is None:
        from .config import load_config_from_env

        config = load_config_from_env()

    log_level = getattr(logging, LogLevel(config.log_level).value)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(PrivilegeLogFormatter(json_format=config.log_json))
    package_logger.addHandler(console_handler)

    if config.service_name:
        logging.getLogger(config.service_name).setLevel(log_level)


def get_principal_logger(name: str, principal_id: Optional[str] = None) -> PrincipalLoggerAdapter:
    """Get a logger adapter bound to a principal.

    Args:
        name: Logger name (typically __name__)
        principal_id: Optional principal to include in all logs
    """
    return PrincipalLoggerAdapter(logging.getLogger(name), principal_id=principal_id)


__all__ = [
    "PACKAGE_LOGGER",
    "PrincipalLoggerAdapter",
    "PrivilegeLogFormatter",
    "get_principal_logger",
    "safe_preview",
    "setup_logging",
]
