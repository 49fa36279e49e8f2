"""Configuration for privilegecore.

Pydantic-validated settings for logging and for the area vocabulary used when
encoding and decoding tokens. Direct os.environ/os.getenv usage is limited to
:func:`load_config_from_env`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .privileges.constants import DEFAULT_VOCABULARY, DELIMITER, Domain, Vocabulary


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class PrivilegeConfig(BaseModel):
    """Settings shared by everything that encodes or evaluates privilege tokens.

    Area vocabulary:
        strict_areas         — reject areas outside the vocabulary (default: True).
                               When False, any delimiter-free area name is accepted.
        extra_account_areas  — account areas added to the built-in ones
        extra_project_areas  — project areas added to the built-in ones
    """

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )
    service_name: Optional[str] = Field(
        default=None,
        description="Service name attached to the package logger",
    )

    # Vocabulary
    strict_areas: bool = Field(
        default=True,
        description="Treat tokens with unknown areas as malformed",
    )
    extra_account_areas: list[str] = Field(
        default_factory=list,
        description="Account areas in addition to the built-in AccountArea values",
    )
    extra_project_areas: list[str] = Field(
        default_factory=list,
        description="Project areas in addition to the built-in ProjectArea values",
    )

    @field_validator("extra_account_areas", "extra_project_areas")
    @classmethod
    def validate_areas(cls, v: list[str]) -> list[str]:
        """Area names must be non-empty and free of the token delimiter."""
        for area in v:
            if not area:
                raise ValueError("Area names must not be empty")
            if DELIMITER in area:
                raise ValueError(f"Area name must not contain {DELIMITER!r}: {area!r}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    def vocabulary(self) -> Optional[Vocabulary]:
        """Vocabulary to pass to the codec and evaluator (None when not strict)."""
        if not self.strict_areas:
            return None
        return DEFAULT_VOCABULARY.extend(Domain.ACCOUNT, *self.extra_account_areas).extend(
            Domain.PROJECT, *self.extra_project_areas
        )

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",  # Prevent accidental extra fields
    }


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_config_from_env() -> PrivilegeConfig:
    """Load configuration from environment variables.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - SERVICE_NAME: Service name for logging
    - PRIVILEGE_STRICT_AREAS: Reject unknown areas (true/false, default: true)
    - PRIVILEGE_EXTRA_ACCOUNT_AREAS: Comma-separated extra account areas
    - PRIVILEGE_EXTRA_PROJECT_AREAS: Comma-separated extra project areas

    Returns:
        PrivilegeConfig instance with values from environment or defaults.
    """
    import os

    return PrivilegeConfig(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes"),
        service_name=os.getenv("SERVICE_NAME"),
        strict_areas=os.getenv("PRIVILEGE_STRICT_AREAS", "true").lower() in ("true", "1", "yes"),
        extra_account_areas=_split_list(os.getenv("PRIVILEGE_EXTRA_ACCOUNT_AREAS", "")),
        extra_project_areas=_split_list(os.getenv("PRIVILEGE_EXTRA_PROJECT_AREAS", "")),
    )


__all__ = [
    "LogLevel",
    "PrivilegeConfig",
    "load_config_from_env",
]
