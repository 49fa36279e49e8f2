"""Unified exception hierarchy for privilegecore.

All errors inherit from PrivilegeError. This module provides:
- Base exception hierarchy with stable error codes

Usage:
    from privilegecore.exceptions import (
        PrivilegeError,
        MalformedTokenError,
        MissingContextError,
    )

"Not granted" is never an error: only malformed input data raises.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PrivilegeError",
    "MissingContextError",
    "MalformedTokenError",
    "InvalidFieldError",
    "PrivilegeSourceError",
]


# ---- Exception Hierarchy ----------------------------------------------------


class PrivilegeError(Exception):
    """Base exception for privilegecore.

    Attributes:
        code: Stable error code string for protocol mapping (e.g. "MALFORMED_TOKEN").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class MissingContextError(PrivilegeError):
    """A project privilege was built without a context id.

    Signals a data-integrity defect in the upstream record: a project
    privilege without context is invalid by construction.
    """

    code: str = "MISSING_CONTEXT"
    message: str = "Project privilege must have a context id"


class MalformedTokenError(PrivilegeError):
    """A token does not follow the grammar of the domain it was decoded under."""

    code: str = "MALFORMED_TOKEN"
    message: str = "Malformed privilege token"

    def __init__(self, message: str | None = None, *, token: str | None = None, **kwargs: Any) -> None:
        self.token = token
        super().__init__(message, token=token, **kwargs)


class InvalidFieldError(PrivilegeError):
    """A field value cannot be placed in a token (empty, contains the delimiter, unknown area)."""

    code: str = "INVALID_FIELD"
    message: str = "Invalid privilege field"


class PrivilegeSourceError(PrivilegeError):
    """The external privilege store failed to return records."""

    code: str = "PRIVILEGE_SOURCE_ERROR"

