"""Privilege values and the external record shape.

Two privilege variants form a closed sum type:

- :class:`AccountPrivilege` — ``(area, level)``, no context field at all.
- :class:`ProjectPrivilege` — ``(context_id, area, level)``, context required.

:class:`PrivilegeRecord` is the row shape returned by the privilege store.
It may carry ``context_id=None`` for a project row (a data defect), which is
why it converts to a variant through :meth:`PrivilegeRecord.to_privilege`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..exceptions import MissingContextError
from .constants import AccessLevel, Domain, area_name


@dataclass(frozen=True)
class AccountPrivilege:
    """Account-wide grant of ``level`` on ``area``."""

    area: str
    level: AccessLevel

    def __post_init__(self) -> None:
        object.__setattr__(self, "area", area_name(self.area))
        object.__setattr__(self, "level", AccessLevel(self.level))

    @property
    def domain(self) -> Domain:
        return Domain.ACCOUNT


@dataclass(frozen=True)
class ProjectPrivilege:
    """Grant of ``level`` on ``area`` inside the project ``context_id``."""

    context_id: str
    area: str
    level: AccessLevel

    def __post_init__(self) -> None:
        if not self.context_id:
            raise MissingContextError(area=area_name(self.area))
        object.__setattr__(self, "area", area_name(self.area))
        object.__setattr__(self, "level", AccessLevel(self.level))

    @property
    def domain(self) -> Domain:
        return Domain.PROJECT


Privilege = Union[AccountPrivilege, ProjectPrivilege]


class PrivilegeRecord(BaseModel):
    """A privilege row as stored for one principal.

    Owned by the external store and read-only here.
    """

    model_config = ConfigDict(frozen=True)

    principal_id: str
    domain: Domain
    area: str
    level: AccessLevel
    context_id: Optional[str] = None

    @field_validator("area", mode="before")
    @classmethod
    def validate_area(cls, v: str | Enum) -> str:
        """Store enum areas by value."""
        return area_name(v)

    def to_privilege(self) -> Privilege:
        """Convert to the typed variant for this record's domain.

        ``context_id`` is ignored for account rows.

        Raises:
            MissingContextError: If a project row has no context id.
        """
        if self.domain is Domain.ACCOUNT:
            return AccountPrivilege(area=self.area, level=self.level)
        if not self.context_id:
            raise MissingContextError(principal_id=self.principal_id, area=self.area)
        return ProjectPrivilege(context_id=self.context_id, area=self.area, level=self.level)

    @classmethod
    def from_privilege(cls, principal_id: str, privilege: Privilege) -> PrivilegeRecord:
        return cls(
            principal_id=principal_id,
            domain=privilege.domain,
            area=privilege.area,
            level=privilege.level,
            context_id=getattr(privilege, "context_id", None),
        )


__all__ = [
    "AccountPrivilege",
    "Privilege",
    "PrivilegeRecord",
    "ProjectPrivilege",
]
