"""Authorization query shapes and the decision contract."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..exceptions import MissingContextError
from .constants import AccessLevel, Domain, area_name


@dataclass(frozen=True)
class AccountQuery:
    """Does the principal hold at least ``min_level`` on account area ``area``?"""

    area: str
    min_level: AccessLevel

    def __post_init__(self) -> None:
        object.__setattr__(self, "area", area_name(self.area))
        object.__setattr__(self, "min_level", AccessLevel(self.min_level))

    @property
    def domain(self) -> Domain:
        return Domain.ACCOUNT


@dataclass(frozen=True)
class ProjectQuery:
    """Does the principal hold at least ``min_level`` on ``area`` in project ``context_id``?"""

    context_id: str
    area: str
    min_level: AccessLevel

    def __post_init__(self) -> None:
        if not self.context_id:
            raise MissingContextError("Project query must have a context id", area=area_name(self.area))
        object.__setattr__(self, "area", area_name(self.area))
        object.__setattr__(self, "min_level", AccessLevel(self.min_level))

    @property
    def domain(self) -> Domain:
        return Domain.PROJECT


Query = Union[AccountQuery, ProjectQuery]


class Decision(str, Enum):
    """Outcome of a query. There is no partial or conditional result."""

    GRANTED = "granted"
    NOT_GRANTED = "not_granted"

    @classmethod
    def from_bool(cls, granted: bool) -> Decision:
        return cls.GRANTED if granted else cls.NOT_GRANTED

    def __bool__(self) -> bool:
        return self is Decision.GRANTED


__all__ = [
    "AccountQuery",
    "Decision",
    "ProjectQuery",
    "Query",
]
