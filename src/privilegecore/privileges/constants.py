"""Privilege vocabulary: domains, access levels, business areas.

Provides:
- ``Domain`` — token shape selector (account / project).
- ``AccessLevel`` — ordered access tiers (read < write < execute < delete).
- ``LEVEL_RANK`` — the rank table that defines that order.
- ``AccountArea`` / ``ProjectArea`` — built-in business areas per domain.
- ``Vocabulary`` — known area names per domain, extendable without mutation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..exceptions import InvalidFieldError

DELIMITER = ":"


class Domain(str, Enum):
    """Top-level privilege category.

    Token format per domain:
    - ``account:<area>:<level>``
    - ``project:<context_id>:<area>:<level>``
    """

    ACCOUNT = "account"
    PROJECT = "project"

    @property
    def field_count(self) -> int:
        """Number of delimiter-separated fields in a token of this domain."""
        return _FIELD_COUNT[self]


_FIELD_COUNT: Mapping[Domain, int] = MappingProxyType({Domain.ACCOUNT: 3, Domain.PROJECT: 4})


class AccessLevel(str, Enum):
    """Access tier held or requested on an area.

    Ordering comes from :data:`LEVEL_RANK`, not from declaration order
    or string comparison (``"delete" < "read"`` alphabetically).
    """

    READ = "read"
    WRITE = "write"
    EXECUTE = "execute"
    DELETE = "delete"

    @property
    def rank(self) -> int:
        return LEVEL_RANK[self]

    def satisfies(self, required: AccessLevel) -> bool:
        """True if holding this level grants at least ``required``."""
        return LEVEL_RANK[self] >= LEVEL_RANK[required]


# Read is equivalent to plain "access" on an area.
LEVEL_RANK: Mapping[AccessLevel, int] = MappingProxyType(
    {
        AccessLevel.READ: 1,
        AccessLevel.WRITE: 2,
        AccessLevel.EXECUTE: 3,
        AccessLevel.DELETE: 4,
    }
)


class AccountArea(str, Enum):
    """Business areas scoped to the whole account."""

    USER_MANAGEMENT = "user_management"
    ANALYTICS = "analytics"
    BILLING = "billing"


class ProjectArea(str, Enum):
    """Business areas scoped to a single project."""

    TEMPLATES = "templates"
    AUDIENCE = "audience"
    CAMPAIGNS = "campaigns"


def area_name(area: str | Enum) -> str:
    """Plain string form of an area (enum members hash by name, not value)."""
    return area.value if isinstance(area, Enum) else area


def check_field(name: str, value: object) -> str:
    """Validate a single token field and return it as a plain string.

    Raises:
        InvalidFieldError: If the value is empty or contains the delimiter.
    """
    text = value.value if isinstance(value, Enum) else value
    if not isinstance(text, str) or not text:
        raise InvalidFieldError(f"{name} must be a non-empty string", field=name, value=value)
    if DELIMITER in text:
        raise InvalidFieldError(
            f"{name} must not contain {DELIMITER!r}: {text!r}",
            field=name,
            value=text,
        )
    return text


@dataclass(frozen=True)
class Vocabulary:
    """Known area names per domain.

    Account and project areas are separate vocabularies: an area name is only
    meaningful together with its domain. Instances are immutable; use
    :meth:`extend` to derive a vocabulary with more areas.

    Example::

        vocab = DEFAULT_VOCABULARY.extend(Domain.PROJECT, "journeys")
        vocab.contains(Domain.PROJECT, "journeys")   # True
        vocab.contains(Domain.ACCOUNT, "journeys")   # False
    """

    account_areas: frozenset[str] = frozenset()
    project_areas: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "account_areas", frozenset(check_field("account area", a) for a in self.account_areas)
        )
        object.__setattr__(
            self, "project_areas", frozenset(check_field("project area", a) for a in self.project_areas)
        )

    def areas(self, domain: Domain) -> frozenset[str]:
        if domain is Domain.ACCOUNT:
            return self.account_areas
        return self.project_areas

    def contains(self, domain: Domain, area: str | Enum) -> bool:
        return area_name(area) in self.areas(domain)

    def extend(self, domain: Domain, *areas: str | Enum) -> Vocabulary:
        names = frozenset(check_field(f"{domain.value} area", a) for a in areas)
        if domain is Domain.ACCOUNT:
            return replace(self, account_areas=self.account_areas | names)
        return replace(self, project_areas=self.project_areas | names)


DEFAULT_VOCABULARY = Vocabulary(
    account_areas=frozenset(a.value for a in AccountArea),
    project_areas=frozenset(a.value for a in ProjectArea),
)


__all__ = [
    "DEFAULT_VOCABULARY",
    "DELIMITER",
    "LEVEL_RANK",
    "AccessLevel",
    "AccountArea",
    "Domain",
    "ProjectArea",
    "Vocabulary",
    "area_name",
    "check_field",
]
