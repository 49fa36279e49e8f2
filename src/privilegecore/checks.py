"""Expectation checks over a token collection.

Runs a list of queries with expected outcomes and returns one row per check.
Rendering the rows (table, JSON, ...) is up to the caller.

Also ships the reference dataset: one user with two account grants and grants
in two projects, plus the expectations that go with it::

    source = reference_source()
    tokens = load_token_collection(source, REFERENCE_USER_ID)
    rows = run_checks(tokens, REFERENCE_CHECKS)
    assert all(row.passed for row in rows)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .privileges.constants import AccessLevel, AccountArea, Domain, ProjectArea
from .privileges.models import PrivilegeRecord
from .privileges.queries import AccountQuery, ProjectQuery, Query
from .sources import InMemoryPrivilegeSource
from .tokens import TokenCollection


@dataclass(frozen=True)
class PrivilegeCheck:
    query: Query
    expected: bool


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check, flattened for reporting."""

    domain: str
    area: str
    level: str
    context_id: Optional[str]
    expected: bool
    result: bool

    @property
    def passed(self) -> bool:
        return self.result == self.expected

    def as_dict(self) -> dict[str, object]:
        return {
            "domain": self.domain,
            "area": self.area,
            "level": self.level,
            "context_id": self.context_id,
            "expected": self.expected,
            "result": self.result,
            "passed": self.passed,
        }


def run_checks(tokens: TokenCollection, checks: Iterable[PrivilegeCheck]) -> list[CheckResult]:
    results = []
    for check in checks:
        query = check.query
        results.append(
            CheckResult(
                domain=query.domain.value,
                area=query.area,
                level=query.min_level.value,
                context_id=getattr(query, "context_id", None),
                expected=check.expected,
                result=tokens.allows(query),
            )
        )
    return results


# ── Reference dataset ──────────────────────────────────

REFERENCE_USER_ID = "123e4567-e89b-12d3-a456-426614174000"
REFERENCE_PROJECT_A = "eff65ad0-5021-48b2-b8f5-00b3831f219f"
REFERENCE_PROJECT_B = "32922ac8-b585-4ead-8867-95d9c2e066f5"

REFERENCE_RECORDS: tuple[PrivilegeRecord, ...] = (
    PrivilegeRecord(
        principal_id=REFERENCE_USER_ID,
        domain=Domain.ACCOUNT,
        area=AccountArea.USER_MANAGEMENT,
        level=AccessLevel.DELETE,
    ),
    PrivilegeRecord(
        principal_id=REFERENCE_USER_ID,
        domain=Domain.ACCOUNT,
        area=AccountArea.ANALYTICS,
        level=AccessLevel.EXECUTE,
    ),
    PrivilegeRecord(
        principal_id=REFERENCE_USER_ID,
        domain=Domain.PROJECT,
        area=ProjectArea.CAMPAIGNS,
        level=AccessLevel.WRITE,
        context_id=REFERENCE_PROJECT_A,
    ),
    PrivilegeRecord(
        principal_id=REFERENCE_USER_ID,
        domain=Domain.PROJECT,
        area=ProjectArea.AUDIENCE,
        level=AccessLevel.READ,
        context_id=REFERENCE_PROJECT_B,
    ),
)

REFERENCE_CHECKS: tuple[PrivilegeCheck, ...] = (
    PrivilegeCheck(AccountQuery(AccountArea.USER_MANAGEMENT, AccessLevel.WRITE), True),
    PrivilegeCheck(AccountQuery(AccountArea.USER_MANAGEMENT, AccessLevel.DELETE), True),
    PrivilegeCheck(AccountQuery(AccountArea.USER_MANAGEMENT, AccessLevel.EXECUTE), True),
    PrivilegeCheck(AccountQuery(AccountArea.ANALYTICS, AccessLevel.READ), True),
    PrivilegeCheck(AccountQuery(AccountArea.ANALYTICS, AccessLevel.WRITE), True),
    PrivilegeCheck(AccountQuery(AccountArea.ANALYTICS, AccessLevel.DELETE), False),
    PrivilegeCheck(ProjectQuery(REFERENCE_PROJECT_A, ProjectArea.CAMPAIGNS, AccessLevel.READ), True),
    PrivilegeCheck(ProjectQuery(REFERENCE_PROJECT_A, ProjectArea.CAMPAIGNS, AccessLevel.WRITE), True),
    PrivilegeCheck(ProjectQuery(REFERENCE_PROJECT_A, ProjectArea.CAMPAIGNS, AccessLevel.EXECUTE), False),
    PrivilegeCheck(ProjectQuery(REFERENCE_PROJECT_B, ProjectArea.AUDIENCE, AccessLevel.READ), True),
    PrivilegeCheck(ProjectQuery(REFERENCE_PROJECT_B, ProjectArea.AUDIENCE, AccessLevel.WRITE), False),
    PrivilegeCheck(ProjectQuery(REFERENCE_PROJECT_B, ProjectArea.AUDIENCE, AccessLevel.DELETE), False),
    PrivilegeCheck(ProjectQuery(REFERENCE_PROJECT_A, ProjectArea.AUDIENCE, AccessLevel.READ), False),
)


def reference_source() -> InMemoryPrivilegeSource:
    return InMemoryPrivilegeSource(REFERENCE_RECORDS)


__all__ = [
    "REFERENCE_CHECKS",
    "REFERENCE_PROJECT_A",
    "REFERENCE_PROJECT_B",
    "REFERENCE_RECORDS",
    "REFERENCE_USER_ID",
    "CheckResult",
    "PrivilegeCheck",
    "reference_source",
    "run_checks",
]
