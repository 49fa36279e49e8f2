"""Tests for query shapes and decisions."""

from __future__ import annotations

import pytest

from privilegecore import (
    AccessLevel,
    AccountArea,
    AccountQuery,
    Decision,
    Domain,
    MissingContextError,
    ProjectArea,
    ProjectQuery,
)


class TestQueries:
    """Tests for AccountQuery and ProjectQuery."""

    def test_account_query(self) -> None:
        query = AccountQuery(AccountArea.BILLING, "write")
        assert query.domain is Domain.ACCOUNT
        assert query.area == "billing"
        assert query.min_level is AccessLevel.WRITE

    def test_project_query(self) -> None:
        query = ProjectQuery("p1", ProjectArea.AUDIENCE, AccessLevel.READ)
        assert query.domain is Domain.PROJECT
        assert query.context_id == "p1"

    def test_project_query_requires_context(self) -> None:
        with pytest.raises(MissingContextError, match="Project query must have a context id"):
            ProjectQuery("", ProjectArea.AUDIENCE, AccessLevel.READ)

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError):
            AccountQuery(AccountArea.BILLING, "owner")

    def test_queries_are_immutable(self) -> None:
        query = AccountQuery(AccountArea.BILLING, AccessLevel.READ)
        with pytest.raises(AttributeError):
            query.area = "analytics"  # type: ignore[misc]

    def test_enum_and_string_areas_compare_equal(self) -> None:
        assert AccountQuery(AccountArea.BILLING, "read") == AccountQuery("billing", AccessLevel.READ)
        assert len({AccountQuery(AccountArea.BILLING, "read"), AccountQuery("billing", "read")}) == 1


class TestDecision:
    """Tests for Decision."""

    def test_from_bool(self) -> None:
        assert Decision.from_bool(True) is Decision.GRANTED
        assert Decision.from_bool(False) is Decision.NOT_GRANTED

    def test_truthiness(self) -> None:
        assert Decision.GRANTED
        assert not Decision.NOT_GRANTED

    def test_values(self) -> None:
        assert {d.value for d in Decision} == {"granted", "not_granted"}
