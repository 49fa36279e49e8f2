"""Tests for privilege sources and collection loading."""

from __future__ import annotations

import logging
from typing import Sequence

import pytest

from privilegecore import (
    AccessLevel,
    AccountArea,
    Domain,
    InMemoryPrivilegeSource,
    MissingContextError,
    PrivilegeRecord,
    PrivilegeSource,
    PrivilegeSourceError,
    ProjectArea,
    load_token_collection,
)


class _FailingSource(PrivilegeSource):
    def get_privilege_records(self, principal_id: str) -> Sequence[PrivilegeRecord]:
        raise ConnectionError("store unavailable")


RECORDS = (
    PrivilegeRecord(principal_id="u1", domain=Domain.ACCOUNT, area=AccountArea.BILLING, level=AccessLevel.READ),
    PrivilegeRecord(
        principal_id="u1",
        domain=Domain.PROJECT,
        area=ProjectArea.CAMPAIGNS,
        level=AccessLevel.DELETE,
        context_id="p1",
    ),
    PrivilegeRecord(principal_id="u2", domain=Domain.ACCOUNT, area=AccountArea.ANALYTICS, level=AccessLevel.WRITE),
)


class TestInMemoryPrivilegeSource:
    """Tests for InMemoryPrivilegeSource."""

    def test_filters_by_principal(self) -> None:
        source = InMemoryPrivilegeSource(RECORDS)
        assert source.get_privilege_records("u1") == RECORDS[:2]
        assert source.get_privilege_records("u2") == RECORDS[2:]

    def test_unknown_principal(self) -> None:
        assert InMemoryPrivilegeSource(RECORDS).get_privilege_records("nobody") == ()

    def test_empty_store(self) -> None:
        assert InMemoryPrivilegeSource().get_privilege_records("u1") == ()

    def test_cannot_instantiate_interface(self) -> None:
        with pytest.raises(TypeError):
            PrivilegeSource()  # type: ignore[abstract]


class TestLoadTokenCollection:
    """Tests for load_token_collection()."""

    def test_loads_and_encodes(self) -> None:
        tokens = load_token_collection(InMemoryPrivilegeSource(RECORDS), "u1")
        assert tokens.principal_id == "u1"
        assert tokens.tokens == ("account:billing:read", "project:p1:campaigns:delete")
        assert tokens.has_project_privilege("p1", ProjectArea.CAMPAIGNS, AccessLevel.EXECUTE)
        assert not tokens.has_account_privilege(AccountArea.ANALYTICS, AccessLevel.READ)

    def test_unknown_principal_has_no_privileges(self) -> None:
        tokens = load_token_collection(InMemoryPrivilegeSource(RECORDS), "nobody")
        assert len(tokens) == 0
        assert not tokens.has_account_privilege(AccountArea.BILLING, AccessLevel.READ)

    def test_store_failure_is_wrapped(self) -> None:
        with pytest.raises(PrivilegeSourceError, match="store unavailable") as exc_info:
            load_token_collection(_FailingSource(), "u1")
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert exc_info.value.details["principal_id"] == "u1"

    def test_bad_record_propagates(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.ERROR, logger="privilegecore.sources")
        bad = PrivilegeRecord(principal_id="u1", domain=Domain.PROJECT, area=ProjectArea.AUDIENCE, level="read")
        with pytest.raises(MissingContextError):
            load_token_collection(InMemoryPrivilegeSource([bad]), "u1")
        assert "Invalid privilege record" in caplog.text
        assert caplog.records[-1].principal_id == "u1"

    def test_refresh_sees_new_records(self) -> None:
        """Collections are snapshots: reloading picks up store changes."""
        before = load_token_collection(InMemoryPrivilegeSource(RECORDS[:1]), "u1")
        after = load_token_collection(InMemoryPrivilegeSource(RECORDS), "u1")
        assert not before.has_project_privilege("p1", ProjectArea.CAMPAIGNS, AccessLevel.READ)
        assert after.has_project_privilege("p1", ProjectArea.CAMPAIGNS, AccessLevel.READ)
