"""End-to-end scenarios on the reference dataset."""

from __future__ import annotations

import pytest

from privilegecore import (
    AccessLevel,
    AccountArea,
    AccountQuery,
    ProjectArea,
    TokenCollection,
    has_account_privilege,
    has_project_privilege,
    load_token_collection,
)
from privilegecore.checks import (
    REFERENCE_CHECKS,
    REFERENCE_PROJECT_A,
    REFERENCE_PROJECT_B,
    REFERENCE_USER_ID,
    CheckResult,
    PrivilegeCheck,
    reference_source,
    run_checks,
)


@pytest.fixture
def reference_tokens() -> TokenCollection:
    return load_token_collection(reference_source(), REFERENCE_USER_ID)


class TestReferenceScenarios:
    """The reference user's grants and expectations."""

    def test_token_set(self, reference_tokens: TokenCollection) -> None:
        assert reference_tokens.tokens == (
            "account:user_management:delete",
            "account:analytics:execute",
            f"project:{REFERENCE_PROJECT_A}:campaigns:write",
            f"project:{REFERENCE_PROJECT_B}:audience:read",
        )

    def test_delete_satisfies_write(self, reference_tokens: TokenCollection) -> None:
        assert has_account_privilege(reference_tokens, AccountArea.USER_MANAGEMENT, AccessLevel.WRITE)

    def test_execute_does_not_satisfy_delete(self, reference_tokens: TokenCollection) -> None:
        assert not has_account_privilege(reference_tokens, AccountArea.ANALYTICS, AccessLevel.DELETE)

    def test_write_does_not_satisfy_execute(self, reference_tokens: TokenCollection) -> None:
        assert not has_project_privilege(
            reference_tokens, REFERENCE_PROJECT_A, ProjectArea.CAMPAIGNS, AccessLevel.EXECUTE
        )

    def test_read_does_not_satisfy_write(self, reference_tokens: TokenCollection) -> None:
        assert not has_project_privilege(
            reference_tokens, REFERENCE_PROJECT_B, ProjectArea.AUDIENCE, AccessLevel.WRITE
        )

    def test_wrong_context_for_area(self, reference_tokens: TokenCollection) -> None:
        assert not has_project_privilege(
            reference_tokens, REFERENCE_PROJECT_A, ProjectArea.AUDIENCE, AccessLevel.READ
        )

    def test_all_reference_checks_pass(self, reference_tokens: TokenCollection) -> None:
        rows = run_checks(reference_tokens, REFERENCE_CHECKS)
        assert len(rows) == len(REFERENCE_CHECKS)
        failed = [row.as_dict() for row in rows if not row.passed]
        assert failed == []


class TestRunChecks:
    """Tests for run_checks() rows."""

    def test_row_fields(self, reference_tokens: TokenCollection) -> None:
        rows = run_checks(
            reference_tokens,
            [PrivilegeCheck(AccountQuery(AccountArea.BILLING, AccessLevel.READ), expected=True)],
        )
        assert rows == [
            CheckResult(
                domain="account",
                area="billing",
                level="read",
                context_id=None,
                expected=True,
                result=False,
            )
        ]
        assert rows[0].passed is False
        assert rows[0].as_dict()["passed"] is False

    def test_project_rows_carry_context(self, reference_tokens: TokenCollection) -> None:
        rows = run_checks(reference_tokens, REFERENCE_CHECKS)
        project_rows = [row for row in rows if row.domain == "project"]
        assert {row.context_id for row in project_rows} == {REFERENCE_PROJECT_A, REFERENCE_PROJECT_B}
