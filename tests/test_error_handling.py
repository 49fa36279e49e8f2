"""Tests for the error hierarchy."""

from __future__ import annotations

import pytest

from privilegecore import (
    AccessLevel,
    InvalidFieldError,
    MalformedTokenError,
    MissingContextError,
    PrivilegeError,
    PrivilegeSourceError,
    ProjectArea,
    ProjectPrivilege,
    has_account_privilege,
)
from privilegecore import exceptions


class TestErrorHierarchy:
    """Tests for PrivilegeError subclasses."""

    @pytest.mark.parametrize(
        "error_cls, code",
        [
            (MissingContextError, "MISSING_CONTEXT"),
            (MalformedTokenError, "MALFORMED_TOKEN"),
            (InvalidFieldError, "INVALID_FIELD"),
            (PrivilegeSourceError, "PRIVILEGE_SOURCE_ERROR"),
        ],
    )
    def test_codes(self, error_cls: type[PrivilegeError], code: str) -> None:
        error = error_cls()
        assert isinstance(error, PrivilegeError)
        assert error.code == code

    def test_default_message(self) -> None:
        assert str(MissingContextError()) == "Project privilege must have a context id"

    def test_details(self) -> None:
        error = InvalidFieldError("bad", field="area", value="a:b")
        assert error.message == "bad"
        assert error.details == {"field": "area", "value": "a:b"}

    def test_malformed_token_carries_token(self) -> None:
        error = MalformedTokenError("nope", token="account:x")
        assert error.token == "account:x"
        assert error.details["token"] == "account:x"

    def test_project_privilege_without_context(self) -> None:
        with pytest.raises(MissingContextError):
            ProjectPrivilege("", ProjectArea.AUDIENCE, AccessLevel.READ)

    def test_not_granted_is_not_an_error(self) -> None:
        assert has_account_privilege(["account:billing:read"], "analytics", AccessLevel.READ) is False

    def test_module_exports_only_error_classes(self) -> None:
        exported = [getattr(exceptions, name) for name in exceptions.__all__]
        assert all(issubclass(cls, PrivilegeError) for cls in exported)
        codes = [cls.code for cls in exported]
        assert len(codes) == len(set(codes))
