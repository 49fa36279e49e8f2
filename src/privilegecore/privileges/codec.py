"""Token codec: privilege values to canonical token strings and back.

Token grammar (bit-exact, fields joined by ``:``)::

    account:<area>:<level>
    project:<context_id>:<area>:<level>

Field values never contain the delimiter; :func:`encode` refuses them instead
of producing an ambiguous token. No normalization is applied in either
direction, so ``decode(encode(p), p.domain) == p`` for every valid privilege.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from ..exceptions import InvalidFieldError, MalformedTokenError
from .constants import (
    DEFAULT_VOCABULARY,
    DELIMITER,
    AccessLevel,
    Domain,
    Vocabulary,
    check_field,
)
from .models import AccountPrivilege, Privilege, PrivilegeRecord, ProjectPrivilege


_LEVELS = {level.value: level for level in AccessLevel}
_DOMAINS = {domain.value: domain for domain in Domain}


def resolve_domain(value: Union[Domain, str], *, token: Optional[str] = None) -> Domain:
    """Coerce ``value`` to a :class:`Domain`.

    Raises:
        MalformedTokenError: ``value`` names no known domain.
    """
    try:
        return Domain(value)
    except ValueError:
        raise MalformedTokenError(f"Unknown domain: {value!r}", token=token) from None


def token_domain(token: str) -> Optional[Domain]:
    """Return the domain a token claims by its leading field.

    Returns None for foreign or unknown prefixes. Says nothing about
    whether the rest of the token is well formed.

    Example::

        token_domain("account:billing:read")        # Domain.ACCOUNT
        token_domain("project:p1:audience:write")   # Domain.PROJECT
        token_domain("team:t1:read")                # None
    """
    head, _, _ = token.partition(DELIMITER)
    return _DOMAINS.get(head)


def encode(
    privilege: Union[Privilege, PrivilegeRecord],
    *,
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
) -> str:
    """Build the canonical token for a privilege or a stored record.

    Args:
        privilege: An :class:`AccountPrivilege`, :class:`ProjectPrivilege`,
                   or a :class:`PrivilegeRecord` from the store.
        vocabulary: Known areas for the privilege's domain. Pass None to
                    accept any area name.

    Returns:
        Token string, e.g. ``"project:p1:campaigns:write"``.

    Raises:
        MissingContextError: A project record carries no context id.
        InvalidFieldError: A field is empty, contains ``:``, or names an area
                           outside ``vocabulary``.
    """
    if isinstance(privilege, PrivilegeRecord):
        privilege = privilege.to_privilege()

    domain = privilege.domain
    area = check_field("area", privilege.area)
    if vocabulary is not None and not vocabulary.contains(domain, area):
        raise InvalidFieldError(
            f"Unknown {domain.value} area: {area!r}",
            field="area",
            value=area,
        )
    level = AccessLevel(privilege.level).value

    if isinstance(privilege, ProjectPrivilege):
        context_id = check_field("context_id", privilege.context_id)
        return DELIMITER.join((domain.value, context_id, area, level))
    return DELIMITER.join((domain.value, area, level))


def encode_account(
    area: Union[str, Enum],
    level: Union[str, AccessLevel],
    *,
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
) -> str:
    """Shortcut for ``encode(AccountPrivilege(area, level))``."""
    return encode(AccountPrivilege(area=area, level=level), vocabulary=vocabulary)


def encode_project(
    context_id: str,
    area: Union[str, Enum],
    level: Union[str, AccessLevel],
    *,
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
) -> str:
    """Shortcut for ``encode(ProjectPrivilege(context_id, area, level))``."""
    return encode(ProjectPrivilege(context_id=context_id, area=area, level=level), vocabulary=vocabulary)


def decode(
    token: str,
    expected_domain: Union[Domain, str],
    *,
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
) -> Privilege:
    """Parse a token under the grammar of ``expected_domain``.

    Args:
        token: Token string.
        expected_domain: Grammar to parse with.
        vocabulary: Known areas. Pass None to accept any area name.

    Returns:
        The decoded :class:`AccountPrivilege` or :class:`ProjectPrivilege`.

    Raises:
        MalformedTokenError: Wrong field count, wrong leading domain, empty
                             field, unknown access level, or an area outside
                             ``vocabulary``, or an unknown ``expected_domain``.
    """
    domain = resolve_domain(expected_domain, token=token)
    fields = token.split(DELIMITER)

    if len(fields) != domain.field_count:
        raise MalformedTokenError(
            f"Expected {domain.field_count} fields for {domain.value} token, got {len(fields)}",
            token=token,
        )
    if fields[0] != domain.value:
        raise MalformedTokenError(
            f"Token does not belong to the {domain.value} domain",
            token=token,
        )
    if not all(fields):
        raise MalformedTokenError("Token has an empty field", token=token)

    area, raw_level = fields[-2], fields[-1]
    level = _LEVELS.get(raw_level)
    if level is None:
        raise MalformedTokenError(f"Unknown access level: {raw_level!r}", token=token)
    if vocabulary is not None and not vocabulary.contains(domain, area):
        raise MalformedTokenError(f"Unknown {domain.value} area: {area!r}", token=token)

    if domain is Domain.PROJECT:
        return ProjectPrivilege(context_id=fields[1], area=area, level=level)
    return AccountPrivilege(area=area, level=level)


def decode_account(token: str, *, vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY) -> AccountPrivilege:
    privilege = decode(token, Domain.ACCOUNT, vocabulary=vocabulary)
    assert isinstance(privilege, AccountPrivilege)
    return privilege


def decode_project(token: str, *, vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY) -> ProjectPrivilege:
    privilege = decode(token, Domain.PROJECT, vocabulary=vocabulary)
    assert isinstance(privilege, ProjectPrivilege)
    return privilege


__all__ = [
    "decode",
    "decode_account",
    "decode_project",
    "resolve_domain",
    "encode",
    "encode_account",
    "encode_project",
    "token_domain",
]
