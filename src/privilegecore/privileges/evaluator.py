"""Privilege evaluation against a principal's token collection.

Answers "does this token collection grant at least level L on area A in
domain D (and context C for projects)?".

Matching policy:
1. The token must claim the queried domain. Tokens claiming another or an
   unknown domain are not candidates and are skipped silently.
2. Area matches exactly; for projects the context id matches exactly.
3. The held level must rank at least the requested level (:data:`LEVEL_RANK`).

A token that claims the queried domain but breaks its grammar raises
:class:`~privilegecore.exceptions.MalformedTokenError`. Every claiming token
is decoded before matching, so the outcome never depends on token order.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Union

from ..exceptions import MissingContextError
from .codec import decode, resolve_domain, token_domain
from .constants import DEFAULT_VOCABULARY, LEVEL_RANK, AccessLevel, Domain, Vocabulary, area_name
from .models import Privilege
from .queries import AccountQuery, Decision, ProjectQuery, Query

logger = logging.getLogger(__name__)


def level_satisfies(held: Union[str, AccessLevel], required: Union[str, AccessLevel]) -> bool:
    """Check if a held access level grants at least the required one.

    Example::

        level_satisfies(AccessLevel.DELETE, AccessLevel.WRITE)   # True
        level_satisfies("read", "write")                         # False
    """
    return LEVEL_RANK[AccessLevel(held)] >= LEVEL_RANK[AccessLevel(required)]


def iter_privileges(
    tokens: Iterable[str],
    domain: Union[Domain, str],
    *,
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
) -> Iterator[Privilege]:
    """Lazily decode the tokens that claim ``domain``.

    Raises:
        MalformedTokenError: A token claims ``domain`` but violates its grammar,
                             or ``domain`` is unknown.
    """
    domain = resolve_domain(domain)
    for token in tokens:
        claimed = token_domain(token)
        if claimed is not domain:
            logger.debug(
                "Skipping token outside %s domain (claims %s)",
                domain.value,
                claimed.value if claimed else "unknown",
            )
            continue
        yield decode(token, domain, vocabulary=vocabulary)


def has_account_privilege(
    tokens: Iterable[str],
    area: str,
    min_level: Union[str, AccessLevel],
    *,
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
) -> bool:
    """Check if the tokens grant at least ``min_level`` on account area ``area``.

    Args:
        tokens: Token collection of one principal.
        area: Account area (e.g. ``AccountArea.BILLING``).
        min_level: Lowest acceptable level.
        vocabulary: Known areas; None accepts any area name.

    Returns:
        True if some account token matches. "Not found" is False, never an error.

    Raises:
        MalformedTokenError: An account token violates the account grammar,
                             wherever it sits in the collection.

    Example::

        tokens = ["account:user_management:delete", "project:p1:audience:read"]
        has_account_privilege(tokens, AccountArea.USER_MANAGEMENT, AccessLevel.WRITE)  # True
        has_account_privilege(tokens, AccountArea.BILLING, AccessLevel.READ)           # False
    """
    area = area_name(area)
    required = AccessLevel(min_level)
    candidates = list(iter_privileges(tokens, Domain.ACCOUNT, vocabulary=vocabulary))
    return any(p.area == area and level_satisfies(p.level, required) for p in candidates)


def has_project_privilege(
    tokens: Iterable[str],
    context_id: str,
    area: str,
    min_level: Union[str, AccessLevel],
    *,
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
) -> bool:
    """Check if the tokens grant at least ``min_level`` on ``area`` in project ``context_id``.

    Same as :func:`has_account_privilege` with an exact context id match added.
    A grant in one project never satisfies a query for another.

    Raises:
        MissingContextError: ``context_id`` is empty.
        MalformedTokenError: A project token violates the project grammar.
    """
    area = area_name(area)
    if not context_id:
        raise MissingContextError("Project query must have a context id", area=area)
    required = AccessLevel(min_level)
    candidates = list(iter_privileges(tokens, Domain.PROJECT, vocabulary=vocabulary))
    return any(
        p.context_id == context_id and p.area == area and level_satisfies(p.level, required)
        for p in candidates
    )


def evaluate(
    tokens: Iterable[str],
    query: Query,
    *,
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
) -> bool:
    """Answer a query object against a token collection."""
    if isinstance(query, ProjectQuery):
        return has_project_privilege(
            tokens, query.context_id, query.area, query.min_level, vocabulary=vocabulary
        )
    if isinstance(query, AccountQuery):
        return has_account_privilege(tokens, query.area, query.min_level, vocabulary=vocabulary)
    raise TypeError(f"Unsupported query type: {type(query).__name__}")


def decide(
    tokens: Iterable[str],
    query: Query,
    *,
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
) -> Decision:
    """Like :func:`evaluate`, returning a :class:`Decision`."""
    return Decision.from_bool(evaluate(tokens, query, vocabulary=vocabulary))


__all__ = [
    "decide",
    "evaluate",
    "has_account_privilege",
    "has_project_privilege",
    "iter_privileges",
    "level_satisfies",
]
