"""Per-principal token collections.

TokenCollection is the immutable snapshot of one principal's privilege tokens
that authorization checks run against. It is never mutated: to see updated
privileges, re-fetch from the store (see :func:`privilegecore.sources.load_token_collection`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from .exceptions import InvalidFieldError
from .privileges.codec import encode
from .privileges.constants import DEFAULT_VOCABULARY, AccessLevel, Domain, Vocabulary
from .privileges.evaluator import (
    decide,
    evaluate,
    has_account_privilege,
    has_project_privilege,
    iter_privileges,
)
from .privileges.models import Privilege, PrivilegeRecord
from .privileges.queries import Decision, Query


@dataclass(frozen=True)
class TokenCollection:
    """Privilege tokens held by one principal.

    TokenCollection provides:
    - principal_id: Identity the tokens belong to (None = anonymous snapshot)
    - tokens: Canonical token strings, in store order. Duplicates are legal.
    - vocabulary: Known areas used when decoding (None = accept any area)

    Safe to share across concurrent evaluations; nothing is cached.
    """

    tokens: tuple[str, ...] = ()
    principal_id: Optional[str] = None
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY

    @classmethod
    def from_privileges(
        cls,
        privileges: Iterable[Privilege],
        *,
        principal_id: Optional[str] = None,
        vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
    ) -> TokenCollection:
        """Encode typed privileges into a collection."""
        return cls(
            tokens=tuple(encode(p, vocabulary=vocabulary) for p in privileges),
            principal_id=principal_id,
            vocabulary=vocabulary,
        )

    @classmethod
    def from_records(
        cls,
        principal_id: str,
        records: Iterable[PrivilegeRecord],
        *,
        vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
    ) -> TokenCollection:
        """Encode store rows belonging to ``principal_id``.

        Raises:
            InvalidFieldError: A record belongs to another principal.
            MissingContextError: A project record has no context id.
        """
        tokens = []
        for record in records:
            if record.principal_id != principal_id:
                raise InvalidFieldError(
                    f"Record belongs to principal {record.principal_id!r}, not {principal_id!r}",
                    field="principal_id",
                    value=record.principal_id,
                )
            tokens.append(encode(record, vocabulary=vocabulary))
        return cls(tokens=tuple(tokens), principal_id=principal_id, vocabulary=vocabulary)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __contains__(self, token: object) -> bool:
        return token in self.tokens

    def privileges(self, domain: Union[Domain, str]) -> list[Privilege]:
        """Decode every token that claims ``domain``."""
        return list(iter_privileges(self.tokens, domain, vocabulary=self.vocabulary))

    def has_account_privilege(self, area: str, min_level: Union[str, AccessLevel]) -> bool:
        return has_account_privilege(self.tokens, area, min_level, vocabulary=self.vocabulary)

    def has_project_privilege(
        self,
        context_id: str,
        area: str,
        min_level: Union[str, AccessLevel],
    ) -> bool:
        return has_project_privilege(self.tokens, context_id, area, min_level, vocabulary=self.vocabulary)

    def allows(self, query: Query) -> bool:
        """Check if this collection grants ``query``."""
        return evaluate(self.tokens, query, vocabulary=self.vocabulary)

    def decide(self, query: Query) -> Decision:
        return decide(self.tokens, query, vocabulary=self.vocabulary)


__all__ = ["TokenCollection"]
