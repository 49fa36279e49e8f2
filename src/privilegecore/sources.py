from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence

from .exceptions import PrivilegeError, PrivilegeSourceError
from .logging import get_principal_logger
from .privileges.constants import DEFAULT_VOCABULARY, Vocabulary
from .privileges.models import PrivilegeRecord
from .tokens import TokenCollection


class PrivilegeSource(ABC):
    """Read-only access to stored privilege rows."""

    @abstractmethod
    def get_privilege_records(self, principal_id: str) -> Sequence[PrivilegeRecord]:
        raise NotImplementedError


class InMemoryPrivilegeSource(PrivilegeSource):
    """Array-backed store, for tests and local tooling."""

    def __init__(self, records: Optional[Iterable[PrivilegeRecord]] = None):
        self._records: tuple[PrivilegeRecord, ...] = tuple(records or ())

    def get_privilege_records(self, principal_id: str) -> Sequence[PrivilegeRecord]:
        return tuple(r for r in self._records if r.principal_id == principal_id)


def load_token_collection(
    source: PrivilegeSource,
    principal_id: str,
    *,
    vocabulary: Optional[Vocabulary] = DEFAULT_VOCABULARY,
) -> TokenCollection:
    """Fetch a principal's rows and encode them into a fresh collection.

    Args:
        source: Privilege store.
        principal_id: Whose privileges to load.
        vocabulary: Known areas; None accepts any area name.

    Returns:
        New TokenCollection snapshot.

    Raises:
        PrivilegeSourceError: The store failed (original error chained).
        MissingContextError: A stored project row has no context id.
        InvalidFieldError: A stored field cannot be encoded.
    """
    logger = get_principal_logger(__name__, principal_id=principal_id)
    try:
        records = source.get_privilege_records(principal_id)
    except PrivilegeError:
        raise
    except Exception as e:
        raise PrivilegeSourceError(
            f"Failed to load privileges: {e}",
            principal_id=principal_id,
        ) from e

    try:
        collection = TokenCollection.from_records(principal_id, records, vocabulary=vocabulary)
    except PrivilegeError as e:
        logger.error("Invalid privilege record: %s", e.message)
        raise

    logger.debug("Loaded %d privilege tokens", len(collection))
    return collection


__all__ = ["InMemoryPrivilegeSource", "PrivilegeSource", "load_token_collection"]
