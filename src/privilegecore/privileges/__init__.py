"""Privilege grammar, ordering, and evaluation.

Defines:
- Domain / AccessLevel / LEVEL_RANK: the privilege vocabulary and its order
- AccountPrivilege / ProjectPrivilege / PrivilegeRecord: value shapes
- encode() / decode(): canonical token strings
- has_account_privilege() / has_project_privilege(): "at least" evaluation
- AccountQuery / ProjectQuery / Decision: the query contract
"""

from .codec import (
    decode,
    decode_account,
    decode_project,
    encode,
    encode_account,
    encode_project,
    token_domain,
)
from .constants import (
    DEFAULT_VOCABULARY,
    DELIMITER,
    LEVEL_RANK,
    AccessLevel,
    AccountArea,
    Domain,
    ProjectArea,
    Vocabulary,
)
from .evaluator import (
    decide,
    evaluate,
    has_account_privilege,
    has_project_privilege,
    iter_privileges,
    level_satisfies,
)
from .models import AccountPrivilege, Privilege, PrivilegeRecord, ProjectPrivilege
from .queries import AccountQuery, Decision, ProjectQuery, Query

__all__ = [
    "DEFAULT_VOCABULARY",
    "DELIMITER",
    "LEVEL_RANK",
    "AccessLevel",
    "AccountArea",
    "AccountPrivilege",
    "AccountQuery",
    "Decision",
    "Domain",
    "Privilege",
    "PrivilegeRecord",
    "ProjectArea",
    "ProjectPrivilege",
    "ProjectQuery",
    "Query",
    "Vocabulary",
    "decide",
    "decode",
    "decode_account",
    "decode_project",
    "encode",
    "encode_account",
    "encode_project",
    "evaluate",
    "has_account_privilege",
    "has_project_privilege",
    "iter_privileges",
    "level_satisfies",
    "token_domain",
]
