from .config import LogLevel, PrivilegeConfig, load_config_from_env
from .exceptions import (
    InvalidFieldError,
    MalformedTokenError,
    MissingContextError,
    PrivilegeError,
    PrivilegeSourceError,
)
from .logging import (
    PrincipalLoggerAdapter,
    PrivilegeLogFormatter,
    get_principal_logger,
    safe_preview,
    setup_logging,
)
from .privileges import (
    DEFAULT_VOCABULARY,
    LEVEL_RANK,
    AccessLevel,
    AccountArea,
    AccountPrivilege,
    AccountQuery,
    Decision,
    Domain,
    Privilege,
    PrivilegeRecord,
    ProjectArea,
    ProjectPrivilege,
    ProjectQuery,
    Query,
    Vocabulary,
    decide,
    decode,
    decode_account,
    decode_project,
    encode,
    encode_account,
    encode_project,
    evaluate,
    has_account_privilege,
    has_project_privilege,
    level_satisfies,
    token_domain,
)
from .sources import InMemoryPrivilegeSource, PrivilegeSource, load_token_collection
from .tokens import TokenCollection

__all__ = [
    'LogLevel',
    'PrivilegeConfig',
    'load_config_from_env',
    'InvalidFieldError',
    'MalformedTokenError',
    'MissingContextError',
    'PrivilegeError',
    'PrivilegeSourceError',
    'PrincipalLoggerAdapter',
    'PrivilegeLogFormatter',
    'get_principal_logger',
    'safe_preview',
    'setup_logging',
    'DEFAULT_VOCABULARY',
    'LEVEL_RANK',
    'AccessLevel',
    'AccountArea',
    'AccountPrivilege',
    'AccountQuery',
    'Decision',
    'Domain',
    'Privilege',
    'PrivilegeRecord',
    'ProjectArea',
    'ProjectPrivilege',
    'ProjectQuery',
    'Query',
    'Vocabulary',
    'decide',
    'decode',
    'decode_account',
    'decode_project',
    'encode',
    'encode_account',
    'encode_project',
    'evaluate',
    'has_account_privilege',
    'has_project_privilege',
    'level_satisfies',
    'token_domain',
    'InMemoryPrivilegeSource',
    'PrivilegeSource',
    'load_token_collection',
    'TokenCollection',
]
