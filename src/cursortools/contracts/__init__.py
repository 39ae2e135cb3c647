"""Design-by-contract layer — fail-fast enforcement of cursor invariants.

Every adaptor guards its operations with these checks. Contracts fail
immediately and loudly when a caller breaks a precondition or when composed
cursors disagree with each other.

Key principle:
- Pydantic validates configuration correctness
- Contracts validate cursor usage
- ``require_static`` rejects operations a cursor category does not support
"""

from cursortools.contracts.failure import (
    ConditionKind,
    ContractViolation,
    CursorToolsError,
    NotImplementedViolation,
    NotReachableViolation,
)
from cursortools.contracts.base import (
    check,
    configure,
    contracts_enabled,
    ensure,
    get_config,
    not_implemented,
    not_reachable,
    require,
    require_static,
)

__all__ = [
    "ConditionKind",
    "ContractViolation",
    "CursorToolsError",
    "NotImplementedViolation",
    "NotReachableViolation",
    "check",
    "configure",
    "contracts_enabled",
    "ensure",
    "get_config",
    "not_implemented",
    "not_reachable",
    "require",
    "require_static",
]
