"""Base contract enforcement utilities.

``require``, ``check`` and ``ensure`` are the single enforcement mechanism
used by every adaptor. They are switched on or off together by
``InternalConfig.contracts.enabled``, which is resolved once per process and
injected with :func:`configure`. ``require_static``, ``not_implemented`` and
``not_reachable`` are never switched off.
"""

import ast
import inspect
import logging
from typing import Any, Callable, Optional, Union

from cursortools.contracts.failure import (
    ConditionKind,
    ContractViolation,
    NotImplementedViolation,
    NotReachableViolation,
)
from cursortools.schemas import EnvConfig, InternalConfig, ParamConfig, resolve_config

logger = logging.getLogger(__name__)

Condition = Union[bool, Any, Callable[[], Any]]

_ASSERTION_NAMES = frozenset({"require", "check", "ensure", "require_static"})

_config: Optional[InternalConfig] = None


# =============================================================================
# Configuration
# =============================================================================

def configure(config: InternalConfig) -> InternalConfig:
    """Install the process-wide configuration.

    Parameters
    ----------
    config : InternalConfig
        Fully resolved configuration (see ``resolve_config``).

    Returns
    -------
    InternalConfig
        The configuration now in effect.
    """
    global _config
    _config = config
    logging.getLogger("cursortools").setLevel(config.logging.level)
    logger.info(
        "Contract checks %s", "enabled" if config.contracts.enabled else "disabled"
    )
    return config


def get_config() -> InternalConfig:
    """Return the active configuration, resolving it on first use.

    The first call without a prior :func:`configure` resolves the defaults
    overlaid with ``CURSORTOOLS_*`` environment variables.
    """
    if _config is None:
        return configure(resolve_config(ParamConfig(), None, EnvConfig.from_environ()))
    return _config


def contracts_enabled() -> bool:
    return get_config().contracts.enabled


# =============================================================================
# Call-site introspection
# =============================================================================

def _call_site(depth: int):
    """Return (filename, line, source line) ``depth`` frames above the caller."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            frame = frame.f_back
        info = inspect.getframeinfo(frame, context=1)
        source = info.code_context[0] if info.code_context else None
        return info.filename, info.lineno, source
    finally:
        del frame


def _call_name(func: ast.expr) -> Optional[str]:
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


def condition_text(source_line: Optional[str]) -> str:
    """Recover the literal condition from the source line of an assertion.

    Falls back to the stripped line when it cannot be parsed on its own
    (e.g. an assertion spanning several lines).
    """
    if not source_line:
        return "<unknown condition>"
    line = source_line.strip()
    try:
        tree = ast.parse(line)
    except SyntaxError:
        return line
    for node in ast.walk(tree):
        if (
            isinstance(node, ast.Call)
            and _call_name(node.func) in _ASSERTION_NAMES
            and node.args
        ):
            arg = node.args[0]
            if isinstance(arg, ast.Lambda):
                arg = arg.body
            return ast.get_source_segment(line, arg) or line
    return line


def _evaluate(condition: Condition) -> bool:
    if callable(condition):
        condition = condition()
    return bool(condition)


def _fail(kind: ConditionKind, description: Optional[str]) -> None:
    # _fail <- _assert <- require/check/ensure <- caller
    filename, line_number, source = _call_site(3)
    text = description if description is not None else condition_text(source)
    violation = ContractViolation(text, kind, filename, line_number)
    if get_config().contracts.log_violations:
        logger.debug("Contract violation: %s", violation)
    raise violation


def _assert(condition: Condition, kind: ConditionKind, description: Optional[str]) -> None:
    if not contracts_enabled():
        return
    if not _evaluate(condition):
        _fail(kind, description)


# =============================================================================
# Public checks
# =============================================================================

def require(condition: Condition, description: Optional[str] = None) -> None:
    """Enforce a precondition.

    Parameters
    ----------
    condition : bool or callable
        The invariant that must be true. A zero-argument callable is only
        invoked when contract checks are enabled, which keeps expensive
        checks free in release configurations.
    description : str, optional
        Text reported instead of the condition's source text. Required
        when the call spans several lines: the condition text is recovered
        from the calling line alone.

    Raises
    ------
    ContractViolation
        If the condition is false (kind ``precondition``).

    Examples
    --------
    >>> require(step != 0)
    >>> require(lambda: all(a == b for a, b in pairs), "members agree")
    """
    _assert(condition, ConditionKind.PRECONDITION, description)


def check(condition: Condition, description: Optional[str] = None) -> None:
    """Enforce an intermediate consistency check (see :func:`require`)."""
    _assert(condition, ConditionKind.INTERMEDIATE, description)


def ensure(condition: Condition, description: Optional[str] = None) -> None:
    """Enforce a postcondition (see :func:`require`)."""
    _assert(condition, ConditionKind.POSTCONDITION, description)


def require_static(condition: Condition, description: Optional[str] = None) -> None:
    """Enforce a capability requirement that cannot be switched off.

    Used where an operation is simply not available for a cursor category
    (e.g. ``+=`` on a forward-only zip); these are rejections, not checks.
    """
    if not _evaluate(condition):
        filename, line_number, source = _call_site(1)
        text = description if description is not None else condition_text(source)
        raise ContractViolation(text, ConditionKind.PRECONDITION, filename, line_number)


def not_implemented(message: str) -> None:
    """Signal that a documented stub was reached."""
    filename, line_number, _ = _call_site(1)
    raise NotImplementedViolation(message, filename, line_number)


def not_reachable() -> None:
    """Signal that a logically unreachable code path executed."""
    filename, line_number, _ = _call_site(1)
    raise NotReachableViolation(filename, line_number)
