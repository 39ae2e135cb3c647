"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains NO optional fields.
"""

from pydantic import ConfigDict

from cursortools.schemas.base import CursorToolsBaseModel, IntegralDtypeName, LogLevelName


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalContractsConfig(CursorToolsBaseModel):
    """Runtime contract switches."""
    enabled: bool
    log_violations: bool


class InternalRangesConfig(CursorToolsBaseModel):
    """Runtime range defaults."""
    default_dtype: IntegralDtypeName


class InternalEnumerateConfig(CursorToolsBaseModel):
    """Runtime enumerate defaults."""
    index_dtype: IntegralDtypeName


class InternalLoggingConfig(CursorToolsBaseModel):
    """Runtime logging configuration."""
    level: LogLevelName


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(CursorToolsBaseModel):
    """Authoritative runtime configuration.

    Runtime modules read fields directly:

        if get_config().contracts.enabled:
            ...
        dtype = np.dtype(get_config().ranges.default_dtype)

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation in runtime code

    All of that happens during config resolution.
    """

    contracts: InternalContractsConfig
    ranges: InternalRangesConfig
    enumerate: InternalEnumerateConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
