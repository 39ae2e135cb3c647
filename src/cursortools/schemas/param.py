"""ParamConfig: Library defaults for cursortools.

This module defines the complete default configuration. ALL tunable
parameters must have defaults here. No runtime code defines fallback
values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from pydantic import Field, field_validator

from cursortools.schemas.base import CursorToolsBaseModel, IntegralDtypeName, LogLevelName


# =============================================================================
# Nested Configuration Models
# =============================================================================

class ContractsConfig(CursorToolsBaseModel):
    """Design-by-contract switches."""
    enabled: bool = Field(True, description="Evaluate require/check/ensure")
    log_violations: bool = Field(False, description="Log violations at DEBUG before raising")


class RangesConfig(CursorToolsBaseModel):
    """Range defaults."""
    default_dtype: IntegralDtypeName = "int64"

    @field_validator("default_dtype", mode="before")
    @classmethod
    def normalize_dtype_name(cls, v):
        """Normalize dtype names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class EnumerateConfig(CursorToolsBaseModel):
    """Enumerate defaults."""
    index_dtype: IntegralDtypeName = "int64"

    @field_validator("index_dtype", mode="before")
    @classmethod
    def normalize_dtype_name(cls, v):
        """Normalize dtype names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class LoggingConfig(CursorToolsBaseModel):
    """Logging configuration."""
    level: LogLevelName = "WARNING"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(CursorToolsBaseModel):
    """Complete configuration with all defaults.

    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, env_cfg)

    Runtime code only sees InternalConfig.
    """

    contracts: ContractsConfig = Field(default_factory=ContractsConfig)
    ranges: RangesConfig = Field(default_factory=RangesConfig)
    enumerate: EnumerateConfig = Field(default_factory=EnumerateConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
