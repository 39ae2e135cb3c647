"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs in a variety of formats, with aliases
for common naming patterns (e.g., DBC → contracts.enabled,
LOG_LEVEL → logging.level).

UserConfig is intentionally minimal - users only specify what they want
to override from the defaults. Validation is lenient: uppercase and
lowercase keys, "on"/"off" strings for switches, any case for names.
"""

from typing import Optional

from pydantic import Field, field_validator

from cursortools.schemas.base import CursorToolsBaseModel, IntegralDtypeName, LogLevelName


def _lower(v):
    if isinstance(v, str):
        return v.lower().strip()
    return v


def _upper(v):
    if isinstance(v, str):
        return v.upper().strip()
    return v


class UserContractsConfig(CursorToolsBaseModel):
    """User-facing contract switches."""
    enabled: Optional[bool] = None
    log_violations: Optional[bool] = None

    @field_validator("enabled", "log_violations", mode="before")
    @classmethod
    def normalize_switch(cls, v):
        """Accept ON/Off/TRUE in any case."""
        return _lower(v)


class UserRangesConfig(CursorToolsBaseModel):
    """User-facing range defaults."""
    default_dtype: Optional[IntegralDtypeName] = None

    @field_validator("default_dtype", mode="before")
    @classmethod
    def normalize_dtype(cls, v):
        """Normalize dtype names to lowercase."""
        return _lower(v)


class UserEnumerateConfig(CursorToolsBaseModel):
    """User-facing enumerate defaults."""
    index_dtype: Optional[IntegralDtypeName] = None

    @field_validator("index_dtype", mode="before")
    @classmethod
    def normalize_dtype(cls, v):
        """Normalize dtype names to lowercase."""
        return _lower(v)


class UserLoggingConfig(CursorToolsBaseModel):
    """User-facing logging config."""
    level: Optional[LogLevelName] = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return _upper(v)


class UserConfig(CursorToolsBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.

    Usage
    -----
        user_cfg = UserConfig(DBC="off", LOG_LEVEL="debug")

        internal = resolve_config(param_cfg, user_cfg, env_cfg)
    """

    # Flat aliases
    dbc: Optional[bool] = Field(None, alias="DBC")
    log_violations: Optional[bool] = Field(None, alias="LOG_VIOLATIONS")
    log_level: Optional[LogLevelName] = Field(None, alias="LOG_LEVEL")
    default_dtype: Optional[IntegralDtypeName] = Field(None, alias="DEFAULT_DTYPE")
    index_dtype: Optional[IntegralDtypeName] = Field(None, alias="INDEX_DTYPE")

    # Nested overrides (advanced users)
    contracts: Optional[UserContractsConfig] = None
    ranges: Optional[UserRangesConfig] = None
    enumerate: Optional[UserEnumerateConfig] = None
    logging: Optional[UserLoggingConfig] = None

    model_config = CursorToolsBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("dbc", "log_violations", mode="before")
    @classmethod
    def normalize_switches(cls, v):
        """Accept ON/Off/TRUE in any case."""
        return _lower(v)

    @field_validator("default_dtype", "index_dtype", mode="before")
    @classmethod
    def normalize_dtype_names(cls, v):
        """Normalize dtype names to lowercase."""
        return _lower(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return _upper(v)

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Nested sections win over flat aliases when both are given.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        # Contracts section
        contracts = {}
        if self.dbc is not None:
            contracts["enabled"] = self.dbc
        if self.log_violations is not None:
            contracts["log_violations"] = self.log_violations
        if self.contracts is not None:
            contracts.update(self.contracts.model_dump(exclude_none=True))
        if contracts:
            overrides["contracts"] = contracts

        # Ranges section
        ranges = {}
        if self.default_dtype is not None:
            ranges["default_dtype"] = self.default_dtype
        if self.ranges is not None:
            ranges.update(self.ranges.model_dump(exclude_none=True))
        if ranges:
            overrides["ranges"] = ranges

        # Enumerate section
        enumerate_cfg = {}
        if self.index_dtype is not None:
            enumerate_cfg["index_dtype"] = self.index_dtype
        if self.enumerate is not None:
            enumerate_cfg.update(self.enumerate.model_dump(exclude_none=True))
        if enumerate_cfg:
            overrides["enumerate"] = enumerate_cfg

        # Logging section
        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level
        if self.logging is not None:
            logging_cfg.update(self.logging.model_dump(exclude_none=True))
        if logging_cfg:
            overrides["logging"] = logging_cfg

        return overrides
