"""EnvConfig: Process environment overrides.

Operational switches that commonly change between runs without touching
code: whether contract checks run, verbosity, the default range dtype.

Recognized variables
--------------------
CURSORTOOLS_DBC            on/off, true/false, 1/0
CURSORTOOLS_LOG_LEVEL      DEBUG, INFO, WARNING, ERROR, CRITICAL
CURSORTOOLS_DEFAULT_DTYPE  int8 ... uint64
"""

import os
from typing import Mapping, Optional

from pydantic import field_validator

from cursortools.schemas.base import CursorToolsBaseModel, IntegralDtypeName, LogLevelName

ENV_PREFIX = "CURSORTOOLS_"


class EnvConfig(CursorToolsBaseModel):
    """Environment-variable configuration overrides.

    Highest priority in config resolution.

    Usage
    -----
        env_cfg = EnvConfig.from_environ()            # reads os.environ
        env_cfg = EnvConfig.from_environ({"CURSORTOOLS_DBC": "0"})

        internal = resolve_config(param_cfg, user_cfg, env_cfg)
    """

    dbc: Optional[bool] = None
    log_level: Optional[LogLevelName] = None
    default_dtype: Optional[IntegralDtypeName] = None

    @field_validator("dbc", mode="before")
    @classmethod
    def normalize_switch(cls, v):
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("default_dtype", mode="before")
    @classmethod
    def normalize_dtype(cls, v):
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "EnvConfig":
        """Build from ``CURSORTOOLS_*`` variables; empty values are ignored."""
        if environ is None:
            environ = os.environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip():
                values[name] = raw
        return cls.model_validate(values)

    def to_internal_overrides(self) -> dict:
        """Convert environment config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.dbc is not None:
            overrides["contracts"] = {"enabled": self.dbc}

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        if self.default_dtype is not None:
            overrides["ranges"] = {"default_dtype": self.default_dtype}

        return overrides
