"""Pydantic configuration schemas for cursortools.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Library defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
EnvConfig : class
    Environment-variable overrides
"""

from cursortools.schemas.resolve import resolve_config
from cursortools.schemas.internal import InternalConfig
from cursortools.schemas.param import ParamConfig
from cursortools.schemas.user import UserConfig
from cursortools.schemas.env import EnvConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'EnvConfig',
]
