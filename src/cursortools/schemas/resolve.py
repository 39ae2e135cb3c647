"""Configuration resolution and merging logic.

This module provides the single entrypoint for configuration resolution:
resolve_config(). It merges ParamConfig, UserConfig, and EnvConfig in
the correct precedence order and returns a validated InternalConfig.

Precedence (highest to lowest):
1. EnvConfig (CURSORTOOLS_* environment variables)
2. UserConfig (user dict / object)
3. ParamConfig (library defaults)
"""

from typing import Optional, Union

from cursortools.schemas.env import EnvConfig
from cursortools.schemas.internal import InternalConfig
from cursortools.schemas.param import ParamConfig
from cursortools.schemas.user import UserConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.

    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.

    Parameters
    ----------
    base : dict
        Base dictionary (lowest priority)
    *overrides : dict
        Override dictionaries (higher priority, left to right)

    Returns
    -------
    dict
        Merged dictionary

    Examples
    --------
    >>> base = {"a": 1, "b": {"c": 2, "d": 3}}
    >>> override = {"b": {"d": 4, "e": 5}, "f": 6}
    >>> deep_merge(base, override)
    {'a': 1, 'b': {'c': 2, 'd': 4, 'e': 5}, 'f': 6}
    """
    result = base.copy()

    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                # Recursive merge for nested dicts
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value

    return result


def resolve_config(
    param_cfg: Union[dict, ParamConfig],
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    env_cfg: Optional[Union[dict, EnvConfig]] = None,
) -> InternalConfig:
    """Resolve final runtime configuration from param, user, and env configs.

    Parameters
    ----------
    param_cfg : dict or ParamConfig
        Configuration with complete defaults. Required.
    user_cfg : dict or UserConfig, optional
        User overrides. If None or empty, uses only param defaults.
    env_cfg : dict or EnvConfig, optional
        Environment overrides. If None or empty, none are applied.

    Returns
    -------
    InternalConfig
        Fully validated, immutable runtime configuration

    Raises
    ------
    ValidationError
        If any config fails Pydantic validation

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), {"DBC": "off"})
    >>> config.contracts.enabled
    False
    """
    if not isinstance(param_cfg, ParamConfig):
        param = ParamConfig.model_validate(param_cfg)
    else:
        param = param_cfg

    if user_cfg is None or (isinstance(user_cfg, dict) and not user_cfg):
        user = UserConfig()
    elif not isinstance(user_cfg, UserConfig):
        user = UserConfig.model_validate(user_cfg)
    else:
        user = user_cfg

    if env_cfg is None or (isinstance(env_cfg, dict) and not env_cfg):
        env = EnvConfig()
    elif not isinstance(env_cfg, EnvConfig):
        env = EnvConfig.model_validate(env_cfg)
    else:
        env = env_cfg

    # Deep merge: param < user < env
    merged = deep_merge(
        param.model_dump(),
        user.to_internal_overrides(),
        env.to_internal_overrides(),
    )

    return InternalConfig.model_validate(merged)
