"""Configuration resolution and merging logic.

Precedence (highest to lowest):
1. CLIConfig (command-line overrides)
2. ParamConfig (defaults)
"""

from typing import Union, Optional
from fallible.schemas.param import ParamConfig
from fallible.schemas.cli import CLIConfig
from fallible.schemas.internal import InternalConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.

    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.

    Examples
    --------
    >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
    {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result = base.copy()

    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value

    return result


def resolve_config(
    param_cfg: Optional[Union[dict, ParamConfig]] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
) -> InternalConfig:
    """Resolve the runtime configuration from defaults and CLI overrides.

    Parameters
    ----------
    param_cfg : dict or ParamConfig, optional
        Defaults. If None, ``ParamConfig()`` is used.
    cli_cfg : dict or CLIConfig, optional
        Command-line overrides. If None or empty, no overrides applied.

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
    >>> config = resolve_config(ParamConfig(), CLIConfig(variant="index"))
    >>> config.variant
    'index'
    """
    if param_cfg is None:
        param = ParamConfig()
    elif not isinstance(param_cfg, ParamConfig):
        param = ParamConfig.model_validate(param_cfg)
    else:
        param = param_cfg

    if cli_cfg is None or (isinstance(cli_cfg, dict) and not cli_cfg):
        cli = CLIConfig()
    elif not isinstance(cli_cfg, CLIConfig):
        cli = CLIConfig.model_validate(cli_cfg)
    else:
        cli = cli_cfg

    merged = deep_merge(param.model_dump(), cli.to_internal_overrides())

    return InternalConfig.model_validate(merged)
