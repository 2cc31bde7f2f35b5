"""Pydantic configuration schemas for the comparison runner.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Defaults (complete)
CLIConfig : class
    Command-line overrides
"""

from fallible.schemas.resolve import resolve_config
from fallible.schemas.internal import InternalConfig
from fallible.schemas.param import ParamConfig
from fallible.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'CLIConfig',
]
