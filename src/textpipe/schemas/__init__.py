"""Pydantic configuration schemas for textpipe.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line overrides
"""

from textpipe.schemas.resolve import resolve_config
from textpipe.schemas.internal import InternalConfig
from textpipe.schemas.param import ParamConfig
from textpipe.schemas.user import UserConfig
from textpipe.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
