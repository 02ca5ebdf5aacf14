"""ParamConfig: defaults for textpipe.

ALL tunable parameters must have defaults here. No runtime code should
define fallback values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives
InternalConfig.
"""

from typing import Literal

from pydantic import Field, field_validator

from textpipe.schemas.base import TextpipeBaseModel, normalize_operation_name

OperationName = Literal["collapse_whitespace", "to_lowercase", "remove_empty_lines"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(TextpipeBaseModel):
    """Logging configuration."""
    level: LogLevel = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    datefmt: str = '%Y-%m-%d %H:%M:%S'


class DisplayConfig(TextpipeBaseModel):
    """Front-end display settings."""
    show_indicators: bool = Field(True, description="Report pre/post status indicators")


class ParamConfig(TextpipeBaseModel):
    """Complete configuration with all defaults.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    operation: OperationName = "collapse_whitespace"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @field_validator("operation", mode="before")
    @classmethod
    def normalize_operation(cls, v):
        return normalize_operation_name(v)
