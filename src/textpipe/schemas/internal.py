"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully
validated, normalized, and contains NO optional fields.
"""

from pydantic import ConfigDict

from textpipe.schemas.base import TextpipeBaseModel
from textpipe.schemas.param import LogLevel, OperationName


class InternalLoggingConfig(TextpipeBaseModel):
    """Runtime logging configuration."""
    level: LogLevel
    format: str
    datefmt: str


class InternalDisplayConfig(TextpipeBaseModel):
    """Runtime display settings."""
    show_indicators: bool


class InternalConfig(TextpipeBaseModel):
    """Authoritative runtime configuration.

    Runtime code accesses fields directly:

        session = OperationSession(config.operation)
        if config.display.show_indicators: ...

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    """

    operation: OperationName
    logging: InternalLoggingConfig
    display: InternalDisplayConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
