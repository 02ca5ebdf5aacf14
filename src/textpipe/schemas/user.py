"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs in a variety of formats, with aliases
for common naming patterns (e.g., OPERATION → operation, LOG_LEVEL → log_level).

UserConfig is intentionally minimal - users only specify what they want
to override from the defaults.
"""

from typing import Optional

from pydantic import Field, field_validator

from textpipe.schemas.base import TextpipeBaseModel, normalize_operation_name


class UserLoggingConfig(TextpipeBaseModel):
    """User-facing logging config."""
    level: Optional[str] = None
    format: Optional[str] = None
    datefmt: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def uppercase_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


class UserConfig(TextpipeBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(
            OPERATION="remove-empty-lines",
            LOG_LEVEL="debug",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    operation: Optional[str] = Field(None, alias="OPERATION")
    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")
    show_indicators: Optional[bool] = Field(None, alias="SHOW_INDICATORS")

    # Nested overrides (advanced users)
    logging: Optional[UserLoggingConfig] = None

    model_config = TextpipeBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("operation", mode="before")
    @classmethod
    def normalize_operation(cls, v):
        """Normalize operation names ("Remove-Empty-Lines" -> "remove_empty_lines")."""
        return normalize_operation_name(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.operation is not None:
            overrides["operation"] = self.operation

        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level

        # Merge with explicit logging config
        if self.logging is not None:
            logging_cfg.update(self.logging.model_dump(exclude_none=True))

        if logging_cfg:
            overrides["logging"] = logging_cfg

        if self.show_indicators is not None:
            overrides["display"] = {"show_indicators": self.show_indicators}

        return overrides
