"""CLIConfig: Command-line overrides.

Minimal configuration for settings that commonly change between runs:
which operation to apply and verbosity.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional

from pydantic import field_validator

from textpipe.schemas.base import TextpipeBaseModel, normalize_operation_name


class CLIConfig(TextpipeBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution.

    Usage
    -----
        cli_cfg = CLIConfig(operation="to_lowercase", log_level="DEBUG")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    operation: Optional[str] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    @field_validator("operation", mode="before")
    @classmethod
    def normalize_operation(cls, v):
        return normalize_operation_name(v)

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.operation is not None:
            overrides["operation"] = self.operation

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
