"""Core text pipeline execution logic.

This module contains the actual runner, separated from argument parsing.
main.py is a thin wrapper; this is the real implementation.
"""

import sys
import json
import logging
import importlib.util
from pathlib import Path
from typing import Optional, Dict, Any, TextIO

from textpipe.pipeline import OperationSession, indicator
from textpipe.schemas import resolve_config, ParamConfig, UserConfig, CLIConfig, InternalConfig


logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Parameters
    ----------
    config_path : str
        Path to user config Python file containing CONFIG dict.

    Returns
    -------
    dict
        Raw user configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    # Find CONFIG dict
    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def build_config(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> InternalConfig:
    """Resolve configuration (Param < User < CLI).

    Parameters
    ----------
    user_config_path : str, optional
        Path to a Python file with a CONFIG dict.
    cli_args : dict, optional
        CLI overrides. Keys: operation, log_level. None values are ignored.
    verbose : bool, optional
        If True and no explicit log_level, use DEBUG.
    """
    param_cfg = ParamConfig()

    if user_config_path:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))
    else:
        user_cfg = UserConfig()

    cli_args = dict(cli_args or {})
    if verbose and cli_args.get("log_level") is None:
        cli_args["log_level"] = "DEBUG"

    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    return resolve_config(param_cfg, user_cfg, cli_cfg)


def setup_logging(config: InternalConfig, stream: Optional[TextIO] = None) -> None:
    """Configure the root logger from config.

    Logs go to stderr (or ``stream``) so stdout carries only the result.
    Existing root handlers are replaced.
    """
    log_level = getattr(logging, config.logging.level, logging.INFO)

    formatter = logging.Formatter(
        fmt=config.logging.format,
        datefmt=config.logging.datefmt,
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler(stream if stream is not None else sys.stderr)
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    logger.debug("Logging: level=%s", config.logging.level)


def run_text_pipeline(
    text: Optional[str],
    config: InternalConfig,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Apply the configured operation to text and report the result.

    The result is written to stdout without a trailing newline. Status
    indicators (if enabled) and precondition errors go to stderr.

    Returns
    -------
    int
        0 on success, 1 on precondition failure.

    Raises
    ------
    ContractViolation
        If the operation broke its postcondition.
    """
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    session = OperationSession(config.operation)
    session.input_text = text
    outcome = session.execute()

    if config.display.show_indicators:
        print(f"pre:  {indicator(outcome.precondition_satisfied)}", file=stderr)
        print(f"post: {indicator(outcome.postcondition_satisfied)}", file=stderr)

    if not outcome.ok:
        print(f"{outcome.error_kind}: {outcome.error_message}", file=stderr)
        return 1

    stdout.write(outcome.output)
    return 0


def print_config(config: InternalConfig, stream: Optional[TextIO] = None) -> None:
    """Dump the resolved configuration as JSON."""
    stream = stream if stream is not None else sys.stderr
    print(json.dumps(config.model_dump(), indent=2), file=stream)
