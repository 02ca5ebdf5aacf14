"""``textpipe`` command-line entry point.

Usage:
    textpipe "  hello    world  "
    printf 'line1\\n\\nline2' | textpipe -o remove_empty_lines
    textpipe --config scripts/user_config.py --contract
    textpipe --list
"""

import sys
import argparse
import logging

from textpipe.contracts import ContractViolation
from textpipe.pipeline import OPERATIONS, OperationSession
from textpipe.cli.run_text import build_config, print_config, run_text_pipeline, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textpipe",
        description="Apply a contract-checked text operation",
    )
    parser.add_argument("text", nargs="?", help="Input text (default: read stdin)")
    parser.add_argument("--config", help="Path to user config file")
    parser.add_argument("-o", "--operation", choices=list(OPERATIONS), help="Override operation")
    parser.add_argument("--contract", action="store_true", help="Print the operation contract and exit")
    parser.add_argument("--list", action="store_true", help="List operations and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = build_config(
        args.config,
        cli_args={"operation": args.operation},
        verbose=args.verbose,
    )
    setup_logging(config)

    if args.verbose:
        print_config(config)

    if args.list:
        for name in OPERATIONS:
            print(f"{name:<22}{OperationSession(name).title}")
        return 0

    if args.contract:
        print(OperationSession(config.operation).describe_contract())
        return 0

    text = args.text if args.text is not None else sys.stdin.read()

    try:
        return run_text_pipeline(text, config)
    except ContractViolation:
        logger.critical("This indicates a bug in %s. Aborting.", config.operation)
        raise


if __name__ == "__main__":
    sys.exit(main())
