"""textpipe User Configuration.

This is the user-facing configuration file. Modify settings here to customize
the runner. Defaults are in src/textpipe/schemas/param.py

Usage:
    python scripts/run_text_pipeline.py --config scripts/user_config.py "some   text"
    python scripts/run_text_pipeline.py --config scripts/user_config.py -o to_lowercase "Some Text"
"""

CONFIG = {
    # ========================================================================
    # OPERATION
    # ========================================================================
    # "collapse_whitespace", "to_lowercase" or "remove_empty_lines"
    # (dashes, spaces and upper case are accepted: "Remove-Empty-Lines")
    "OPERATION": "collapse_whitespace",

    # ========================================================================
    # OUTPUT
    # ========================================================================
    "LOG_LEVEL": "WARNING",     # DEBUG, INFO, WARNING, ERROR, CRITICAL
    "SHOW_INDICATORS": True,    # Print pre/post status (green/red) to stderr
}
