#!/usr/bin/env python3
"""``textpipe`` runner for a source checkout.

Usage:
    python scripts/run_text_pipeline.py --config scripts/user_config.py "  hello    world  "
    python scripts/run_text_pipeline.py -o to_lowercase "Hello WORLD"
    printf 'line1\\n\\nline2' | python scripts/run_text_pipeline.py -o remove_empty_lines

Note: User config in scripts/user_config.py, defaults in src/textpipe/schemas/param.py
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from textpipe.cli.main import main


if __name__ == "__main__":
    sys.exit(main())
