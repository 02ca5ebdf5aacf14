"""Command-line interface modules for textpipe.

This package contains core execution logic, making scripts/ optional and deletable.
"""

from textpipe.cli.run_text import run_text_pipeline
from textpipe.cli.main import main

__all__ = ['run_text_pipeline', 'main']
