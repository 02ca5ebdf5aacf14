import sys

from textpipe.cli.main import main

sys.exit(main())
