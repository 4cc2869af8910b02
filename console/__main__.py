"""Run the dice command with ``python -m console``."""
import sys

from .handler import main

sys.exit(main())
