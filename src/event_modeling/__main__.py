"""Make package runnable with python -m event_modeling.

This module provides the entry point for running the package as a module
(python -m event_modeling) and for the installed console script (event-modeling).
"""

import sys

from event_modeling.cli import main

if __name__ == "__main__":
    sys.exit(main())
