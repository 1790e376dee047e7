"""Main entry point for wordstem package."""

import sys

from wordstem.cli import main

if __name__ == "__main__":
    sys.exit(main())
