#
# Imports
#

# Standard library
import sys

# CLI entry point
from keycheck.check_files import main

if __name__ == "__main__":
    sys.exit(main())
