import sys

from elite_atomic.cli import main

if __name__ == "__main__":
    sys.exit(main())
