import sys

from flipflop.cli import main

if __name__ == "__main__":
    sys.exit(main())
