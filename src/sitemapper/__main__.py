import sys

from sitemapper.cli import main

if __name__ == "__main__":
    sys.exit(main())
