import sys

from lsh.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
