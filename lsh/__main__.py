import sys

from lsh.console import report_error
from lsh.shell import main_loop
from lsh.status import FAILURE, SUCCESS


def main():
    try:
        main_loop()
    except MemoryError:
        report_error("allocation error")
        return FAILURE
    return SUCCESS


if __name__ == "__main__":
    sys.exit(main())
