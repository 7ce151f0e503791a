from enum import IntEnum

# Process exit codes
SUCCESS = 0
FAILURE = 1


class Continuation(IntEnum):
    """Result of every dispatched command: keep looping or stop."""

    TERMINATE = 0
    CONTINUE = 1
