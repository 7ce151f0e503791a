from lsh.builtin import lookup
from lsh.config import PROMPT
from lsh.executor import launch
from lsh.parser import split_line
from lsh.reader import read_line
from lsh.status import Continuation


def prompt():
    """Generate shell prompt"""
    return PROMPT


def execute(args):
    """
    Run a tokenized command: a builtin if one matches args[0],
    otherwise an external program.
    Returns: Continuation
    """
    if not args:
        return Continuation.CONTINUE

    handler = lookup(args[0])
    if handler is not None:
        return handler(args)
    return launch(args)


def main_loop():
    """Main shell loop. Runs until `exit` or end of input."""
    status = Continuation.CONTINUE
    while status:
        try:
            line = read_line(prompt())
            if line is None:
                print()
                break

            status = execute(split_line(line))
        except KeyboardInterrupt:
            # Ctrl+C abandons the current command, not the shell
            print()
