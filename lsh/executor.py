import contextlib
import os
import signal
import sys

from lsh.console import report_os_error
from lsh.status import FAILURE, Continuation

# Python ignores these at startup; an ignored signal stays ignored across exec
_RESTORED_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGPIPE", "SIGXFSZ") if hasattr(signal, name)
)


def launch(args):
    """
    Run an external program and block until it terminates.
    args[0] is looked up on PATH; the whole list is passed as argv.
    Returns: Continuation.CONTINUE whatever the program's exit status
    """
    # Anything still buffered would otherwise be written twice
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        pid = os.fork()
    except OSError as e:
        report_os_error(e)
        return Continuation.CONTINUE

    with reaping(pid):
        if pid == 0:
            _exec_child(args)
    return Continuation.CONTINUE


@contextlib.contextmanager
def reaping(pid):
    """Wait for child `pid` when the block exits, however it exits."""
    try:
        yield pid
    finally:
        if pid:
            wait_for(pid)


def _exec_child(args):
    """Replace the forked child with the program. Never returns."""
    try:
        for signum in _RESTORED_SIGNALS:
            signal.signal(signum, signal.SIG_DFL)
        os.execvp(args[0], args)
    except (OSError, ValueError) as e:
        report_os_error(e, args[0])
    finally:
        os._exit(FAILURE)


def wait_for(pid):
    """
    Wait until child `pid` has exited or been killed by a signal.
    A stopped child is not finished, so the wait goes on.
    Returns: exit code, or the negated signal number if it was killed
    """
    while True:
        try:
            _, status = os.waitpid(pid, os.WUNTRACED)
        except KeyboardInterrupt:
            # Ctrl+C reaches the child too; keep waiting so it gets reaped
            continue

        if os.WIFEXITED(status) or os.WIFSIGNALED(status):
            return os.waitstatus_to_exitcode(status)
