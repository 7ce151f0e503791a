import sys

from lsh.config import PROGRAM_NAME


def report_error(message):
    """Write one diagnostic line to stderr, prefixed with the program name"""
    print(f"{PROGRAM_NAME}: {message}", file=sys.stderr)
    sys.stderr.flush()


def report_os_error(exc, subject=None):
    """
    Report an OSError using the OS's own error text.
    `subject` is the path or program the error is about, if any.
    """
    reason = getattr(exc, "strerror", None) or str(exc)
    if subject:
        reason = f"{subject}: {reason}"
    report_error(reason)
