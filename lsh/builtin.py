import os
from types import MappingProxyType

from lsh.config import HELP_FOOTER, HELP_HEADER
from lsh.console import report_error, report_os_error
from lsh.status import Continuation


def builtin_cd(args):
    """Change directory"""
    if len(args) < 2:
        report_error('expected argument to "cd"')
        return Continuation.CONTINUE

    try:
        os.chdir(args[1])
    except OSError as e:
        report_os_error(e, f"cd: {args[1]}")
    return Continuation.CONTINUE


def builtin_help(args):
    """Print help message"""
    for line in HELP_HEADER:
        print(line)
    for name in builtin_names():
        print(f"  {name}")
    print(HELP_FOOTER)
    return Continuation.CONTINUE


def builtin_exit(args):
    return Continuation.TERMINATE


# Name -> handler, in the order `help` lists them
BUILTINS = MappingProxyType({
    "cd": builtin_cd,
    "help": builtin_help,
    "exit": builtin_exit,
})


def lookup(name):
    """Return the handler for a builtin, or None if `name` is not one"""
    return BUILTINS.get(name)


def builtin_names():
    return tuple(BUILTINS)
