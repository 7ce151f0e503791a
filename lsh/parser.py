import re

from lsh.config import DELIMITERS

_TOKEN_RE = re.compile(f"[^{re.escape(DELIMITERS)}]+")


def split_line(line):
    """
    Split a command line into tokens.
    Any run of delimiter characters separates tokens; there is no quoting.
    Returns: list of non-empty tokens in order
    """
    return _TOKEN_RE.findall(line)
