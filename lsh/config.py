# Prefix for every diagnostic written to stderr
PROGRAM_NAME = "lsh"

PROMPT = "> "

# Characters that separate tokens on a command line
DELIMITERS = " \t\r\n\a"

HELP_HEADER = (
    "LSH - a minimal command interpreter",
    "Type program names and arguments, and hit enter.",
    "The following are built in:",
)
HELP_FOOTER = "Use the man command for information on other programs."
