def read_line(prompt_text=""):
    """
    Show the prompt and read one command line.
    Returns: the line without its line break, or None at end of input
    """
    try:
        return input(prompt_text)
    except EOFError:
        return None
