"""
lexer.py

PURPOSE: Tokenize and normalize raw actor input.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
The lexer is deliberately minimal: tokens are the whitespace-delimited
words of the input, in order, with case preserved. Leading, trailing and
repeated whitespace (including Unicode whitespace) never produce empty
tokens.

Both functions are total: every string, including "" and whitespace-only
strings, has a well-defined result.
"""


def lex(text: str) -> list[str]:
    """
    Split input text into whitespace-delimited tokens.

    Args:
        text: Raw actor input

    Returns:
        List of tokens in input order (empty for blank input)
    """
    # str.split() with no separator drops empty runs at both ends and inside
    return text.split()


def normalize(text: str) -> str:
    """
    Collapse whitespace runs to single spaces and trim the ends.

    normalize(normalize(x)) == normalize(x) for every string.
    """
    return " ".join(lex(text))
