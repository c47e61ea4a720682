from typing import Iterator

from fsmkit.symbols import Token

REPEAT = "*"


def tokenize(pattern: str) -> Iterator[Token]:
    """
    Split a pattern into tokens. A character followed by `*` becomes a repeated
    token, any other character a plain one.

    Args:
        pattern: The pattern to tokenize.

    Returns:
        A lazy iterator over the tokens of `pattern`.
    """

    index = 0
    while index < len(pattern):
        char = pattern[index]
        index += 1
        if index < len(pattern) and pattern[index] == REPEAT:
            index += 1
            yield Token(char, repeated=True)
        else:
            yield Token(char)
