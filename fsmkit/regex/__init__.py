from fsmkit.regex.nfa import NFA
from fsmkit.regex.parser import tokenize  # noqa: F401


def compile(pattern: str) -> NFA:
    """
    Compile a pattern into an `NFA`.

    Supported syntax: literal characters, `.` for any character and a postfix `*`
    for zero or more repetitions of the preceding character.
    """

    return NFA.from_pattern(pattern)


def accepts(nfa: NFA, text: str) -> bool:
    return nfa.accepts(text)


def fullmatch(pattern: str, text: str) -> bool:
    """
    Check whether `pattern` matches the whole of `text`.
    """

    return compile(pattern).accepts(text)
