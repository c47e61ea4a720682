import dataclasses

from fsmkit.types import InvalidSymbol

# consumes no input, ignores the stack top or pushes nothing
EPSILON = ""
WILDCARD = "."


def is_epsilon(symbol: str) -> bool:
    return symbol == EPSILON


def check_symbol(symbol: str, allow_epsilon: bool = False) -> None:
    """
    Raise `InvalidSymbol` unless `symbol` is a single character.

    Args:
        symbol: The symbol to validate.
        allow_epsilon: Whether `EPSILON` is also accepted.
    """

    if not isinstance(symbol, str):
        raise InvalidSymbol(symbol, "symbols must be strings")
    if allow_epsilon and is_epsilon(symbol):
        return
    if len(symbol) != 1:
        raise InvalidSymbol(symbol, "symbols must be single characters")


@dataclasses.dataclass(frozen=True)
class Token:
    """
    A pattern atom: a literal character or the wildcard, optionally repeated by `*`.
    """

    value: str
    repeated: bool = False

    def __str__(self) -> str:
        return f"{self.value}*" if self.repeated else self.value
