from typing import Optional

State = int


class InvalidState(ValueError):
    def __init__(self, state: State, reason: Optional[str] = None) -> None:
        super().__init__()
        self.state = state
        self.reason = reason

    def __str__(self) -> str:
        if self.reason is None:
            return f"Invalid state: {self.state!r}"
        return f"Invalid state {self.state!r}: {self.reason}"


class InvalidSymbol(ValueError):
    def __init__(self, symbol: str, reason: Optional[str] = None) -> None:
        super().__init__()
        self.symbol = symbol
        self.reason = reason

    def __str__(self) -> str:
        if self.reason is None:
            return f"Invalid symbol: {self.symbol!r}"
        return f"Invalid symbol {self.symbol!r}: {self.reason}"
