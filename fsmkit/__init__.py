from fsmkit.dfa import DFA  # noqa: F401
from fsmkit.pda import PDA, PDATransition  # noqa: F401
from fsmkit.symbols import EPSILON, WILDCARD, Token  # noqa: F401
from fsmkit.types import InvalidState, InvalidSymbol, State  # noqa: F401
from fsmkit.version import VERSION as __version__  # noqa: F401
