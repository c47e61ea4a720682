import dataclasses
from logging import getLogger
from typing import List, Optional, Union

from fsmkit.common.jsonnet import FromJsonnet
from fsmkit.dfa import DFA
from fsmkit.pda import PDA
from fsmkit.regex import NFA
from fsmkit.symbols import EPSILON
from fsmkit.types import State

logger = getLogger(__name__)

Automaton = Union[DFA, PDA, NFA]


@dataclasses.dataclass
class DFATransitionConfig:
    source: State
    symbol: str
    target: State


@dataclasses.dataclass
class DFAConfig:
    states: List[State]
    start_state: State
    final_states: List[State]
    transitions: List[DFATransitionConfig] = dataclasses.field(default_factory=list)

    def build(self) -> DFA:
        dfa = DFA(self.states, self.start_state, self.final_states)
        for transition in self.transitions:
            dfa.add_transition(transition.source, transition.symbol, transition.target)
        return dfa


@dataclasses.dataclass
class PDATransitionConfig:
    source: State
    target: State
    input_symbol: str = EPSILON
    stack_top: str = EPSILON
    push_symbol: str = EPSILON


@dataclasses.dataclass
class PDAConfig:
    start: State
    states: List[State]
    accepting_states: List[State]
    transitions: List[PDATransitionConfig] = dataclasses.field(default_factory=list)

    def build(self) -> PDA:
        pda = PDA(self.start, self.states, self.accepting_states)
        for transition in self.transitions:
            pda.add_transition(
                transition.source,
                transition.target,
                transition.input_symbol,
                transition.stack_top,
                transition.push_symbol,
            )
        return pda


@dataclasses.dataclass
class AutomatonConfig(FromJsonnet):
    """
    Declarative definition of a single automaton. Exactly one of `dfa`, `pda` and
    `regex` must be given.
    """

    dfa: Optional[DFAConfig] = None
    pda: Optional[PDAConfig] = None
    regex: Optional[str] = None

    def build(self) -> Automaton:
        given = [name for name in ("dfa", "pda", "regex") if getattr(self, name) is not None]
        if len(given) != 1:
            raise ValueError(f"Exactly one of dfa, pda or regex must be given, found: {given}")

        if self.dfa is not None:
            automaton: Automaton = self.dfa.build()
        elif self.pda is not None:
            automaton = self.pda.build()
        else:
            assert self.regex is not None
            automaton = NFA.from_pattern(self.regex)

        logger.debug("Built %r", automaton)
        return automaton
