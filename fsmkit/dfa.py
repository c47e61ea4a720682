from logging import getLogger
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Set

from fsmkit.symbols import check_symbol
from fsmkit.types import InvalidState, State

logger = getLogger(__name__)


class DFA:
    """
    A deterministic finite automaton (DFA)

    States are declared up front and transitions are added afterwards. The automaton
    keeps track of dead states while transitions are added: a non-final state whose
    only edges are self loops is marked dead, and loses the mark as soon as it gets an
    edge to another state. `accepts()` rejects as soon as it enters a dead state.

    Args:
        states: All states of the automaton.
        start_state: The start state. Must be one of `states`.
        final_states: The accepting states. Must be a subset of `states`.
    """

    def __init__(
        self,
        states: Iterable[State],
        start_state: State,
        final_states: Iterable[State],
    ) -> None:
        self.states: FrozenSet[State] = frozenset(states)
        if start_state not in self.states:
            raise InvalidState(start_state, "start state is not declared")

        self.start_state = start_state
        self.final_states: FrozenSet[State] = frozenset(final_states)
        for state in self.final_states:
            self._check_state(state)

        self.dead_states: Set[State] = set()
        self._transitions: Dict[State, Dict[str, State]] = {state: {} for state in self.states}

    def __repr__(self) -> str:
        return (
            f"DFA(states={sorted(self.states)}, start_state={self.start_state}, "
            f"final_states={sorted(self.final_states)})"
        )

    def _check_state(self, state: State) -> None:
        if state not in self.states:
            raise InvalidState(state, "state is not declared")

    def add_transition(self, state: State, symbol: str, to_state: State) -> None:
        """
        Add the edge `state --symbol--> to_state`, replacing any previous edge for
        `(state, symbol)`.
        """

        self._check_state(state)
        self._check_state(to_state)
        check_symbol(symbol)

        transition = self._transitions[state]
        has_other_transition = any(other != symbol for other in transition)
        transition[symbol] = to_state

        if state in self.dead_states and state != to_state:
            self.dead_states.discard(state)
            logger.debug("State %d is no longer dead", state)
        elif state == to_state and not has_other_transition and state not in self.final_states:
            self.dead_states.add(state)
            logger.debug("State %d marked as dead", state)

    def has_any_transition(self, state: State) -> bool:
        self._check_state(state)
        return bool(self._transitions[state])

    def transitions(self, state: State) -> Mapping[str, State]:
        self._check_state(state)
        return MappingProxyType(self._transitions[state])

    def is_dead(self, state: State) -> bool:
        return state in self.dead_states

    def next_state(self, state: State, symbol: str) -> Optional[State]:
        return self._transitions.get(state, {}).get(symbol)

    def accepts(self, text: Iterable[str], short_circuit: bool = True) -> bool:
        """
        Check whether the automaton accepts the given sequence of symbols.

        Args:
            text: The input symbols.
            short_circuit: Stop reading the input once a dead state is entered.

        Returns:
            `True` if the input is accepted.
        """

        state = self.start_state
        for symbol in text:
            next_state = self.next_state(state, symbol)
            if next_state is None:
                return False
            state = next_state
            if short_circuit and state in self.dead_states:
                return False
        return state in self.final_states

    def show(self) -> None:
        for state in sorted(self.states):
            flags = []
            if state == self.start_state:
                flags.append("start")
            if state in self.final_states:
                flags.append("final")
            if state in self.dead_states:
                flags.append("dead")
            print(f"DFAState {state}" + (f" ({', '.join(flags)})" if flags else ""))
            for symbol, next_state in sorted(self._transitions[state].items()):
                print(f"  {symbol} -> {next_state}")
