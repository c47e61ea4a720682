import itertools
from logging import getLogger
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from fsmkit.regex.parser import tokenize
from fsmkit.symbols import WILDCARD, Token
from fsmkit.types import State

logger = getLogger(__name__)

_EMPTY: FrozenSet[State] = frozenset()


class NFA:
    """
    A nondeterministic finite automaton compiled from a pattern of literals, the
    wildcard `.` and postfix `*`.

    The automaton has no epsilon transitions. Every token gets one state, and the
    ways of skipping repeated tokens are added as direct edges ("skip edges") from
    earlier states to the states of later tokens:

    * a repeated token's state loops on its symbol,
    * each state of a run of repeated tokens, and the last required state before
      the run, has an edge to the next required token's state,
    * the last required state has an edge to each state of the run, and
    * each state of a run has an edge to every later state of the same run.

    States are numbered from `START_STATE` in token order.

    Args:
        tokens: The pattern tokens, as produced by `tokenize()`.
    """

    START_STATE: State = 0

    @classmethod
    def from_pattern(cls, pattern: str) -> "NFA":
        return cls(tokenize(pattern))

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._transitions: Dict[State, Dict[str, Set[State]]] = {}

        current_state = self.START_STATE
        last_required_state: Optional[State] = None
        optional_states: List[Tuple[State, Token]] = []

        for token in tokens:
            if token.repeated:
                if current_state == self.START_STATE:
                    last_required_state = current_state
                self._add_transition(token, current_state, current_state + 1)
                current_state += 1
                self._add_transition(token, current_state, current_state)
                optional_states.append((current_state, token))

                if last_required_state is not None:
                    self._add_transition(token, last_required_state, current_state)
            else:
                self._add_transition(token, current_state, current_state + 1)
                for state, _ in optional_states:
                    self._add_transition(token, state, current_state + 1)

                if last_required_state is not None:
                    self._add_transition(token, last_required_state, current_state + 1)

                self._add_optional_skips(optional_states)

                optional_states.clear()
                current_state += 1
                last_required_state = current_state

        self._add_optional_skips(optional_states)

        final_states: Set[State]
        if optional_states:
            final_states = {state for state, _ in optional_states}
            if last_required_state is not None:
                final_states.add(last_required_state)
        else:
            final_states = {current_state}

        self.final_states: FrozenSet[State] = frozenset(final_states)
        self.num_states = current_state + 1

        logger.debug("Compiled NFA with %d states and final states %s", self.num_states, sorted(self.final_states))

    def __repr__(self) -> str:
        return f"NFA(num_states={self.num_states}, final_states={sorted(self.final_states)})"

    def _add_transition(self, token: Token, source: State, target: State) -> None:
        self._transitions.setdefault(source, {}).setdefault(token.value, set()).add(target)

    def _add_optional_skips(self, optional_states: List[Tuple[State, Token]]) -> None:
        # neighbours in a run are already connected
        for i, (state, _) in enumerate(optional_states[:-2]):
            for target, token in optional_states[i + 2 :]:
                self._add_transition(token, state, target)

    def transitions(self, state: State) -> Mapping[str, FrozenSet[State]]:
        return {symbol: frozenset(targets) for symbol, targets in self._transitions.get(state, {}).items()}

    def next_states(self, state: State, symbol: str) -> FrozenSet[State]:
        targets = self._transitions.get(state)
        if not targets or symbol not in targets:
            return _EMPTY
        return frozenset(targets[symbol])

    def candidates(self, state: State, char: str) -> Iterator[State]:
        """
        Yield the states reachable from `state` on `char`, wildcard edges first.
        """

        transitions = self._transitions.get(state, {})
        if char == WILDCARD:
            # a literal "." in the input is matched by the wildcard edges only
            return iter(transitions.get(WILDCARD, _EMPTY))
        return itertools.chain(transitions.get(WILDCARD, _EMPTY), transitions.get(char, _EMPTY))

    def accepts(self, text: str, memoize: bool = True) -> bool:
        """
        Check whether the pattern matches the whole string.

        Args:
            text: The input string.
            memoize: Remember `(state, position)` pairs already known to fail. This
                only affects the running time, never the result.

        Returns:
            `True` if the string is accepted.
        """

        rejected: Optional[Set[Tuple[State, int]]] = set() if memoize else None
        return self._accepts_from(text, self.START_STATE, 0, rejected)

    def _accepts_from(
        self,
        text: str,
        state: State,
        position: int,
        rejected: Optional[Set[Tuple[State, int]]],
    ) -> bool:
        if position == len(text):
            return state in self.final_states

        for next_state in self.candidates(state, text[position]):
            attempt = (next_state, position + 1)
            if rejected is not None and attempt in rejected:
                continue
            if self._accepts_from(text, next_state, position + 1, rejected):
                return True
            if rejected is not None:
                rejected.add(attempt)

        return False

    def show(self) -> None:
        for state in range(self.num_states):
            representation = f"NFAState {state}"
            if state == self.START_STATE:
                representation += " (start)"
            if state in self.final_states:
                representation += " (final)"
            print(representation)
            for symbol, targets in sorted(self._transitions.get(state, {}).items()):
                for target in sorted(targets):
                    print(f"  {symbol} -> {target}")
