import dataclasses
from logging import getLogger
from typing import Dict, FrozenSet, Iterable, Iterator, List, NamedTuple, Optional, Sequence

from fsmkit.symbols import EPSILON, check_symbol, is_epsilon
from fsmkit.types import InvalidState, State

logger = getLogger(__name__)


class PDATransition(NamedTuple):
    input_symbol: str
    stack_top: str
    push_symbol: str
    target: State

    def __str__(self) -> str:
        def _show(symbol: str) -> str:
            return "ε" if is_epsilon(symbol) else symbol

        return f"{_show(self.input_symbol)}, {_show(self.stack_top)} / {_show(self.push_symbol)} -> {self.target}"

    @property
    def is_epsilon(self) -> bool:
        return is_epsilon(self.input_symbol)


@dataclasses.dataclass
class PDAStateTransitions:
    """
    Outgoing transitions of a single state. Transitions consuming input are kept apart
    from epsilon transitions so that they can be tried first.
    """

    consuming: List[PDATransition] = dataclasses.field(default_factory=list)
    epsilon: List[PDATransition] = dataclasses.field(default_factory=list)

    def __iter__(self) -> Iterator[PDATransition]:
        yield from self.consuming
        yield from self.epsilon

    def __len__(self) -> int:
        return len(self.consuming) + len(self.epsilon)

    def add(self, transition: PDATransition) -> None:
        if transition.is_epsilon:
            self.epsilon.append(transition)
        else:
            self.consuming.append(transition)


class PDA:
    """
    A nondeterministic pushdown automaton (PDA)

    Each transition reads an input symbol (or nothing), requires a stack top (or
    nothing), pushes a symbol (or nothing) and moves to a target state. `EPSILON`
    stands for "nothing" in all three positions. Acceptance is by final state after
    the whole input has been read, decided by an exhaustive depth-first search.

    Note:
        The search does not detect epsilon cycles. An automaton that can take
        epsilon transitions forever without reading input recurses until Python's
        recursion limit is hit, unless `max_depth` is given to `accepts()`.

    Args:
        start: The start state. Must be one of `states`.
        states: All states of the automaton.
        accepting_states: The accepting states. Must be a subset of `states`.
    """

    def __init__(
        self,
        start: State,
        states: Iterable[State],
        accepting_states: Iterable[State],
    ) -> None:
        self.states: FrozenSet[State] = frozenset(states)
        if start not in self.states:
            raise InvalidState(start, "start state is not declared")

        self.start = start
        self.accepting_states: FrozenSet[State] = frozenset(accepting_states)
        for state in self.accepting_states:
            self._check_state(state)

        self._transitions: Dict[State, PDAStateTransitions] = {state: PDAStateTransitions() for state in self.states}

    def __repr__(self) -> str:
        return (
            f"PDA(start={self.start}, states={sorted(self.states)}, "
            f"accepting_states={sorted(self.accepting_states)})"
        )

    def _check_state(self, state: State) -> None:
        if state not in self.states:
            raise InvalidState(state, "state is not declared")

    def add_transition(
        self,
        source: State,
        target: State,
        input_symbol: str = EPSILON,
        stack_top: str = EPSILON,
        push_symbol: str = EPSILON,
    ) -> None:
        self._check_state(source)
        self._check_state(target)
        for symbol in (input_symbol, stack_top, push_symbol):
            check_symbol(symbol, allow_epsilon=True)

        self._transitions[source].add(PDATransition(input_symbol, stack_top, push_symbol, target))

    def transitions(self, state: State) -> Sequence[PDATransition]:
        self._check_state(state)
        return tuple(self._transitions[state])

    def accepts(self, text: str, max_depth: Optional[int] = None) -> bool:
        """
        Check whether the automaton accepts the given string.

        Args:
            text: The input string.
            max_depth: If given, search branches taking more than this number of
                transitions are abandoned. Searches that finish within the bound
                return the same result as without it.

        Returns:
            `True` if some sequence of transitions reads the whole input and ends
            in an accepting state.
        """

        stack: List[str] = []
        return self._accepts_from(text, stack, self.start, 0, 0, max_depth)

    @staticmethod
    def _can_take(transition: PDATransition, text: str, stack: List[str], position: int) -> bool:
        if not transition.is_epsilon:
            if position >= len(text) or text[position] != transition.input_symbol:
                return False
        if not is_epsilon(transition.stack_top):
            if not stack or stack[-1] != transition.stack_top:
                return False
        return True

    def _accepts_from(
        self,
        text: str,
        stack: List[str],
        state: State,
        position: int,
        depth: int,
        max_depth: Optional[int],
    ) -> bool:
        if max_depth is not None and depth > max_depth:
            logger.debug("Abandoning search at state %d, position %d: depth %d exceeded", state, position, max_depth)
            return False

        for transition in self._transitions[state]:
            if not self._can_take(transition, text, stack, position):
                continue

            top = transition.stack_top
            push = transition.push_symbol
            if not is_epsilon(top):
                stack.pop()
            if not is_epsilon(push):
                stack.append(push)

            next_position = position if transition.is_epsilon else position + 1
            if self._accepts_from(text, stack, transition.target, next_position, depth + 1, max_depth):
                return True

            # undo in reverse order
            if not is_epsilon(push):
                popped = stack.pop()
                assert popped == push, "stack top is not the pushed symbol"
            if not is_epsilon(top):
                stack.append(top)

        return state in self.accepting_states and position >= len(text)

    def show(self) -> None:
        for state in sorted(self.states):
            flags = []
            if state == self.start:
                flags.append("start")
            if state in self.accepting_states:
                flags.append("accepting")
            print(f"PDAState {state}" + (f" ({', '.join(flags)})" if flags else ""))
            for transition in self._transitions[state]:
                print(f"  {transition}")
