from typing import Sequence, Tuple

import pytest

from fsmkit import DFA, PDA

Edge = Tuple[int, str, int]


def _build_dfa(num_states: int, final_states: Sequence[int], edges: Sequence[Edge]) -> DFA:
    dfa = DFA(range(num_states), 0, final_states)
    for source, symbol, target in edges:
        dfa.add_transition(source, symbol, target)
    return dfa


@pytest.fixture()
def bit_switch_dfa() -> DFA:
    """01, 10, 001, 110, ... 111110000, 00001111"""
    return _build_dfa(
        6,
        [3, 4],
        [
            (0, "0", 1),
            (0, "1", 2),
            (1, "0", 1),
            (1, "1", 3),
            (2, "0", 4),
            (2, "1", 2),
            (3, "0", 5),
            (3, "1", 3),
            (4, "0", 4),
            (4, "1", 5),
            (5, "0", 5),
            (5, "1", 5),
        ],
    )


@pytest.fixture()
def ends_in_zeros_dfa() -> DFA:
    return _build_dfa(
        2,
        [1],
        [
            (0, "0", 1),
            (0, "1", 0),
            (1, "0", 1),
            (1, "1", 0),
        ],
    )


@pytest.fixture()
def contains_0100_or_0111_dfa() -> DFA:
    return _build_dfa(
        7,
        [4, 6],
        [
            (0, "0", 1),
            (0, "1", 0),
            (1, "0", 1),
            (1, "1", 2),
            (2, "0", 3),
            (2, "1", 5),
            (3, "0", 4),
            (3, "1", 2),
            (4, "0", 4),
            (4, "1", 4),
            (5, "0", 1),
            (5, "1", 6),
            (6, "0", 6),
            (6, "1", 6),
        ],
    )


@pytest.fixture()
def zeros_then_ones_pda() -> PDA:
    pda = PDA(0, [0, 1, 2, 3], [3])
    pda.add_transition(0, 1, push_symbol="Z")
    pda.add_transition(1, 1, "0", push_symbol="X")
    pda.add_transition(1, 2, "1", "X")
    pda.add_transition(2, 2, "1", "X")
    pda.add_transition(2, 3, stack_top="Z")
    return pda
