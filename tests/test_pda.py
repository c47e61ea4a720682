from typing import List

import pytest

from fsmkit import EPSILON, PDA, InvalidState, InvalidSymbol, PDATransition


class TestZerosThenOnes:
    @pytest.mark.parametrize("text", ["01", "0011", "000111", "0" * 50 + "1" * 50])
    def test_accepts(self, zeros_then_ones_pda: PDA, text: str) -> None:
        assert zeros_then_ones_pda.accepts(text)

    @pytest.mark.parametrize("text", ["", "0", "1", "10", "001", "011", "0101", "00110", "x"])
    def test_rejects(self, zeros_then_ones_pda: PDA, text: str) -> None:
        assert not zeros_then_ones_pda.accepts(text)


def test_failed_branch_restores_stack() -> None:
    pda = PDA(0, [0, 1, 2, 3], [3])
    pda.add_transition(0, 1, push_symbol="Z")
    # first candidate replaces Z by X and dead-ends
    pda.add_transition(1, 2, "0", "Z", "X")
    # second candidate only works if Z is back on top
    pda.add_transition(1, 3, "0", "Z")

    assert pda.accepts("0")
    assert not pda.accepts("00")


def test_failed_search_leaves_stack_untouched(zeros_then_ones_pda: PDA) -> None:
    stack: List[str] = ["Z", "X", "X"]
    assert not zeros_then_ones_pda._accepts_from("1", stack, 2, 0, 0, None)
    assert stack == ["Z", "X", "X"]

    stack = ["Z"]
    assert not zeros_then_ones_pda._accepts_from("0001", stack, 1, 0, 0, None)
    assert stack == ["Z"]


def test_consuming_transitions_are_tried_before_epsilon() -> None:
    pda = PDA(0, [0, 1, 2], [2])
    # epsilon transition into a cycle that never terminates on its own
    pda.add_transition(0, 1)
    pda.add_transition(1, 1, push_symbol="A")
    pda.add_transition(0, 2, "a")

    assert pda.transitions(0)[0] == PDATransition("a", EPSILON, EPSILON, 2)
    assert pda.accepts("a")


def test_accepting_state_requires_whole_input() -> None:
    pda = PDA(0, [0, 1], [1])
    pda.add_transition(0, 1, "a")
    assert pda.accepts("a")
    assert not pda.accepts("ab")
    assert not pda.accepts("")


def test_stack_top_required() -> None:
    pda = PDA(0, [0, 1], [1])
    pda.add_transition(0, 1, "a", "X")
    assert not pda.accepts("a")


def test_epsilon_cycle_without_bound_diverges() -> None:
    pda = PDA(0, [0, 1], [1])
    pda.add_transition(0, 0)
    with pytest.raises(RecursionError):
        pda.accepts("a")


def test_max_depth_bounds_epsilon_cycle() -> None:
    pda = PDA(0, [0, 1], [1])
    pda.add_transition(0, 0, push_symbol="A")
    pda.add_transition(0, 1, "a")
    assert pda.accepts("a", max_depth=50)
    assert not pda.accepts("b", max_depth=50)


def test_max_depth_does_not_change_bounded_search(zeros_then_ones_pda: PDA) -> None:
    for text in ["01", "0011", "001", "0101"]:
        assert zeros_then_ones_pda.accepts(text, max_depth=100) == zeros_then_ones_pda.accepts(text)


def test_invalid_states() -> None:
    with pytest.raises(InvalidState):
        PDA(5, [0, 1], [1])
    with pytest.raises(InvalidState):
        PDA(0, [0, 1], [2])

    pda = PDA(0, [0, 1], [1])
    with pytest.raises(InvalidState):
        pda.add_transition(0, 9, "a")
    assert pda.transitions(0) == ()


def test_invalid_symbol() -> None:
    pda = PDA(0, [0, 1], [1])
    with pytest.raises(InvalidSymbol):
        pda.add_transition(0, 1, "ab")
    with pytest.raises(InvalidSymbol):
        pda.add_transition(0, 1, "a", push_symbol="XY")


def test_show(zeros_then_ones_pda: PDA, capsys: pytest.CaptureFixture) -> None:
    zeros_then_ones_pda.show()
    output = capsys.readouterr().out
    assert "PDAState 0 (start)" in output
    assert "PDAState 3 (accepting)" in output
    assert "  ε, ε / Z -> 1" in output
    assert "  1, X / ε -> 2" in output
