import pytest

from headings import Rotation, Turn
from rule_tables import (
    AXIS_RULES,
    HEX_RULES,
    Frame,
    Symbol,
    branching_factor,
    expand,
)


class TestRuleTables:
    @pytest.mark.parametrize('rules, none', [(AXIS_RULES, Rotation.NONE),
                                             (HEX_RULES, Turn.NONE)])
    def test_three_children_one_without_turn(self, rules, none) -> None:
        for children in rules.values():
            assert len(children) == 3
            turns = [turn for _, turn in children]
            assert turns.count(none) == 1
            assert turns[0] is none

    def test_symbols(self) -> None:
        assert set(AXIS_RULES) == {Symbol.X, Symbol.Y, Symbol.Z}
        assert set(HEX_RULES) == {Symbol.X, Symbol.Y}
        for children in HEX_RULES.values():
            assert all(symbol in HEX_RULES for symbol, _ in children)

    def test_branching_factor(self) -> None:
        assert branching_factor(AXIS_RULES) == 3
        assert branching_factor(HEX_RULES) == 3


class TestExpand:
    def test_push_order_pops_left_to_right(self) -> None:
        stack = expand(AXIS_RULES, Frame(2, Symbol.X, Rotation.A))
        popped = [stack.pop() for _ in range(3)]
        assert popped == [
            Frame(1, Symbol.Y, Rotation.NONE),
            Frame(1, Symbol.Z, Rotation.A),
            Frame(1, Symbol.Y, Rotation.A),
        ]

    def test_depth_decreases(self) -> None:
        for frame in expand(HEX_RULES, Frame(5, Symbol.Y, Turn.LEFT)):
            assert frame.remaining == 4

    def test_terminal_frame_has_no_children(self) -> None:
        with pytest.raises(ValueError):
            expand(HEX_RULES, Frame(0, Symbol.X, Turn.NONE))
