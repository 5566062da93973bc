from fractions import Fraction

import pytest

from direction import Direction, run_tests
from pt import Pt


ALL = list(Direction)


def test_self_tests_pass():
    passed, total = run_tests()
    assert passed == total


def test_cycle_order():
    assert ALL == [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]
    assert len(Direction) == 4


@pytest.mark.parametrize('d', ALL)
def test_turns_are_inverses(d):
    assert d.turn_left().turn_right() is d
    assert d.turn_right().turn_left() is d


@pytest.mark.parametrize('d', ALL)
def test_turn_around(d):
    assert d.turn_around().turn_around() is d
    assert d.turn_around() is d.turn_right().turn_right()


@pytest.mark.parametrize('d', ALL)
def test_four_right_turns_close_the_cycle(d):
    e = d
    for _ in range(4):
        e = e.turn_right()
    assert e is d


def test_displacements_sum_to_zero():
    total = Pt(0, 0)
    for d in ALL:
        total = total + d.displacement()
    assert total == Pt(0, 0)


@pytest.mark.parametrize('d', ALL)
@pytest.mark.parametrize('p', [Pt(0, 0), Pt(3, -2), Pt(-10, 7)])
def test_point_arithmetic(p, d):
    assert p + d == p + d.displacement()
    assert (p + d) - d == p
    assert p - d == p - d.displacement()


def test_augmented_assignment_rebinds_and_leaves_aliases_alone():
    p = Pt(2, 2)
    alias = p
    p += Direction.DOWN
    assert p == Pt(2, 3)
    p -= Direction.LEFT
    assert p == Pt(3, 3)
    assert alias == Pt(2, 2)


def test_points_are_hashable_values():
    seen = {Pt(0, 0), Pt(0, 0) + Direction.RIGHT}
    assert Pt(0, 0) in seen
    assert Pt(1, 0) in seen
    assert len(seen | {Pt(-1, 0) + Direction.RIGHT}) == 2
    steps = {d.displacement(): d for d in ALL}
    assert steps[Pt(0, -1)] is Direction.UP
    with pytest.raises(AttributeError):
        Pt(0, 0).x = 1


def test_full_ordering_follows_the_cycle():
    for i, a in enumerate(ALL):
        for j, b in enumerate(ALL):
            assert (a < b) == (i < j)
            assert (a <= b) == (i <= j)
            assert (a > b) == (i > j)
            assert (a >= b) == (i >= j)
    assert max(ALL) is Direction.UP
    assert min(ALL) is Direction.RIGHT


def test_value_forms_leave_the_point_alone():
    p = Pt(2, 2)
    q = p + Direction.UP
    assert p == Pt(2, 2)
    assert q == Pt(2, 1)


def test_displacement_kind():
    step = Direction.LEFT.displacement(Fraction)
    assert step == Pt(Fraction(-1), Fraction(0))
    assert isinstance(step.x, Fraction)

    p = Pt(0.5, 0.5) + Direction.UP
    assert p == Pt(0.5, -0.5)
    assert isinstance(p.y, float)


def test_non_point_operand_is_rejected():
    with pytest.raises(TypeError):
        (1, 2) + Direction.UP
    with pytest.raises(TypeError):
        p = Pt(0, 0)
        p += (1, 1)


def test_enum_conveniences():
    assert Direction(3) is Direction.UP
    assert sorted([Direction.UP, Direction.RIGHT]) == [Direction.RIGHT, Direction.UP]
    assert str(Direction.LEFT) == 'Left'
    assert {d: d.displacement() for d in ALL}[Direction.DOWN] == Pt(0, 1)
