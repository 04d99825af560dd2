import itertools
import random

import pytest

from pushswap.sorting import (
    handle_stack,
    range_sort,
    solve,
    sort_five,
    sort_four,
    sort_three,
)
from pushswap.stacks import Stacks

VALID_MOVES = {"sa", "sb", "ss", "ra", "rb", "rr", "rra", "rrb", "rrr", "pa", "pb"}


def replay(values, moves):
    stacks = Stacks(values)
    for move in moves:
        getattr(stacks, move)()
    return stacks


@pytest.mark.parametrize("values", list(itertools.permutations([5, -2, 9])))
def test_sort_three_all_orders(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.values_a() == sorted(values)
    assert len(stacks.moves) <= 2
    assert stacks.values_b() == []


def test_sort_three_reversed_moves():
    stacks = Stacks([3, 2, 1])
    sort_three(stacks)
    assert stacks.moves == ["sa", "rra"]


@pytest.mark.parametrize("values", list(itertools.permutations([4, 1, 3, 2])))
def test_sort_four_all_orders(values):
    stacks = Stacks(values)
    sort_four(stacks)
    assert stacks.values_a() == [1, 2, 3, 4]
    assert stacks.values_b() == []


@pytest.mark.parametrize("values", list(itertools.permutations([10, 20, 30, 40, 50])))
def test_sort_five_all_orders(values):
    stacks = Stacks(values)
    sort_five(stacks)
    assert stacks.values_a() == [10, 20, 30, 40, 50]
    assert stacks.values_b() == []
    assert len(stacks.moves) <= 12


@pytest.mark.parametrize(
    "func, values",
    [(sort_three, [1, 2]), (sort_four, [1, 2, 3]), (sort_five, [1, 2, 3, 4, 5, 6])],
)
def test_wrong_size_rejected(func, values):
    with pytest.raises(ValueError):
        func(Stacks(values))


@pytest.mark.parametrize("size", [6, 17, 100, 250])
def test_range_sort_sorts(size):
    values = random.Random(size).sample(range(-1000, 1000), size)
    stacks = Stacks(values)
    range_sort(stacks)
    assert stacks.values_a() == sorted(values)
    assert stacks.values_b() == []


def test_handle_stack_single_value_makes_no_move():
    stacks = Stacks([42])
    handle_stack(stacks)
    assert stacks.moves == []
    assert stacks.values_a() == [42]


def test_handle_stack_two_values_swaps():
    stacks = Stacks([2, 1])
    handle_stack(stacks)
    assert stacks.moves == ["sa"]
    assert stacks.values_a() == [1, 2]


@pytest.mark.parametrize("size", [2, 3, 4, 5, 8, 60, 120])
def test_solve_moves_replay_to_sorted(size):
    values = random.Random(size * 7).sample(range(10000), size)
    if values == sorted(values):
        values.reverse()
    moves = solve(values)
    assert set(moves) <= VALID_MOVES
    stacks = replay(values, moves)
    assert stacks.values_a() == sorted(values)
    assert stacks.values_b() == []


def test_solve_does_not_change_input():
    values = [3, 1, 2]
    solve(values)
    assert values == [3, 1, 2]