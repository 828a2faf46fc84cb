import itertools
import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.analysis import cost_all, cost_top, sort_values
from pushswap.sorting import (
    finish,
    higher_half_to_b,
    insert,
    lowest_half_to_b,
    rotate_to_top,
    solve,
    sort_stack,
    sort_three,
    sort_two,
)
from pushswap.stacks import Machine, Node

INSTRUCTIONS = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _replay(values, operations):
    machine = Machine(values)
    for name in operations:
        assert name in INSTRUCTIONS
        assert getattr(machine, name)() is True
    return machine


def _circularly_sorted(values):
    if not values:
        return True
    start = values.index(min(values))
    turned = values[start:] + values[:start]
    return turned == sorted(values)


def test_sort_two_swaps_unordered():
    machine = Machine([2, 1])
    sort_two(machine)
    assert machine.a.values() == [1, 2]
    assert machine.operations == ["sa"]


def test_sort_two_leaves_ordered():
    machine = Machine([1, 2])
    sort_two(machine)
    assert machine.operations == []


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_permutations(values):
    machine = Machine(values)
    sort_three(machine)
    assert machine.a.values() == [1, 2, 3]
    assert len(machine.operations) <= 2


def test_sort_three_reverse_order():
    machine = Machine([3, 2, 1])
    sort_three(machine)
    assert machine.operations == ["ra", "sa"]


@pytest.mark.parametrize("position", range(6))
def test_rotate_to_top_uses_cost_top_moves(position):
    machine = Machine([10, 20, 30, 40, 50, 60])
    node = list(machine.a)[position]
    expected = cost_top(node, machine.a)
    rotate_to_top(machine, node, False)
    assert machine.a.head is node
    assert len(machine.operations) == expected
    assert set(machine.operations) <= {"ra", "rra"}


def test_rotate_to_top_on_b():
    machine = Machine()
    machine.b.push_front(Node(3))
    machine.b.push_front(Node(2))
    machine.b.push_front(Node(1))
    node = list(machine.b)[2]
    rotate_to_top(machine, node, True)
    assert machine.b.head is node
    assert set(machine.operations) <= {"rb", "rrb"}


def test_rotate_to_top_absent_node_raises():
    machine = Machine([1, 2, 3])
    with pytest.raises(ValueError):
        rotate_to_top(machine, Node(2), False)


def test_insert_keeps_a_circularly_sorted():
    machine = Machine([1, 5, 9, 4])
    machine.a.reverse_rotate()
    machine.pb()
    cost_all(machine.a, machine.b)
    insert(machine)
    assert len(machine.b) == 0
    assert _circularly_sorted(machine.a.values())
    assert machine.operations[-1] == "pa"


def test_insert_on_empty_b_raises():
    machine = Machine([1, 2, 3])
    with pytest.raises(ValueError):
        insert(machine)


@pytest.mark.parametrize("size", [4, 5, 8, 13, 20])
def test_higher_half_to_b_leaves_lower_half(size):
    values = random.Random(size).sample(range(-50, 50), size)
    ranked = sort_values(values)
    machine = Machine(values)
    higher_half_to_b(machine, size, ranked)
    assert len(machine.a) == size // 2 + 1
    assert all(v <= ranked[size // 2] for v in machine.a.values())
    assert sorted(machine.a.values() + machine.b.values()) == ranked


@pytest.mark.parametrize("size", [4, 7, 12])
def test_lowest_half_to_b_leaves_three(size):
    values = random.Random(size).sample(range(100), size)
    ranked = sort_values(values)
    machine = Machine(values)
    lowest_half_to_b(machine, size, ranked)
    assert len(machine.a) == 3
    assert sorted(machine.a.values() + machine.b.values()) == ranked


def test_finish_brings_lowest_on_top():
    machine = Machine([7, 8, 9, 1, 2])
    finish(machine)
    assert machine.a.values() == sorted(machine.a.values())


def test_sort_stack_sorts_a():
    values = [6, -2, 14, 3, 0, 9]
    machine = Machine(values)
    sort_stack(machine, len(values), sort_values(values))
    assert machine.a.values() == sorted(values)
    assert len(machine.b) == 0


def test_solve_empty_and_sorted():
    assert solve([]) == []
    assert solve([1, 2, 3, 4, 5]) == []
    assert solve([42]) == []


def test_solve_two():
    assert solve([2, 1]) == ["sa"]


def test_solve_hundred_values():
    values = random.Random(0).sample(range(-10000, 10000), 100)
    operations = solve(values)
    machine = _replay(values, operations)
    assert machine.a.values() == sorted(values)
    assert len(machine.b) == 0


@settings(max_examples=60, deadline=None)
@given(
    st.lists(
        st.integers(min_value=-2147483648, max_value=2147483647),
        min_size=1,
        max_size=40,
        unique=True,
    )
)
def test_solve_replay_sorts(values):
    operations = solve(values)
    machine = _replay(values, operations)
    assert machine.a.values() == sorted(values)
    assert len(machine.b) == 0