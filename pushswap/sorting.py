"""The sorting strategy: split a into b by rank, then insert back by cheapest cost."""

from __future__ import annotations

from typing import Sequence

from .analysis import cost_all, find_cheapest, is_sorted, sort_values
from .stacks import Machine, Node


def sort_two(machine: Machine) -> None:
    """Order two elements of a with at most one swap."""
    if len(machine.a) < 2:
        return
    if not is_sorted(machine.a, machine.b):
        machine.sa()


def sort_three(machine: Machine) -> None:
    """Order three elements of a with at most two instructions."""
    low = machine.a.lowest()
    high = machine.a.highest()
    high_index = machine.a.index(high)
    if high_index == 0:
        machine.ra()
    elif high_index == 1:
        machine.rra()
    if machine.a.index(low) == 1:
        machine.sa()


def rotate_to_top(machine: Machine, node: Node, on_b: bool) -> None:
    """Rotate the stack holding ``node`` the short way until ``node`` is on top."""
    stack = machine.b if on_b else machine.a
    index = stack.index(node)
    if index < 0:
        raise ValueError("node is not in the stack")
    if index > len(stack) // 2:
        step = machine.rrb if on_b else machine.rra
    else:
        step = machine.rb if on_b else machine.ra
    while stack.head is not node:
        step()


def insert(machine: Machine) -> None:
    """Push the cheapest node of b onto its target in a.

    Costs and targets must already have been stored by ``cost_all``.
    """
    change = find_cheapest(machine.b)
    if change is None:
        raise ValueError("stack b is empty")
    closest = change.target
    if closest is None:
        raise ValueError("node has no target; run cost_all first")
    rotate_to_top(machine, change, True)
    rotate_to_top(machine, closest, False)
    machine.pa()


def higher_half_to_b(machine: Machine, size: int, ranked: Sequence[int]) -> None:
    """Move every value above the median to b, the top quarter to its bottom."""
    stack = machine.a
    while len(stack) > size // 2 + 1:
        head = stack.head.content
        if head > ranked[size // 4 * 3]:
            machine.pb()
            if stack.head.content <= size // 2:
                machine.rr()
            else:
                machine.rb()
        elif head > ranked[size // 2]:
            machine.pb()
        else:
            machine.ra()


def lowest_half_to_b(machine: Machine, size: int, ranked: Sequence[int]) -> None:
    """Move all but three values to b, the lowest quarter to its bottom."""
    stack = machine.a
    while len(stack) > 3:
        if stack.head.content > ranked[size // 4]:
            machine.pb()
        else:
            machine.pb()
            machine.rb()


def finish(machine: Machine) -> None:
    """Rotate a until its lowest value is on top."""
    rotate_to_top(machine, machine.a.lowest(), False)


def sort_stack(machine: Machine, size: int, ranked: Sequence[int]) -> None:
    """Sort a stack of more than three values; ``ranked`` is them in ascending order."""
    higher_half_to_b(machine, size, ranked)
    lowest_half_to_b(machine, size, ranked)
    sort_three(machine)
    while len(machine.b):
        cost_all(machine.a, machine.b)
        insert(machine)
    finish(machine)


def solve(values: Sequence[int]) -> list[str]:
    """The instructions that sort ``values`` (distinct integers, top first)."""
    values = list(values)
    if not values:
        return []
    machine = Machine(values)
    if is_sorted(machine.a, machine.b):
        return []
    if len(values) == 2:
        sort_two(machine)
    elif len(values) == 3:
        sort_three(machine)
    else:
        sort_stack(machine, len(values), sort_values(values))
    return list(machine.operations)