"""Measurements the sorter takes of the stacks: order, targets and move costs."""

from __future__ import annotations

from typing import Iterable

from .stacks import Node, Stack

INT_MAX = 2147483647


def sort_values(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(values)


def is_sorted(stack_a: Stack, stack_b: Stack | None) -> bool:
    """True when a holds something, b is empty and a ascends from the top."""
    if not len(stack_a):
        return False
    if stack_b is not None and len(stack_b):
        return False
    contents = stack_a.values()
    return all(first <= second for first, second in zip(contents, contents[1:]))


def get_target(stack_a: Stack, node: Node) -> Node:
    """Choose where ``node`` belongs in a: the smallest larger value, else the lowest.

    The chosen node is stored on ``node.target`` and returned.
    """
    target: Node | None = None
    for current in stack_a:
        if current.content > node.content and (
            target is None or current.content < target.content
        ):
            target = current
    if target is None:
        target = stack_a.lowest()
    node.target = target
    return target


def cost_top(node: Node, stack: Stack) -> int:
    """Moves needed to bring ``node`` to the top of ``stack``.

    Nodes in the upper half are counted as rotations, the others as reverse
    rotations. A node that is not in the stack gives -1.
    """
    index = stack.index(node)
    if index > len(stack) // 2:
        return len(stack) - index
    return index


def cost(node: Node, stack_a: Stack, stack_b: Stack) -> int:
    """Moves needed to bring ``node`` and its target to the tops and push it to a."""
    moves = cost_top(node, stack_b)
    target = get_target(stack_a, node)
    moves += cost_top(target, stack_a)
    return moves + 1


def cost_all(stack_a: Stack, stack_b: Stack) -> None:
    """Store on every node of b its cost and target."""
    for node in stack_b:
        node.cost = cost(node, stack_a, stack_b)


def find_cheapest(stack: Stack) -> Node | None:
    """The first node with the lowest stored cost, or None for an empty stack."""
    cheapest: Node | None = None
    for node in stack:
        if cheapest is None or node.cost < cheapest.cost:
            cheapest = node
    return cheapest


def closest_higher(node: Node, stack: Stack) -> Node | None:
    """The node with the smallest value above ``node``'s, else the top of ``stack``."""
    closest = stack.head
    bound = INT_MAX
    for current in stack:
        if current.content < bound and node.content < current.content:
            closest = current
            bound = current.content
    return closest