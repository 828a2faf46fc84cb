"""Linked stacks of integers and the push_swap instruction set."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One element of a stack, with the bookkeeping the sorter attaches to it."""

    content: int
    cost: int = 0
    target: Node | None = field(default=None, repr=False)


class Stack:
    """A stack of nodes; the first node is the top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(int(v)) for v in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    @property
    def head(self) -> Node | None:
        """The top node, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def values(self) -> list[int]:
        """The contents from top to bottom."""
        return [node.content for node in self._nodes]

    def index(self, node: Node) -> int:
        """Position of ``node`` (by identity) from the top, or -1 if absent."""
        for position, current in enumerate(self._nodes):
            if current is node:
                return position
        return -1

    def push_front(self, node: Node) -> None:
        """Put ``node`` on top."""
        self._nodes.appendleft(node)

    def pop_front(self) -> Node:
        """Remove and return the top node; IndexError when empty."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def swap(self) -> bool:
        """Exchange the two top nodes; False when there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top node to the bottom; False when there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom node to the top; False when there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(1)
        return True

    def lowest(self) -> Node:
        """The first node holding the smallest value; ValueError when empty."""
        if not self._nodes:
            raise ValueError("empty stack has no lowest node")
        lowest = self._nodes[0]
        for node in self._nodes:
            if node.content < lowest.content:
                lowest = node
        return lowest

    def highest(self) -> Node:
        """The first node holding the largest value; ValueError when empty."""
        if not self._nodes:
            raise ValueError("empty stack has no highest node")
        top = self._nodes[0]
        for node in self._nodes:
            if node.content > top.content:
                top = node
        return top


class Machine:
    """Two stacks and the instructions on them; every applied instruction is recorded."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.operations: list[str] = []

    def _record(self, name: str, done: bool) -> bool:
        if done:
            self.operations.append(name)
        return done

    def sa(self) -> bool:
        """Swap the two top elements of a."""
        return self._record("sa", self.a.swap())

    def sb(self) -> bool:
        """Swap the two top elements of b."""
        return self._record("sb", self.b.swap())

    def ss(self) -> bool:
        """sa and sb at once; only when both stacks hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.a.swap()
        self.b.swap()
        return self._record("ss", True)

    def pa(self) -> bool:
        """Move the top of b onto a."""
        if not len(self.b):
            return False
        self.a.push_front(self.b.pop_front())
        return self._record("pa", True)

    def pb(self) -> bool:
        """Move the top of a onto b."""
        if not len(self.a):
            return False
        self.b.push_front(self.a.pop_front())
        return self._record("pb", True)

    def ra(self) -> bool:
        """Rotate a upwards."""
        return self._record("ra", self.a.rotate())

    def rb(self) -> bool:
        """Rotate b upwards."""
        return self._record("rb", self.b.rotate())

    def rr(self) -> bool:
        """ra and rb at once; only when both stacks hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.a.rotate()
        self.b.rotate()
        return self._record("rr", True)

    def rra(self) -> bool:
        """Rotate a downwards."""
        return self._record("rra", self.a.reverse_rotate())

    def rrb(self) -> bool:
        """Rotate b downwards."""
        return self._record("rrb", self.b.reverse_rotate())

    def rrr(self) -> bool:
        """rra and rrb at once; only when both stacks hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        return self._record("rrr", True)