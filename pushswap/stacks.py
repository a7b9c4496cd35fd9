"""The two stacks of the puzzle and the instructions that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from pushswap.bits import format_bits

Log = Callable[[str], None]


def _print_instruction(instruction: str) -> None:
    print(instruction)


@dataclass
class Node:
    """One element of a stack: its value and its rank index."""

    value: int
    index: int = 0


class Stack:
    """A named stack whose instructions are reported to a log.

    The first node is the top. Every instruction that changes the stack
    reports its name ("sa", "pb", "rra", ...) to the log, which defaults
    to printing one instruction per line on standard output.
    """

    def __init__(
        self,
        name: str,
        values: Iterable[int] = (),
        log: Log | None = None,
    ) -> None:
        self.name = name
        self.log: Log = _print_instruction if log is None else log
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, {self.values()!r})"

    def top(self) -> Node:
        """Return the top node."""
        if not self._nodes:
            raise IndexError(f"stack {self.name} is empty")
        return self._nodes[0]

    def values(self) -> list[int]:
        """Return the values from top to bottom."""
        return [node.value for node in self._nodes]

    def push_from(self, other: Stack) -> None:
        """Move the top of other onto this stack; nothing happens if other is empty."""
        if not other._nodes:
            return
        self._nodes.appendleft(other._nodes.popleft())
        self.log(f"p{self.name}")

    def swap(self, quiet: bool = False) -> None:
        """Exchange the two top nodes, when there are at least two."""
        if len(self._nodes) < 2:
            return
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)
        if not quiet:
            self.log(f"s{self.name}")

    def rotate(self, quiet: bool = False) -> None:
        """Move the top node to the bottom, when there are at least two."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(-1)
        if not quiet:
            self.log(f"r{self.name}")

    def reverse_rotate(self, quiet: bool = False) -> None:
        """Move the bottom node to the top, when there are at least two."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(1)
        if not quiet:
            self.log(f"rr{self.name}")

    def format(self) -> str:
        """Render the stack with values, indexes and index bits for inspection."""
        parts = [f"[ {self.name} ]\n"]
        if self._nodes:
            parts.extend(
                f"{node.value}   [{node.index}]   {format_bits(node.index)}"
                for node in self._nodes
            )
        else:
            parts.append("(empty list)\n")
        parts.append("\n")
        return "".join(parts)


def swap_both(a: Stack, b: Stack) -> None:
    """Swap the tops of both stacks as one instruction."""
    a.swap(quiet=True)
    b.swap(quiet=True)
    a.log("ss")


def rotate_both(a: Stack, b: Stack) -> None:
    """Rotate both stacks as one instruction."""
    a.rotate(quiet=True)
    b.rotate(quiet=True)
    a.log("rr")


def reverse_rotate_both(a: Stack, b: Stack) -> None:
    """Reverse-rotate both stacks as one instruction."""
    a.reverse_rotate(quiet=True)
    b.reverse_rotate(quiet=True)
    a.log("rrr")