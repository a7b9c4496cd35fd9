"""Sorting strategies for stack a, using stack b as scratch space."""

from __future__ import annotations

from operator import attrgetter

from pushswap.bits import highest_set, is_set
from pushswap.stacks import Node, Stack

_BY_VALUE = attrgetter("value")


def is_sorted(stack: Stack) -> bool:
    """True when the values rise strictly from top to bottom; an empty stack is not sorted."""
    values = stack.values()
    if not values:
        return False
    return all(x < y for x, y in zip(values, values[1:]))


def biggest_node(stack: Stack) -> Node:
    """Return the node holding the largest value."""
    if not len(stack):
        raise ValueError(f"stack {stack.name} is empty")
    return max(stack, key=_BY_VALUE)


def smallest_node(stack: Stack) -> Node:
    """Return the node holding the smallest value."""
    if not len(stack):
        raise ValueError(f"stack {stack.name} is empty")
    return min(stack, key=_BY_VALUE)


def distance(value: int, stack: Stack, direction: str) -> int:
    """Number of rotations that bring value to the top.

    Direction "u" counts forward rotations, "d" counts reverse rotations
    as the stack size minus the forward count. A missing value is taken
    to sit at the bottom.
    """
    values = stack.values()
    if not values:
        raise ValueError(f"stack {stack.name} is empty")
    position = values.index(value) if value in values else len(values) - 1
    if direction == "u":
        return position
    if direction == "d":
        return len(values) - position
    raise ValueError(f"unknown direction {direction!r}")


def move_to_top(node: Node, stack: Stack) -> bool:
    """Rotate the stack the shorter way until node is on top.

    Returns True if the stack turned out sorted before the move finished.
    """
    up = distance(node.value, stack, "u")
    down = distance(node.value, stack, "d")
    if up > down:
        step, count = stack.reverse_rotate, down
    else:
        step, count = stack.rotate, up
    for _ in range(count):
        if is_sorted(stack):
            return True
        step()
    return False


def sort_two(a: Stack) -> None:
    """Sort a stack of two values."""
    values = a.values()
    if len(values) >= 2 and values[0] > values[1]:
        a.swap()


def sort_three(a: Stack) -> None:
    """Sort a stack of three values in at most two instructions."""
    head, second = a.values()[:2]
    biggest = biggest_node(a).value
    smallest = smallest_node(a).value
    if biggest == second:
        if smallest == head:
            a.swap()
            a.rotate()
        else:
            a.reverse_rotate()
    elif biggest == head:
        if smallest == second:
            a.rotate()
        else:
            a.swap()
            a.reverse_rotate()
    else:
        a.swap()


def sort_four_five(a: Stack, b: Stack) -> None:
    """Sort four or five values by parking the two smallest on b."""
    if len(a) < 3:
        raise ValueError("at least three values are needed")
    move_to_top(smallest_node(a), a)
    b.push_from(a)
    move_to_top(smallest_node(a), a)
    b.push_from(a)
    first, second = b.values()[:2]
    if first < second:
        b.swap()
    if not is_sorted(a):
        sort_three(a)
    a.push_from(b)
    a.push_from(b)


def sort_six_more(a: Stack, b: Stack) -> None:
    """Radix-sort a on the bits of the node indexes, least significant first."""
    size = len(a)
    passes = highest_set(biggest_node(a).index)
    for bit in range(passes + 1):
        for _ in range(size):
            if is_set(a.top().index, bit):
                a.rotate()
            else:
                b.push_from(a)
        while len(b):
            a.push_from(b)