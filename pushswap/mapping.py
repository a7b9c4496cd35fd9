"""Assignment of rank indexes to the values of a stack."""

from __future__ import annotations

from operator import attrgetter

from pushswap.sorting import smallest_node
from pushswap.stacks import Stack

_BY_VALUE = attrgetter("value")


def count_sign(stack: Stack, sign: str) -> int:
    """Count the positive values for "+" or the negative values for "-"."""
    if sign == "+":
        return sum(1 for node in stack if node.value > 0)
    if sign == "-":
        return sum(1 for node in stack if node.value < 0)
    raise ValueError(f"unknown sign {sign!r}")


def is_already_set(stack: Stack, value: int) -> bool:
    """True when a node holding value already carries a positive index."""
    return any(node.value == value and node.index > 0 for node in stack)


def set_indexes(stack: Stack) -> None:
    """Give every node a non-negative index that follows the order of the values.

    Positive values are ranked from 1 upwards, negative values from -1
    downwards, zero gets 0, and everything is then shifted so the smallest
    value has index 0. When negatives are present but zero is not, the
    index that zero would hold is left unused.
    """
    positives = sorted((node for node in stack if node.value > 0), key=_BY_VALUE)
    negatives = sorted(
        (node for node in stack if node.value < 0), key=_BY_VALUE, reverse=True
    )
    for rank, node in enumerate(positives, start=1):
        node.index = rank
    for rank, node in enumerate(negatives, start=1):
        node.index = -rank
    for node in stack:
        if node.value == 0:
            node.index = 0
    shift = -smallest_node(stack).index
    for node in stack:
        node.index += shift