"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class ListNode:
    """One link of a LinkedList."""

    content: Any
    next: ListNode | None = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def add_front(self, content: Any) -> ListNode:
        """Insert content at the head; return its node."""
        self.head = ListNode(content, self.head)
        return self.head

    def add_back(self, content: Any) -> ListNode:
        """Insert content at the tail; return its node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> ListNode | None:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every node, passing each content to delete first."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None

    def for_each(self, f: Callable[[Any], None]) -> None:
        """Call f on every content, head to tail."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> LinkedList:
        """Return a new list of f applied to each content.

        If f returns None, the contents built so far are passed to delete
        and ValueError is raised.
        """
        result = LinkedList()
        tail: ListNode | None = None
        for content in self:
            mapped = f(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"mapping produced no value for {content!r}")
            node = ListNode(mapped)
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result