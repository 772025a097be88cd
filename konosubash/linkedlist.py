"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class ListNode:
    """One link of a list: its content and the node after it."""

    content: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> ListNode:
        """Insert ``content`` before the first node and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> ListNode:
        """Append ``content`` after the last node and return its node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> ListNode | None:
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], object] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on each content from first to last."""
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], object] | None = None,
    ) -> LinkedList:
        """A new list of ``func(content)`` for each content.

        If ``func`` raises, the contents mapped so far are passed to
        ``delete`` and the exception propagates.
        """
        mapped = LinkedList()
        try:
            for node in self._nodes():
                mapped.push_back(func(node.content))
        except BaseException:
            mapped.clear(delete)
            raise
        return mapped

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"