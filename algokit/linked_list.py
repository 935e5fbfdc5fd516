"""A singly linked list that keeps its values in ascending order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["SortedLinkedList"]


@dataclass(slots=True)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SortedLinkedList:
    """Singly linked list whose insertions keep values in ascending order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value`` before the first node that is not smaller than it."""
        node = _Node(value)
        if self._head is None or self._head.value >= value:
            node.next = self._head
            self._head = node
        else:
            current = self._head
            while current.next is not None and current.next.value < value:
                current = current.next
            node.next = current.next
            current.next = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"