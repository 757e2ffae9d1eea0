"""A singly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class LinkedListNode(Generic[T]):
    """One node of a singly linked list."""

    value: T
    next: LinkedListNode[T] | None = None

    def has_children(self) -> bool:
        """Return ``True`` when no node follows this one."""
        return self.next is None

    def last(self) -> LinkedListNode[T]:
        """Return the final node of the chain starting here."""
        cursor = self
        while cursor.next is not None:
            cursor = cursor.next
        return cursor

    def append(self, value: T) -> None:
        """Attach a new node holding ``value`` at the end of the chain."""
        self.last().next = LinkedListNode(value)


@dataclass
class LinkedList(Generic[T]):
    """A list of nodes reached from ``head``."""

    head: LinkedListNode[T] | None = None

    def add_head(self, node: LinkedListNode[T]) -> None:
        """Put ``node`` in front, replacing whatever chain it carried."""
        node.next = self.head
        self.head = node

    def add_node(self, node: LinkedListNode[T]) -> None:
        """Attach ``node`` after the last node."""
        if self.head is None:
            self.head = node
        else:
            self.head.last().next = node

    def nodes(self) -> Iterator[LinkedListNode[T]]:
        cursor = self.head
        while cursor is not None:
            yield cursor
            cursor = cursor.next

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self.nodes())