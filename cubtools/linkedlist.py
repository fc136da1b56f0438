"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

_T = TypeVar("_T")
_U = TypeVar("_U")


@dataclass(eq=False)
class Node(Generic[_T]):
    """One link of a :class:`LinkedList`."""

    value: _T
    next: Optional["Node[_T]"] = None


class LinkedList(Generic[_T]):
    """A singly linked list that supports adding at either end."""

    def __init__(self, values: Iterable[_T] = ()) -> None:
        self._head: Node[_T] | None = None
        self._tail: Node[_T] | None = None
        self._size = 0
        for value in values:
            self.add_back(value)

    @property
    def head(self) -> Node[_T] | None:
        """The first node, or None for an empty list."""
        return self._head

    def add_front(self, value: _T) -> Node[_T]:
        """Insert ``value`` at the front and return its node."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, value: _T) -> Node[_T]:
        """Append ``value`` at the back and return its node."""
        node: Node[_T] = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node[_T] | None:
        """Return the last node, or None for an empty list."""
        return self._tail

    def clear(self, delete: Callable[[_T], Any] | None = None) -> None:
        """Remove every node, passing each value to ``delete`` first if given."""
        node = self._head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.value)
            node.next = None
            node = following
        self._head = None
        self._tail = None
        self._size = 0

    def iterate(self, func: Callable[[_T], Any]) -> None:
        """Call ``func`` on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[_T], _U]) -> "LinkedList[_U]":
        """Return a new list holding ``func(value)`` for every value."""
        return LinkedList(func(value) for value in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[_T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"