"""A doubly linked list with explicit cursors for walking it in both directions."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Optional[_Node[T]] = None
        self.prev: Optional[_Node[T]] = None


class Cursor(Generic[T]):
    """A position in a LinkedList that can move forwards and backwards."""

    __slots__ = ("_node",)

    def __init__(self, node: Optional[_Node[T]]) -> None:
        self._node = node

    def done(self) -> bool:
        """True once the cursor has walked off either end of the list."""
        return self._node is None

    def value(self) -> T:
        """The value under the cursor."""
        if self._node is None:
            raise IndexError("cursor is past the end of the list")
        return self._node.value

    def advance(self) -> "Cursor[T]":
        """Move towards the back; a finished cursor stays where it is."""
        if self._node is not None:
            self._node = self._node.next
        return self

    def retreat(self) -> "Cursor[T]":
        """Move towards the front; a finished cursor stays where it is."""
        if self._node is not None:
            self._node = self._node.prev
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)


class LinkedList(Generic[T]):
    """A doubly linked list that keeps track of both ends and its length."""

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._front: Optional[_Node[T]] = None
        self._back: Optional[_Node[T]] = None
        self._count = 0
        if iterable is not None:
            for value in iterable:
                self.push_back(value)

    def push_front(self, value: T) -> None:
        node = _Node(value)
        node.next = self._front
        if self._front is not None:
            self._front.prev = node
        self._front = node
        if self._back is None:
            self._back = node
        self._count += 1

    def push_back(self, value: T) -> None:
        node = _Node(value)
        node.prev = self._back
        if self._back is not None:
            self._back.next = node
        self._back = node
        if self._front is None:
            self._front = node
        self._count += 1

    def pop_front(self) -> T:
        """Remove and return the first value."""
        if self._front is None:
            raise IndexError("pop from an empty list")
        node = self._front
        self._unlink(node)
        return node.value

    def pop_back(self) -> T:
        """Remove and return the last value."""
        if self._back is None:
            raise IndexError("pop from an empty list")
        node = self._back
        self._unlink(node)
        return node.value

    def front(self) -> T:
        if self._front is None:
            raise IndexError("front of an empty list")
        return self._front.value

    def back(self) -> T:
        if self._back is None:
            raise IndexError("back of an empty list")
        return self._back.value

    def erase(self, cursor: Cursor[T]) -> None:
        """Remove the node under the cursor from the list."""
        node = cursor._node
        if node is None:
            raise ValueError("cannot erase through a finished cursor")
        self._unlink(node)

    def _unlink(self, node: _Node[T]) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        if node is self._front:
            self._front = node.next
        if node is self._back:
            self._back = node.prev
        node.next = node.prev = None
        self._count -= 1

    def merge_front(self, other: "LinkedList[T]") -> None:
        """Move every node of other in front of this list, leaving other empty."""
        if other is self or other._front is None:
            return
        if self._front is None:
            self._front, self._back = other._front, other._back
        else:
            assert other._back is not None
            other._back.next = self._front
            self._front.prev = other._back
            self._front = other._front
        self._count += other._count
        other._front = other._back = None
        other._count = 0

    def merge_back(self, other: "LinkedList[T]") -> None:
        """Move every node of other behind this list, leaving other empty."""
        if other is self or other._front is None:
            return
        if self._back is None:
            self._front, self._back = other._front, other._back
        else:
            self._back.next = other._front
            other._front.prev = self._back
            self._back = other._back
        self._count += other._count
        other._front = other._back = None
        other._count = 0

    def clear(self) -> None:
        self._front = self._back = None
        self._count = 0

    def foreach(self, callback: Callable[[T], Any]) -> bool:
        """Call callback on each value in order; stop and return False when it does."""
        for value in self:
            if not callback(value):
                return False
        return True

    def begin(self) -> Cursor[T]:
        return Cursor(self._front)

    def rbegin(self) -> Cursor[T]:
        return Cursor(self._back)

    def copy(self) -> "LinkedList[T]":
        return LinkedList(self)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._back
        while node is not None:
            yield node.value
            node = node.prev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"