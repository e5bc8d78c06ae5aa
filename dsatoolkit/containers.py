"""Fixed-capacity and linked stacks and queues."""

from dataclasses import dataclass
from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class EmptyError(IndexError):
    """Raised when reading from or removing out of an empty container."""


class FullError(OverflowError):
    """Raised when adding to a container that is at capacity."""


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    return capacity


class ArrayStack(Generic[T]):
    """A last-in, first-out stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: List[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top; raise FullError at capacity."""
        if len(self._items) == self.capacity:
            raise FullError("stack is full")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class ArrayQueue(Generic[T]):
    """A first-in, first-out queue in a fixed-size circular buffer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: List[Optional[T]] = [None] * capacity
        self._head = 0
        self._count = 0

    def push(self, value: T) -> None:
        """Append ``value`` at the back; raise FullError at capacity."""
        if self._count == self.capacity:
            raise FullError("queue is full")
        self._slots[(self._head + self._count) % self.capacity] = value
        self._count += 1

    def pop(self) -> T:
        """Remove and return the front value."""
        if not self._count:
            raise EmptyError("queue is empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return value  # type: ignore[return-value]

    def front(self) -> T:
        """Return the front value without removing it."""
        if not self._count:
            raise EmptyError("queue is empty")
        return self._slots[self._head]  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Yield the values from front to back."""
        for offset in range(self._count):
            yield self._slots[(self._head + offset) % self.capacity]  # type: ignore[misc]


@dataclass
class _Node(Generic[T]):
    value: T
    next: "Optional[_Node[T]]" = None


class LinkedStack(Generic[T]):
    """An unbounded stack built on a singly linked list."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._count = 0

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._head = _Node(value, self._head)
        self._count += 1

    def pop(self) -> T:
        """Remove and return the top value."""
        if self._head is None:
            raise EmptyError("stack is empty")
        node = self._head
        self._head = node.next
        self._count -= 1
        return node.value

    def top(self) -> T:
        """Return the top value without removing it."""
        if self._head is None:
            raise EmptyError("stack is empty")
        return self._head.value

    def __len__(self) -> int:
        return self._count


class LinkedQueue(Generic[T]):
    """An unbounded queue built on a singly linked list with a tail pointer."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._count = 0

    def push(self, value: T) -> None:
        """Append ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def pop(self) -> T:
        """Remove and return the front value."""
        if self._head is None:
            raise EmptyError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return node.value

    def front(self) -> T:
        """Return the front value without removing it."""
        if self._head is None:
            raise EmptyError("queue is empty")
        return self._head.value

    def __len__(self) -> int:
        return self._count