"""Generic containers and small helpers over sequences."""

from __future__ import annotations

import functools
from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
H = TypeVar("H", bound=Hashable)


class EmptyCollectionError(LookupError):
    """Raised when an operation needs an element but the collection is empty."""

    def __init__(self, message: str = "collection is empty") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Pair(Generic[T, U]):
    """Two values of possibly different types."""

    first: T
    second: U

    def swap(self) -> Pair[U, T]:
        """Return a new pair with the two values exchanged."""
        return Pair(self.second, self.first)


class Stack(Generic[T]):
    """A last-in, first-out collection."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyCollectionError()
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyCollectionError()
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return whether the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


class Queue(Generic[T]):
    """A first-in, first-out collection."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        if not self._items:
            raise EmptyCollectionError()
        return self._items.popleft()

    def front(self) -> T:
        """Return the front value without removing it."""
        if not self._items:
            raise EmptyCollectionError()
        return self._items[0]

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class HashSet(Generic[H]):
    """A collection of unique values that remembers insertion order."""

    def __init__(self, items: Iterable[H] = ()) -> None:
        self._items: dict[H, None] = dict.fromkeys(items)

    def add(self, value: H) -> None:
        """Add ``value`` unless it is already present."""
        self._items.setdefault(value, None)

    def remove(self, value: H) -> None:
        """Remove ``value`` if it is present."""
        self._items.pop(value, None)

    def contains(self, value: H) -> bool:
        """Return whether ``value`` is in the set."""
        return value in self._items

    def elements(self) -> list[H]:
        """Return the values of the set as a new list."""
        return list(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[H]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"HashSet({list(self._items)!r})"


def union(s1: HashSet[H], s2: HashSet[H]) -> HashSet[H]:
    """Return a new set with the values of both sets."""
    return HashSet([*s1, *s2])


def intersection(s1: HashSet[H], s2: HashSet[H]) -> HashSet[H]:
    """Return a new set with the values present in both sets."""
    return HashSet(value for value in s1 if value in s2)


def difference(s1: HashSet[H], s2: HashSet[H]) -> HashSet[H]:
    """Return a new set with the values of ``s1`` that are not in ``s2``."""
    return HashSet(value for value in s1 if value not in s2)


def filter_items(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the items for which ``predicate`` is true, in order."""
    return [item for item in items if predicate(item)]


def map_items(items: Iterable[T], mapper: Callable[[T], U]) -> list[U]:
    """Return ``mapper`` applied to every item, in order."""
    return [mapper(item) for item in items]


def reduce_items(items: Iterable[T], initial: U, reducer: Callable[[U, T], U]) -> U:
    """Fold ``items`` into one value, starting from ``initial``."""
    return functools.reduce(reducer, items, initial)


def contains(items: Iterable[T], element: T) -> bool:
    """Return whether ``element`` occurs in ``items``."""
    return any(item == element for item in items)


def find_index(items: Iterable[T], element: T) -> int:
    """Return the index of the first ``element`` in ``items``, or -1."""
    for index, item in enumerate(items):
        if item == element:
            return index
    return -1


def remove_duplicates(items: Iterable[H]) -> list[H]:
    """Return the items without repeats, keeping first occurrences in order."""
    return list(dict.fromkeys(items))