"""Singly linked list of short strings, used for the names kept in a city."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class LinkedList:
    """An ordered sequence of strings with linked-list style operations."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = list(items)

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return not self._items

    def push_front(self, value: str) -> None:
        """Insert ``value`` at the head of the list."""
        self._items.insert(0, value)

    def append(self, value: str) -> None:
        """Insert ``value`` at the tail of the list."""
        self._items.append(value)

    def insert_after(self, target: str, value: str) -> None:
        """Insert ``value`` right after the first element equal to ``target``."""
        index = self._index_of(target)
        self._items.insert(index + 1, value)

    def pop_front(self) -> str:
        """Remove and return the first element."""
        if not self._items:
            raise IndexError("pop from an empty list")
        return self._items.pop(0)

    def pop_back(self) -> str:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from an empty list")
        return self._items.pop()

    def remove(self, value: str) -> bool:
        """Remove the first element equal to ``value``; report whether one was found."""
        try:
            self._items.remove(value)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        """Drop every element."""
        self._items.clear()

    def find(self, value: str) -> int | None:
        """Return the position of the first element equal to ``value``, or None."""
        try:
            return self._items.index(value)
        except ValueError:
            return None

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        self._items.reverse()

    def render(self) -> str:
        """Return the list as ``"a" -> "b" -> NULL``."""
        return "".join(f'"{value}" -> ' for value in self._items) + "NULL"

    def _index_of(self, target: str) -> int:
        try:
            return self._items.index(target)
        except ValueError:
            raise ValueError(f"{target!r} is not in the list") from None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({self._items!r})"