"""Doubly linked list of cities, each holding its own list of names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .linkedlist import LinkedList


@dataclass
class CityNode:
    """A city and the names registered under it."""

    name: str
    names: LinkedList = field(default_factory=LinkedList)


class CityList:
    """An ordered list of cities that can be walked in both directions."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._nodes: list[CityNode] = [CityNode(name) for name in names]

    def is_empty(self) -> bool:
        """Return True when there are no cities."""
        return not self._nodes

    def push_front(self, name: str) -> CityNode:
        """Add a city at the head and return its node."""
        node = CityNode(name)
        self._nodes.insert(0, node)
        return node

    def append(self, name: str) -> CityNode:
        """Add a city at the tail and return its node."""
        node = CityNode(name)
        self._nodes.append(node)
        return node

    def insert_after(self, target: str, name: str) -> CityNode:
        """Add a city right after the first city called ``target``."""
        for index, node in enumerate(self._nodes):
            if node.name == target:
                new = CityNode(name)
                self._nodes.insert(index + 1, new)
                return new
        raise ValueError(f"{target!r} is not in the list")

    def pop_front(self) -> str:
        """Remove the first city and return its name."""
        if not self._nodes:
            raise IndexError("pop from an empty list")
        return self._nodes.pop(0).name

    def remove(self, name: str) -> CityNode | None:
        """Remove the first city called ``name`` and return it, or None."""
        for index, node in enumerate(self._nodes):
            if node.name == name:
                return self._nodes.pop(index)
        return None

    def find(self, name: str) -> CityNode | None:
        """Return the first city called ``name``, or None."""
        return next((node for node in self._nodes if node.name == name), None)

    def reverse(self) -> None:
        """Reverse the order of the cities in place."""
        self._nodes.reverse()

    def render(self) -> str:
        """Return the cities head to tail as ``a -> b -> NULL``."""
        return "".join(f"{node.name} -> " for node in self._nodes) + "NULL"

    def render_descending(self) -> str:
        """Return the cities tail to head as ``b -> a -> NULL``."""
        return "".join(f"{node.name} -> " for node in reversed(self._nodes)) + "NULL"

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[CityNode]:
        return iter(self._nodes)

    def __reversed__(self) -> Iterator[CityNode]:
        return reversed(self._nodes)

    def __repr__(self) -> str:
        return f"CityList({[node.name for node in self._nodes]!r})"