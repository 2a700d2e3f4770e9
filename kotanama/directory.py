"""Cities and the names registered under each of them."""

from __future__ import annotations

from .doublylinked import CityList, CityNode


class CityNotFoundError(LookupError):
    """Raised when a requested city does not exist."""


class InvalidChoiceError(ValueError):
    """Raised when a city number is not a valid choice."""


class Directory:
    """A list of cities, each with its own list of names."""

    def __init__(self) -> None:
        self.cities = CityList()

    def add_city(self, name: str) -> CityNode:
        """Append a new city and return its node."""
        return self.cities.append(name)

    def remove_city(self, name: str) -> CityNode:
        """Remove a city together with every name in it."""
        node = self.cities.find(name)
        if node is None:
            raise CityNotFoundError(f"Kota '{name}' tidak ditemukan!")
        node.names.clear()
        self.cities.remove(name)
        return node

    def city_at(self, number: int) -> CityNode:
        """Return the city at the 1-based position ``number``."""
        if number < 1:
            raise InvalidChoiceError("Pilihan tidak valid.")
        for position, node in enumerate(self.cities, start=1):
            if position == number:
                return node
        raise CityNotFoundError(f"no city number {number}")

    def add_name(self, number: int, name: str) -> None:
        """Append ``name`` to the city at position ``number``."""
        self.city_at(number).names.append(name)

    def remove_name(self, number: int, name: str) -> bool:
        """Remove ``name`` from the city at position ``number``; report success."""
        return self.city_at(number).names.remove(name)

    def city_menu(self) -> str:
        """Return the numbered list of cities, one per line."""
        return "".join(
            f"{number}. {node.name}\n" for number, node in enumerate(self.cities, start=1)
        )

    def render(self) -> str:
        """Return every city followed by the names registered in each."""
        if self.cities.is_empty():
            return "Belum ada data kota.\n"
        chain = " -> ".join(node.name for node in self.cities)
        lines = [f"KOTA: {chain} -> NULL\n\n"]
        for node in self.cities:
            lines.append(f"  {node.name}:\n")
            if node.names.is_empty():
                lines.append("    (tidak ada nama)\n")
            else:
                people = " -> ".join(f"[{person}]" for person in node.names)
                lines.append(f"    {people} -> NULL\n")
        return "".join(lines)

    def __len__(self) -> int:
        return len(self.cities)