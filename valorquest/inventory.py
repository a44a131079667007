"""A character's bounded collection of items."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, TextIO

from .console import Console
from .items import BuffItem, Item, Potion

CAPACITY = 10


class InventoryError(ValueError):
    """Raised for a bad item index or malformed inventory save data."""


class Inventory:
    """Holds up to ten items in the order they were added."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self._items: list[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def copy(self) -> "Inventory":
        """Return a new inventory holding the same items."""
        other = Inventory(self.console)
        other._items = list(self._items)
        return other

    def add(self, item: Item) -> bool:
        """Add an item; return False if full or a duplicate unique item."""
        if len(self._items) >= CAPACITY:
            self.console.write("Inventory full!")
            self.console.pause()
            return False
        if item.unique and any(held.name == item.name for held in self._items):
            self.console.write(f"Cannot add duplicate unique item: {item.name}")
            self.console.pause()
            return False
        self._items.append(item)
        self.console.write(f"Added {item.name} to inventory.")
        return True

    def remove(self, index: int) -> None:
        """Remove the item at a zero-based index."""
        if not 0 <= index < len(self._items):
            raise InventoryError("Invalid index!")
        del self._items[index]
        self.console.write("Item removed.")
        self.console.pause()

    def use(self, index: int, character: Any) -> None:
        """Use the item at a zero-based index, discarding it if consumable."""
        if not 0 <= index < len(self._items):
            raise InventoryError("Invalid item index!")
        item = self._items[index]
        item.use(character)
        if item.consumable:
            self.remove(index)

    def show(self) -> None:
        """List the items, numbered from one."""
        self.console.clear()
        self.console.write("Inventory:")
        if not self._items:
            self.console.write("  (Empty)")
        for number, item in enumerate(self._items, start=1):
            self.console.write(f"{number}. {item.name}")
        self.console.pause()

    def save(self, out: TextIO) -> None:
        """Write the inventory section of a save file."""
        out.write("[Inventory]\n")
        out.write(f"count = {len(self._items)}\n")
        for number, item in enumerate(self._items):
            out.write(f"item{number}={item.save()}\n")

    def load(self, lines: Iterable[str], count: int) -> None:
        """Replace the contents with up to ``count`` items read from ``lines``."""
        loaded: list[Item] = []
        source = iter(lines)
        for _ in range(count):
            line = next(source, None)
            if line is None:
                break
            loaded.append(_parse_item(line.rstrip("\r\n")))
        self._items = loaded


def _parse_item(line: str) -> Item:
    key, sep, value = line.partition("=")
    parts = value.split(",", 2)
    if not sep or len(parts) < 3:
        raise InventoryError("Invalid save data format.")
    name, description = parts[0], parts[1]
    if "Buff" in name:
        return BuffItem(name, description, 5, 0, 2)
    return Potion(name, description, 15)