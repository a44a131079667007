"""Items a character can carry and use."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Item(ABC):
    """Something that can be stored in an inventory and used by a character."""

    def __init__(self, name: str, description: str, unique: bool = False) -> None:
        self.name = name
        self.description = description
        self.unique = unique

    @abstractmethod
    def use(self, character: Any) -> None:
        """Apply the item's effect to a character."""

    @property
    def consumable(self) -> bool:
        """Whether the item is used up when used."""
        return False

    def save(self) -> str:
        """Return the item's save-file representation."""
        return f"{self.name},{self.description},{int(self.unique)}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.description!r})"


class Potion(Item):
    """Restores health when drunk."""

    def __init__(self, name: str, description: str, heal_amount: int) -> None:
        super().__init__(name, description)
        self.heal_amount = heal_amount

    @property
    def consumable(self) -> bool:
        return True

    def use(self, character: Any) -> None:
        character.heal(self.heal_amount)
        character.console.write(f"{character.name} healed for {self.heal_amount} HP.")
        character.console.pause()


class BuffItem(Item):
    """Grants a temporary attack and defense boost."""

    def __init__(
        self,
        name: str,
        description: str,
        attack_boost: int,
        defense_boost: int,
        duration: int,
    ) -> None:
        super().__init__(name, description)
        self.attack_boost = attack_boost
        self.defense_boost = defense_boost
        self.duration = duration

    @property
    def consumable(self) -> bool:
        return True

    def use(self, character: Any) -> None:
        character.apply_buff(self.name, self.attack_boost, self.defense_boost, 0, self.duration)
        character.console.pause()