"""Places in the realm a character can explore."""

from __future__ import annotations

import random
import re
from abc import ABC, abstractmethod
from typing import Any

from .console import Console
from .enemies import Boss, Dragon, Enemy, Goblin, Wolves, Zombie
from .items import BuffItem

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Area(ABC):
    """A location with its own enemies and events."""

    def __init__(
        self,
        name: str,
        description: str,
        encounter_rate: float,
        locked: bool,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.name = name
        self.description = description
        self.encounter_rate = encounter_rate
        self.locked = locked
        self.console = console if console is not None else Console()
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locked={self.locked})"

    def enter(self) -> None:
        """Announce arrival in the area."""
        self.console.clear()
        self.console.write(f"Entering {self.name}: {self.description}")
        self.console.pause()

    @abstractmethod
    def random_enemy(self, level: int) -> Enemy | None:
        """Create an enemy scaled to a character level, or None."""

    @abstractmethod
    def trigger_event(self, character: Any) -> None:
        """Run the area's event for a visiting character."""


class Forest(Area):
    """A dense forest with wolves, goblins and healing herbs."""

    def __init__(self, console: Console | None = None, rng: random.Random | None = None) -> None:
        super().__init__("Forest", "A dense, mysterious forest.", 0.5, False, console, rng)

    def random_enemy(self, level: int) -> Enemy:
        health = 20 + level * 5
        if self.rng.randrange(2) == 0:
            return Wolves(
                "Forest Wolf", health, 10, 5 + level * 2, 2 + level, self.console, self.rng
            )
        return Goblin(
            "Forest Goblin", health - 5, 15, 7 + level * 2, 3 + level, self.console, self.rng
        )

    def trigger_event(self, character: Any) -> None:
        if self.rng.randrange(100) < 30:
            self.console.write("Found a healing herb! +5 HP")
            character.heal(5)
            self.console.pause()


class Cave(Area):
    """A dark cave with zombies, dragons and a shop."""

    def __init__(self, console: Console | None = None, rng: random.Random | None = None) -> None:
        super().__init__("Cave", "A dark and eerie cave.", 0.7, False, console, rng)

    def random_enemy(self, level: int) -> Enemy:
        health = 25 + level * 5
        if self.rng.randrange(2) == 0:
            return Zombie(
                "Cave Zombie", health, 5, 6 + level * 2, 4 + level, self.console, self.rng
            )
        return Dragon(
            "Cave Dragon", health + 10, 15, 15 + level * 2, 8 + level, self.console, self.rng
        )

    def trigger_event(self, character: Any) -> None:
        self.console.clear()
        self.console.write()
        self.console.write("Welcome to the Shop!")
        self.console.write("1.Attack Buff(50 gold)")
        self.console.write("2.Exit")
        match = _LEADING_INT.match(self.console.read_line("Choice: "))
        if match is None:
            self.console.write("Error triggering event in Cave.")
            self.console.pause()
            return
        choice = int(match.group(1))
        if choice == 1:
            buff = BuffItem("Attack Buff", "Boosts attack by 5 for 2 turns", 5, 0, 2)
            character.buy_item(buff, 50)
        elif choice == 2:
            self.console.write("Exiting....")
        else:
            self.console.write("Invalid option")
        self.console.pause()


class Town(Area):
    """A safe town where the character rests."""

    def __init__(self, console: Console | None = None, rng: random.Random | None = None) -> None:
        super().__init__("Town", "A peaceful town.", 0.0, False, console, rng)

    def random_enemy(self, level: int) -> None:
        return None

    def trigger_event(self, character: Any) -> None:
        self.console.write("Resting in town: +20 HP restored")
        character.heal(20)
        self.console.pause()


class Dungeon(Area):
    """A locked dungeon guarded by a boss and traps."""

    def __init__(self, console: Console | None = None, rng: random.Random | None = None) -> None:
        super().__init__("Dungeon", "A dangerous dungeon.", 1.0, True, console, rng)

    def random_enemy(self, level: int) -> Enemy:
        return Boss(
            "Dungeon Boss",
            80 + level * 5,
            10,
            15 + level * 2,
            10 + level,
            self.console,
            self.rng,
        )

    def trigger_event(self, character: Any) -> None:
        if self.rng.randrange(100) < 10:
            self.console.write("Trap triggered! -10 HP")
            character.take_damage(10)
            self.console.pause()