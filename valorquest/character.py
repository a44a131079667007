"""The player character: stats, buffs, battle history and save data."""

from __future__ import annotations

import copy
import random
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Iterable, TextIO

from .console import Console
from .inventory import Inventory, InventoryError
from .items import Item

MAX_BUFFS = 5
MAX_BATTLE_RECORDS = 100
MAX_HEAL_THRESHOLD = 100
CHECKSUM_LINE = "checksum=12345"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_INT_FIELDS = {
    "level": "level",
    "health": "health",
    "agility": "agility",
    "attack": "attack",
    "defense": "defense",
    "gold": "gold",
    "mana": "mana",
    "experience": "experience",
    "enemies": "enemies_defeated",
}


class SaveFormatError(ValueError):
    """Raised when character save data cannot be read."""


@dataclass
class Buff:
    """A temporary stat boost with a number of turns remaining."""

    name: str
    attack_boost: int
    defense_boost: int
    agility_boost: int
    turns_left: int


@dataclass(frozen=True)
class BattleRecord:
    """The outcome of one battle."""

    enemy_name: str
    outcome: str
    experience_gained: int


def _to_int(text: str, message: str = "Invalid save data format.") -> int:
    """Read the leading integer of a string, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise SaveFormatError(message)
    return int(match.group(1))


def _count_value(line: str | None, section: str) -> int:
    if line is None:
        raise SaveFormatError(f"Missing {section} count.")
    _, sep, value = line.rstrip("\r\n").partition("=")
    if not sep:
        raise SaveFormatError(f"Invalid {section} count.")
    return _to_int(value, f"Invalid {section} count.")


class Character(ABC):
    """A player character with stats, an inventory, buffs and a battle history."""

    _player_count = 0

    def __init__(
        self,
        name: str,
        level: int,
        health: int,
        agility: int,
        attack: int,
        defense: int,
        gold: int,
        mana: int,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.name = name
        self.level = level
        self.health = health
        self.agility = agility
        self.attack = attack
        self.defense = defense
        self.gold = gold
        self.mana = mana
        self.experience = 0
        self.enemies_defeated = 0
        self.skill_cooldown = 0
        self.console = console if console is not None else Console()
        self.rng = rng if rng is not None else random.Random()
        self.inventory = Inventory(self.console)
        self.buffs: list[Buff] = []
        self.battle_records: list[BattleRecord] = []
        Character._player_count += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, level={self.level}, health={self.health})"

    @classmethod
    def player_count(cls) -> int:
        """How many characters have been created, copies included."""
        return Character._player_count

    def copy(self) -> "Character":
        """Return an independent copy with its own inventory, buffs and records."""
        other = copy.copy(self)
        other.inventory = self.inventory.copy()
        other.buffs = [replace(buff) for buff in self.buffs]
        other.battle_records = list(self.battle_records)
        Character._player_count += 1
        return other

    def take_damage(self, damage: int) -> None:
        """Lose health, never dropping below zero."""
        self.health = max(0, self.health - damage)

    def heal(self, amount: int) -> None:
        """Restore health; a fallen or overfull character is reset to 100."""
        if 0 < self.health <= MAX_HEAL_THRESHOLD:
            self.health += amount
        else:
            self.health = MAX_HEAL_THRESHOLD

    def boost_defense(self, boost: int) -> None:
        self.defense += boost

    def boost_attack(self, boost: int) -> None:
        self.attack += boost

    def boost_agility(self, boost: int) -> None:
        self.agility += boost

    def show_stats(self) -> None:
        """Display the character's statistics and active buffs."""
        self.console.clear()
        self.console.write()
        self.console.write(f"Name: {self.name}")
        self.console.write(f"Level: {self.level}")
        self.console.write(f"Health: {self.health}")
        self.console.write(f"Mana: {self.mana}")
        self.console.write(f"Attack: {self.attack}")
        self.console.write(f"Defense: {self.defense}")
        self.console.write(f"Gold: {self.gold}")
        self.console.write(f"Experience: {self.experience}")
        self.console.write(f"Enemies Defeated: {self.enemies_defeated}")
        if self.buffs:
            self.console.write("Active Buffs:")
            for buff in self.buffs:
                self.console.write(f"- {buff.name} (Turns: {buff.turns_left})")
        self.console.pause()

    def add_item(self, item: Item) -> bool:
        """Put an item in the inventory; return whether it was added."""
        return self.inventory.add(item)

    def buy_item(self, item: Item, price: int) -> bool:
        """Pay for an item and add it to the inventory if gold allows."""
        if self.gold >= price:
            self.gold -= price
            self.add_item(item)
            self.console.write(f"Purchased {item.name} for {price} gold.")
            self.console.pause()
            return True
        self.console.write("Not enough gold!")
        self.console.pause()
        return False

    def use_item(self, index: int) -> None:
        """Use the inventory item at a zero-based index."""
        try:
            self.inventory.use(index, self)
        except InventoryError as exc:
            self.console.write(str(exc))
            self.console.pause()

    def remove_item(self, index: int) -> None:
        """Discard the inventory item at a zero-based index."""
        try:
            self.inventory.remove(index)
        except InventoryError as exc:
            self.console.write(str(exc))
            self.console.pause()

    def show_inventory(self) -> None:
        self.inventory.show()

    def add_battle_record(self, enemy_name: str, outcome: str, experience: int) -> None:
        """Record a battle, award experience and level up when enough is earned."""
        if len(self.battle_records) >= MAX_BATTLE_RECORDS:
            self.console.write("Battle record limit reached!")
            self.console.pause()
            return
        self.battle_records.append(BattleRecord(enemy_name, outcome, experience))
        self.experience += experience
        if outcome == "Victory":
            self.enemies_defeated += 1
        needed = self.level * 100
        if self.experience >= needed:
            self.level_up()
            self.experience -= needed

    def view_battle_history(self) -> None:
        self.console.clear()
        self.console.write()
        self.console.write("Battle History:")
        for number, record in enumerate(self.battle_records, start=1):
            self.console.write(
                f"Battle {number}: vs {record.enemy_name}, Outcome: {record.outcome}, "
                f"Exp: {record.experience_gained}"
            )
        self.console.pause()

    def update_buffs(self) -> None:
        """Count down buff durations, drop expired ones and cool the skill down."""
        for buff in self.buffs:
            buff.turns_left -= 1
        self.buffs = [buff for buff in self.buffs if buff.turns_left > 0]
        if self.skill_cooldown > 0:
            self.skill_cooldown -= 1

    def apply_buff(
        self,
        name: str,
        attack_boost: int,
        defense_boost: int,
        agility_boost: int,
        duration: int,
    ) -> None:
        """Add a buff and its stat boosts, up to five at a time."""
        if len(self.buffs) >= MAX_BUFFS:
            self.console.write("Buff limit reached!")
            self.console.pause()
            return
        self.buffs.append(Buff(name, attack_boost, defense_boost, agility_boost, duration))
        self.attack += attack_boost
        self.defense += defense_boost
        self.agility += agility_boost
        self.console.write(f"{self.name} applied {name} for {duration} turns.")

    def save(self, out: TextIO) -> None:
        """Write the character, inventory and battle history as save data."""
        out.write("[Character]\n")
        out.write(f"name = {self.name}\n")
        out.write(f"level = {self.level}\n")
        out.write(f"health = {self.health}\n")
        out.write(f"agility={self.agility}\n")
        out.write(f"attack={self.attack}\n")
        out.write(f"defense={self.defense}\n")
        out.write(f"gold={self.gold}\n")
        out.write(f"mana={self.mana}\n")
        out.write(f"experience={self.experience}\n")
        out.write(f"enemies={self.enemies_defeated}\n")
        out.write(f"buffCount={len(self.buffs)}\n")
        for number, buff in enumerate(self.buffs):
            out.write(
                f"buff{number}={buff.name},{buff.attack_boost},"
                f"{buff.defense_boost},{buff.turns_left}\n"
            )
        self.inventory.save(out)
        out.write("[BattleHistory]\n")
        out.write(f"count = {len(self.battle_records)}\n")
        for number, record in enumerate(self.battle_records):
            out.write(
                f"battle{number}={record.enemy_name},{record.outcome},"
                f"{record.experience_gained}\n"
            )
        out.write(f"{CHECKSUM_LINE}\n")

    def load(self, lines: Iterable[str]) -> None:
        """Read save data from lines, stopping after the battle history.

        Lines after the battle history, such as the checksum, are left
        unread in the iterator. Raises SaveFormatError on malformed data.
        """
        try:
            self._load(iter(lines))
        except SaveFormatError as exc:
            self.console.write(f"Error loading character: {exc}")
            raise

    def _load(self, source: Any) -> None:
        buffs = list(self.buffs)
        buff_count = len(buffs)
        found_inventory = False
        for raw in source:
            line = raw.rstrip("\r\n")
            if line == "[Inventory]":
                found_inventory = True
                break
            if not line or line.startswith("["):
                continue
            key, sep, value = line.partition("=")
            if not sep:
                raise SaveFormatError("Invalid save data format.")
            key, value = key.strip(), value.strip()
            if key == "name":
                self.name = value
            elif key in _INT_FIELDS:
                setattr(self, _INT_FIELDS[key], _to_int(value))
            elif key == "buffCount":
                buff_count = _to_int(value)
                if not 0 <= buff_count <= MAX_BUFFS:
                    raise SaveFormatError("Invalid buff count.")
            elif key.startswith("buff"):
                index = _to_int(key[4:], "Invalid buff data format.")
                parts = value.split(",", 3)
                if len(parts) < 4 or not 0 <= index < MAX_BUFFS:
                    raise SaveFormatError("Invalid buff data format.")
                while len(buffs) <= index:
                    buffs.append(Buff("", 0, 0, 0, 0))
                buffs[index] = Buff(
                    parts[0],
                    _to_int(parts[1], "Invalid buff data format."),
                    _to_int(parts[2], "Invalid buff data format."),
                    0,
                    _to_int(parts[3], "Invalid buff data format."),
                )
        if not found_inventory:
            raise SaveFormatError("Missing inventory section.")
        while len(buffs) < buff_count:
            buffs.append(Buff("", 0, 0, 0, 0))
        self.buffs = buffs[:buff_count]

        item_count = _count_value(next(source, None), "inventory")
        try:
            self.inventory.load(source, item_count)
        except InventoryError as exc:
            raise SaveFormatError(str(exc)) from exc

        next(source, None)
        record_count = _count_value(next(source, None), "battle history")
        records: list[BattleRecord] = []
        for _ in range(record_count):
            raw = next(source, None)
            if raw is None:
                break
            records.append(_parse_record(raw.rstrip("\r\n")))
        self.battle_records = records

    def show_final_report(self) -> None:
        self.console.clear()
        self.console.write()
        self.console.write("Final Score Report:")
        self.console.write(f"Name: {self.name}")
        self.console.write(f"Level: {self.level}")
        self.console.write(f"Total XP: {self.experience}")
        self.console.write(f"Battles Won: {self.enemies_defeated}")
        self.console.write(f"Gold: {self.gold}")
        self.console.pause()

    @abstractmethod
    def use_skill(self) -> None:
        """Use the character class's special skill."""

    @abstractmethod
    def level_up(self) -> None:
        """Advance one level and improve stats."""

    @abstractmethod
    def attack_enemy(self, enemy: Any) -> None:
        """Make one attack on an enemy."""


def _parse_record(line: str) -> BattleRecord:
    _, sep, value = line.partition("=")
    parts = value.split(",", 2)
    if not sep or len(parts) < 3:
        raise SaveFormatError("Invalid battle record format.")
    return BattleRecord(
        parts[0], parts[1], _to_int(parts[2], "Invalid battle record format.")
    )