"""The playable character classes."""

from __future__ import annotations

import random
from typing import Any

from .character import Character
from .console import Console


def _half(value: int) -> int:
    """Halve a whole number, rounding toward zero."""
    return int(value / 2)


class _Hero(Character):
    """Behaviour shared by every playable class."""

    def _ready(self, cost: int) -> bool:
        """Report whether the skill can be used now, explaining why not."""
        if self.mana < cost:
            self.console.write("Not enough mana!")
            return False
        if self.skill_cooldown > 0:
            self.console.write("Skill on cooldown!")
            return False
        return True

    def _advance(self, health: int, attack: int, defense: int, mana: int) -> None:
        """Gain a level, reset health and raise stats."""
        self.level += 1
        self.health = health
        self.attack += attack
        self.defense += defense
        self.mana += mana
        self.console.write(f"{self.name} leveled up to {self.level}!")
        self.console.pause()

    def _strike(self, enemy: Any, low: int, span: int) -> None:
        """Roll to hit a living enemy and resolve the damage."""
        if enemy.health <= 0:
            return
        roll = low + self.rng.randrange(span)
        if roll >= self.agility - enemy.agility + 50:
            self.console.write(f"{enemy.name} dodged the hit")
            return
        damage = self.attack - enemy.defense
        if damage > 0:
            label = "Critical Hit" if damage > 10 else "Hit"
            self.console.write(f"{label} on the {enemy.name} for {damage} damage")
            enemy.take_damage(damage)
        else:
            self.console.write(f"{enemy.name} defended the attack sucessfully")
            enemy.take_damage(1)


class Warrior(_Hero):
    """A sturdy fighter whose skill raises defense."""

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
        armor: int,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name, level, health, agility, attack, defense, gold, mana, console, rng)
        self.armor = armor

    def use_skill(self) -> None:
        if not self._ready(10):
            return
        self.mana -= 10
        self.skill_cooldown = 3
        boost = _half(self.armor)
        self.defense += boost
        self.console.write(f"Shield activated: Defense +{boost} for 2 turns.")
        self.apply_buff("Shield", 0, boost, 0, 2)

    def level_up(self) -> None:
        self._advance(80, 4, 5, 3)

    def attack_enemy(self, enemy: Any) -> None:
        self._strike(enemy, 0, 100)


class Mage(_Hero):
    """A spellcaster whose skill raises attack."""

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
        magic: int,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name, level, health, agility, attack, defense, gold, mana, console, rng)
        self.magic = magic

    def use_skill(self) -> None:
        if not self._ready(15):
            return
        self.mana -= 15
        self.skill_cooldown = 3
        boost = _half(self.magic)
        self.attack += boost
        self.console.write(f"Fireball cast: Attack +{boost} for 2 turns.")
        self.apply_buff("Fireball", boost, 0, 0, 2)

    def level_up(self) -> None:
        self._advance(70, 3, 2, 5)

    def attack_enemy(self, enemy: Any) -> None:
        self._strike(enemy, 20, 81)


class Rogue(_Hero):
    """A nimble thief whose skill raises agility."""

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
        stealth: int,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name, level, health, agility, attack, defense, gold, mana, console, rng)
        self.stealth = stealth

    def use_skill(self) -> None:
        if not self._ready(10):
            return
        self.mana -= 10
        self.skill_cooldown = 2
        boost = _half(self.stealth)
        self.agility += boost
        self.console.write(f"Stealth activated: Agility +{boost} for 2 turns.")
        self.apply_buff("Stealth", 0, 0, boost, 2)

    def level_up(self) -> None:
        self._advance(75, 3, 3, 3)

    def attack_enemy(self, enemy: Any) -> None:
        self._strike(enemy, 0, 100)


class Archer(_Hero):
    """A marksman whose skill raises attack."""

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
        range_: int,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name, level, health, agility, attack, defense, gold, mana, console, rng)
        self.range = range_

    def use_skill(self) -> None:
        if not self._ready(12):
            return
        self.mana -= 12
        self.skill_cooldown = 3
        boost = _half(self.range)
        self.attack += boost
        self.console.write(f"Precision Shot: Attack +{boost} for 2 turns.")
        self.apply_buff("Precision", boost, 0, 0, 2)

    def level_up(self) -> None:
        self._advance(70, 4, 2, 3)

    def attack_enemy(self, enemy: Any) -> None:
        self._strike(enemy, 40, 61)