"""Hostile creatures a character can meet in battle."""

from __future__ import annotations

import random
from typing import Any

from .console import Console


class Enemy:
    """A creature with health, agility, attack and defense that fights back."""

    def __init__(
        self,
        name: str,
        health: int,
        agility: int,
        attack: int,
        defense: int,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.name = name
        self.max_health = health
        self.health = health
        self.agility = agility
        self.attack = attack
        self.defense = defense
        self.console = console if console is not None else Console()
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, health={self.health}/{self.max_health})"

    def take_damage(self, damage: int) -> None:
        """Lose health, never dropping below zero."""
        self.health = max(0, self.health - damage)

    def attack_character(self, character: Any) -> None:
        """Make one ordinary attack on a character."""
        self._strike(character, 0, 100)
        self.console.pause()

    def _strike(self, character: Any, low: int, span: int) -> None:
        """Roll to hit a living character and resolve the damage."""
        if character.health <= 0:
            return
        roll = low + self.rng.randrange(span)
        if roll >= self.agility - character.agility + 50:
            self.console.write(f"{character.name} dodged the hit")
            return
        damage = self.attack - character.defense
        if damage > 0:
            label = "Critical Hit" if damage > 10 else "Hit"
            self.console.write(f"{label} on the {character.name} for {damage} damage")
            character.take_damage(damage)
        else:
            self.console.write(f"{character.name} defended the attack sucessfully")
            character.take_damage(1)


class Wolves(Enemy):
    """A pack of forest wolves."""


class Goblin(Enemy):
    """A cunning goblin."""


class Zombie(Enemy):
    """A slow, sturdy zombie."""


class Dragon(Enemy):
    """A fearsome cave dragon."""


class Boss(Enemy):
    """A boss whose tactics change as its health falls."""

    def attack_character(self, character: Any) -> None:
        ratio = self.health / self.max_health if self.max_health else 0.0
        if ratio > 0.66:
            self.console.write(f"{self.name} (Phase 1): Normal Attack")
            self._normal_attack(character)
        elif ratio > 0.33:
            self.console.write(f"{self.name} (Phase 2): Double Strike")
            self._normal_attack(character)
            if character.health > 0:
                self._normal_attack(character)
        else:
            self.console.write(f"{self.name} (Phase 3): Desperate Assault")
            if self.rng.randrange(100) < 20:
                self.health = min(self.health + 10, self.max_health)
                self.console.write(f"{self.name} heals for 10 HP!")
            else:
                massive_damage = self.attack * 2
                self.console.write(f"{self.name} unleashes a massive attack!")
                if self.rng.randrange(100) < self.agility - character.agility + 50:
                    self.console.write(f"Dealt {massive_damage} damage!")
                    character.take_damage(massive_damage - character.defense)
                else:
                    self.console.write(
                        f"{character.name} miraculously dodges the devastating attack"
                    )
        self.console.pause()

    def _normal_attack(self, character: Any) -> None:
        self._strike(character, 10, 90)
        self.console.pause()