"""The game loop: character creation, exploration, battles and saves."""

from __future__ import annotations

import argparse
import random
from typing import Sequence

from .areas import Area, Cave, Dungeon, Forest, Town
from .character import CHECKSUM_LINE, Character, SaveFormatError
from .console import Console
from .enemies import Enemy
from .heroes import Archer, Mage, Rogue, Warrior
from .items import BuffItem, Potion

DEFAULT_SAVE_PATH = "savegame.txt"

COLOR_RESET = "\033[0m"
COLOR_GREEN = "\033[32m"
COLOR_CYAN = "\033[36m"
COLOR_YELLOW = "\033[33m"
COLOR_RED = "\033[31m"
BOLD_ON = "\033[1m"
BOLD_OFF = "\033[22m"

# Class choice -> (class, health, agility, attack, defense, gold, mana, special)
_CLASSES = {
    1: (Warrior, 60, 8, 10, 3, 50, 30, 3),
    2: (Mage, 50, 10, 7, 2, 50, 40, 5),
    3: (Rogue, 55, 12, 8, 2, 50, 30, 8),
    4: (Archer, 50, 11, 9, 2, 50, 30, 10),
}

_MENU_ENTRIES = [
    (COLOR_RESET, "Explore the Realm", 18, ""),
    (COLOR_RESET, "Character Statistics", 15, ""),
    (COLOR_RESET, "Inventory Management", 15, ""),
    (COLOR_RESET, "Battle History", 21, ""),
    (COLOR_RESET, "Save Progress", 22, ""),
    (COLOR_RESET, "Load Game", 25, " "),
    (COLOR_RED, "Quit Game", 25, " "),
]


def create_player(console: Console, rng: random.Random | None = None) -> Character:
    """Ask for a name and class and build the player's character."""
    console.clear()
    name = console.read_string("Enter your name: ")
    console.write("Choose class:")
    console.write("1.Warrior")
    console.write("2.Mage")
    console.write("3.Rogue")
    console.write("4.Archer")
    choice = console.read_int("Choice: ")
    if choice not in _CLASSES:
        console.write("Invalid choice, defaulting to Warrior.")
        console.pause()
        choice = 1
    cls, *stats = _CLASSES[choice]
    return cls(name, 1, *stats, console, rng)


def save_game(character: Character, console: Console, path: str = DEFAULT_SAVE_PATH) -> bool:
    """Write the character to a save file; return whether it succeeded."""
    console.clear()
    try:
        with open(path, "w", encoding="utf-8") as out:
            character.save(out)
    except OSError:
        console.write("Save failed: Unable to open save file.")
        console.pause()
        return False
    console.write("Game saved.")
    console.pause()
    return True


def load_game(character: Character, console: Console, path: str = DEFAULT_SAVE_PATH) -> bool:
    """Read a save file into the character; return whether it succeeded."""
    console.clear()
    try:
        with open(path, encoding="utf-8") as source:
            lines = iter(source)
            character.load(lines)
            checksum = next(lines, "").rstrip("\r\n")
    except OSError:
        console.write("No save file found.")
        console.pause()
        return False
    except SaveFormatError as exc:
        console.write(str(exc))
        console.pause()
        return False
    if checksum != CHECKSUM_LINE:
        console.write("Save file corrupted!")
        console.pause()
        return False
    console.write("Game loaded.")
    console.pause()
    return True


def engage_battle(character: Character, enemy: Enemy, console: Console) -> str:
    """Fight turn by turn until one side falls; return the outcome."""
    console.clear()
    console.write()
    console.write(f"Battle: {character.name} vs {enemy.name}")
    defending = False
    while character.health > 0 and enemy.health > 0:
        console.clear()
        console.write()
        console.write(f"HP: {character.health} | Enemy HP: {enemy.health}")
        choice = console.read_int("1. Attack 2. Skill 3. Item 4. Defend\nChoice: ")
        character.update_buffs()
        if defending:
            character.boost_defense(-5)
            defending = False
        if choice == 1:
            character.attack_enemy(enemy)
        elif choice == 2:
            character.use_skill()
        elif choice == 3:
            character.show_inventory()
            index = console.read_int("Item index (0 to cancel): ")
            if index > 0:
                character.use_item(index - 1)
        elif choice == 4:
            character.boost_defense(5)
            defending = True
            console.write("Defending: +5 Defense")
            console.pause()
        else:
            console.write("Invalid choice.")
            console.pause()
            continue
        if enemy.health > 0:
            enemy.attack_character(character)
    outcome = "Victory" if character.health > 0 else "Defeat"
    experience = 10 if outcome == "Victory" else 0
    character.add_battle_record(enemy.name, outcome, experience)
    console.write(f"{outcome}!")
    console.pause()
    return outcome


class Game:
    """The main menu loop of one play session."""

    def __init__(
        self,
        console: Console | None = None,
        rng: random.Random | None = None,
        save_path: str = DEFAULT_SAVE_PATH,
    ) -> None:
        self.console = console if console is not None else Console()
        self.rng = rng if rng is not None else random.Random()
        self.save_path = save_path
        self.player: Character | None = None
        self.areas: list[Area] = [
            Forest(self.console, self.rng),
            Cave(self.console, self.rng),
            Town(self.console, self.rng),
            Dungeon(self.console, self.rng),
        ]
        self.in_combat = False

    def run(self) -> Character:
        """Play until the player quits; return the player's character."""
        player = create_player(self.console, self.rng)
        self.player = player
        player.add_item(Potion("Health Potion", "Heals 15 HP", 15))
        player.add_item(BuffItem("Strength", "Boosts attack by 5", 5, 0, 2))
        self.console.pause()

        running = True
        while running:
            self._show_menu()
            choice = self.console.read_int("\nEnter your choice (1-7): ")
            if player.level >= 3:
                self.areas[3].locked = False
            if choice == 1:
                self._explore(player)
            elif choice == 2:
                player.show_stats()
            elif choice == 3:
                player.show_inventory()
                index = self.console.read_int("Use item? (0 for no): ")
                if index > 0:
                    player.use_item(index - 1)
            elif choice == 4:
                player.view_battle_history()
            elif choice == 5:
                save_game(player, self.console, self.save_path)
            elif choice == 6:
                load_game(player, self.console, self.save_path)
            elif choice == 7:
                if self.in_combat:
                    self.console.write("Warning: Quitting in combat may result in loss!")
                if self.console.read_int("Save? (1: Yes, 0: No): ") == 1:
                    save_game(player, self.console, self.save_path)
                player.show_final_report()
                running = False
            else:
                self.console.write("Invalid choice.")
                self.console.pause()
        return player

    def _show_menu(self) -> None:
        write = self.console.write
        self.console.clear()
        write()
        write(f"{COLOR_GREEN}.-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=.")
        write(
            f"|{BOLD_ON}{COLOR_CYAN}         LEGENDS OF VALOR          "
            f"{BOLD_OFF}{COLOR_GREEN}     |"
        )
        write("|=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-|")
        for number, (color, label, padding, tail) in enumerate(_MENU_ENTRIES, start=1):
            write(
                f"|{COLOR_YELLOW}  {number}. {color}{label}{' ' * padding}"
                f"{COLOR_GREEN}{tail}|"
            )
        write(f":-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=:{COLOR_RESET}")

    def _explore(self, player: Character) -> None:
        self.console.clear()
        self.console.write("Areas:")
        for number, area in enumerate(self.areas, start=1):
            suffix = " (Locked)" if area.locked else ""
            self.console.write(f"{number}. {area.name}{suffix}")
        area_choice = self.console.read_int("Choose area: ")
        if not 1 <= area_choice <= len(self.areas):
            self.console.write("Invalid area!")
            self.console.pause()
            return
        area = self.areas[area_choice - 1]
        if area.locked:
            self.console.write("Area locked! Reach level 3 to unlock the Dungeon.")
            self.console.pause()
            return
        area.enter()
        area.trigger_event(player)
        if self.rng.randrange(100) < area.encounter_rate * 100:
            enemy = area.random_enemy(player.level)
            if enemy is None:
                self.console.write("Failed to generate enemy, skipping battle.")
                self.console.pause()
                return
            self.in_combat = True
            try:
                engage_battle(player, enemy, self.console)
            finally:
                self.in_combat = False


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game session from the command line."""
    parser = argparse.ArgumentParser(description="A turn-based role-playing adventure.")
    parser.add_argument(
        "--save-file",
        default=DEFAULT_SAVE_PATH,
        help="path of the save file (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    console = Console()
    try:
        Game(console, random.Random(), args.save_file).run()
    except EOFError:
        console.write()
        console.write("Input ended. Exiting game.")
        return 1
    return 0