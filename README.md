# valorquest

A turn-based role-playing game for the terminal. You create a hero, explore the
realm, fight what lives there and save your progress to a text file.

## Installing

```
pip install .
```

## Playing

```
valorquest
```

You can use a different save file:

```
valorquest --save-file mygame.txt
```

Without the option, the game saves to `savegame.txt` in the current directory.
If input ends while the game is waiting for you, it prints
"Input ended. Exiting game." and exits with status 1.

You first enter a name and choose a class. An invalid choice gives you a
Warrior.

| Class   | Skill          | Mana | Cooldown | Boost                      |
|---------|----------------|------|----------|----------------------------|
| Warrior | Shield         | 10   | 3        | defense, from half armour  |
| Mage    | Fireball       | 15   | 3        | attack, from half magic    |
| Rogue   | Stealth        | 10   | 2        | agility, from half stealth |
| Archer  | Precision Shot | 12   | 3        | attack, from half range    |

Using a skill also records a buff that lasts two turns. Every hero starts with a
Health Potion and a Strength buff item in the inventory, which holds at most ten
items.

The main menu lets you:

1. Explore the realm: the Forest, the Cave, the Town and the Dungeon. The
   Dungeon stays locked until you reach level 3.
2. Show your character's statistics and active buffs.
3. Look at your inventory and use an item.
4. Review your battle history.
5. Save your progress.
6. Load the saved game.
7. Quit, optionally saving first, with a final score report.

Each area has its own enemies and events:

- **Forest**: wolves and goblins; a 30% chance of a healing herb (+5 HP).
- **Cave**: zombies and dragons; a shop that sells an Attack Buff for 50 gold.
- **Town**: no enemies; resting heals 20 HP.
- **Dungeon**: the Dungeon Boss; a 10% chance of a trap (−10 HP). The boss
  attacks normally above two thirds of its health, strikes twice above one
  third, and below that either heals or unleashes a double-strength attack.

In battle you attack, use your skill, use an item or defend (+5 defense for one
turn). A victory is worth 10 experience, and reaching `level × 100` experience
raises your level.

## Using it as a library

The game is built from plain classes that you can drive from code or tests.
Every class takes a `Console` (any pair of text streams) and a `random.Random`:

```python
import io
import random

from valorquest.console import Console
from valorquest.heroes import Warrior
from valorquest.enemies import Goblin
from valorquest.game import engage_battle

console = Console(io.StringIO("1\n" * 500), io.StringIO())
rng = random.Random(7)
hero = Warrior("Ayla", 1, 60, 8, 10, 3, 50, 30, 3, console, rng)
goblin = Goblin("Goblin", 15, 15, 7, 3, console, rng)
outcome = engage_battle(hero, goblin, console)  # "Victory" or "Defeat"
```

The modules:

- `valorquest.console`: `Console`, line input and output with `read_int`,
  `read_string`, `pause` and `clear`.
- `valorquest.items`: `Item`, `Potion`, `BuffItem`.
- `valorquest.inventory`: `Inventory`, `InventoryError`.
- `valorquest.enemies`: `Enemy`, `Wolves`, `Goblin`, `Zombie`, `Dragon`, `Boss`.
- `valorquest.areas`: `Area`, `Forest`, `Cave`, `Town`, `Dungeon`.
- `valorquest.character`: `Character`, `Buff`, `BattleRecord`,
  `SaveFormatError`.
- `valorquest.heroes`: `Warrior`, `Mage`, `Rogue`, `Archer`.
- `valorquest.game`: `create_player`, `save_game`, `load_game`,
  `engage_battle`, `Game` and `main`.

`Game(console, rng, save_path).run()` plays the whole game on the given console
and returns the player's character.

## Limitations

- Stat boosts from skills and buff items stay after the buff's turns run out;
  only the buff entry is removed.
- Save files do not keep everything. A buff's agility boost is not written, and
  items are rebuilt from their names on loading: an item whose name contains
  "Buff" comes back as a buff item with +5 attack for 2 turns, and any other
  item comes back as a potion that heals 15 HP.
- There is one save slot per save file and no list of saved games.