import io

from valorquest.console import Console
from valorquest.items import BuffItem, Item, Potion


class Hero:
    def __init__(self):
        self.name = "Hero"
        self.out = io.StringIO()
        self.console = Console(io.StringIO("\n" * 10), self.out)
        self.healed = []
        self.buffs = []

    def heal(self, amount):
        self.healed.append(amount)

    def apply_buff(self, name, attack, defense, agility, duration):
        self.buffs.append((name, attack, defense, agility, duration))


class Relic(Item):
    def use(self, character):
        character.heal(1)


def test_potion_heals_and_reports():
    hero = Hero()
    Potion("Health Potion", "Heals 15 HP", 15).use(hero)
    assert hero.healed == [15]
    assert "Hero healed for 15 HP." in hero.out.getvalue()


def test_buff_item_applies_buff():
    hero = Hero()
    BuffItem("Attack Buff", "Boosts attack by 5 for 2 turns", 5, 0, 2).use(hero)
    assert hero.buffs == [("Attack Buff", 5, 0, 0, 2)]


def test_consumable_flags():
    assert Potion("p", "d", 1).consumable is True
    assert BuffItem("b", "d", 1, 1, 1).consumable is True
    assert Relic("r", "d").consumable is False


def test_unique_defaults_to_false():
    assert Potion("p", "d", 1).unique is False
    assert Relic("r", "d", True).unique is True


def test_save_format():
    assert Potion("Health Potion", "Heals 15 HP", 15).save() == "Health Potion,Heals 15 HP,0"
    assert Relic("Crown", "Shiny", True).save() == "Crown,Shiny,1"


def test_potion_heals_its_own_amount():
    hero = Hero()
    Potion("Elixir", "Heals 7 HP", 7).use(hero)
    assert hero.healed == [7]
    assert "Hero healed for 7 HP." in hero.out.getvalue().splitlines()