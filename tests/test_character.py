import io

import pytest

from valorquest.character import BattleRecord, Buff, Character, SaveFormatError
from valorquest.console import Console
from valorquest.enemies import Wolves
from valorquest.items import BuffItem, Potion


class Hero(Character):
    def use_skill(self):
        self.mana -= 1

    def level_up(self):
        self.level += 1

    def attack_enemy(self, enemy):
        enemy.take_damage(self.attack)


def make_hero(name="Ayla", level=1, health=60, agility=8, attack=10, defense=3, gold=50, mana=30):
    out = io.StringIO()
    console = Console(io.StringIO(), out)
    hero = Hero(name, level, health, agility, attack, defense, gold, mana, console)
    return hero, out


def test_take_damage_never_below_zero():
    hero, _ = make_hero(health=20)
    hero.take_damage(5)
    assert hero.health == 15
    hero.take_damage(1000)
    assert hero.health == 0


@pytest.mark.parametrize("start", [0, 150])
def test_heal_resets_fallen_or_overfull_to_hundred(start):
    hero, _ = make_hero(health=start)
    hero.heal(5)
    assert hero.health == 100


def test_heal_adds_amount_when_in_range():
    hero, _ = make_hero(health=40)
    hero.heal(15)
    assert hero.health == 40 + 15


def test_player_count_counts_creations_and_copies():
    before = Character.player_count()
    hero, _ = make_hero()
    hero.copy()
    assert Character.player_count() == before + 2


def test_copy_is_independent():
    hero, _ = make_hero()
    hero.add_item(Potion("Health Potion", "Heals 15 HP", 15))
    hero.apply_buff("Shield", 0, 2, 0, 3)
    twin = hero.copy()
    twin.add_item(Potion("Elixir", "Heals", 15))
    twin.buffs[0].turns_left = 1
    assert len(hero.inventory) == 1
    assert len(twin.inventory) == 2
    assert hero.buffs[0].turns_left == 3
    assert isinstance(twin, Hero)


def test_buy_item_with_enough_gold():
    hero, out = make_hero(gold=50)
    item = BuffItem("Attack Buff", "Boosts attack by 5 for 2 turns", 5, 0, 2)
    assert hero.buy_item(item, 50) is True
    assert hero.gold == 50 - 50
    assert [held.name for held in hero.inventory] == ["Attack Buff"]
    assert "Purchased Attack Buff for 50 gold." in out.getvalue()


def test_buy_item_without_enough_gold():
    hero, out = make_hero(gold=10)
    item = Potion("Health Potion", "Heals 15 HP", 15)
    assert hero.buy_item(item, 50) is False
    assert hero.gold == 10
    assert len(hero.inventory) == 0
    assert "Not enough gold!" in out.getvalue()


def test_apply_buff_raises_stats_and_respects_limit():
    hero, out = make_hero(attack=10, defense=3, agility=8)
    for number in range(5):
        hero.apply_buff(f"B{number}", 1, 2, 3, 2)
    assert len(hero.buffs) == 5
    assert hero.attack == 10 + 5 * 1
    hero.apply_buff("Extra", 1, 1, 1, 2)
    assert len(hero.buffs) == 5
    assert hero.attack == 10 + 5 * 1
    assert "Buff limit reached!" in out.getvalue()


def test_update_buffs_drops_expired_and_keeps_stats():
    hero, _ = make_hero(attack=10)
    hero.apply_buff("Short", 4, 0, 0, 1)
    hero.apply_buff("Long", 1, 0, 0, 3)
    hero.skill_cooldown = 2
    hero.update_buffs()
    assert [buff.name for buff in hero.buffs] == ["Long"]
    assert hero.buffs[0].turns_left == 3 - 1
    assert hero.attack == 10 + 4 + 1
    assert hero.skill_cooldown == 2 - 1


def test_battle_record_victory_and_level_up():
    hero, _ = make_hero(level=1)
    hero.add_battle_record("Forest Wolf", "Victory", 60)
    assert hero.enemies_defeated == 1
    assert hero.level == 1
    hero.add_battle_record("Cave Zombie", "Defeat", 60)
    assert hero.enemies_defeated == 1
    assert hero.level == 2
    assert hero.experience == 60 + 60 - 100
    assert hero.battle_records[0] == BattleRecord("Forest Wolf", "Victory", 60)


def test_battle_record_limit():
    hero, out = make_hero()
    for _ in range(100):
        hero.add_battle_record("Wolf", "Defeat", 0)
    hero.add_battle_record("Wolf", "Victory", 0)
    assert len(hero.battle_records) == 100
    assert hero.enemies_defeated == 0
    assert "Battle record limit reached!" in out.getvalue()


def test_use_item_invalid_index_reports_error():
    hero, out = make_hero()
    hero.use_item(3)
    assert "Invalid item index!" in out.getvalue()


def test_remove_item_invalid_index_reports_error():
    hero, out = make_hero()
    hero.remove_item(-1)
    assert "Invalid index!" in out.getvalue()


def test_use_potion_consumes_it():
    hero, _ = make_hero(health=40)
    hero.add_item(Potion("Health Potion", "Heals 15 HP", 15))
    hero.use_item(0)
    assert hero.health == 40 + 15
    assert len(hero.inventory) == 0


def test_attack_enemy_through_subclass():
    hero, _ = make_hero(attack=10)
    wolf = Wolves("Forest Wolf", 25, 10, 7, 3, hero.console)
    hero.attack_enemy(wolf)
    assert wolf.health == 25 - 10


def test_save_layout():
    hero, _ = make_hero()
    out = io.StringIO()
    hero.save(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "[Character]"
    assert lines[1] == "name = Ayla"
    assert lines[-1] == "checksum=12345"
    assert "[Inventory]" in lines
    assert "[BattleHistory]" in lines


def test_save_load_round_trip_leaves_checksum():
    hero, _ = make_hero(name="Ayla", level=2, health=44, gold=70, mana=12)
    hero.add_item(Potion("Health Potion", "Heals 15 HP", 15))
    hero.add_item(BuffItem("Attack Buff", "Boosts attack", 5, 0, 2))
    hero.apply_buff("Shield", 0, 2, 0, 2)
    hero.add_battle_record("Forest Wolf", "Victory", 10)
    out = io.StringIO()
    hero.save(out)

    other, _ = make_hero(name="Other", level=9, health=1, gold=0, mana=0)
    lines = iter(out.getvalue().splitlines(keepends=True))
    other.load(lines)

    assert other.name == hero.name
    assert other.level == hero.level
    assert other.health == hero.health
    assert other.attack == hero.attack
    assert other.defense == hero.defense
    assert other.gold == hero.gold
    assert other.mana == hero.mana
    assert other.experience == hero.experience
    assert other.enemies_defeated == hero.enemies_defeated
    assert other.buffs == [Buff("Shield", 0, 2, 0, 2)]
    assert other.battle_records == hero.battle_records
    assert [item.name for item in other.inventory] == ["Health Potion", "Attack Buff"]
    assert isinstance(list(other.inventory)[1], BuffItem)
    assert next(lines).rstrip("\n") == "checksum=12345"


def test_load_rejects_line_without_equals():
    hero, out = make_hero()
    with pytest.raises(SaveFormatError):
        hero.load(["[Character]", "garbage line", "[Inventory]"])
    assert "Error loading character:" in out.getvalue()


def test_load_rejects_bad_battle_record():
    hero, _ = make_hero()
    data = [
        "[Character]",
        "gold=5",
        "[Inventory]",
        "count = 0",
        "[BattleHistory]",
        "count = 1",
        "battle0=Wolf",
    ]
    with pytest.raises(SaveFormatError):
        hero.load(data)


def test_load_requires_inventory_section():
    hero, _ = make_hero()
    with pytest.raises(SaveFormatError):
        hero.load(["[Character]", "gold=5"])


def test_final_report_lists_totals():
    hero, out = make_hero(name="Ayla", gold=50)
    hero.show_final_report()
    text = out.getvalue()
    assert "Final Score Report:" in text
    assert "Name: Ayla" in text
    assert "Gold: 50" in text