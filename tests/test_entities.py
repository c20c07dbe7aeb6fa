import pytest

from castlequest.entities import Item, Monster, Princess, Treasure, Weapon


def test_treasure_worth():
    assert Treasure("GOLDEN EGG", 500000).worth() == 500000
    assert Treasure("PROOF", 1000000).worth() == 1000000


def test_weapon_is_worth_nothing():
    assert Weapon("SHIELD").worth() == 0


def test_item_is_abstract():
    with pytest.raises(TypeError):
        Item("THING")


def test_items_compare_by_identity():
    first = Weapon("DAGGER")
    second = Weapon("DAGGER")
    assert first == first
    assert [first].count(second) == 0


def test_monster_defaults():
    shield = Weapon("SHIELD")
    medusa = Monster("MEDUSA", shield)
    assert medusa.alive is True
    assert medusa.killing_weapon is shield
    assert medusa.name == "MEDUSA"


def test_princess_starts_alive():
    princess = Princess()
    assert princess.alive is True
    princess.alive = False
    assert princess.alive is False