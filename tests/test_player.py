"""Tests for Player and Inventory."""

import pytest
from pydantic import ValidationError

from outbreak.models.items import Inventory, ItemId
from outbreak.models.player import Player


class TestPlayerStats:
    """Test suite for health, hunger and ammo bookkeeping."""

    def test_starting_stats(self):
        """Test a fresh player's stats."""
        player = Player()
        assert player.health == 100
        assert player.hunger == 0
        assert player.ammo == 6
        assert player.weapon == ItemId.KNIFE
        assert player.items == ()

    def test_constructor_clamps(self):
        """Test out-of-range starting values are clamped."""
        player = Player(health=150, hunger=-5)
        assert player.health == 100
        assert player.hunger == 0

    def test_damage_never_below_zero(self):
        """Test damage larger than health leaves zero."""
        player = Player(health=10)
        player.take_damage(25)
        assert player.health == 0
        assert not player.is_alive()

    def test_heal_capped(self):
        """Test healing stops at maximum health."""
        player = Player(health=95)
        player.heal(30)
        assert player.health == 100

    def test_hunger_bounds(self):
        """Test hunger is clamped to [0, 100]."""
        player = Player(hunger=94)
        player.increase_hunger(12)
        assert player.hunger == 100
        assert player.is_starving()
        player.decrease_hunger(130)
        assert player.hunger == 0

    def test_negative_amount_rejected(self):
        """Test negative amounts raise ValueError."""
        player = Player()
        with pytest.raises(ValueError):
            player.take_damage(-1)
        with pytest.raises(ValueError):
            player.add_ammo(-2)

    def test_negative_starting_ammo_rejected(self):
        """Test starting ammo is validated."""
        with pytest.raises(ValidationError):
            Player(ammo=-1)

    def test_assignment_is_clamped(self):
        """Test direct assignment goes through the same clamping."""
        player = Player()
        player.health = 250
        player.hunger = -10
        assert player.health == 100
        assert player.hunger == 0

    def test_use_ammo_all_or_nothing(self):
        """Test ammo is only spent when enough is available."""
        player = Player(ammo=1)
        assert player.use_ammo(2) is False
        assert player.ammo == 1
        assert player.use_ammo(1) is True
        assert player.ammo == 0


class TestPlayerEquipment:
    """Test suite for inventory and equipped weapon."""

    def test_knife_always_equippable(self):
        """Test the knife can be equipped without owning one."""
        player = Player()
        assert player.set_weapon(ItemId.KNIFE) is True
        assert player.weapon == ItemId.KNIFE

    def test_cannot_equip_unowned(self):
        """Test equipping an unowned item leaves the weapon unchanged."""
        player = Player()
        assert player.set_weapon(ItemId.SHOTGUN) is False
        assert player.weapon == ItemId.KNIFE

    def test_equip_owned(self):
        """Test equipping an owned item."""
        player = Player()
        player.add_item(ItemId.PISTOL)
        assert player.set_weapon(ItemId.PISTOL) is True
        assert player.weapon == ItemId.PISTOL

    def test_remove_first_match_only(self):
        """Test only the first copy of a duplicate is removed."""
        player = Player()
        for item in (ItemId.MEDKIT, ItemId.PISTOL, ItemId.MEDKIT):
            player.add_item(item)
        assert player.remove_item(ItemId.MEDKIT) is True
        assert player.items == (ItemId.PISTOL, ItemId.MEDKIT)

    def test_remove_missing_item(self):
        """Test removing an unowned item reports False."""
        player = Player()
        assert player.remove_item(ItemId.MEDKIT) is False

    def test_removing_last_equipped_copy_falls_back_to_knife(self):
        """Test the knife is equipped once the equipped item is gone."""
        player = Player()
        player.add_item(ItemId.MOLOTOV)
        player.add_item(ItemId.MOLOTOV)
        player.set_weapon(ItemId.MOLOTOV)

        player.remove_item(ItemId.MOLOTOV)
        assert player.weapon == ItemId.MOLOTOV
        player.remove_item(ItemId.MOLOTOV)
        assert player.weapon == ItemId.KNIFE

    def test_item_at_out_of_range(self):
        """Test slot lookups outside the inventory return None."""
        player = Player()
        player.add_item(ItemId.MACHETE)
        assert player.item_at(0) == ItemId.MACHETE
        assert player.item_at(1) is None
        assert player.item_at(-1) is None


class TestInventory:
    """Test suite for Inventory."""

    def test_insertion_order_and_duplicates(self):
        """Test items keep insertion order and duplicates are counted."""
        inventory = Inventory()
        inventory.add(ItemId.CANNED_FOOD)
        inventory.add(ItemId.PISTOL)
        inventory.add(ItemId.CANNED_FOOD)
        assert inventory.items == (ItemId.CANNED_FOOD, ItemId.PISTOL, ItemId.CANNED_FOOD)
        assert inventory.count(ItemId.CANNED_FOOD) == 2
        assert len(inventory) == 3

    def test_items_view_is_immutable(self):
        """Test callers get a tuple, not the live list."""
        inventory = Inventory([ItemId.MEDKIT])
        assert isinstance(inventory.items, tuple)
