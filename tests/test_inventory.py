"""Tests for inventory construction, commits and randomized occupancy."""

import sys
import os
import random
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.room import Room, RoomRef
from models.inventory import Floor, RoomInventory, expected_room_numbers
from engine.inventory import new_inventory, with_booked, randomized
from engine.errors import InvalidSelectionError, InventoryLayoutError


def ref(number):
    return RoomRef(number // 100, number)


def make_inventory(booked=()):
    inv = new_inventory()
    if booked:
        inv = with_booked(inv, [ref(n) for n in booked])
    return inv


def assert_layout(inv):
    numbers = [r.number for r in inv.rooms]
    assert len(numbers) == 97
    assert len(set(numbers)) == 97


class TestNewInventory:
    def test_layout(self):
        inv = new_inventory()
        assert inv.floor_numbers == list(range(1, 11))
        for n in range(1, 10):
            assert inv.floor(n).room_numbers == list(range(n * 100 + 1, n * 100 + 11))
        assert inv.floor(10).room_numbers == [1001, 1002, 1003, 1004, 1005, 1006, 1007]
        assert_layout(inv)

    def test_all_unbooked(self):
        inv = new_inventory()
        assert inv.total_available == 97
        assert inv.booked_room_numbers == []

    def test_deterministic(self):
        assert new_inventory() == new_inventory()

    def test_available_rooms_preserve_order(self):
        inv = make_inventory(booked=[102, 105])
        numbers = [r.number for r in inv.available_rooms(1)]
        assert numbers == [101, 103, 104, 106, 107, 108, 109, 110]
        assert inv.available_count(1) == 8

    def test_unknown_floor(self):
        with pytest.raises(KeyError):
            new_inventory().floor(11)


class TestLayoutInvariants:
    def test_missing_floor_rejected(self):
        floors = new_inventory().floors[:9]
        with pytest.raises(InventoryLayoutError):
            RoomInventory(floors=floors)

    def test_wrong_room_numbers_rejected(self):
        floors = list(new_inventory().floors)
        floors[9] = Floor(10, tuple(Room(n) for n in range(1001, 1011)))
        with pytest.raises(InventoryLayoutError):
            RoomInventory(floors=tuple(floors))

    def test_unordered_rooms_rejected(self):
        floors = list(new_inventory().floors)
        floors[0] = Floor(1, tuple(reversed(floors[0].rooms)))
        with pytest.raises(InventoryLayoutError):
            RoomInventory(floors=tuple(floors))

    def test_expected_room_numbers(self):
        assert expected_room_numbers(3) == list(range(301, 311))
        assert expected_room_numbers(10) == list(range(1001, 1008))


class TestWithBooked:
    def test_marks_rooms_booked(self):
        inv = make_inventory(booked=[101, 1007])
        assert inv.booked_room_numbers == [101, 1007]
        assert_layout(inv)

    def test_input_untouched(self):
        before = new_inventory()
        after = with_booked(before, [ref(101)])
        assert before.total_available == 97
        assert after.total_available == 96

    def test_already_booked_rejected(self):
        inv = make_inventory(booked=[101])
        with pytest.raises(InvalidSelectionError):
            with_booked(inv, [ref(101)])

    def test_nonexistent_room_rejected(self):
        with pytest.raises(InvalidSelectionError):
            with_booked(new_inventory(), [RoomRef(10, 1008)])

    def test_room_on_wrong_floor_rejected(self):
        with pytest.raises(InvalidSelectionError):
            with_booked(new_inventory(), [RoomRef(2, 101)])

    def test_nonexistent_floor_rejected(self):
        with pytest.raises(InvalidSelectionError):
            with_booked(new_inventory(), [RoomRef(11, 1101)])

    def test_duplicate_ref_rejected(self):
        with pytest.raises(InvalidSelectionError):
            with_booked(new_inventory(), [ref(101), ref(101)])

    def test_failed_commit_leaves_inventory_unchanged(self):
        inv = make_inventory(booked=[103])
        snapshot = make_inventory(booked=[103])
        with pytest.raises(InvalidSelectionError):
            with_booked(inv, [ref(101), ref(103)])
        assert inv == snapshot

    def test_empty_selection(self):
        inv = make_inventory(booked=[205])
        assert with_booked(inv, []) == inv


class TestRandomized:
    def test_layout_kept(self):
        assert_layout(randomized(0.5, random.Random(1)))

    def test_seeded_is_reproducible(self):
        assert randomized(0.3, random.Random(7)) == randomized(0.3, random.Random(7))

    def test_zero_and_one(self):
        assert randomized(0.0, random.Random(1)).total_available == 97
        assert randomized(1.0, random.Random(1)).total_available == 0

    def test_probability_out_of_range(self):
        with pytest.raises(ValueError):
            randomized(1.5)
        with pytest.raises(ValueError):
            randomized(-0.1)

    def test_default_rate_near_thirty_percent(self):
        rng = random.Random(2024)
        trials = 200
        booked = sum(len(randomized(rng=rng).booked_room_numbers) for _ in range(trials))
        rate = booked / (trials * 97)
        assert abs(rate - 0.3) < 0.02

    def test_rooms_independent(self):
        rng = random.Random(99)
        trials = 500
        per_room = {}
        both = 0
        for _ in range(trials):
            booked = set(randomized(0.3, rng).booked_room_numbers)
            for n in booked:
                per_room[n] = per_room.get(n, 0) + 1
            if 101 in booked and 102 in booked:
                both += 1
        # Every room is booked at roughly the same rate
        assert all(0.2 < per_room.get(n, 0) / trials < 0.4 for n in range(101, 111))
        # Neighbours are booked together about p*p of the time
        assert abs(both / trials - 0.09) < 0.05


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
