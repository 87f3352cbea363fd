"""Tests for booking request validation and the DataFrame views."""

import sys
import os
import random
from datetime import datetime
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.audit import BookingRecord
from data.validator import validate_room_count
from data.sample_data import generate_demo_inventory, inventory_to_df, booking_log_to_df
from engine.inventory import randomized
from config.defaults import INVALID_REQUEST_MESSAGE


class TestValidateRoomCount:
    @pytest.mark.parametrize("raw, expected", [(1, 1), (5, 5), ("3", 3), (2.0, 2)])
    def test_valid(self, raw, expected):
        result = validate_room_count(raw)
        assert result.is_valid
        assert result.value == expected

    @pytest.mark.parametrize("raw", [0, 6, "10", -2])
    def test_out_of_range(self, raw):
        result = validate_room_count(raw)
        assert not result.is_valid
        assert result.errors == [INVALID_REQUEST_MESSAGE]
        assert result.value is None
        assert result.requested == int(raw)

    @pytest.mark.parametrize("raw", [None, "", "abc", 2.5])
    def test_unparseable(self, raw):
        result = validate_room_count(raw)
        assert not result.is_valid
        assert result.value is None
        assert result.errors


class TestSampleData:
    def test_demo_inventory_reproducible(self):
        assert generate_demo_inventory(seed=5) == generate_demo_inventory(seed=5)

    def test_demo_inventory_matches_seeded_randomize(self):
        assert generate_demo_inventory(7, 0.5) == randomized(0.5, random.Random(7))

    def test_inventory_df(self):
        df = inventory_to_df(generate_demo_inventory(probability=0.0))
        assert len(df) == 97
        assert (df["Status"] == "Available").all()
        assert df["Room"].is_unique
        assert df[df["Floor"] == 10]["Position"].max() == 7

    def test_booking_log_df_newest_first(self):
        records = [
            BookingRecord(datetime(2024, 1, 1, 9, 0, 0), "book", True, "Booked room(s): 101",
                          requested_count=1, room_numbers=[101], tier="same_floor"),
            BookingRecord(datetime(2024, 1, 1, 9, 5, 0), "reset", True, "All bookings cleared"),
        ]
        df = booking_log_to_df(records)
        assert list(df["Action"]) == ["reset", "book"]
        assert df.iloc[1]["Rooms"] == "101"

    def test_booking_log_df_keeps_rejected_count(self):
        record = BookingRecord(datetime(2024, 1, 1, 9, 0, 0), "book", False, INVALID_REQUEST_MESSAGE,
                               requested_count=6)
        df = booking_log_to_df([record])
        assert df.iloc[0]["Requested"] == 6
        assert df.iloc[0]["Result"] == "Failed"

    def test_empty_booking_log(self):
        df = booking_log_to_df([])
        assert df.empty
        assert "Result" in df.columns


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
