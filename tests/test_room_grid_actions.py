"""Tests for the Room Grid tab action handlers, with session storage stubbed out."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from components.sidebar import SidebarState
from data.sample_data import generate_demo_inventory
from engine.inventory import new_inventory
from tabs import tab_room_grid


class FakeSession:
    def __init__(self, inventory=None, rule_config=None):
        self.inventory = inventory or new_inventory()
        self.rule_config = rule_config or {}
        self.last_outcome = None
        self.records = []

    def add_booking_record(self, action, ok, message, requested_count=None,
                           room_numbers=None, tier="none"):
        self.records.append({
            "action": action, "ok": ok, "message": message,
            "requested_count": requested_count, "room_numbers": room_numbers or [],
        })


def make_session(monkeypatch, **kwargs):
    session = FakeSession(**kwargs)
    monkeypatch.setattr(tab_room_grid, "get_inventory", lambda: session.inventory)
    monkeypatch.setattr(tab_room_grid, "set_inventory",
                        lambda inv: setattr(session, "inventory", inv))
    monkeypatch.setattr(tab_room_grid, "set_last_outcome",
                        lambda o: setattr(session, "last_outcome", o))
    monkeypatch.setattr(tab_room_grid, "get_rule_config", lambda: session.rule_config)
    monkeypatch.setattr(tab_room_grid, "add_booking_record", session.add_booking_record)
    return session


class TestHandleBooking:
    @pytest.mark.parametrize("raw", [0, 6])
    def test_rejected_count_is_recorded(self, monkeypatch, raw):
        session = make_session(monkeypatch)
        tab_room_grid._handle_booking(raw)
        assert session.records[-1]["ok"] is False
        assert session.records[-1]["requested_count"] == raw
        assert session.inventory == new_inventory()

    def test_unparseable_count_recorded_without_number(self, monkeypatch):
        session = make_session(monkeypatch)
        tab_room_grid._handle_booking("abc")
        assert session.records[-1]["requested_count"] is None

    def test_valid_booking_commits(self, monkeypatch):
        session = make_session(monkeypatch)
        tab_room_grid._handle_booking(2)
        assert session.records[-1]["requested_count"] == 2
        assert session.records[-1]["room_numbers"] == [101, 102]
        assert session.inventory.booked_room_numbers == [101, 102]


class TestHandleRandomize:
    def test_seeded_uses_demo_generator(self, monkeypatch):
        session = make_session(monkeypatch)
        tab_room_grid._handle_randomize(SidebarState(occupancy_probability=0.5, seed=7))
        assert session.inventory == generate_demo_inventory(7, 0.5)
        assert session.records[-1]["action"] == "randomize"

    def test_unseeded_reads_rule_config(self, monkeypatch):
        session = make_session(monkeypatch, rule_config={"occupancy_probability": 1.0})
        tab_room_grid._handle_randomize(SidebarState(occupancy_probability=1.0, seed=None))
        assert session.inventory.total_available == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
