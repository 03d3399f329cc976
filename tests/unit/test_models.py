"""
Unit tests for core data models.
"""

import dataclasses

import pytest

from fitengine.differ import TypeMismatchError
from fitengine.models import (
    SLOT_CATEGORIES,
    CargoItem,
    CategoryDelta,
    FitDiffReport,
    Loadout,
    SlotDelta,
    accumulate,
)


class TestAccumulate:
    """Tests for the additive fold over parsed items."""

    def test_repeated_names_add_up(self):
        """Test that repeated names accumulate rather than overwrite."""
        counts = accumulate([CargoItem("Hobgoblin I", 5), CargoItem("Hobgoblin I", 3)])
        assert counts == {"Hobgoblin I": 8}

    def test_first_appearance_order(self):
        """Test that names keep the order they first appeared in."""
        counts = accumulate([CargoItem("B", 1), CargoItem("A", 1), CargoItem("B", 1)])
        assert list(counts) == ["B", "A"]

    def test_zero_amount_skipped(self):
        """Test that zero amounts never create an entry."""
        assert accumulate([CargoItem("Paste", 0)]) == {}

    def test_empty(self):
        """Test that no items gives an empty mapping."""
        assert accumulate([]) == {}


class TestLoadout:
    """Tests for Loadout model."""

    def test_defaults_are_empty(self):
        """Test that all slot categories default to empty."""
        loadout = Loadout(ship_type="Raven", ship_name="Mine")
        for category, _ in SLOT_CATEGORIES:
            assert loadout.slots(category) == {}

    def test_frozen(self):
        """Test that fields cannot be reassigned."""
        loadout = Loadout(ship_type="Raven", ship_name="Mine")
        with pytest.raises(dataclasses.FrozenInstanceError):
            loadout.ship_name = "Other"

    def test_slots_are_read_only(self):
        """Test that slot mappings cannot be mutated."""
        loadout = Loadout(ship_type="Raven", ship_name="Mine", cargo={"Ammo": 100})
        with pytest.raises(TypeError):
            loadout.cargo["Ammo"] = 5

    def test_slots_copied_from_input(self):
        """Test that changing the source dict does not change the loadout."""
        cargo = {"Ammo": 100}
        loadout = Loadout(ship_type="Raven", ship_name="Mine", cargo=cargo)
        cargo["Ammo"] = 1
        assert loadout.cargo["Ammo"] == 100

    def test_rejects_non_positive_count(self):
        """Test that zero and negative counts are rejected."""
        with pytest.raises(ValueError, match="positive integer"):
            Loadout(ship_type="Raven", ship_name="Mine", drones={"Hobgoblin I": 0})
        with pytest.raises(ValueError, match="positive integer"):
            Loadout(ship_type="Raven", ship_name="Mine", drones={"Hobgoblin I": -2})

    def test_rejects_empty_item_name(self):
        """Test that empty item names are rejected."""
        with pytest.raises(ValueError, match="non-empty string"):
            Loadout(ship_type="Raven", ship_name="Mine", low_slots={"": 1})

    def test_rejects_empty_ship_type(self):
        """Test that a ship type is required."""
        with pytest.raises(ValueError, match="Ship type"):
            Loadout(ship_type="", ship_name="Mine")

    def test_unknown_category(self):
        """Test that unknown categories raise KeyError."""
        loadout = Loadout(ship_type="Raven", ship_name="Mine")
        with pytest.raises(KeyError):
            loadout.slots("subsystems")

    def test_item_count(self):
        """Test total item count across categories."""
        loadout = Loadout(
            ship_type="Raven",
            ship_name="Mine",
            low_slots={"A": 2},
            high_slots={"B": 6},
            drones={"C": 5},
        )
        assert loadout.item_count == 13

    def test_equality(self):
        """Test that loadouts with equal contents are equal."""
        first = Loadout(ship_type="Raven", ship_name="Mine", rigs={"R": 1})
        second = Loadout(ship_type="Raven", ship_name="Mine", rigs={"R": 1})
        assert first == second


class TestFitDiffReport:
    """Tests for FitDiffReport model."""

    def test_empty_report(self):
        """Test an empty but comparable report."""
        report = FitDiffReport(ship_type_a="Raven", ship_type_b="Raven")
        assert report.comparable is True
        assert report.has_differences is False
        assert report.total_removed == 0
        assert report.total_added == 0

    def test_totals(self):
        """Test that totals sum all categories."""
        report = FitDiffReport(
            ship_type_a="Raven",
            ship_type_b="Raven",
            removals=[
                CategoryDelta("low_slots", "Low Slots", [SlotDelta("A", 1), SlotDelta("B", 2)]),
                CategoryDelta("cargo", "Cargo", [SlotDelta("Ammo", 100)]),
            ],
            additions=[CategoryDelta("drones", "Drones", [SlotDelta("Hobgoblin I", 3)])],
        )
        assert report.has_differences is True
        assert report.total_removed == 103
        assert report.total_added == 3

    def test_mismatch_not_comparable(self):
        """Test that a stored mismatch makes the report not comparable."""
        report = FitDiffReport(
            ship_type_a="Raven",
            ship_type_b="Scorpion",
            mismatch=TypeMismatchError("Raven", "Scorpion"),
        )
        assert report.comparable is False
        assert "Scorpion" in str(report.mismatch)
