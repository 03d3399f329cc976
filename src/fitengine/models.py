"""
Core data models for the fit comparison engine.

All models are pure data structures that can be reused by the CLI
and by any other front end built on the engine.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .differ import TypeMismatchError

# Slot categories in report order: (Loadout attribute, display label)
SLOT_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("low_slots", "Low Slots"),
    ("mid_slots", "Mid Slots"),
    ("high_slots", "High Slots"),
    ("rigs", "Rigs"),
    ("drones", "Drones"),
    ("cargo", "Cargo"),
)

CATEGORY_LABELS: dict[str, str] = dict(SLOT_CATEGORIES)


@dataclass(frozen=True)
class CargoItem:
    """
    A single drone or cargo line, e.g. ``Phased Plasma M x1600``.
    """

    name: str
    amount: int


def accumulate(items: Iterable[CargoItem]) -> dict[str, int]:
    """
    Fold items into a name -> count mapping.

    Repeated names add up instead of overwriting. Items with a zero
    amount are dropped so every count stays positive.

    Args:
        items: Parsed items in file order

    Returns:
        Mapping in order of first appearance
    """
    counts: dict[str, int] = {}
    for item in items:
        if item.amount <= 0:
            continue
        counts[item.name] = counts.get(item.name, 0) + item.amount
    return counts


def _frozen_slots(slots: Mapping[str, int], label: str) -> Mapping[str, int]:
    for name, count in slots.items():
        if not name or not isinstance(name, str):
            raise ValueError(f"{label}: item name must be a non-empty string: {name!r}")
        if not isinstance(count, int) or count <= 0:
            raise ValueError(f"{label}: count for {name!r} must be a positive integer: {count!r}")
    return MappingProxyType(dict(slots))


@dataclass(frozen=True)
class Loadout:
    """
    Parsed representation of a ship fit.

    Frozen, and each slot mapping is wrapped read-only, so a Loadout
    cannot change once the parser has built it.
    """

    ship_type: str
    ship_name: str
    low_slots: Mapping[str, int] = field(default_factory=dict)
    mid_slots: Mapping[str, int] = field(default_factory=dict)
    high_slots: Mapping[str, int] = field(default_factory=dict)
    rigs: Mapping[str, int] = field(default_factory=dict)
    drones: Mapping[str, int] = field(default_factory=dict)
    cargo: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        """Validate slot contents and freeze the mappings."""
        if not self.ship_type or not isinstance(self.ship_type, str):
            raise ValueError(f"Ship type must be a non-empty string: {self.ship_type!r}")

        for category, label in SLOT_CATEGORIES:
            frozen = _frozen_slots(getattr(self, category), label)
            object.__setattr__(self, category, frozen)

    def slots(self, category: str) -> Mapping[str, int]:
        """
        Get the mapping for a slot category.

        Args:
            category: One of the attribute names in SLOT_CATEGORIES

        Returns:
            Read-only name -> count mapping
        """
        if category not in CATEGORY_LABELS:
            raise KeyError(f"Unknown slot category: {category}")
        return getattr(self, category)

    @property
    def item_count(self) -> int:
        """Total number of items across all categories."""
        return sum(sum(self.slots(category).values()) for category, _ in SLOT_CATEGORIES)


@dataclass(frozen=True)
class SlotDelta:
    """One line of a diff: how many of an item to remove or add."""

    name: str
    amount: int


@dataclass
class CategoryDelta:
    """
    Removals or additions for a single slot category.
    """

    category: str
    label: str
    items: list[SlotDelta] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Sum of all amounts in this category."""
        return sum(item.amount for item in self.items)


@dataclass
class FitDiffReport:
    """
    Everything needed to turn loadout A into loadout B.

    Removals cover what A has more of, additions what B has more of.
    Categories without changes are left out of both lists.
    """

    ship_type_a: str
    ship_type_b: str
    removals: list[CategoryDelta] = field(default_factory=list)
    additions: list[CategoryDelta] = field(default_factory=list)
    mismatch: "TypeMismatchError | None" = None

    @property
    def comparable(self) -> bool:
        """Check if both loadouts were of the same ship type."""
        return self.mismatch is None

    @property
    def has_differences(self) -> bool:
        """Check if any removal or addition was found."""
        return len(self.removals) > 0 or len(self.additions) > 0

    @property
    def total_removed(self) -> int:
        """Number of items to remove across all categories."""
        return sum(delta.total for delta in self.removals)

    @property
    def total_added(self) -> int:
        """Number of items to add across all categories."""
        return sum(delta.total for delta in self.additions)
