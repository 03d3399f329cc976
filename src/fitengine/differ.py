"""
Fit differ for comparing two parsed loadouts.

Works out what has to come off loadout A and what has to go on to turn it
into loadout B, one slot category at a time.
"""

import logging
from collections.abc import Mapping

from .models import SLOT_CATEGORIES, CategoryDelta, FitDiffReport, Loadout, SlotDelta

logger = logging.getLogger(__name__)


class TypeMismatchError(Exception):
    """
    Two loadouts of different ship types cannot be compared.

    Stored on the FitDiffReport rather than raised.
    """

    def __init__(self, ship_type_a: str, ship_type_b: str):
        super().__init__(
            f"Ship types differ: {ship_type_a!r} vs {ship_type_b!r}"
        )
        self.ship_type_a = ship_type_a
        self.ship_type_b = ship_type_b


def surplus(source: Mapping[str, int], target: Mapping[str, int]) -> list[SlotDelta]:
    """
    Find how much of each item in source exceeds the target.

    Args:
        source: Counts to compare from
        target: Counts to compare against

    Returns:
        Positive deltas in the source's order
    """
    deltas: list[SlotDelta] = []
    for name, count in source.items():
        amount = count - target.get(name, 0)
        if amount > 0:
            deltas.append(SlotDelta(name=name, amount=amount))
    return deltas


class FitDiffer:
    """
    Compares two loadouts of the same ship type.

    Removals are what A has more of than B; additions are what B has
    more of than A.
    """

    def compare(self, first: Loadout, second: Loadout) -> FitDiffReport:
        """
        Compare two loadouts.

        Args:
            first: Loadout being changed (A)
            second: Loadout to end up with (B)

        Returns:
            FitDiffReport with removals then additions, or with
            ``mismatch`` set when the ship types differ
        """
        if first.ship_type != second.ship_type:
            logger.debug("Not comparing %r with %r", first.ship_type, second.ship_type)
            return FitDiffReport(
                ship_type_a=first.ship_type,
                ship_type_b=second.ship_type,
                mismatch=TypeMismatchError(first.ship_type, second.ship_type),
            )

        removals = self._collect(first, second)
        additions = self._collect(second, first)

        report = FitDiffReport(
            ship_type_a=first.ship_type,
            ship_type_b=second.ship_type,
            removals=removals,
            additions=additions,
        )
        logger.debug(
            "Diff for %s: %d to remove, %d to add",
            first.ship_type,
            report.total_removed,
            report.total_added,
        )
        return report

    def _collect(self, source: Loadout, target: Loadout) -> list[CategoryDelta]:
        # Only categories with at least one delta are kept
        deltas: list[CategoryDelta] = []
        for category, label in SLOT_CATEGORIES:
            items = surplus(source.slots(category), target.slots(category))
            if items:
                deltas.append(CategoryDelta(category=category, label=label, items=items))
        return deltas
