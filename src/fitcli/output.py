"""
Terminal output formatter for CLI.

Handles all display logic - no business logic, just presentation.
"""

from collections.abc import Mapping

from fitengine.models import SLOT_CATEGORIES, CategoryDelta, FitDiffReport, Loadout

TYPE_MISMATCH_MESSAGE = "Ships are not of the same type, no comparison given."


def print_banner(version: str) -> None:
    """Print the program identification line."""
    print(f"Eve Compare Fits: Version {version}\n")


def print_slots(items: Mapping[str, int], label: str) -> None:
    """
    Print every item in one slot category.

    Args:
        items: Name -> count mapping
        label: Category label shown above the items
    """
    print("")
    print(label)

    for name, count in items.items():
        print(f"{count:8d}x {name}")


def print_loadout(path: str, loadout: Loadout) -> None:
    """
    Print a parsed fit with all six slot categories.

    Args:
        path: File the fit was read from
        loadout: Parsed fit
    """
    print("Ship File", path)
    print("Ship:", loadout.ship_name, "Type:", loadout.ship_type)

    for category, label in SLOT_CATEGORIES:
        print_slots(loadout.slots(category), label)

    print("")


def _print_deltas(deltas: list[CategoryDelta], heading: str) -> None:
    for delta in deltas:
        print(f"{heading} {delta.label}")
        for item in delta.items:
            print(f"{item.amount:10d}x {item.name}")


def print_diff_report(report: FitDiffReport) -> None:
    """
    Print removals followed by additions.

    Args:
        report: FitDiffReport from the differ
    """
    if not report.comparable:
        print(TYPE_MISMATCH_MESSAGE)
        return

    if not report.has_differences:
        print("No differences found.")
        return

    _print_deltas(report.removals, "Remove from")
    _print_deltas(report.additions, "Add To")
