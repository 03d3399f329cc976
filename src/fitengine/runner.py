"""
Runner for the two ways the tool is used: inspecting fits and comparing them.
"""

import logging

from .differ import FitDiffer
from .loader import FitLoader
from .models import FitDiffReport, Loadout

logger = logging.getLogger(__name__)


class FitRunner:
    """
    Orchestrates loading, parsing and comparing fit files.

    Errors are not caught here; the caller decides how to report them.
    """

    def __init__(self, loader: FitLoader | None = None, differ: FitDiffer | None = None):
        """
        Initialize the runner.

        Args:
            loader: Loader for fit files (default: a new FitLoader)
            differ: Differ for loadouts (default: a new FitDiffer)
        """
        self.loader = loader or FitLoader()
        self.differ = differ or FitDiffer()

    def inspect(self, paths: list[str]) -> list[tuple[str, Loadout]]:
        """
        Parse each fit file on its own.

        Args:
            paths: Fit files, in the order they should be reported

        Returns:
            List of (path, Loadout) pairs
        """
        results: list[tuple[str, Loadout]] = []
        for path in paths:
            logger.debug("Inspecting %s", path)
            results.append((path, self.loader.load(path)))
        return results

    def compare(self, first_path: str, second_path: str) -> FitDiffReport:
        """
        Load two fit files and compare them.

        Args:
            first_path: Fit to change from
            second_path: Fit to change to

        Returns:
            FitDiffReport for the two fits
        """
        first = self.loader.load(first_path)
        second = self.loader.load(second_path)
        logger.debug("Comparing %s with %s", first_path, second_path)
        return self.differ.compare(first, second)
