"""
Eve fit comparison engine.

Parses EFT-style fit exports and compares two loadouts. Designed to be
reusable by the CLI and by any other front end.
"""

__version__ = "0.1.0"

# Engine components
from .differ import FitDiffer, TypeMismatchError
from .loader import FileOpenError, FitLoader
from .models import (
    SLOT_CATEGORIES,
    CargoItem,
    CategoryDelta,
    FitDiffReport,
    Loadout,
    SlotDelta,
)
from .parser import (
    FitParseError,
    FitParser,
    HeaderFormatError,
    SeparatorError,
    UnexpectedEndOfInput,
)
from .runner import FitRunner

__all__ = [
    # Models
    "SLOT_CATEGORIES",
    "CargoItem",
    "Loadout",
    "SlotDelta",
    "CategoryDelta",
    "FitDiffReport",
    # Components
    "FitParser",
    "FitDiffer",
    "FitLoader",
    # Errors
    "FitParseError",
    "HeaderFormatError",
    "SeparatorError",
    "UnexpectedEndOfInput",
    "FileOpenError",
    "TypeMismatchError",
    # Main entry point
    "FitRunner",
]
