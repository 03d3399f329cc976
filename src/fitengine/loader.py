"""
Loader for reading fit files from disk.

Keeps file handling out of the parser: the file is read inside a single
``with`` block and closed before any parsing happens.
"""

import logging
from pathlib import Path

from .models import Loadout
from .parser import FitParseError, FitParser, split_lines

logger = logging.getLogger(__name__)


class FileOpenError(Exception):
    """Exception raised when a fit file cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to open {path}: {reason}")
        self.path = path
        self.reason = reason


class FitLoader:
    """
    Reads fit files and hands their lines to a FitParser.
    """

    def __init__(self, parser: FitParser | None = None, encoding: str = "utf-8"):
        """
        Initialize the loader.

        Args:
            parser: Parser to use (default: a new FitParser)
            encoding: Text encoding of fit files (default: utf-8)
        """
        self.parser = parser or FitParser()
        self.encoding = encoding

    def read_lines(self, path: str) -> list[str]:
        """
        Read all lines of a file.

        Args:
            path: Path to the fit file

        Returns:
            Lines with line endings removed

        Raises:
            FileOpenError: If the file cannot be opened or decoded
        """
        file_path = Path(path)

        try:
            with open(file_path, "r", encoding=self.encoding, newline="") as fit_file:
                lines = split_lines(fit_file.read())
        except OSError as e:
            raise FileOpenError(str(path), e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise FileOpenError(str(path), f"not valid {self.encoding} text") from e

        logger.debug("Read %d lines from %s", len(lines), file_path)
        return lines

    def load(self, path: str) -> Loadout:
        """
        Read and parse a fit file.

        Args:
            path: Path to the fit file

        Returns:
            Parsed Loadout

        Raises:
            FileOpenError: If the file cannot be read
            FitParseError: If the file is not a valid fit
        """
        lines = self.read_lines(path)

        try:
            loadout = self.parser.parse(lines)
        except FitParseError as e:
            e.path = str(path)
            raise

        logger.debug(
            "Parsed %s: %s (%s) with %d items",
            path,
            loadout.ship_name,
            loadout.ship_type,
            loadout.item_count,
        )
        return loadout
