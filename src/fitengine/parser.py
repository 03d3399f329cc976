"""
Fit parser for EFT-style text exports.

A fit file is read as a fixed sequence of stages (header, equipped slots,
separator, drones, cargo), each consuming lines from a shared cursor.
"""

import logging
import re
from collections.abc import Callable, Iterable
from enum import Enum

from .models import CargoItem, Loadout, accumulate

logger = logging.getLogger(__name__)

HEADER_PATTERN = re.compile(r"\[([^,]+), ([^\]]+)\]")
CARGO_ITEM_PATTERN = re.compile(r"^(.+) x([0-9]+)$")


class ParseStage(str, Enum):
    """Stages of a fit file, in the order they appear."""

    HEADER = "Header"
    LOW_SLOTS = "Low Slots"
    MID_SLOTS = "Mid Slots"
    HIGH_SLOTS = "High Slots"
    RIGS = "Rigs"
    SEPARATOR = "Separator"
    DRONES = "Drones"
    CARGO = "Cargo"


class FitParseError(Exception):
    """Base exception for fit parse errors."""

    def __init__(self, message: str, stage: ParseStage, line_number: int | None = None):
        super().__init__(message)
        self.stage = stage
        self.line_number = line_number
        self.path: str | None = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is not None:
            message = f"{message} (line {self.line_number})"
        if self.path:
            message = f"{self.path}: {message}"
        return message


class HeaderFormatError(FitParseError):
    """Exception raised when the [Type, Name] header cannot be parsed."""

    def __init__(self, line: str, line_number: int):
        super().__init__(
            f"Could not parse ship type and name from header: {line!r}",
            ParseStage.HEADER,
            line_number,
        )
        self.line = line


class SeparatorError(FitParseError):
    """Exception raised when the double blank line before drones is missing."""

    def __init__(self, line_number: int | None = None):
        super().__init__(
            "Expected two blank lines before the drone section",
            ParseStage.SEPARATOR,
            line_number,
        )


class UnexpectedEndOfInput(FitParseError):
    """Exception raised when the input ends inside a section."""

    def __init__(self, section: ParseStage):
        super().__init__(f"Unexpected end of input while reading {section.value}", section)
        self.section = section.value


def split_lines(text: str) -> list[str]:
    """
    Split text on ``\\n`` only, dropping a trailing ``\\r`` from each line.

    Other characters that ``str.splitlines`` treats as breaks (form feed,
    ``\\u2028`` and so on) stay part of the line.

    Args:
        text: Whole fit file contents

    Returns:
        Lines without line endings; a final newline does not add an empty line
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_blank(line: str) -> bool:
    """Check if a line terminates a section. Only an empty line does."""
    return line == ""


def parse_cargo_item(line: str) -> CargoItem:
    """
    Parse a drone or cargo line.

    ``Phased Plasma M x1600`` becomes ("Phased Plasma M", 1600). A line
    without a valid ``x<digits>`` suffix is a single item named by the
    whole line.

    Args:
        line: Line text without its line ending

    Returns:
        CargoItem with name and amount
    """
    match = CARGO_ITEM_PATTERN.match(line)
    if match is None:
        return CargoItem(name=line, amount=1)

    try:
        amount = int(match.group(2))
    except ValueError:
        # Suffix too long for int(); same as no suffix
        return CargoItem(name=line, amount=1)
    return CargoItem(name=match.group(1), amount=amount)


def parse_header(lines: list[str], cursor: int) -> tuple[tuple[str, str], int]:
    """
    Read the ``[Ship Type, Ship Name]`` header line.

    A present but malformed line raises HeaderFormatError; empty input
    raises UnexpectedEndOfInput for the Header section, like every other
    section that runs out of lines.

    Args:
        lines: Buffered input lines
        cursor: Index of the header line

    Returns:
        ((ship_type, ship_name), next cursor)
    """
    if cursor >= len(lines):
        raise UnexpectedEndOfInput(ParseStage.HEADER)

    line = lines[cursor]
    matches = HEADER_PATTERN.findall(line)
    if len(matches) != 1:
        raise HeaderFormatError(line, cursor + 1)

    ship_type, ship_name = matches[0]
    return (ship_type, ship_name), cursor + 1


def _read_section(
    lines: list[str],
    cursor: int,
    stage: ParseStage,
    to_item: Callable[[str], CargoItem],
    allow_eof: bool = False,
) -> tuple[dict[str, int], int]:
    """
    Read item lines up to and including the terminating blank line.

    Args:
        lines: Buffered input lines
        cursor: Index of the first line of the section
        stage: Section being read, used in errors
        to_item: Converts one line into a CargoItem
        allow_eof: Whether end of input may terminate the section

    Returns:
        (name -> count mapping, cursor after the blank line)
    """
    items: list[CargoItem] = []

    while True:
        if cursor >= len(lines):
            if allow_eof:
                break
            raise UnexpectedEndOfInput(stage)

        line = lines[cursor]
        cursor += 1
        if is_blank(line):
            break
        if not line.strip():
            logger.warning(
                "%s: line %d holds only whitespace and is read as an item", stage.value, cursor
            )
        items.append(to_item(line))

    slots = accumulate(items)
    logger.debug("%s: %d lines, %d distinct items", stage.value, len(items), len(slots))
    return slots, cursor


def _equipped_item(line: str) -> CargoItem:
    # Equipped slots never carry a repetition suffix
    return CargoItem(name=line, amount=1)


def parse_equipped(
    lines: list[str], cursor: int, stage: ParseStage
) -> tuple[dict[str, int], int]:
    """Read a low, mid, high or rig section."""
    return _read_section(lines, cursor, stage, _equipped_item)


def parse_separator(lines: list[str], cursor: int) -> tuple[None, int]:
    """
    Consume the two blank lines that precede the drone section.

    Args:
        lines: Buffered input lines
        cursor: Index of the first separator line

    Returns:
        (None, cursor after the separator)
    """
    for _ in range(2):
        if cursor >= len(lines):
            raise SeparatorError()
        if not is_blank(lines[cursor]):
            raise SeparatorError(cursor + 1)
        cursor += 1
    return None, cursor


def parse_drones(lines: list[str], cursor: int) -> tuple[dict[str, int], int]:
    """Read the drone section."""
    return _read_section(lines, cursor, ParseStage.DRONES, parse_cargo_item)


def parse_cargo(lines: list[str], cursor: int) -> tuple[dict[str, int], int]:
    """Read the cargo section, which may run to the end of input."""
    return _read_section(lines, cursor, ParseStage.CARGO, parse_cargo_item, allow_eof=True)


class FitParser:
    """
    Parses fit text into a Loadout.

    Stateless; one instance can parse any number of fits.
    """

    EQUIPPED_STAGES = (
        ParseStage.LOW_SLOTS,
        ParseStage.MID_SLOTS,
        ParseStage.HIGH_SLOTS,
        ParseStage.RIGS,
    )

    def parse(self, lines: Iterable[str]) -> Loadout:
        """
        Parse fit lines into a Loadout.

        Args:
            lines: Fit file lines, with or without line endings

        Returns:
            Loadout built from the fit

        Raises:
            FitParseError: If the input does not follow the fit layout
        """
        buffered = [line.removesuffix("\n").removesuffix("\r") for line in lines]

        (ship_type, ship_name), cursor = parse_header(buffered, 0)
        logger.debug("Header: type=%r name=%r", ship_type, ship_name)

        equipped: list[dict[str, int]] = []
        for stage in self.EQUIPPED_STAGES:
            slots, cursor = parse_equipped(buffered, cursor, stage)
            equipped.append(slots)

        _, cursor = parse_separator(buffered, cursor)
        drones, cursor = parse_drones(buffered, cursor)
        cargo, cursor = parse_cargo(buffered, cursor)

        if cursor < len(buffered):
            logger.debug("Ignoring %d trailing lines", len(buffered) - cursor)

        low_slots, mid_slots, high_slots, rigs = equipped
        return Loadout(
            ship_type=ship_type,
            ship_name=ship_name,
            low_slots=low_slots,
            mid_slots=mid_slots,
            high_slots=high_slots,
            rigs=rigs,
            drones=drones,
            cargo=cargo,
        )

    def parse_text(self, text: str) -> Loadout:
        """
        Parse a whole fit given as a single string.

        Args:
            text: Fit file contents

        Returns:
            Loadout built from the fit
        """
        return self.parse(split_lines(text))
