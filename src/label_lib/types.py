"""
Type definitions and shared data structures for the label engine.

This module contains the value types produced by the primitive decoders
(Year, Week, Month), the date-code record grammars emit, and the
family-specific records returned by the per-family grammars.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TypedDict

from src.label_lib import constants as C


@dataclass(frozen=True)
class FullYear:
    """A year known to all four digits (e.g. 1994)."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class PartialYear:
    """
    A year known only to its last decimal digit.

    Labels that print a single year digit are ambiguous across decades; the
    digit is kept as-is so reconciliation knows precision was reduced on
    purpose rather than missing.
    """

    digit: int

    def __str__(self) -> str:
        return f"x{self.digit}"


Year = FullYear | PartialYear


@dataclass(frozen=True, order=True)
class Week:
    """A manufacturing week, validated to 1..53."""

    value: int

    def __post_init__(self):
        low, high = C.WEEK_RANGE
        if not low <= self.value <= high:
            raise ValueError(f"Week out of range: {self.value}")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def title(self) -> str:
        """Calendar name, e.g. 'March'."""
        return self.name.capitalize()

    @property
    def short_title(self) -> str:
        """Three-letter abbreviation, e.g. 'Mar'."""
        return self.title[:3]

    def __str__(self) -> str:
        return self.title


# LSI_LOGIC -> "LSI Logic"
Manufacturer = Enum("Manufacturer", C.MANUFACTURER_NAMES)


@dataclass(frozen=True)
class PartDateCode:
    """
    The date code printed on a part.

    Attributes:
        year: Full or partial year.
        month: Set for year+month codes.
        week: Set for year+week codes.
    """

    year: Year
    month: Month | None = None
    week: Week | None = None


@dataclass(frozen=True)
class GenericPart:
    """A support chip (amplifier, regulator, CPU...) identified by its kind."""

    kind: str
    manufacturer: Manufacturer | None
    date_code: PartDateCode | None


@dataclass(frozen=True)
class StaticRam:
    """A static RAM chip."""

    kind: str
    manufacturer: Manufacturer | None
    date_code: PartDateCode | None


@dataclass(frozen=True)
class Crystal:
    """A crystal oscillator with its nominal frequency in Hz."""

    manufacturer: Manufacturer | None
    frequency: int
    date_code: PartDateCode | None

    def format_frequency(self) -> str:
        """
        Formats the frequency for display.

        Returns:
            '4.194304 MHz', '32.768 kHz' or '<n> Hz'.
        """
        if self.frequency > 1_000_000:
            return f"{self.frequency // 1_000_000}.{self.frequency % 1_000_000:06} MHz"
        if self.frequency > 1_000:
            return f"{self.frequency // 1_000}.{self.frequency % 1_000:03} kHz"
        return f"{self.frequency} Hz"


# --- Submission Processing ---


class SubmissionStats(TypedDict):
    """
    Tracking metrics and errors for a single submission.

    Attributes:
        labels_read: Labelled slots that were attempted.
        parts_decoded: Slots whose label decoded successfully.
        hint_year: Full year taken from the board's hint slot, if any.
        residuals: "slot: label" entries no grammar could decode.
        errors: Anything else that went wrong (bad board, unreadable file).
    """

    labels_read: int
    parts_decoded: int
    hint_year: int | None
    residuals: list[str]
    errors: list[str]


class PartRow(TypedDict):
    """One decoded part, flattened for display and CSV export."""

    submission: str
    board: str
    slot: str
    label: str
    kind: str
    manufacturer: str
    frequency: str
    year: int | None
    month: str
    week: int | None
    date: str
    date_short: str


def create_empty_stats() -> SubmissionStats:
    return {
        "labels_read": 0,
        "parts_decoded": 0,
        "hint_year": None,
        "residuals": [],
        "errors": [],
    }
