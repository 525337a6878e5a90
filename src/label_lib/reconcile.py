"""
Date reconciliation: turning decoded date codes into calendar dates.

Many parts print only the last digit of their manufacturing year. On a
board, a sibling part that prints the full year (usually the CPU) gives a
"hint" year, and the part's year is the one ending in its digit that lies
closest to the hint.
"""

import logging
from dataclasses import dataclass

from src.label_lib import constants as C
from src.label_lib.types import FullYear, Month, PartDateCode, PartialYear, Week, Year

logger = logging.getLogger(__name__)


def _nearest_year(hint: int, digit: int) -> int:
    decade = hint - hint % 10
    candidates = [decade - 10 + digit, decade + digit, decade + 10 + digit]
    # min() keeps the first of equally distant candidates, i.e. the earlier year
    return min(candidates, key=lambda year: abs(year - hint))


def reconcile_year(own: Year | None, hint: int | None) -> int | None:
    """
    Resolves a decoded year into a full calendar year.

    Args:
        own: The year decoded from the part's own label.
        hint: Full year of a sibling part, if known.

    Returns:
        - The value of a FullYear (the hint is ignored).
        - For a PartialYear with a hint, the nearest year ending in its digit.
        - None when the year is missing or partial without a hint.
    """
    if own is None:
        return None

    if isinstance(own, FullYear):
        year = own.value
    elif isinstance(own, PartialYear):
        if hint is None:
            return None
        year = _nearest_year(hint, own.digit)
    else:
        raise TypeError(f"Expected FullYear or PartialYear, got {type(own).__name__}")

    low, high = C.PLAUSIBLE_YEARS
    if not low <= year <= high:
        logger.warning(f"Suspicious year {year} (decoded {own}, hint {hint})")
    return year


@dataclass(frozen=True)
class DateCode:
    """
    A reconciled manufacturing date.

    Attributes:
        year: Full calendar year, or None if it could not be resolved.
        month: Month, for parts that print one.
        week: Week, for parts that print one.
    """

    year: int | None = None
    month: Month | None = None
    week: Week | None = None

    @classmethod
    def loose(cls, hint: int | None, date_code: PartDateCode | None) -> "DateCode":
        """Builds a DateCode from a part's date code, reconciling its year against `hint`."""
        if date_code is None:
            return cls()
        return cls(
            year=reconcile_year(date_code.year, hint),
            month=date_code.month,
            week=date_code.week,
        )

    def calendar(self) -> str | None:
        """'Week 6/1994', 'March/1999' or '1999'; None without a year."""
        if self.year is None:
            return None
        if self.week is not None:
            return f"Week {self.week}/{self.year}"
        if self.month is not None:
            return f"{self.month.title}/{self.year}"
        return str(self.year)

    def calendar_short(self) -> str | None:
        """'6/1994', 'Mar/1999' or '1999'; None without a year."""
        if self.year is None:
            return None
        if self.week is not None:
            return f"{self.week}/{self.year}"
        if self.month is not None:
            return f"{self.month.short_title}/{self.year}"
        return str(self.year)
