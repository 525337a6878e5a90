"""
Primitive date-code decoders.

Each function takes a substring a grammar has already isolated (e.g. the
two digits after the vendor tag) and turns it into a domain value. They
encapsulate the date-code conventions seen across decades of manufacturing:
- 1-digit years (ambiguous across decades -> PartialYear).
- 2-digit years with a sliding century (88-99 -> 19xx, 00-87 -> 20xx).
- Reserved two-letter year codes.
- Week numbers, 2-digit months and the lettered month alphabets.

All functions are pure and raise DecodeError on rejected input.
"""

from src.label_lib import constants as C
from src.label_lib.errors import DecodeError
from src.label_lib.types import FullYear, Month, PartialYear, Week, Year


def _expect_length(text: str, length: int, what: str) -> None:
    if len(text) != length:
        raise DecodeError(
            f"Invalid {what}: {text!r} (expected {length} character(s), got {len(text)})",
            label=text,
            constraint="length",
        )


def _expect_digits(text: str, what: str) -> int:
    # str.isdigit() accepts non-ASCII digits like '²'
    if not (text.isascii() and text.isdigit()):
        raise DecodeError(
            f"Invalid {what}: {text!r} (expected digits only)",
            label=text,
            constraint="numeric",
        )
    return int(text)


def decode_year1(text: str) -> Year:
    """
    Decodes a single year digit.

    Args:
        text: Exactly one ASCII digit (e.g. "4").

    Returns:
        PartialYear(4). The decade is unknown until reconciled.
    """
    _expect_length(text, 1, "1-digit year")
    return PartialYear(_expect_digits(text, "1-digit year"))


def decode_year1_letter(text: str) -> Year:
    """
    Decodes a year digit that may be printed as a letter.

    Digits map to themselves; A..H map to 1..8 and J maps to 9.
    """
    _expect_length(text, 1, "1-character year")
    if text.isascii() and text.isdigit():
        return PartialYear(int(text))
    index = C.YEAR_DIGIT_LETTERS.find(text)
    if index < 0:
        raise DecodeError(
            f"Invalid 1-character year: {text!r} (expected 0-9 or one of {C.YEAR_DIGIT_LETTERS})",
            label=text,
            constraint="letter",
        )
    return PartialYear(index + 1)


def decode_year2(text: str) -> Year:
    """
    Decodes a two-character year.

    Reserved two-letter codes map to fixed years. Anything else must be two
    digits, whose century is inferred from the magnitude: values at or above
    CENTURY_PIVOT are 19xx, the rest 20xx. This only holds for parts made
    around 1989-2010; do not reuse it for other date ranges.

    Args:
        text: Two characters (e.g. "94", "03", "AA").

    Returns:
        FullYear with the calendar year.
    """
    _expect_length(text, 2, "2-digit year")

    if text in C.SPECIAL_YEAR_CODES:
        return FullYear(C.SPECIAL_YEAR_CODES[text])

    value = _expect_digits(text, "2-digit year")
    if value >= C.CENTURY_PIVOT:
        return FullYear(1900 + value)
    return FullYear(2000 + value)


def decode_week2(text: str) -> Week:
    """
    Decodes a two-digit week number (01..53).
    """
    _expect_length(text, 2, "2-digit week")
    value = _expect_digits(text, "2-digit week")
    low, high = C.WEEK_RANGE
    if not low <= value <= high:
        raise DecodeError(
            f"Invalid 2-digit week: {text!r} (expected {low:02}-{high})",
            label=text,
            constraint="range",
        )
    return Week(value)


def decode_month2(text: str) -> Month:
    """
    Decodes a two-digit month number (01..12).
    """
    _expect_length(text, 2, "2-digit month")
    value = _expect_digits(text, "2-digit month")
    if not 1 <= value <= 12:
        raise DecodeError(
            f"Invalid 2-digit month: {text!r} (expected 01-12)",
            label=text,
            constraint="range",
        )
    return Month(value)


def _decode_month_code(text: str, alphabet: str, what: str, aliases=None) -> Month:
    _expect_length(text, 1, what)
    if aliases and text in aliases:
        return Month(aliases[text])
    index = alphabet.find(text)
    if index < 0:
        raise DecodeError(
            f"Invalid {what}: {text!r} (expected one of {alphabet})",
            label=text,
            constraint="letter",
        )
    return Month(index + 1)


def decode_month_letter(text: str) -> Month:
    """
    Decodes a single-letter month: A=January ... H=August, J=September ... M=December.

    The letter I is not part of the alphabet and is rejected, not shifted.
    """
    return _decode_month_code(text, C.MONTH_LETTERS, "1-letter month")


def decode_month_123abc(text: str) -> Month:
    """Decodes 1..9 for January..September, then A, B, C."""
    return _decode_month_code(text, C.MONTH_CODES_123ABC, "1-character month")


def decode_month_123xyz(text: str) -> Month:
    """Decodes 1..9 for January..September, then X, Y, Z."""
    return _decode_month_code(text, C.MONTH_CODES_123XYZ, "1-character month")


def decode_month_123ond(text: str) -> Month:
    """Decodes 1..9 for January..September, then O, N, D ('0' is an old spelling of O)."""
    return _decode_month_code(
        text,
        C.MONTH_CODES_123OND,
        "1-character month",
        aliases=C.MONTH_CODE_ALIASES_123OND,
    )
