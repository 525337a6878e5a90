"""
Panasonic cartridge mappers (SOP packages).

The date code reads year digit, apostrophe, 123OND month code and one more
digit: "P 0'D7" is year 0, December.
"""

from src.label_lib.combinators import (
    StreamingGrammar,
    char,
    digits,
    lines,
    month_123ond,
    seq,
    tag,
    year1,
)
from src.label_lib.dispatcher import MultiGrammar
from src.label_lib.types import GenericPart, Manufacturer, PartDateCode

_date_code_sop = seq(tag("P "), year1, char("'"), month_123ond, digits(1)).map(
    lambda v: PartDateCode(year=v[1], month=v[3])
)


def _mbc_sop(kind):
    return lines(tag("DMG"), tag(kind), tag("Nintendo"), _date_code_sop).map(
        lambda v: GenericPart(kind=kind, manufacturer=Manufacturer.PANASONIC, date_code=v[3])
    )


PANASONIC_MBC1B = StreamingGrammar(
    "Panasonic MBC1B",
    _mbc_sop("MBC1-B"),
    examples=["DMG MBC1-B Nintendo P 0'D7"],
)

PANASONIC_MBC2A = StreamingGrammar(
    "Panasonic MBC2A",
    _mbc_sop("MBC2-A"),
    examples=["DMG MBC2-A Nintendo P 8'73"],
)

MBC1_SOP_24 = MultiGrammar("mbc1_sop24", [PANASONIC_MBC1B])
MBC2_SOP_28 = MultiGrammar("mbc2_sop28", [PANASONIC_MBC2A])
