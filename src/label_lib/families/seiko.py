"""
Seiko Instruments RTC and power-management chips.

Seiko date codes are a lettered year digit followed by a 123XYZ month code
("S3511 AVEX 2753": year 5, October), then a lot code.
"""

from src.label_lib.combinators import (
    StreamingGrammar,
    alnum_uppers,
    char,
    digits,
    month_123xyz,
    recognize,
    seq,
    tag,
    year1_letter,
)
from src.label_lib.dispatcher import MultiGrammar
from src.label_lib.types import GenericPart, Manufacturer, PartDateCode

_date_code = seq(year1_letter, month_123xyz).map(lambda v: PartDateCode(year=v[0], month=v[1]))
_lot_code = recognize(seq(alnum_uppers(1), digits(3)))


def _seiko(prefix, kind):
    return seq(tag(prefix), _date_code, char(" "), _lot_code).map(
        lambda v: GenericPart(kind=kind, manufacturer=Manufacturer.SEIKO, date_code=v[1])
    )


SEIKO_S3511A = StreamingGrammar(
    "Seiko S-3511A",
    _seiko("S3511 AV", "S-3511A"),
    examples=["S3511 AV31 9812", "S3511 AVEX 2753"],
)

SEIKO_S3516AE = StreamingGrammar(
    "Seiko S-3516AE",
    _seiko("S3516 AEV", "S-3516AE"),
    examples=["S3516 AEV42 7505"],
)

SEIKO_S6960E = StreamingGrammar(
    "Seiko S-6960E",
    _seiko("S6960 E-U", "S-6960E"),
    examples=["S6960 E-U2Z C700", "S6960 E-U2X C410"],
)

RTC_SOP_8 = MultiGrammar("rtc_sop_8", [SEIKO_S3511A, SEIKO_S3516AE])
AGB_PMIC = MultiGrammar("agb_pmic", [SEIKO_S6960E])
