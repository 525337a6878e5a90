"""
Texas Instruments logic chips.
"""

from src.label_lib.combinators import (
    StreamingGrammar,
    alnum_uppers,
    char,
    month_123abc,
    seq,
    tag,
    year1,
)
from src.label_lib.dispatcher import MultiGrammar
from src.label_lib.types import GenericPart, Manufacturer, PartDateCode

# "LV2416 0CM A73E": year 0, December
TI_SN74LV2416 = StreamingGrammar(
    "TI SN74LV2416",
    seq(
        tag("LV2416 "),
        seq(year1, month_123abc, tag("M")),
        char(" "),
        seq(tag("A"), alnum_uppers(3)),
    ).map(
        lambda v: GenericPart(
            kind="SN74LV2416",
            manufacturer=Manufacturer.TEXAS_INSTRUMENTS,
            date_code=PartDateCode(year=v[1][0], month=v[1][1]),
        )
    ),
    examples=["LV2416 17M A23D", "LV2416 13M A8R3", "LV2416 0CM A73E"],
)

SUPERVISOR_RESET = MultiGrammar("supervisor_reset", [TI_SN74LV2416])
