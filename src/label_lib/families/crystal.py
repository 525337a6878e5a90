"""
Crystal oscillator label grammars.

Crystals print very little: a vendor mark, a frequency code and a short
date code. All of them are declared with the streaming combinators.
"""

from src.label_lib import constants as C
from src.label_lib.combinators import (
    StreamingGrammar,
    alt,
    char,
    delimited,
    lines,
    month_letter_year1,
    opt,
    seq,
    tag,
    uppers,
    year1_month_letter,
    year2_week2,
)
from src.label_lib.dispatcher import MultiGrammar
from src.label_lib.types import Crystal, Manufacturer


def _kds(frequency, date_code):
    return Crystal(manufacturer=Manufacturer.KDS, frequency=frequency, date_code=date_code)


def _kinseki(frequency, date_code):
    return Crystal(manufacturer=Manufacturer.KINSEKI, frequency=frequency, date_code=date_code)


# --- KDS (Daishinku) ---

KDS_32_KIHZ = StreamingGrammar(
    "KDS 32 KiHz",
    seq(tag("KDS"), year1_month_letter).map(lambda v: _kds(C.FREQ_32_KIHZ, v[1])),
    examples=["KDS1H"],
)

KDS_4_MIHZ_OLD = StreamingGrammar(
    "KDS 4 MiHz (old)",
    lines(
        seq(tag("KDS"), opt(char(" ")), alt(year1_month_letter, year2_week2)),
        tag("4.194"),
    ).map(lambda v: _kds(C.FREQ_4_MIHZ, v[0][2])),
    examples=["KDS9807 4.194", "KDS 9803 4.194", "KDS 6F 4.194"],
)

KDS_4_MIHZ_NEW = StreamingGrammar(
    "KDS 4 MiHz (new)",
    lines(seq(tag("KDS "), year2_week2), tag("4.194")).map(lambda v: _kds(C.FREQ_4_MIHZ, v[0][1])),
    examples=["KDS 0102 4.194"],
)

KDS_4_MIHZ_AGS = StreamingGrammar(
    "KDS 4 MiHz (KDSI)",
    lines(seq(tag("KDSI "), year2_week2), tag("4.194")).map(lambda v: _kds(C.FREQ_4_MIHZ, v[0][1])),
    examples=["KDSI 0549 4.194"],
)

KDS_8_MIHZ = StreamingGrammar(
    "KDS 8 MiHz",
    lines(seq(tag("KDS "), year2_week2), tag("8.388")).map(lambda v: _kds(C.FREQ_8_MIHZ, v[0][1])),
    examples=["KDS 9841 8.388"],
)

KDS_D419_OLD = StreamingGrammar(
    "KDS D419 (old)",
    seq(tag("D419"), month_letter_year1).map(lambda v: _kds(C.FREQ_4_MIHZ, v[1])),
    examples=["D419A2"],
)

KDS_D419_NEW = StreamingGrammar(
    "KDS D419 (new)",
    seq(tag("D419"), month_letter_year1, uppers(1)).map(lambda v: _kds(C.FREQ_4_MIHZ, v[1])),
    examples=["D419J3I"],
)

KDS_D838 = StreamingGrammar(
    "KDS D838",
    seq(tag("D838"), month_letter_year1, uppers(1)).map(lambda v: _kds(C.FREQ_8_MIHZ, v[1])),
    examples=["D838K0I"],
)

KDS_D209 = StreamingGrammar(
    "KDS D209",
    seq(tag("D209"), month_letter_year1).map(lambda v: _kds(C.FREQ_20_MIHZ, v[1])),
    examples=["D209A8"],
)

# --- Kinseki ---


def _kinseki_lines(frequency_code, frequency):
    # "4194 KSS 0KF" and "4194 KSS1A"
    return lines(
        tag(frequency_code),
        seq(
            tag("KSS"),
            alt(delimited(char(" "), year1_month_letter, uppers(1)), year1_month_letter),
        ),
    ).map(lambda v: _kinseki(frequency, v[1][1]))


KINSEKI_4_MIHZ = StreamingGrammar(
    "Kinseki 4 MiHz",
    _kinseki_lines("4194", C.FREQ_4_MIHZ),
    examples=["4194 KSS 0KF", "4194 KSS1A"],
)

KINSEKI_8_MIHZ = StreamingGrammar(
    "Kinseki 8 MiHz",
    _kinseki_lines("8388", C.FREQ_8_MIHZ),
    examples=["8388 KSS 1CF", "8388 KSS9J"],
)

KINSEKI_20_MIHZ = StreamingGrammar(
    "Kinseki 20 MiHz",
    seq(tag("KSS20V "), year1_month_letter).map(lambda v: _kinseki(C.FREQ_20_MIHZ, v[1])),
    examples=["KSS20V 8A"],
)

KINSEKI_32_MIHZ = StreamingGrammar(
    "Kinseki 32 MiHz",
    seq(tag("33WKSS"), year1_month_letter, char("T")).map(lambda v: _kinseki(C.FREQ_32_MIHZ, v[1])),
    examples=["33WKSS6DT"],
)

# --- Families ---

DMG_CRYSTAL = MultiGrammar("dmg_crystal", [KDS_4_MIHZ_OLD, KINSEKI_4_MIHZ])
MGB_CRYSTAL = MultiGrammar("mgb_crystal", [KDS_4_MIHZ_OLD, KINSEKI_4_MIHZ])
CGB_CRYSTAL = MultiGrammar("cgb_crystal", [KDS_8_MIHZ, KDS_D838, KINSEKI_8_MIHZ])
AGB_CRYSTAL = MultiGrammar("agb_crystal", [KDS_4_MIHZ_NEW, KDS_4_MIHZ_AGS, KDS_D419_OLD, KDS_D419_NEW])
RTC_CRYSTAL = MultiGrammar("rtc_crystal", [KDS_32_KIHZ])
CRYSTAL_20_MIHZ = MultiGrammar("crystal_20mihz", [KDS_D209, KINSEKI_20_MIHZ])
CRYSTAL_32_MIHZ = MultiGrammar("crystal_32mihz", [KINSEKI_32_MIHZ])
