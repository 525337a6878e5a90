"""
Sharp support chips and the console CPUs.

The amplifier and regulator labels are short token sequences and use the
streaming combinators. The CPU labels carry a fixed copyright line and are
declared as regex Grammars.

Sharp prints two-letter codes in place of the year digits on some 2000-2001
parts ("AGB-REG IR3E09N AA24 A"); decode_year2 handles them.
"""

from src.label_lib.combinators import (
    StreamingGrammar,
    alphas,
    char,
    lines,
    opt,
    recognize,
    seq,
    tag,
    uppers,
    value,
    year2_week2,
)
from src.label_lib.decoders import decode_week2, decode_year2
from src.label_lib.dispatcher import MultiGrammar
from src.label_lib.grammar import Grammar
from src.label_lib.types import GenericPart, Manufacturer, PartDateCode

# Package code printed after the part number
SSOP_18 = "N"


def _ir3(prefix, kind):
    """Newer amplifier/regulator labels: 'AMP MGB IR3R53N 9806 a'."""
    return lines(
        tag(prefix),
        recognize(seq(tag(kind), value(tag(SSOP_18), "SSOP-18"))),
        seq(year2_week2, char(" "), alphas(1)),
    ).map(lambda v: GenericPart(kind=v[1], manufacturer=Manufacturer.SHARP, date_code=v[2][0]))


def _ir3_old(prefix, kind):
    """Older labels without a package code: 'DMG-AMP IR3R40 9222 AA'."""
    return lines(
        tag(prefix),
        tag(kind),
        seq(year2_week2, char(" "), alphas(1), opt(uppers(1))),
    ).map(lambda v: GenericPart(kind=v[1], manufacturer=Manufacturer.SHARP, date_code=v[2][0]))


# --- Amplifiers ---

SHARP_IR3R40 = StreamingGrammar(
    "Sharp IR3R40",
    _ir3_old("DMG-AMP", "IR3R40"),
    examples=["DMG-AMP IR3R40 9222 AA", "DMG-AMP IR3R40 8909 A"],
)

SHARP_IR3R53 = StreamingGrammar(
    "Sharp IR3R53",
    _ir3("AMP MGB", "IR3R53"),
    examples=["AMP MGB IR3R53N 9806 a", "AMP MGB IR3R53N 9724 C"],
)

SHARP_IR3R56 = StreamingGrammar(
    "Sharp IR3R56",
    _ir3("AMP MGB", "IR3R56"),
    examples=["AMP MGB IR3R56N 0046 A", "AMP MGB IR3R56N 0040 C"],
)

SHARP_IR3R60 = StreamingGrammar(
    "Sharp IR3R60",
    _ir3("AMP AGB", "IR3R60"),
    examples=["AMP AGB IR3R60N 0103 a", "AMP AGB IR3R60N 0240 N"],
)

# --- Regulators ---

SHARP_IR3E02 = StreamingGrammar(
    "Sharp IR3E02",
    _ir3_old("DMG-REG", "IR3E02"),
    examples=["DMG-REG IR3E02 9527 CB", "DMG-REG IR3E02 9820 n", "DMG-REG IR3E02 9024 J"],
)

SHARP_IR3E06 = StreamingGrammar(
    "Sharp IR3E06",
    _ir3("CGB-REG", "IR3E06"),
    examples=["CGB-REG IR3E06N 9839 C", "CGB-REG IR3E06N 0046 A"],
)

SHARP_IR3E09 = StreamingGrammar(
    "Sharp IR3E09",
    _ir3("AGB-REG", "IR3E09"),
    examples=[
        "AGB-REG IR3E09N 0104 C",
        "AGB-REG IR3E09N 0141 K",
        "AGB-REG IR3E09N 0204 d",
        "AGB-REG IR3E09N AA24 A",
        "AGB-REG IR3E09N 0223 B",
    ],
)

# --- CPUs ---


def _cpu(m):
    return GenericPart(
        kind=m["kind"],
        manufacturer=Manufacturer.SHARP,
        date_code=PartDateCode(year=decode_year2(m["year"]), week=decode_week2(m["week"])),
    )


DMG_CPU_LR35902 = Grammar(
    "DMG CPU LR35902",
    r"(?P<kind>DMG-CPU\ LR35902)\ (?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [A-Z]",
    _cpu,
    examples=["DMG-CPU LR35902 8907 D"],
)

DMG_CPU = Grammar(
    "DMG CPU",
    r"(?P<kind>DMG-CPU(?:\ [ABC])?)\ ©\ 1989\ Nintendo\ JAPAN\ (?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [A-Z]",
    _cpu,
    examples=[
        "DMG-CPU © 1989 Nintendo JAPAN 8913 D",
        "DMG-CPU A © 1989 Nintendo JAPAN 8937 D",
        "DMG-CPU B © 1989 Nintendo JAPAN 9207 D",
        "DMG-CPU C © 1989 Nintendo JAPAN 9835 D",
    ],
)

MGB_CPU = Grammar(
    "MGB CPU",
    r"(?P<kind>CPU\ MGB)\ Ⓜ\ ©\ 1996\ Nintendo\ JAPAN\ (?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [A-Z]{1,2}",
    _cpu,
    examples=["CPU MGB Ⓜ © 1996 Nintendo JAPAN 9808 D", "CPU MGB Ⓜ © 1996 Nintendo JAPAN 0040 DA"],
)

AGB_CPU = Grammar(
    "AGB CPU",
    r"""
    (?P<kind>CPU\ AGB(?:\ A(?:\ E)?)?)
    \ Ⓜ\ ©\ 2000\ Nintendo\ JAPAN\ ARM
    \ (?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [a-zA-Z]{1,2}
    """,
    _cpu,
    examples=["CPU AGB Ⓜ © 2000 Nintendo JAPAN ARM 0104 I"],
)

AGB_CPU_B = Grammar(
    "AGB CPU B",
    r"""
    (?P<kind>CPU\ AGB\ B(?:\ E)?)
    \ Ⓜ\ ©\ 2002\ Nintendo\ JAPAN\ ARM
    \ (?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [a-zA-Z]{1,2}
    """,
    _cpu,
    examples=["CPU AGB B E Ⓜ © 2002 Nintendo JAPAN ARM 0602 UB"],
)

# Date code printed first on the last revision
AGB_CPU_E = Grammar(
    "AGB CPU E",
    r"(?P<year>[0-9]{2})(?P<week>[0-9]{2})\ 2m\ (?P<kind>CPU\ AGB\ E)\ Ⓜ\ ©\ 2004\ Nintendo\ JAPAN\ ARM",
    _cpu,
    examples=["0529 2m CPU AGB E Ⓜ © 2004 Nintendo JAPAN ARM"],
)

# --- Families ---

DMG_CPU_FAMILY = MultiGrammar("dmg_cpu", [DMG_CPU_LR35902, DMG_CPU])
MGB_CPU_FAMILY = MultiGrammar("mgb_cpu", [MGB_CPU])
AGB_CPU_FAMILY = MultiGrammar("agb_cpu", [AGB_CPU, AGB_CPU_B, AGB_CPU_E])

DMG_AMP = MultiGrammar("dmg_amp", [SHARP_IR3R40])
MGB_AMP = MultiGrammar("mgb_amp", [SHARP_IR3R53, SHARP_IR3R56])
AGB_AMP = MultiGrammar("agb_amp", [SHARP_IR3R60])

DMG_REG = MultiGrammar("dmg_reg", [SHARP_IR3E02])
CGB_REG = MultiGrammar("cgb_reg", [SHARP_IR3E06])
AGB_REG = MultiGrammar("agb_reg", [SHARP_IR3E09])
