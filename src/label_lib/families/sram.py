"""
Static RAM label grammars (SOP-28 package).

Work RAM and video RAM chips on the handheld boards came from a dozen
vendors. Fixed-layout labels are declared as regex Grammars; labels that
read as a sequence of validated tokens use the streaming combinators.
"""

from src.label_lib.combinators import (
    StreamingGrammar,
    alnum_uppers,
    alt,
    char,
    delimited,
    digits,
    lines,
    one_of,
    opt,
    recognize,
    seq,
    tag,
    uppers,
    week2,
    year1,
    year1_month_letter,
    year1_week2,
    year2_week2,
)
from src.label_lib.decoders import decode_week2, decode_year1, decode_year2
from src.label_lib.dispatcher import MultiGrammar
from src.label_lib.grammar import Grammar
from src.label_lib.types import Manufacturer, PartDateCode, StaticRam


def _year_week_ram(manufacturer, decode_year, kind_format="{kind}"):
    """Extraction for patterns with `kind`, `year` and `week` groups."""

    def extract(m):
        return StaticRam(
            kind=kind_format.format(**m.groupdict()),
            manufacturer=manufacturer,
            date_code=PartDateCode(year=decode_year(m["year"]), week=decode_week2(m["week"])),
        )

    return extract


# --- LSI Logic (Sharp designs made under license) ---


def _lsi_logic_date(trailer):
    # "D4 06" and "D406" are both in use
    return delimited(
        tag("D"),
        seq(year1, opt(char(" ")), week2).map(lambda v: PartDateCode(year=v[0], week=v[2])),
        trailer,
    )


def _lsi_logic_lh51(kind):
    return lines(
        tag(kind),
        tag("LSI LOGIC"),
        tag("JAPAN"),
        _lsi_logic_date(seq(char(" "), digits(1), char(" "), uppers(2))),
    ).map(lambda v: StaticRam(kind=v[0], manufacturer=Manufacturer.LSI_LOGIC, date_code=v[3]))


def _lsi_logic_lh52(kind):
    return lines(
        tag(kind),
        tag("LSI LOGIC"),
        tag("JAPAN"),
        _lsi_logic_date(seq(char(" "), digits(1), alnum_uppers(1), char(" "), uppers(1))),
    ).map(lambda v: StaticRam(kind=v[0], manufacturer=Manufacturer.LSI_LOGIC, date_code=v[3]))


LSI_LOGIC_LH5264N4T = StreamingGrammar(
    "LSI Logic LH5264N4T",
    _lsi_logic_lh52("LH5264N4T"),
    examples=["LH5264N4T LSI LOGIC JAPAN D222 24 C", "LH5264N4T LSI LOGIC JAPAN D4 06 05 C"],
)

LSI_LOGIC_LH5264TN = StreamingGrammar(
    "LSI Logic LH5264TN",
    _lsi_logic_lh52("LH5264TN-TL"),
    examples=["LH5264TN-TL LSI LOGIC JAPAN D220 53 C"],
)

LSI_LOGIC_LH52A64N = StreamingGrammar(
    "LSI Logic LH52A64N",
    _lsi_logic_lh52("LH52A64N-TL"),
    examples=["LH52A64N-TL LSI LOGIC JAPAN D404 0U C", "LH52A64N-TL LSI LOGIC JAPAN D4 06 05 C"],
)

LSI_LOGIC_LH52B256N = StreamingGrammar(
    "LSI Logic LH52B256N",
    _lsi_logic_lh52("LH52B256NA-10TLL"),
    examples=["LH52B256NA-10TLL LSI LOGIC JAPAN D344 03 B"],
)

LSI_LOGIC_LH5168N = StreamingGrammar(
    "LSI Logic LH5168N",
    _lsi_logic_lh51("LH5168NFB-10TL"),
    examples=["LH5168NFB-10TL LSI LOGIC JAPAN D242 7 BC"],
)

# Same parts with a Sharp-style date code: two year digits, no space.
LSI_LOGIC_LH52XX_YEAR2 = Grammar(
    "LSI Logic LH52xx (2-digit year)",
    r"""
    (?P<kind>LH5264N4T|LH52A64N-TL|LH5264TN-TL)
    \ LSI\ LOGIC\ JAPAN
    \ [A-Z](?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [0-9]\ [A-Z]
    """,
    _year_week_ram(Manufacturer.LSI_LOGIC, decode_year2),
    examples=["LH5264N4T LSI LOGIC JAPAN D9204 5 C"],
)

LSI_LOGIC_SRAM = MultiGrammar(
    "lsi_logic_sram",
    [
        LSI_LOGIC_LH5264N4T,
        LSI_LOGIC_LH5264TN,
        LSI_LOGIC_LH52A64N,
        LSI_LOGIC_LH52B256N,
        LSI_LOGIC_LH5168N,
        LSI_LOGIC_LH52XX_YEAR2,
    ],
)

# --- Regex Grammars ---

ROHM_BR62256F = Grammar(
    "Rohm BR62256F",
    r"""
    (?P<kind>BR62256[AB]?F)-(?P<speed>70)(?P<power>LL)
    \ (?P<year>[0-9])(?P<week>[0-9]{2})
    \ [0-9]{3}[A-Z]{0,2}
    """,
    _year_week_ram(Manufacturer.ROHM, decode_year1, "{kind}-{speed}{power}"),
    examples=["BR62256F-70LL 006 169NA"],
)

ROHM_BR6265 = Grammar(
    "Rohm BR6265",
    r"""
    (?P<kind>BR6265[AB]?F)-(?P<speed>10)(?P<power>SL)
    \ (?P<year>[0-9])(?P<week>[0-9]{2})
    \ [0-9]{3}[A-Z]{1,2}
    """,
    _year_week_ram(Manufacturer.ROHM, decode_year1, "{kind}-{speed}{power}"),
    examples=["BR6265BF-10SL 111 120N"],
)

ROHM_XLJ6265 = Grammar(
    "Rohm XLJ6265",
    r"""
    (?P<kind>XLJ6265[AB]?F)-(?P<speed>10)(?P<power>SL)
    \ (?P<year>[0-9])(?P<week>[0-9]{2})
    \ [0-9]{3}[A-Z]{0,2}
    """,
    _year_week_ram(Manufacturer.ROHM, decode_year1, "{kind}-{speed}{power}"),
    examples=["XLJ6265BF-10SL 640 173N"],
)

SHARP_LH52256 = Grammar(
    "Sharp LH52256",
    r"""
    (?P<kind>LH52256C?)(?P<package>N)-(?P<speed>10)(?P<power>LL)
    \ SHARP\ (?:JAPAN\ |A)
    (?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [0-9]\ [A-Z]{2}
    """,
    _year_week_ram(Manufacturer.SHARP, decode_year2, "{kind}{package}-{speed}{power}"),
    examples=["LH52256CN-10LL SHARP JAPAN 9832 1 SN", "LH52256CN-10LL SHARP A9802 3 EC"],
)

# --- Streaming Grammars ---

BSI_BS62LV256 = StreamingGrammar(
    "BSI BS62LV256",
    seq(
        tag("BSI "),
        recognize(
            seq(
                tag("BS62LV256"),
                tag("S"),  # package
                one_of("CI"),  # temperature
                one_of("-GP"),  # material
                alt(tag("55"), tag("70")),  # speed
            )
        ),
        char(" "),
        seq(
            alt(tag("S2827"), tag("S2828")),
            opt(alt(tag("CA"), uppers(1))),
            digits(5),
            opt(seq(char("."), alnum_uppers(1), opt(uppers(1)))),
        ),
        char(" "),
        seq(uppers(1), year2_week2, opt(digits(1))),
        tag(" TAIWAN"),
    ).map(lambda v: StaticRam(kind=v[1], manufacturer=Manufacturer.BSI, date_code=v[5][1])),
    examples=[
        "BSI BS62LV256SC-70 S2827V52155 A0106 TAIWAN",
        "BSI BS62LV256SC-70 S2828W11075.1 F0231 TAIWAN",
        "BSI BS62LV256SCG70 S2828CA30125.A D05502 TAIWAN",
        "BSI BS62LV256SC-70 S2828W13088.1N F0318 TAIWAN",
    ],
)

_HY6264_KIND = alt(tag("HY6264A"), tag("HY6264"))
_HY6264_POWER = alt(tag("LL"), tag("L"))
_HY6264_SPEED = alt(tag("70"), tag("85"), tag("10"), tag("12"), tag("15"))

# 1992-1994: "HYUNDAI HY6264ALLJ-10 9327B KOREA"
_HY6264_OLD = seq(
    tag("HYUNDAI "),
    seq(_HY6264_KIND, _HY6264_POWER, tag("J"), char("-"), _HY6264_SPEED),
    char(" "),
    seq(year2_week2, uppers(1)),
    tag(" KOREA"),
).map(
    lambda v: StaticRam(
        kind="{}{}J-{}".format(v[1][0], v[1][1], v[1][4]),
        manufacturer=Manufacturer.HYUNDAI,
        date_code=v[3][0],
    )
)

# 1994-: "HY6264A LLJ-10 9902B KOREA"
_HY6264_NEW = seq(
    _HY6264_KIND,
    char(" "),
    seq(_HY6264_POWER, tag("J"), char("-"), _HY6264_SPEED),
    char(" "),
    seq(year2_week2, uppers(1)),
    tag(" KOREA"),
).map(
    lambda v: StaticRam(
        kind="{}{}J-{}".format(v[0], v[2][0], v[2][3]),
        manufacturer=Manufacturer.HYUNDAI,
        date_code=v[4][0],
    )
)

HYUNDAI_HY6264 = StreamingGrammar(
    "Hyundai HY6264",
    alt(_HY6264_NEW, _HY6264_OLD),
    examples=["HYUNDAI HY6264ALLJ-10 9327B KOREA", "HY6264A LLJ-10 9902B KOREA"],
)


def _gm76c256(vendor, manufacturer):
    # Designed by LGS; Hyundai kept the part number after the acquisition
    return seq(
        tag(f"{vendor} "),
        seq(
            recognize(seq(tag("GM76C256"), opt(one_of("ABC")))),
            alt(tag("LL"), tag("L")),  # power
            tag("FW"),  # package
            alt(tag("70"), tag("85"), tag("10")),  # speed
        ),
        char(" "),
        year2_week2,
        tag(" KOREA"),
    ).map(lambda v: StaticRam(kind="".join(v[1]), manufacturer=manufacturer, date_code=v[3]))


LGS_GM76C256 = StreamingGrammar(
    "LGS GM76C256",
    _gm76c256("LGS", Manufacturer.LGS),
    examples=["LGS GM76C256CLLFW70 0047 KOREA"],
)

HYUNDAI_GM76C256 = StreamingGrammar(
    "Hyundai GM76C256",
    _gm76c256("HYUNDAI", Manufacturer.HYUNDAI),
    examples=["HYUNDAI GM76C256CLLFW70 0047 KOREA"],
)


def _sanyo(kind, speed_suffix):
    return lines(
        tag("SANYO"),
        seq(recognize(kind), char("M"), char("-"), tag("70"), speed_suffix),
        seq(tag("JAPAN"), char(" "), year1_month_letter, alnum_uppers(3)),
    ).map(
        lambda v: StaticRam(
            kind=f"{v[1][0]}M-70",
            manufacturer=Manufacturer.SANYO,
            date_code=v[2][2],
        )
    )


SANYO_LC35256 = StreamingGrammar(
    "Sanyo LC35256",
    _sanyo(seq(tag("LC35256"), opt(one_of("ABCDEF"))), alnum_uppers(1)),
    examples=["SANYO LC35256DM-70W JAPAN 0EUPG", "SANYO LC35256FM-70U JAPAN 0LK5G"],
)

SANYO_LC3564 = StreamingGrammar(
    "Sanyo LC3564",
    _sanyo(seq(tag("LC3564"), opt(one_of("AB"))), opt(alnum_uppers(1))),
    examples=["SANYO LC3564BM-70 JAPAN 9MUBG"],
)

VICTRONIX_VN4464 = StreamingGrammar(
    "Victronix VN4464",
    lines(
        tag("Victronix"),
        tag("VN4464S-08LL"),
        seq(year2_week2, digits(1), alnum_uppers(1), digits(3)),
    ).map(lambda v: StaticRam(kind=v[1], manufacturer=Manufacturer.VICTRONIX, date_code=v[2][0])),
    examples=["Victronix VN4464S-08LL 95103B029"],
)


def _winbond(kind, lot_code):
    return lines(
        tag("Winbond"),
        tag(kind),
        seq(year1_week2, lot_code),
    ).map(lambda v: StaticRam(kind=v[1], manufacturer=Manufacturer.WINBOND, date_code=v[2][0]))


WINBOND_W24257 = StreamingGrammar(
    "Winbond W24257S",
    _winbond("W24257S-70LL", seq(uppers(2), digits(9), uppers(2))),
    examples=["Winbond W24257S-70LL 046QB202858301AC"],
)

WINBOND_W24258 = StreamingGrammar(
    "Winbond W24258S",
    _winbond("W24258S-70LE", seq(uppers(2), digits(9), uppers(2))),
    examples=["Winbond W24258S-70LE 011MH200254401AA"],
)

WINBOND_W2465 = StreamingGrammar(
    "Winbond W2465S",
    _winbond(
        "W2465S-70LL",
        seq(uppers(2), digits(8), char("-"), alnum_uppers(1), alnum_uppers(1), tag("1RA")),
    ),
    examples=["Winbond W2465S-70LL 140SD21331480-II1RA", "Winbond W2465S-70LL 127AD21212050-811RA"],
)

SRAM_SOP_28 = MultiGrammar(
    "sram_sop_28",
    [
        BSI_BS62LV256,
        HYUNDAI_GM76C256,
        HYUNDAI_HY6264,
        LGS_GM76C256,
        LSI_LOGIC_SRAM,
        ROHM_BR62256F,
        ROHM_BR6265,
        ROHM_XLJ6265,
        SANYO_LC35256,
        SANYO_LC3564,
        SHARP_LH52256,
        VICTRONIX_VN4464,
        WINBOND_W24257,
        WINBOND_W24258,
        WINBOND_W2465,
    ],
)
