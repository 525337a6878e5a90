"""
Static Knowledge Base for the Silkscreen label engine.

This module serves as the central repository for:
1.  **Manufacturers:** Display names for every vendor a grammar can report.
2.  **Date-Code Conventions:** Month alphabets, reserved two-letter year codes
    and the century pivot used when a label only prints two year digits.
3.  **Sanity Windows:** The manufacturing period the source photos come from,
    used to flag suspicious reconciled years.
4.  **Crystal Frequencies:** Nominal frequencies of the oscillators we decode.
5.  **Board Layouts:** Which component family is expected in which slot of a
    submission record, and which slot provides the year hint.
"""

# --- Date-Code Conventions ---

# Two-digit years at or above the pivot belong to the 1900s, the rest to the
# 2000s. Correct for parts made ~1989-2010 and wrong outside it.
CENTURY_PIVOT = 88

# Reserved two-letter year codes (Sharp).
# Maps the printed code to the full calendar year.
SPECIAL_YEAR_CODES = {
    "AA": 2000,
    "AL": 2001,
}

# Single-letter month alphabet. I is intentionally skipped.
MONTH_LETTERS = "ABCDEFGHJKLM"

# Single-character month codes used by other vendors.
# Index 0 is January.
MONTH_CODES_123ABC = "123456789ABC"
MONTH_CODES_123XYZ = "123456789XYZ"
MONTH_CODES_123OND = "123456789OND"

# Legacy spellings accepted in addition to the codes above.
MONTH_CODE_ALIASES_123OND = {"0": 10}

# Lettered year digits (Seiko style). Digits map to themselves.
# I is skipped here as well.
YEAR_DIGIT_LETTERS = "ABCDEFGHJ"

WEEK_RANGE = (1, 53)

# --- Sanity Windows ---

# Reconciled years outside this window get logged as suspicious.
PLAUSIBLE_YEARS = (1988, 2010)

# --- Manufacturers ---

MANUFACTURER_NAMES = {
    "AMIC": "AMIC Technology",
    "ANALOG": "Analog Devices",
    "ATMEL": "Atmel",
    "AT_T": "AT&T Technologies",
    "BSI": "BSI",
    "CROSSLINK": "Crosslink Semiconductor",
    "FUJITSU": "Fujitsu",
    "HUDSON": "Hudson",
    "HYNIX": "Hynix",
    "HYUNDAI": "Hyundai",
    "KDS": "Daishinku",
    "KINSEKI": "Kinseki",
    "LGS": "Lucky GoldStar",
    "LSI_LOGIC": "LSI Logic",
    "MACRONIX": "Macronix",
    "MAGNACHIP": "Magnachip",
    "MITSUBISHI": "Mitsubishi",
    "MITSUMI": "Mitsumi",
    "MOSEL_VITELIC": "Mosel-Vitelic",
    "MOTOROLA": "Motorola",
    "NEC": "NEC",
    "OKI": "OKI",
    "PANASONIC": "Panasonic",
    "ROHM": "ROHM",
    "SAMSUNG": "Samsung",
    "SANYO": "Sanyo",
    "SEIKO": "Seiko Instruments Inc.",
    "SHARP": "Sharp",
    "SST": "SST",
    "ST_MICRO": "STMicroelectronics",
    "TDK": "TDK",
    "TEXAS_INSTRUMENTS": "Texas Instruments",
    "TOSHIBA": "Toshiba",
    "VICTRONIX": "Victronix",
    "WINBOND": "Winbond",
}

# --- Crystal Frequencies (Hz) ---

FREQ_32_KIHZ = 32_768
FREQ_4_MIHZ = 4_194_304
FREQ_8_MIHZ = 8_388_608
FREQ_20_MIHZ = 20_971_520
FREQ_32_MIHZ = 33_554_432

# --- Board Layouts ---

# Schema: { board_type: { "hint_slot": slot, "slots": { slot: family } } }
# The hint slot is decoded first; its full year disambiguates partial years
# on every other slot of the same board.
BOARD_LAYOUTS: dict[str, dict] = {
    "DMG": {
        "hint_slot": "cpu",
        "slots": {
            "cpu": "dmg_cpu",
            "work_ram": "sram_sop_28",
            "video_ram": "sram_sop_28",
            "amplifier": "dmg_amp",
            "regulator": "dmg_reg",
            "crystal": "dmg_crystal",
        },
    },
    "MGB": {
        "hint_slot": "cpu",
        "slots": {
            "cpu": "mgb_cpu",
            "work_ram": "sram_sop_28",
            "amplifier": "mgb_amp",
            "crystal": "mgb_crystal",
        },
    },
    "CGB": {
        "hint_slot": None,
        "slots": {
            "work_ram": "sram_sop_28",
            "amplifier": "mgb_amp",
            "regulator": "cgb_reg",
            "crystal": "cgb_crystal",
        },
    },
    "AGB": {
        "hint_slot": "cpu",
        "slots": {
            "cpu": "agb_cpu",
            "amplifier": "agb_amp",
            "regulator": "agb_reg",
            "crystal": "agb_crystal",
        },
    },
}
