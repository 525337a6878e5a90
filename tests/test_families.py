import logging

import pytest
from hypothesis import given, settings, strategies as st

from src.label_lib import (
    Crystal,
    DecodeError,
    FullYear,
    GenericPart,
    Manufacturer,
    Month,
    NoMatchError,
    PartialYear,
    StaticRam,
    Week,
    init_registry,
)
from src.label_lib.families import sram


def _samples():
    registry = init_registry()
    for name in registry.names():
        family = registry.family(name)
        for grammar in family.parsers:
            for label in grammar.examples:
                yield pytest.param(name, grammar, label, id=f"{name}:{label}")


SAMPLES = list(_samples())


def test_every_grammar_has_samples(registry):
    for name in registry.names():
        for grammar in registry.family(name).parsers:
            assert grammar.examples, f"{grammar.name} has no sample labels"


@pytest.mark.parametrize("family_name, grammar, label", SAMPLES)
def test_sample_decodes_with_its_grammar(family_name, grammar, label):
    part = grammar.parse(label)
    assert part.manufacturer is not None


@pytest.mark.parametrize("family_name, grammar, label", SAMPLES)
def test_sample_is_unambiguous_in_its_family(registry, family_name, grammar, label):
    """The family must pick the sample's own grammar, and only that one."""
    family = registry.family(family_name)
    assert family.matching_names(label) == [grammar.name]


# --- End-to-End Labels ---


def test_lsi_logic_spaced_date_code(caplog):
    with caplog.at_level(logging.WARNING):
        part = init_registry().parse("sram_sop_28", "LH5264N4T LSI LOGIC JAPAN D4 06 05 C")

    assert part == StaticRam(
        kind="LH5264N4T",
        manufacturer=Manufacturer.LSI_LOGIC,
        date_code=part.date_code,
    )
    assert part.date_code.year == PartialYear(4)
    assert part.date_code.week == Week(6)
    assert "multiple matches" not in caplog.text


def test_lsi_logic_two_digit_year(registry):
    part = registry.parse("sram_sop_28", "LH5264N4T LSI LOGIC JAPAN D9204 5 C")
    assert part.date_code.year == FullYear(1992)
    assert part.date_code.week == Week(4)


def test_lsi_logic_multi_line_transcription(registry):
    part = registry.parse("sram_sop_28", "LH52A64N-TL\nLSI LOGIC\nJAPAN\nD404 0U C")
    assert part.kind == "LH52A64N-TL"
    assert part.date_code.year == PartialYear(4)


def test_hyundai_formats(registry):
    old = registry.parse("sram_sop_28", "HYUNDAI HY6264ALLJ-10 9327B KOREA")
    new = registry.parse("sram_sop_28", "HY6264A LLJ-10 9902B KOREA")

    assert old.kind == "HY6264ALLJ-10"
    assert old.date_code.year == FullYear(1993)
    assert new.kind == "HY6264ALLJ-10"
    assert new.date_code.week == Week(2)


def test_gm76c256_vendor_follows_label(registry):
    lgs = registry.parse("sram_sop_28", "LGS GM76C256CLLFW70 0047 KOREA")
    hyundai = registry.parse("sram_sop_28", "HYUNDAI GM76C256CLLFW70 0047 KOREA")

    assert lgs.manufacturer == Manufacturer.LGS
    assert hyundai.manufacturer == Manufacturer.HYUNDAI
    assert lgs.kind == hyundai.kind == "GM76C256CLLFW70"


def test_sanyo_lettered_month(registry):
    part = registry.parse("sram_sop_28", "SANYO LC35256FM-70U JAPAN 0LK5G")
    assert part.kind == "LC35256FM-70"
    assert part.date_code.year == PartialYear(0)
    assert part.date_code.month == Month.NOVEMBER


def test_sharp_reserved_year_code(registry):
    part = registry.parse("agb_reg", "AGB-REG IR3E09N AA24 A")
    assert part == GenericPart(kind="IR3E09N", manufacturer=Manufacturer.SHARP, date_code=part.date_code)
    assert part.date_code.year == FullYear(2000)


def test_cpu_full_year(registry):
    part = registry.parse("dmg_cpu", "DMG-CPU B © 1989 Nintendo JAPAN 9207 D")
    assert part.kind == "DMG-CPU B"
    assert part.date_code.year == FullYear(1992)
    assert part.date_code.week == Week(7)


def test_crystal_frequency(registry):
    part = registry.parse("dmg_crystal", "KDS 6F 4.194")

    assert isinstance(part, Crystal)
    assert part.format_frequency() == "4.194304 MHz"
    assert part.date_code.month == Month.JUNE

    rtc = registry.parse("rtc_crystal", "KDS1H")
    assert rtc.format_frequency() == "32.768 kHz"


def test_seiko_lettered_year(registry):
    part = registry.parse("rtc_sop_8", "S3511 AVEX 2753")
    assert part == GenericPart(kind="S-3511A", manufacturer=Manufacturer.SEIKO, date_code=part.date_code)
    assert part.date_code.year == PartialYear(5)
    assert part.date_code.month == Month.OCTOBER


def test_ti_lettered_month(registry):
    part = registry.parse("supervisor_reset", "LV2416 0CM A73E")
    assert part.manufacturer == Manufacturer.TEXAS_INSTRUMENTS
    assert part.date_code.year == PartialYear(0)
    assert part.date_code.month == Month.DECEMBER


def test_panasonic_mbc_date_code(registry):
    part = registry.parse("mbc1_sop24", "DMG MBC1-B Nintendo P 0'D7")
    assert part.kind == "MBC1-B"
    assert part.manufacturer == Manufacturer.PANASONIC
    assert part.date_code.month == Month.DECEMBER

    with pytest.raises(NoMatchError):
        registry.parse("mbc1_sop24", "DMG MBC1-B Nintendo P 0'I7")


def test_invalid_week_in_streaming_label_is_no_match(registry):
    with pytest.raises(NoMatchError):
        registry.parse("sram_sop_28", "LH5264N4T LSI LOGIC JAPAN D4 54 05 C")


def test_lsi_logic_family_is_nested():
    names = [p.name for p in sram.SRAM_SOP_28.parsers]
    assert "LSI Logic LH5264N4T" in names
    assert "LSI Logic LH52xx (2-digit year)" in names


def test_unknown_family(registry):
    with pytest.raises(KeyError, match="Unknown component family"):
        registry.family("vacuum_tube")


@settings(max_examples=50, deadline=None)
@given(st.text(max_size=50))
def test_families_never_crash(garbage):
    """
    STRESS TEST: whatever is typed into the checker, every family either
    decodes it or raises DecodeError.
    """
    registry = init_registry()
    for name in registry.names():
        try:
            registry.parse(name, garbage)
        except DecodeError:
            pass
