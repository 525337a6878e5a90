import re

import pytest

from src.label_lib import (
    DecodeError,
    FullYear,
    Grammar,
    Manufacturer,
    NoMatchError,
    PartDateCode,
    StaticRam,
    Week,
    decode_week2,
    decode_year2,
)


def _ram(m):
    return StaticRam(
        kind=m["kind"],
        manufacturer=Manufacturer.HYUNDAI,
        date_code=PartDateCode(year=decode_year2(m["year"]), week=decode_week2(m["week"])),
    )


@pytest.fixture
def hy6264():
    return Grammar(
        "Hyundai HY6264 (1994+)",
        r"(?P<kind>HY6264A)\ (?P<power>L|LL)J-(10|70)\ (?P<year>[0-9]{2})(?P<week>[0-9]{2})[A-Z]\ KOREA",
        _ram,
    )


def test_grammar_decodes_whole_label(hy6264):
    part = hy6264.parse("HY6264A LLJ-10 9902B KOREA")

    assert part.kind == "HY6264A"
    assert part.manufacturer == Manufacturer.HYUNDAI
    assert part.date_code == PartDateCode(year=FullYear(1999), week=Week(2))


def test_grammar_rejects_partial_match(hy6264):
    """A prefix that matches is still not a match: the pattern must cover the whole label."""
    with pytest.raises(NoMatchError) as e:
        hy6264.parse("HY6264A LLJ-10 9902B KOREA 2")

    assert e.value.label == "HY6264A LLJ-10 9902B KOREA 2"
    assert str(e.value) == "no match for HY6264A LLJ-10 9902B KOREA 2"

    with pytest.raises(NoMatchError):
        hy6264.parse("xHY6264A LLJ-10 9902B KOREA")


def test_grammar_reports_rejected_capture(hy6264):
    """Week 54 slips through [0-9]{2}; the decoder failure names the full label."""
    label = "HY6264A LLJ-10 9954B KOREA"

    with pytest.raises(DecodeError) as e:
        hy6264.parse(label)

    assert not isinstance(e.value, NoMatchError)
    assert e.value.label == label
    assert e.value.constraint == "range"
    assert label in str(e.value)


def test_verbose_patterns_ignore_layout_whitespace():
    grammar = Grammar(
        "verbose",
        r"""
        (?P<kind>[A-Z]+)   # part
        \ (?P<year>[0-9]{2})
        """,
        lambda m: (m["kind"], decode_year2(m["year"])),
    )
    assert grammar.parse("ABC 95") == ("ABC", FullYear(1995))


def test_malformed_pattern_fails_at_construction():
    with pytest.raises(re.error):
        Grammar("broken", r"(?P<kind>[A-Z", lambda m: m)


def test_examples_are_kept():
    grammar = Grammar("g", r"A", lambda m: m[0], examples=["A"])
    assert grammar.examples == ("A",)
    assert repr(grammar) == "Grammar('g')"
