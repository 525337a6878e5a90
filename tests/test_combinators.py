import pytest
from hypothesis import given, strategies as st

from src.label_lib import DecodeError, NoMatchError, PartialYear, StreamingGrammar, Week
from src.label_lib.combinators import (
    FAIL,
    INCOMPLETE,
    MATCH,
    alt,
    char,
    digits,
    lines,
    opt,
    recognize,
    seq,
    tag,
    uppers,
    week2,
    year1_week2,
)
from src.label_lib.families.sram import LSI_LOGIC_LH5264N4T, WINBOND_W24257

# --- Primitive Parsers ---


def test_tag_complete_and_partial():
    parser = tag("KOREA")

    assert parser.run("KOREA", 0, True).status == MATCH
    assert parser.run("KOR", 0, True).status == FAIL
    # Out of input inside the literal: still consistent
    assert parser.run("KOR", 0, False).status == INCOMPLETE
    assert parser.run("KOX", 0, False).status == FAIL


def test_digits_stop_at_first_non_digit():
    step = digits(3).run("12A", 0, False)
    assert step.status == FAIL
    assert step.pos == 2


def test_alt_takes_first_success():
    parser = alt(tag("LL"), tag("L"))
    step = parser.run("LL", 0, True)
    assert step.value == "LL"
    assert parser.run("L ", 0, True).value == "L"


def test_opt_yields_none():
    step = opt(char(" ")).run("X", 0, True)
    assert step.status == MATCH
    assert step.value is None
    assert step.pos == 0


def test_decoder_rejection_is_a_non_match():
    """week2 consumes two characters, but 54 is not a week."""
    assert week2.run("54", 0, True).status == FAIL
    assert week2.run("06", 0, True).value == Week(6)


def test_recognize_returns_consumed_text():
    parser = recognize(seq(tag("GM76C256"), opt(uppers(1))))
    assert parser.run("GM76C256C", 0, True).value == "GM76C256C"


def test_lines_accept_space_or_newline():
    parser = lines(tag("Winbond"), tag("W24257S-70LL"))

    assert parser.run("Winbond W24257S-70LL", 0, True).value == ("Winbond", "W24257S-70LL")
    assert parser.run("Winbond\nW24257S-70LL", 0, True).value == ("Winbond", "W24257S-70LL")
    assert parser.run("Winbond\tW24257S-70LL", 0, True).status == FAIL


# --- StreamingGrammar ---


@pytest.fixture
def date_grammar():
    return StreamingGrammar("date", seq(tag("D"), year1_week2).map(lambda v: v[1]))


def test_streaming_parse(date_grammar):
    date_code = date_grammar.parse("D406")
    assert date_code.year == PartialYear(4)
    assert date_code.week == Week(6)


def test_streaming_rejects_trailing_text(date_grammar):
    with pytest.raises(NoMatchError) as e:
        date_grammar.parse("D406 X")
    assert "unexpected text at offset 4" in str(e.value)


def test_streaming_names_failing_offset(date_grammar):
    with pytest.raises(NoMatchError) as e:
        date_grammar.parse("D4X6")
    assert "at offset 2" in str(e.value)


@pytest.mark.parametrize(
    "prefix, expected",
    [
        ("", True),
        ("D", True),
        ("D4", True),
        ("D40", True),
        ("D406", True),
        ("D406 ", False),
        ("X", False),
        ("D4X6", False),
        # week 00 can never become valid
        ("D400", False),
    ],
)
def test_accepts_prefix(date_grammar, prefix, expected):
    assert date_grammar.accepts_prefix(prefix) is expected


def test_label_stream_feeds_lines():
    stream = LSI_LOGIC_LH5264N4T.stream()

    assert stream.feed("LH5264N4T")
    assert stream.feed("LSI LOGIC")
    assert stream.feed("JAPAN")
    assert stream.feed("D4 06 05 C")

    assert stream.text == "LH5264N4T\nLSI LOGIC\nJAPAN\nD4 06 05 C"
    part = stream.finish()
    assert part.kind == "LH5264N4T"
    assert part.date_code.year == PartialYear(4)
    assert part.date_code.week == Week(6)


def test_label_stream_rejects_early():
    stream = WINBOND_W24257.stream()

    assert stream.feed("Winbond")
    assert not stream.feed("TOSHIBA")
    assert stream.rejected
    # Once rejected, always rejected
    assert not stream.feed("W24257S-70LL")

    with pytest.raises(NoMatchError):
        stream.finish()


@given(st.text(max_size=60))
def test_streaming_grammar_never_crashes(garbage):
    """
    STRESS TEST: arbitrary text either decodes or raises DecodeError,
    and accepts_prefix always answers.
    """
    for grammar in (LSI_LOGIC_LH5264N4T, WINBOND_W24257):
        grammar.accepts_prefix(garbage)
        try:
            grammar.parse(garbage)
        except DecodeError:
            pass
