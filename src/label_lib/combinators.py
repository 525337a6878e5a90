"""
Streaming token combinators and the StreamingGrammar built from them.

Some label formats read most naturally as a left-to-right sequence of small,
independently validated tokens ("vendor tag, part number, country, date code,
lot code"). Instead of one big regex, these grammars are assembled from
reusable parsers:

    lines(tag("DMG-CPU"), tag("LR35902"), seq(year2_week2, char(" "), uppers(1)))

Every parser runs in one of two modes:
- complete (final=True): the text is the whole label; running out of input
  inside a token is a failure.
- partial (final=False): the text is only a prefix; running out of input
  inside a token reports INCOMPLETE, meaning "consistent so far".

Partial mode lets multi-line labels be fed one physical line at a time and
rejected as soon as a line cannot belong to the grammar.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from src.label_lib.decoders import (
    decode_month2,
    decode_month_123abc,
    decode_month_123ond,
    decode_month_123xyz,
    decode_month_letter,
    decode_week2,
    decode_year1,
    decode_year1_letter,
    decode_year2,
)
from src.label_lib.errors import DecodeError, NoMatchError
from src.label_lib.types import PartDateCode

logger = logging.getLogger(__name__)

T = TypeVar("T")

MATCH = "match"
INCOMPLETE = "incomplete"
FAIL = "fail"

# Physical lines of a label are joined with either of these.
LINE_SEPARATORS = " \n"


@dataclass(frozen=True)
class Step:
    """
    Result of running a parser at some position.

    Attributes:
        status: MATCH, INCOMPLETE or FAIL.
        pos: Position after the match, or where the failure happened.
        value: Parsed value (MATCH only).
        expected: What the parser wanted to see (FAIL only).
    """

    status: str
    pos: int
    value: Any = None
    expected: str = ""


class Parser:
    """Base class for all token combinators."""

    def run(self, text: str, pos: int, final: bool) -> Step:
        raise NotImplementedError

    def map(self, f: Callable[[Any], Any]) -> "Parser":
        return Map(self, f)


class Satisfy(Parser):
    """Between min and max characters that all satisfy a predicate."""

    def __init__(self, min_count: int, max_count: int, predicate: Callable[[str], bool], description: str):
        self.min_count = min_count
        self.max_count = max_count
        self.predicate = predicate
        self.description = description

    def run(self, text: str, pos: int, final: bool) -> Step:
        end = pos
        limit = min(len(text), pos + self.max_count)
        while end < limit and self.predicate(text[end]):
            end += 1

        if end - pos >= self.min_count:
            return Step(MATCH, end, text[pos:end])
        if end == len(text) and not final:
            return Step(INCOMPLETE, end)
        return Step(FAIL, end, expected=self.description)


class Tag(Parser):
    """An exact literal."""

    def __init__(self, literal: str):
        self.literal = literal

    def run(self, text: str, pos: int, final: bool) -> Step:
        if text.startswith(self.literal, pos):
            return Step(MATCH, pos + len(self.literal), self.literal)
        rest = text[pos:]
        if not final and len(rest) < len(self.literal) and self.literal.startswith(rest):
            return Step(INCOMPLETE, len(text))
        return Step(FAIL, pos, expected=repr(self.literal))


class Seq(Parser):
    """All parsers in order; the value is a tuple of their values."""

    def __init__(self, *parsers: Parser):
        self.parsers = parsers

    def run(self, text: str, pos: int, final: bool) -> Step:
        values = []
        for parser in self.parsers:
            step = parser.run(text, pos, final)
            if step.status != MATCH:
                return step
            values.append(step.value)
            pos = step.pos
        return Step(MATCH, pos, tuple(values))


class Alt(Parser):
    """
    The first alternative that matches.

    A branch that runs out of input in partial mode stops the search and
    reports INCOMPLETE, since it may still match once more text arrives.
    """

    def __init__(self, *parsers: Parser):
        self.parsers = parsers

    def run(self, text: str, pos: int, final: bool) -> Step:
        furthest = Step(FAIL, pos, expected="one of several alternatives")
        for parser in self.parsers:
            step = parser.run(text, pos, final)
            if step.status != FAIL:
                return step
            if step.pos > furthest.pos:
                furthest = step
        return furthest


class Opt(Parser):
    """Zero or one occurrence; the value is None when absent."""

    def __init__(self, parser: Parser):
        self.parser = parser

    def run(self, text: str, pos: int, final: bool) -> Step:
        step = self.parser.run(text, pos, final)
        if step.status == FAIL:
            return Step(MATCH, pos, None)
        return step


class Map(Parser):
    def __init__(self, parser: Parser, f: Callable[[Any], Any]):
        self.parser = parser
        self.f = f

    def run(self, text: str, pos: int, final: bool) -> Step:
        step = self.parser.run(text, pos, final)
        if step.status != MATCH:
            return step
        return Step(MATCH, step.pos, self.f(step.value))


class MapDecode(Parser):
    """
    Feeds the matched text to a primitive decoder.

    A rejected value (e.g. week "54") is treated as a non-match of this
    token, so an alternative grammar or branch can still be tried.
    """

    def __init__(self, parser: Parser, decoder: Callable[[str], Any], description: str):
        self.parser = parser
        self.decoder = decoder
        self.description = description

    def run(self, text: str, pos: int, final: bool) -> Step:
        step = self.parser.run(text, pos, final)
        if step.status != MATCH:
            return step
        try:
            return Step(MATCH, step.pos, self.decoder(step.value))
        except DecodeError:
            return Step(FAIL, pos, expected=self.description)


class Recognize(Parser):
    """The raw text consumed by a parser, instead of its value."""

    def __init__(self, parser: Parser):
        self.parser = parser

    def run(self, text: str, pos: int, final: bool) -> Step:
        step = self.parser.run(text, pos, final)
        if step.status != MATCH:
            return step
        return Step(MATCH, step.pos, text[pos : step.pos])


# --- Constructors ---


def tag(literal: str) -> Parser:
    return Tag(literal)


def char(c: str) -> Parser:
    return Tag(c)


def one_of(chars: str) -> Parser:
    return Satisfy(1, 1, lambda c: c in chars, f"one of {chars!r}")


def take(count: int) -> Parser:
    return Satisfy(count, count, lambda c: True, f"{count} character(s)")


def satisfy_m_n(min_count: int, max_count: int, predicate: Callable[[str], bool], description: str = "") -> Parser:
    return Satisfy(min_count, max_count, predicate, description or f"{min_count}-{max_count} matching characters")


def digits(count: int) -> Parser:
    return Satisfy(count, count, lambda c: "0" <= c <= "9", f"{count} digit(s)")


def uppers(count: int) -> Parser:
    return Satisfy(count, count, lambda c: "A" <= c <= "Z", f"{count} uppercase letter(s)")


def alphas(count: int) -> Parser:
    return Satisfy(count, count, lambda c: c.isascii() and c.isalpha(), f"{count} letter(s)")


def alnum_uppers(count: int) -> Parser:
    return Satisfy(
        count,
        count,
        lambda c: "A" <= c <= "Z" or "0" <= c <= "9",
        f"{count} uppercase letter(s) or digit(s)",
    )


def seq(*parsers: Parser) -> Parser:
    return Seq(*parsers)


def alt(*parsers: Parser) -> Parser:
    return Alt(*parsers)


def opt(parser: Parser) -> Parser:
    return Opt(parser)


def recognize(parser: Parser) -> Parser:
    return Recognize(parser)


def value(parser: Parser, v: Any) -> Parser:
    return Map(parser, lambda _: v)


def delimited(before: Parser, parser: Parser, after: Parser) -> Parser:
    return Seq(before, parser, after).map(lambda values: values[1])


def map_decode(parser: Parser, decoder: Callable[[str], Any], description: str) -> Parser:
    return MapDecode(parser, decoder, description)


def lines(*parsers: Parser) -> Parser:
    """
    Tokens printed on consecutive physical lines.

    Transcriptions join lines with a space or a newline; both are accepted.
    The value is a tuple with one entry per line parser.
    """
    separated: list[Parser] = []
    for i, parser in enumerate(parsers):
        if i:
            separated.append(one_of(LINE_SEPARATORS))
        separated.append(parser)
    return Seq(*separated).map(lambda values: values[::2])


# --- Date Tokens ---

year1 = map_decode(take(1), decode_year1, "1-digit year")
year2 = map_decode(take(2), decode_year2, "2-digit year")
week2 = map_decode(take(2), decode_week2, "2-digit week (01-53)")
month2 = map_decode(take(2), decode_month2, "2-digit month (01-12)")
month_letter = map_decode(take(1), decode_month_letter, "month letter (A-H, J-M)")

# Single-character codes used by a few vendors
year1_letter = map_decode(take(1), decode_year1_letter, "1-character year (0-9, A-H, J)")
month_123abc = map_decode(take(1), decode_month_123abc, "month code (1-9, A-C)")
month_123xyz = map_decode(take(1), decode_month_123xyz, "month code (1-9, X-Z)")
month_123ond = map_decode(take(1), decode_month_123ond, "month code (1-9, O, N, D)")

year1_week2 = seq(year1, week2).map(lambda v: PartDateCode(year=v[0], week=v[1]))
year2_week2 = seq(year2, week2).map(lambda v: PartDateCode(year=v[0], week=v[1]))
year2_month2 = seq(year2, month2).map(lambda v: PartDateCode(year=v[0], month=v[1]))
year1_month_letter = seq(year1, month_letter).map(lambda v: PartDateCode(year=v[0], month=v[1]))
month_letter_year1 = seq(month_letter, year1).map(lambda v: PartDateCode(year=v[1], month=v[0]))


class StreamingGrammar(Generic[T]):
    """
    A label grammar assembled from token combinators.

    Interchangeable with Grammar inside a MultiGrammar. It has no single
    regex, so the dispatcher prefilter always keeps it as a candidate.
    """

    pattern = None

    def __init__(self, name: str, parser: Parser, examples: Sequence[str] = ()):
        self.name = name
        self.parser = parser
        self.examples = tuple(examples)

    def parse(self, label: str) -> T:
        """
        Decodes a complete label.

        Raises:
            NoMatchError: If the tokens do not account for the whole label.
                          The detail names the first offending offset.
        """
        step = self.parser.run(label, 0, True)
        if step.status == MATCH and step.pos == len(label):
            return step.value
        if step.status == MATCH:
            raise NoMatchError(label, f"unexpected text at offset {step.pos}")
        raise NoMatchError(label, f"expected {step.expected} at offset {step.pos}")

    def accepts_prefix(self, prefix: str) -> bool:
        """
        Checks whether a label starting with `prefix` could still decode.

        Returns:
            True if the prefix is consistent with eventual success.
        """
        step = self.parser.run(prefix, 0, False)
        if step.status == INCOMPLETE:
            return True
        if step.status == MATCH:
            return step.pos == len(prefix)
        return False

    def stream(self) -> "LabelStream[T]":
        """Starts a line-at-a-time decode of a multi-line label."""
        return LabelStream(self)

    def __repr__(self) -> str:
        return f"StreamingGrammar({self.name!r})"


class LabelStream(Generic[T]):
    """
    Incremental decode of a label supplied one physical line at a time.

    Usage:
        stream = grammar.stream()
        stream.feed("LH5264N4T")      # True
        stream.feed("LSI LOGIC")      # True
        stream.feed("TOSHIBA")        # False, rejected early
    """

    def __init__(self, grammar: StreamingGrammar[T]):
        self.grammar = grammar
        self.lines: list[str] = []
        self.rejected = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def feed(self, line: str) -> bool:
        """
        Adds the next line.

        Returns:
            False once the label can no longer match; later feeds stay False.
        """
        self.lines.append(line)
        if not self.rejected and not self.grammar.accepts_prefix(self.text):
            logger.debug(f"{self.grammar.name}: rejected after line {len(self.lines)}: {line!r}")
            self.rejected = True
        return not self.rejected

    def finish(self) -> T:
        """Decodes everything fed so far as a complete label."""
        return self.grammar.parse(self.text)
