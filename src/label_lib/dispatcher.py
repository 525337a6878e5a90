"""
Multi-grammar dispatch for one component family.

A family (e.g. "SOP-28 SRAM") is printed in many historical label formats,
each with its own Grammar. MultiGrammar holds them in declaration order and
picks the first one that decodes a label.

Trying every member's regex one by one is wasteful for large families, so
construction also builds one combined prefilter: every member pattern is
wrapped in a lookahead branch with its own marker group, and a single match
against the label reports which members can possibly succeed.
"""

import logging
import re
from collections.abc import Sequence
from typing import Generic, TypeVar

from src.label_lib.errors import DecodeError, NoMatchError
from src.label_lib.grammar import LabelParser

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Member names must not leak into the combined pattern, or two members using
# the same group name would collide.
_NAMED_GROUP = re.compile(r"\(\?P<[A-Za-z_][A-Za-z0-9_]*>")


def _strip_named_groups(pattern: str) -> str:
    return _NAMED_GROUP.sub("(?:", pattern)


def _flatten(parsers: Sequence[LabelParser]) -> tuple[LabelParser, ...]:
    flat: list[LabelParser] = []
    for parser in parsers:
        if isinstance(parser, MultiGrammar):
            flat.extend(parser.parsers)
        else:
            flat.append(parser)
    return tuple(flat)


def _build_prefilter(parsers: Sequence[LabelParser]) -> re.Pattern[str] | None:
    """
    Builds the combined candidate filter.

    Each member becomes `(?:(?=(?P<_mN> ... \\Z))|)`: the lookahead records a
    marker when the member matches the whole label, and the empty branch
    lets the scan continue either way. Member patterns are placed on their
    own lines so a trailing verbose-mode comment cannot swallow the wrapper.
    """
    branches = []
    for i, parser in enumerate(parsers):
        if parser.pattern is None:
            continue
        stripped = _strip_named_groups(parser.pattern)
        branches.append(f"(?:(?=(?P<_m{i}>(?:\n{stripped}\n)\\Z))|)")

    if not branches:
        return None
    return re.compile("".join(branches), re.VERBOSE)


class MultiGrammar(Generic[T]):
    """
    An ordered set of grammars for one component family.

    Attributes:
        name: Family name (e.g. "sram_sop_28").
        parsers: Flattened member grammars, in declaration order.
    """

    # A dispatcher has no single pattern; nesting flattens it instead.
    pattern = None

    def __init__(self, name: str, parsers: Sequence[LabelParser]):
        self.name = name
        self.parsers = _flatten(parsers)
        self._prefilter = _build_prefilter(self.parsers)
        self._always = tuple(i for i, p in enumerate(self.parsers) if p.pattern is None)

    @property
    def examples(self) -> tuple[str, ...]:
        return tuple(example for parser in self.parsers for example in getattr(parser, "examples", ()))

    def candidates(self, label: str) -> list[int]:
        """
        Indices of members that might decode `label`, in declaration order.

        Regex members are included only if their pattern matches the whole
        label; members without a pattern are always included.
        """
        indices = set(self._always)
        if self._prefilter is not None:
            match = self._prefilter.match(label)
            if match is not None:
                for i, parser in enumerate(self.parsers):
                    if parser.pattern is not None and match.group(f"_m{i}") is not None:
                        indices.add(i)
        return sorted(indices)

    def parse(self, label: str) -> T:
        """
        Decodes a label with the first member that accepts it.

        If a later candidate also accepts the label, a warning is logged
        ("multiple matches for <label>") and the first result is kept.

        Raises:
            NoMatchError: If no member decodes the label.
        """
        candidates = self.candidates(label)
        last_error: DecodeError | None = None

        for position, index in enumerate(candidates):
            parser = self.parsers[index]
            try:
                result = parser.parse(label)
            except NoMatchError:
                continue
            except DecodeError as e:
                logger.debug(f"{self.name}: {parser.name} rejected {label!r}: {e}")
                last_error = e
                continue

            self._check_ambiguity(label, parser, candidates[position + 1 :])
            return result

        if last_error is not None:
            raise NoMatchError(label) from last_error
        raise NoMatchError(label)

    def _check_ambiguity(self, label: str, winner: LabelParser, remaining: Sequence[int]) -> None:
        for index in remaining:
            other = self.parsers[index]
            try:
                other.parse(label)
            except DecodeError:
                continue
            logger.warning(f"multiple matches for {label}")
            logger.debug(f"{self.name}: {winner.name!r} and {other.name!r} both accept {label!r}")
            return

    def matching_names(self, label: str) -> list[str]:
        """Names of every member that decodes `label`, in declaration order."""
        names = []
        for index in self.candidates(label):
            parser = self.parsers[index]
            try:
                parser.parse(label)
            except DecodeError:
                continue
            names.append(parser.name)
        return names

    def __len__(self) -> int:
        return len(self.parsers)

    def __repr__(self) -> str:
        return f"MultiGrammar({self.name!r}, {len(self.parsers)} grammars)"
