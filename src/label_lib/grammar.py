r"""
The Grammar abstraction: one compiled pattern plus one extraction function.

A Grammar is the atomic decoding unit. It describes one historical label
format of one component family, e.g. "Hyundai SRAM, 1994+":

    Grammar(
        "Hyundai HY6264 (1994+)",
        r"(?P<kind>HY6264A)\ (?P<power>L|LL)J-(10|70)\ (?P<year>[0-9]{2})(?P<week>[0-9]{2})[A-Z]\ KOREA",
        lambda m: StaticRam(...),
    )

Patterns are compiled in verbose mode, so whitespace inside them is ignored
(write literal spaces as '\ ') and '#' starts a comment (write '\#').
"""

import logging
import re
from collections.abc import Callable, Sequence
from typing import Generic, Protocol, TypeVar

from src.label_lib.errors import DecodeError, NoMatchError

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class LabelParser(Protocol[T_co]):
    """
    Common capability of everything that can decode a label.

    Implemented by Grammar, StreamingGrammar and MultiGrammar, so a
    dispatcher never needs to know how a member was built.

    Attributes:
        name: Human-readable grammar name (e.g. "LSI Logic LH5264N4T").
        pattern: Source regex for the prefilter, or None if the parser
                 cannot be expressed as one pattern.
    """

    name: str
    pattern: str | None

    def parse(self, label: str) -> T_co: ...


class Grammar(Generic[T]):
    """
    A single regex-backed label grammar.

    Construction compiles the pattern once; a malformed pattern raises
    re.error immediately so a broken grammar can never be used.
    """

    def __init__(
        self,
        name: str,
        pattern: str,
        extract: Callable[[re.Match[str]], T],
        examples: Sequence[str] = (),
    ):
        self.name = name
        self.pattern = pattern
        self.regex = re.compile(pattern, re.VERBOSE)
        self.extract = extract
        self.examples = tuple(examples)

    def parse(self, label: str) -> T:
        """
        Decodes a label with this grammar.

        The pattern must account for the entire label; partial matches are
        rejected.

        Args:
            label: The raw label text.

        Returns:
            The value built by the extraction function.

        Raises:
            NoMatchError: If the pattern does not match the whole label.
            DecodeError: If the extraction function rejects a captured value
                         (a grammar authoring bug: the pattern let it through).
        """
        match = self.regex.fullmatch(label)
        if match is None:
            raise NoMatchError(label)

        try:
            return self.extract(match)
        except DecodeError as e:
            logger.debug(f"{self.name}: matched {label!r} but extraction failed: {e}")
            raise DecodeError(f"{label}: {e}", label=label, constraint=e.constraint) from e

    def __repr__(self) -> str:
        return f"Grammar({self.name!r})"
