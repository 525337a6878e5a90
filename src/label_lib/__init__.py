"""
Silkscreen Label Library (Package Entry Point).

Exposes the decoding engine (primitive decoders, grammars, dispatchers and
date reconciliation) plus the registry and submission helpers built on it.
"""

from .combinators import LabelStream, StreamingGrammar
from .decoders import (
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
from .dispatcher import MultiGrammar
from .errors import DecodeError, NoMatchError
from .exporters import generate_parts_csv
from .grammar import Grammar, LabelParser
from .reconcile import DateCode, reconcile_year
from .registry import Registry, get_registry, init_registry
from .submission import load_submission, process_submission
from .types import (
    Crystal,
    FullYear,
    GenericPart,
    Manufacturer,
    Month,
    PartDateCode,
    PartialYear,
    PartRow,
    StaticRam,
    SubmissionStats,
    Week,
    Year,
)

__all__ = [
    # types
    "Year",
    "FullYear",
    "PartialYear",
    "Week",
    "Month",
    "Manufacturer",
    "PartDateCode",
    "GenericPart",
    "StaticRam",
    "Crystal",
    "PartRow",
    "SubmissionStats",
    # errors
    "DecodeError",
    "NoMatchError",
    # decoders
    "decode_year1",
    "decode_year1_letter",
    "decode_year2",
    "decode_week2",
    "decode_month2",
    "decode_month_letter",
    "decode_month_123abc",
    "decode_month_123xyz",
    "decode_month_123ond",
    # grammars
    "LabelParser",
    "Grammar",
    "StreamingGrammar",
    "LabelStream",
    "MultiGrammar",
    # reconcile
    "reconcile_year",
    "DateCode",
    # registry
    "Registry",
    "init_registry",
    "get_registry",
    # submission
    "process_submission",
    "load_submission",
    "generate_parts_csv",
]
