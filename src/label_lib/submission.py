"""
Submission processing.

A submission is one photographed board, transcribed as JSON:

    {
        "code": "DMG-0042",
        "board": "DMG",
        "labels": {
            "cpu": "DMG-CPU B © 1989 Nintendo JAPAN 9207 D",
            "work_ram": "LH5264N4T LSI LOGIC JAPAN D4 06 05 C",
            ...
        }
    }

Each labelled slot is decoded with the family its board layout assigns to
it. The full year decoded from the hint slot (usually the CPU) is then
used to reconcile single-digit years printed on the other parts.
"""

import json
import logging
from typing import Any

import requests

from src.label_lib import constants as C
from src.label_lib.errors import DecodeError, NoMatchError
from src.label_lib.reconcile import DateCode
from src.label_lib.registry import get_registry
from src.label_lib.types import (
    Crystal,
    FullYear,
    PartRow,
    SubmissionStats,
    create_empty_stats,
)

logger = logging.getLogger(__name__)


def _hint_year(part) -> int | None:
    date_code = getattr(part, "date_code", None)
    if date_code is not None and isinstance(date_code.year, FullYear):
        return date_code.year.value
    return None


def _to_row(code: str, board: str, slot: str, label: str, part, hint: int | None) -> PartRow:
    date = DateCode.loose(hint, part.date_code)
    return {
        "submission": code,
        "board": board,
        "slot": slot,
        "label": label,
        "kind": getattr(part, "kind", ""),
        "manufacturer": part.manufacturer.value if part.manufacturer else "",
        "frequency": part.format_frequency() if isinstance(part, Crystal) else "",
        "year": date.year,
        "month": date.month.title if date.month else "",
        "week": int(date.week) if date.week else None,
        "date": date.calendar() or "",
        "date_short": date.calendar_short() or "",
    }


def process_submission(record: dict[str, Any]) -> tuple[list[PartRow], SubmissionStats]:
    """
    Decodes every labelled slot of one submission.

    Decode failures never abort the run: unknown labels go to
    stats["residuals"] for manual review, everything else to stats["errors"].

    Args:
        record: Parsed submission JSON with "board" and "labels" keys.

    Returns:
        A tuple containing:
            - list[PartRow]: One row per decoded slot, in layout order.
            - SubmissionStats: Counters, residuals and errors.
    """
    stats = create_empty_stats()
    rows: list[PartRow] = []

    code = str(record.get("code", ""))
    board = str(record.get("board", ""))
    labels = record.get("labels") or {}

    layout = C.BOARD_LAYOUTS.get(board)
    if layout is None:
        stats["errors"].append(f"Unknown board type: '{board}'")
        return rows, stats

    if not isinstance(labels, dict):
        stats["errors"].append(f"Expected 'labels' to be an object, got {type(labels).__name__}")
        return rows, stats

    for slot in labels:
        if slot not in layout["slots"]:
            stats["errors"].append(f"Unknown slot '{slot}' for board {board}")

    registry = get_registry()
    decoded = {}

    # 1. Decode every labelled slot
    for slot, family in layout["slots"].items():
        raw = labels.get(slot)
        if raw is None:
            continue
        if not isinstance(raw, str):
            stats["errors"].append(f"{slot}: expected a string label")
            continue

        label = raw.strip()
        if not label:
            continue

        stats["labels_read"] += 1
        try:
            decoded[slot] = registry.family(family).parse(label)
        except NoMatchError:
            stats["residuals"].append(f"{slot}: {label}")
        except DecodeError as e:
            logger.error(f"{code or board} {slot}: {e}")
            stats["errors"].append(f"{slot}: {e}")

    # 2. Take the hint year from the hint slot
    hint_slot = layout["hint_slot"]
    if hint_slot in decoded:
        stats["hint_year"] = _hint_year(decoded[hint_slot])

    # 3. Reconcile and flatten
    for slot, part in decoded.items():
        label = labels[slot].strip()
        rows.append(_to_row(code, board, slot, label, part, stats["hint_year"]))

    stats["parts_decoded"] = len(rows)
    return rows, stats


def load_submission(source: str) -> tuple[list[PartRow], SubmissionStats]:
    """
    Loads a submission from a local JSON file or an http(s) URL and processes it.

    Args:
        source: File path or URL.

    Returns:
        Same as process_submission. Loading failures are reported in
        stats["errors"] with no rows.
    """
    try:
        if source.startswith(("http://", "https://")):
            response = requests.get(source, timeout=10)
            response.raise_for_status()
            record = response.json()
        else:
            with open(source, encoding="utf-8") as f:
                record = json.load(f)
    except (requests.RequestException, OSError, ValueError) as e:
        logger.error(f"Error loading {source}: {e}")
        stats = create_empty_stats()
        stats["errors"].append(str(e))
        return [], stats

    if not isinstance(record, dict):
        stats = create_empty_stats()
        stats["errors"].append(f"{source}: expected a JSON object")
        return [], stats

    return process_submission(record)
