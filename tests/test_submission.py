import pytest

from src.label_lib import process_submission


@pytest.fixture(autouse=True)
def _registry(registry):
    """process_submission looks families up in the process-wide registry."""


def _dmg(**labels):
    return {"code": "DMG-0042", "board": "DMG", "labels": labels}


def test_hint_year_resolves_partial_years():
    record = _dmg(
        cpu="DMG-CPU B © 1989 Nintendo JAPAN 9207 D",
        work_ram="LH5264N4T LSI LOGIC JAPAN D4 06 05 C",
    )
    rows, stats = process_submission(record)

    assert stats["labels_read"] == 2
    assert stats["parts_decoded"] == 2
    assert stats["hint_year"] == 1992
    assert stats["residuals"] == []
    assert stats["errors"] == []

    ram = next(r for r in rows if r["slot"] == "work_ram")
    # 1994 is the closest year ending in 4
    assert ram["year"] == 1994
    assert ram["week"] == 6
    assert ram["date"] == "Week 6/1994"
    assert ram["date_short"] == "6/1994"
    assert ram["manufacturer"] == "LSI Logic"
    assert ram["submission"] == "DMG-0042"


def test_rows_follow_layout_order():
    record = _dmg(
        crystal="KDS 9807 4.194",
        cpu="DMG-CPU C © 1989 Nintendo JAPAN 9835 D",
        amplifier="DMG-AMP IR3R40 9222 AA",
    )
    rows, _ = process_submission(record)
    assert [r["slot"] for r in rows] == ["cpu", "amplifier", "crystal"]


def test_crystal_row_has_frequency():
    rows, _ = process_submission(_dmg(crystal="KDS 6F 4.194"))

    assert rows[0]["frequency"] == "4.194304 MHz"
    assert rows[0]["kind"] == ""
    # No CPU on the submission: the single-digit year stays open
    assert rows[0]["year"] is None
    assert rows[0]["month"] == "June"
    assert rows[0]["date"] == ""


def test_unmatched_label_goes_to_residuals():
    record = _dmg(cpu="DMG-CPU B © 1989 Nintendo JAPAN 9207 D", work_ram="TOSHIBA TC5565")
    rows, stats = process_submission(record)

    assert stats["residuals"] == ["work_ram: TOSHIBA TC5565"]
    assert stats["parts_decoded"] == 1
    assert stats["labels_read"] == 2
    assert len(rows) == 1


def test_blank_labels_are_skipped():
    rows, stats = process_submission(_dmg(cpu="   ", work_ram=""))
    assert rows == []
    assert stats["labels_read"] == 0


def test_unknown_board():
    rows, stats = process_submission({"board": "VB", "labels": {"cpu": "x"}})
    assert rows == []
    assert stats["errors"] == ["Unknown board type: 'VB'"]


def test_unknown_slot_is_reported_but_not_fatal():
    rows, stats = process_submission(_dmg(cartridge="???", amplifier="DMG-AMP IR3R40 8909 A"))

    assert stats["errors"] == ["Unknown slot 'cartridge' for board DMG"]
    assert len(rows) == 1
    assert rows[0]["year"] == 1989


def test_board_without_hint_slot():
    record = {"board": "CGB", "labels": {"regulator": "CGB-REG IR3E06N 9839 C"}}
    rows, stats = process_submission(record)

    assert stats["hint_year"] is None
    assert rows[0]["year"] == 1998


def test_non_string_label_is_reported_not_raised():
    record = _dmg(cpu="DMG-CPU B © 1989 Nintendo JAPAN 9207 D", crystal=4194)
    rows, stats = process_submission(record)

    assert stats["errors"] == ["crystal: expected a string label"]
    assert [r["slot"] for r in rows] == ["cpu"]
    assert stats["labels_read"] == 1


def test_labels_must_be_an_object():
    rows, stats = process_submission({"board": "DMG", "labels": ["DMG-CPU B"]})

    assert rows == []
    assert len(stats["errors"]) == 1
    assert "Expected 'labels' to be an object" in stats["errors"][0]
    assert stats["labels_read"] == 0
