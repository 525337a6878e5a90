import csv
import io

from src.label_lib.exporters import PART_FIELDS, generate_parts_csv


def _row(**overrides):
    row = {
        "submission": "DMG-0042",
        "board": "DMG",
        "slot": "work_ram",
        "label": "LH5264N4T LSI LOGIC JAPAN D4 06 05 C",
        "kind": "LH5264N4T",
        "manufacturer": "LSI Logic",
        "frequency": "",
        "year": 1994,
        "month": "",
        "week": 6,
        "date": "Week 6/1994",
        "date_short": "6/1994",
    }
    row.update(overrides)
    return row


def _read(data: bytes):
    return list(csv.DictReader(io.StringIO(data.decode("utf-8-sig"))))


def test_csv_has_bom_and_header():
    data = generate_parts_csv([])

    assert data.startswith(b"\xef\xbb\xbf")
    header = data.decode("utf-8-sig").splitlines()[0]
    assert header.split(",") == PART_FIELDS


def test_csv_rows():
    rows = _read(generate_parts_csv([_row()]))

    assert len(rows) == 1
    assert rows[0]["kind"] == "LH5264N4T"
    assert rows[0]["date"] == "Week 6/1994"
    # date_short is folded into 'date' only on request
    assert "date_short" not in rows[0]


def test_csv_short_dates():
    rows = _read(generate_parts_csv([_row()], short_dates=True))
    assert rows[0]["date"] == "6/1994"


def test_none_is_an_empty_cell():
    rows = _read(generate_parts_csv([_row(year=None, week=None, date="")]))
    assert rows[0]["year"] == ""
    assert rows[0]["week"] == ""


def test_csv_keeps_non_ascii_labels():
    label = "CPU MGB Ⓜ © 1996 Nintendo JAPAN 9808 D"
    rows = _read(generate_parts_csv([_row(label=label)]))
    assert rows[0]["label"] == label
