import csv
import io
from typing import Any

PART_FIELDS = [
    "submission",
    "board",
    "slot",
    "kind",
    "manufacturer",
    "frequency",
    "year",
    "month",
    "week",
    "date",
    "label",
]


def generate_parts_csv(rows: list[dict[str, Any]], short_dates: bool = False) -> bytes:
    """
    Generates a CSV file of decoded parts.

    Constructs a UTF-8 encoded CSV string (with BOM signature) suitable for
    download or for opening directly in a spreadsheet.

    Args:
        rows (list[dict]): Part rows as produced by process_submission.
        short_dates (bool): If True, writes the 'date' column in the compact
                            form ("6/1994", "Mar/1999") instead of the long one.

    Returns:
        bytes: The CSV content encoded as utf-8-sig.
    """
    csv_buf = io.StringIO()
    writer = csv.DictWriter(csv_buf, fieldnames=PART_FIELDS, extrasaction="ignore")
    writer.writeheader()

    for row in rows:
        if short_dates:
            row = {**row, "date": row.get("date_short", "")}
        # None renders as an empty cell
        writer.writerow({k: ("" if row.get(k) is None else row.get(k)) for k in PART_FIELDS})

    # encode "utf-8-sig" so Excel picks up the encoding of names like "Ⓜ"
    return csv_buf.getvalue().encode("utf-8-sig")
