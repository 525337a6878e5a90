import logging
import os
import sys

from src.label_lib import generate_parts_csv, init_registry, load_submission


def find_submissions(folder="data"):
    if not os.path.exists(folder):
        print(f"❌ Missing folder: '{folder}'. Create it and drop your submission JSON files there.")
        sys.exit(1)

    files = sorted(f for f in os.listdir(folder) if f.endswith(".json"))

    if not files:
        print(f"⚠️  No .json files in '{folder}'.")
        sys.exit(1)

    print(f"📂 Reading {len(files)} submissions from '{folder}'...")
    return [os.path.join(folder, f) for f in files]


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("SILKSCREEN_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    init_registry()

    # 1. Ingest
    all_rows = []
    residuals = []
    failed = 0

    for path in find_submissions(os.environ.get("SILKSCREEN_DATA_DIR", "data")):
        rows, stats = load_submission(path)
        name = os.path.basename(path)
        if stats["errors"]:
            failed += 1
            print(f"   fail: {name}")
            for error in stats["errors"]:
                print(f"      {error}")
        else:
            print(f"   ok: {name} ({stats['parts_decoded']}/{stats['labels_read']} labels)")
        all_rows.extend(rows)
        residuals.extend(f"{name} {line}" for line in stats["residuals"])

    # 2. Verify
    print("\n--- Stats ---")
    print(f"Parts: {len(all_rows)} | Unmatched: {len(residuals)} | Failed files: {failed}")

    if residuals:
        print(f"\n⚠️  {len(residuals)} labels matched no grammar (review by hand):")
        for line in residuals:
            print(f"   ? {line}")
    else:
        print("✅ Every label decoded.")

    # 3. Output
    out_dir = "output"
    os.makedirs(out_dir, exist_ok=True)

    csv_path = os.path.join(out_dir, "parts.csv")
    md_path = os.path.join(out_dir, "parts.md")

    # Save CSV
    try:
        with open(csv_path, "wb") as f:
            f.write(generate_parts_csv(all_rows))
        print(f"\n✅ CSV: {csv_path}")
    except PermissionError:
        print(f"\n❌ Error: Close {csv_path} first.")

    # Save Markdown
    try:
        with open(md_path, "w", encoding="utf-8") as f:
            f.write("# Decoded Parts\n\n")
            f.write("| Submission | Slot | Manufacturer | Part | Date |\n")
            f.write("| --- | --- | --- | --- | :---: |\n")
            for row in all_rows:
                part = row["kind"] or row["frequency"]
                f.write(
                    f"| {row['submission']} | {row['slot']} | {row['manufacturer']} | **{part}** | {row['date']} |\n"
                )
        print(f"✅ MD:  {md_path}")
    except PermissionError:
        print(f"\n❌ Error: Close {md_path} first.")

    print("\nDone.")
