"""
Grammar Check Tool.

Runs every registered grammar against its own sample labels and reports:
- samples the grammar fails to decode (a broken pattern), and
- samples that more than one grammar in the same family accepts
  (ambiguity that should be fixed by splitting or reordering grammars).

Exits with status 1 if any sample fails, so it can gate CI.
"""

import logging
import os
import sys

from src.label_lib import DecodeError, MultiGrammar, init_registry


def check_family(family: MultiGrammar) -> tuple[list[str], list[str]]:
    """
    Checks all sample labels of one family.

    Returns:
        A tuple containing:
            - list[str]: "grammar: label (error)" for samples that fail.
            - list[str]: "label -> grammar, grammar" for ambiguous samples.
    """
    failures = []
    ambiguous = []

    for grammar in family.parsers:
        for label in getattr(grammar, "examples", ()):
            try:
                grammar.parse(label)
            except DecodeError as e:
                failures.append(f"{grammar.name}: {label} ({e})")
                continue

            matches = family.matching_names(label)
            if len(matches) > 1:
                ambiguous.append(f"{label} -> {', '.join(matches)}")

    return failures, ambiguous


def main() -> int:
    logging.basicConfig(level=os.environ.get("SILKSCREEN_LOG_LEVEL", "ERROR").upper())
    registry = init_registry()

    total_failures = 0
    print(f"🔍 Checking {len(registry.families)} families...")

    for name in registry.names():
        family = registry.family(name)
        failures, ambiguous = check_family(family)
        samples = len(family.examples)

        if not failures and not ambiguous:
            print(f"   ok: {name} ({len(family)} grammars, {samples} samples)")
            continue

        print(f"   {'fail' if failures else 'warn'}: {name}")
        for line in failures:
            print(f"      ✗ {line}")
        for line in ambiguous:
            print(f"      ? {line}")
        total_failures += len(failures)

    if total_failures:
        print(f"\n❌ {total_failures} samples failed.")
        return 1

    print("\n✅ All samples decode.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
