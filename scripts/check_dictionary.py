from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from location_matcher.gazetteer import DEFAULT_VARIATIONS, DictionaryError, find_conflicts, load_dictionary


def check(path: Path | None) -> dict[str, list[str]]:
    variations = load_dictionary(path) if path else DEFAULT_VARIATIONS
    return find_conflicts(variations)


def export(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(DEFAULT_VARIATIONS, f, ensure_ascii=False, indent=2)
        f.write("\n")


def main() -> None:
    parser = argparse.ArgumentParser(description="Report variants claimed by more than one canonical location.")
    parser.add_argument("--dictionary", type=Path, help="JSON dictionary file (default: built-in sample)")
    parser.add_argument("--export", type=Path, help="write the built-in sample dictionary to this file and exit")
    args = parser.parse_args()

    if args.export:
        export(args.export)
        print(f"Wrote sample dictionary to {args.export}")
        return

    try:
        conflicts = check(args.dictionary)
    except DictionaryError as exc:
        parser.error(str(exc))
    if not conflicts:
        print("No conflicting variants.")
        return

    for variant, owners in sorted(conflicts.items()):
        print(f"{variant!r}: {', '.join(owners)} (resolves to {owners[-1]!r})")
    sys.exit(1)


if __name__ == "__main__":
    main()
