# parse_data.py
"""
Parse data/dinosaurs.json and print basic stats.

Usage:
    python parse_data.py
"""

import sys
from typing import List

import anyio

from app.data.dinosaurs import DATA_PATH, load_dinosaurs
from app.data.errors import DinoError
from app.models.dinosaurs import DinoRecord


def summarize_dinosaurs(dinos: List[DinoRecord]) -> dict:
    # Lookup is first-match-wins, so later case-insensitive duplicates are unreachable
    seen_names: set[str] = set()
    duplicate_name_examples: list[str] = []
    duplicate_name_count = 0

    for index, dino in enumerate(dinos):
        key = dino.name.lower()
        if key in seen_names:
            duplicate_name_count += 1
            if len(duplicate_name_examples) < 5:
                duplicate_name_examples.append(
                    f"Duplicate name {dino.name!r} at index {index}"
                )
        else:
            seen_names.add(key)

    return {
        "n_records": len(dinos),
        "n_unique_names": len(seen_names),
        "n_duplicate_names": duplicate_name_count,
        "duplicate_name_examples": duplicate_name_examples,
    }


def main(path: str = DATA_PATH) -> int:
    try:
        dinos = anyio.run(load_dinosaurs, path)
    except DinoError as e:
        print(f"{e.kind}: {e}")
        return 1

    stats = summarize_dinosaurs(dinos)

    print(f"Records loaded:        {stats['n_records']}")
    print(f"Unique names:          {stats['n_unique_names']}")
    print(f"Duplicate names:       {stats['n_duplicate_names']}")

    if stats["duplicate_name_examples"]:
        print("\nExample duplicates:")
        for ex in stats["duplicate_name_examples"]:
            print(f"- {ex}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
