#!/usr/bin/env python3
"""Validate keyword catalogues against the JSON Schema and custom rules."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from release_keywords import CatalogueError, DictionaryLoader, KeywordManager
from release_keywords.dictionary_loader import DEFAULT_DICTIONARY


def load_json(path: Path):
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def check_shadowed_keywords(catalogue) -> List[str]:
    """Report texts whose later registration is ignored because an earlier group claimed them.

    These are warnings, not failures: the catalogue relies on first-wins precedence.
    """
    notes: List[str] = []
    seen: Dict[tuple, str] = {}
    for idx, group in enumerate(catalogue.get("keywords") or []):
        table = "extension" if group.get("category") == "file_extension" else "general"
        for text in group.get("keywords") or []:
            key = (table, text)
            if key in seen and seen[key] != group.get("category"):
                notes.append(
                    f"keywords[{idx}]: '{text}' already registered as {seen[key]}; "
                    f"{group.get('category')} registration is ignored"
                )
            seen.setdefault(key, group.get("category"))
    return notes


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "catalogue",
        nargs="?",
        help=f"Catalogue file to check (defaults to the bundled {DEFAULT_DICTIONARY})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Also list shadowed keywords")
    args = parser.parse_args(argv)

    path = Path(args.catalogue) if args.catalogue else DictionaryLoader.get_dictionary_path()
    try:
        catalogue = load_json(path)
    except (FileNotFoundError, json.JSONDecodeError) as exc:
        print(f"Dictionary validation failed:\n - {path}: {exc}")
        return 1

    failures = DictionaryLoader.validate_catalogue(catalogue)
    if not failures:
        try:
            manager = KeywordManager.from_catalogue(catalogue, dictionary_name=str(path))
        except CatalogueError as exc:
            failures.extend(exc.problems)
        else:
            print(f"Loaded {manager!r}")

    if failures:
        print("Dictionary validation failed:")
        for failure in failures:
            print(f" - {failure}")
        return 1

    if args.verbose:
        for note in check_shadowed_keywords(catalogue):
            print(f" ~ {note}")

    print("All dictionaries validated successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
