"""Sanity import of all runtime requirements.

Run: python tools/import_requirements.py
Catches a missing driver (or dnspython for mongodb+srv URIs) before a seeding run.
"""

from __future__ import annotations

from collections.abc import Iterable
import importlib
import sys

RUNTIME_PACKAGES: list[str] = [
    # Names correspond to importable modules
    "pydantic",
    "pydantic_settings",
    "dotenv",  # python-dotenv
    "pymongo",
    "dns",  # dnspython, needed to resolve mongodb+srv
]


def try_import(names: Iterable[str]) -> int:
    failures = 0
    for name in names:
        try:
            mod = importlib.import_module(name)
        except ImportError as exc:
            failures += 1
            print(f"FAIL {name}: {exc}", file=sys.stderr)
            continue
        print(f"OK   {name} {getattr(mod, '__version__', 'unknown')}")
    return failures


def main() -> None:
    sys.exit(1 if try_import(RUNTIME_PACKAGES) else 0)


if __name__ == "__main__":
    main()
