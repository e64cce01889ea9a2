"""Seed MongoDB with the hiragana/katakana to romaji mapping table.

Reads MONGO_USERNAME, MONGO_PASSWORD and MONGO_CLUSTER from the environment
(or a local .env), pings the cluster and inserts the table into
``jp_syllabaries.kana_mappings``. Safe to re-run: existing records are skipped.

Run directly with: `python seed_kana_mappings.py`.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from errors import PartialInsertError, SeedError
from kana_dataset import build_dataset, summarize
from kana_seeder import run_seed
from logger import get_logger

logger = get_logger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed kana to romaji mappings into MongoDB")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and validate the kana table without connecting to MongoDB.",
    )
    args = parser.parse_args(argv)

    try:
        if args.dry_run:
            dataset = build_dataset()
            for (kana_type, category), count in summarize(dataset).items():
                logger.info("%-8s %-15s %3d", kana_type, category, count)
            logger.info("Dataset OK: %d records", len(dataset))
            return 0
        run_seed()
    except PartialInsertError as exc:
        if exc.only_duplicates:
            logger.warning("Kana mappings already present: %s", exc)
            return 0
        logger.error("%s: %s", exc.kind, exc)
        return 1
    except SeedError as exc:
        logger.error("%s: %s", exc.kind, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
