#!/usr/bin/env python3
"""Generate a sample builder catalogue as JSON payloads.

Writes ``builders.json`` and ``incentives.json`` in the same camelCase
shape the builders API serves, for previews and manual testing.
"""

import argparse
import json
from datetime import date
from pathlib import Path

from nocobuilds.config import DirectoryConfig
from nocobuilds.generators import BuilderGenerator, IncentiveGenerator
from nocobuilds.logging import get_logger, setup_logging
from nocobuilds.serialization import builder_to_payload, incentive_to_payload
from nocobuilds.store import CatalogueStore

logger = get_logger(__name__)


def save_json(data: list, filename: str, output_dir: Path) -> None:
    """Save payloads to a JSON file."""
    filepath = output_dir / filename
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info("Saved %d records to %s", len(data), filepath)


def main() -> None:
    """Generate the sample catalogue files."""
    config = DirectoryConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample builder catalogue")
    parser.add_argument("--output-dir", type=Path, default=Path("local"))
    parser.add_argument("--builders", type=int, default=config.sample_builders)
    parser.add_argument("--incentives-per-builder", type=int, default=1)
    parser.add_argument("--seed", type=int, default=config.seed)
    parser.add_argument("--today", type=date.fromisoformat, default=date.today())
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)
    args.output_dir.mkdir(parents=True, exist_ok=True)

    builder_gen = BuilderGenerator(seed=args.seed, locale=config.locale)
    incentive_gen = IncentiveGenerator(seed=args.seed, locale=config.locale)

    store = CatalogueStore()
    for builder in builder_gen.generate_batch(args.builders):
        store.add_builder(builder)
        for _ in range(args.incentives_per_builder):
            store.add_incentive(incentive_gen.generate(builder.name, args.today))

    save_json([builder_to_payload(b) for b in store.builders], "builders.json", args.output_dir)
    save_json([incentive_to_payload(i) for i in store.incentives], "incentives.json", args.output_dir)
    logger.info("Catalogue summary: %s", store.summary())

    live = store.search_incentives(config.incentive_criteria(), args.today)
    logger.info("%d of %d incentives live as of %s", len(live), len(store.incentives), args.today)


if __name__ == "__main__":
    main()
