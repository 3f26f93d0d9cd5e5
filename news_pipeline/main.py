"""Command-line entrypoint for the news ingestion pipeline.

Runs one fetch -> deduplicate -> enrich -> persist cycle and prints the
JSON run report. Suitable for cron or any scheduler.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from typing import Optional, Sequence

from dotenv import load_dotenv

from .orchestrator import NewsPipeline
from .output import failure_response
from .utils.config_loader import ConfigError
from .utils.logging import configure_logging, get_logger
from .utils.pipeline_config import PipelineConfig


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="News pipeline: fetch, deduplicate, summarize and store articles"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to sources configuration file (YAML); defaults to PIPELINE_SOURCES_PATH",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Store articles in memory instead of the hosted database",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Articles requested per source (default 10)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default from LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("np.main")

    try:
        config = PipelineConfig()
    except ConfigError as exc:
        logger.error("Invalid pipeline configuration: %s", exc)
        status, body = 500, failure_response(exc)
    else:
        if args.config:
            config = replace(config, sources_path=args.config)
        if args.page_size is not None:
            config = replace(config, page_size=args.page_size)

        logger.info("Starting news pipeline (dry_run=%s)", args.dry_run)
        status, body = NewsPipeline(config=config, dry_run=args.dry_run).run_safely()
    json.dump(body, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0 if status == 200 else 1


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
