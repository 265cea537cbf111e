"""Entry point for the CTA arrivals board."""

from __future__ import annotations

import argparse
import logging
import sys

from cta_board.config import ConfigError, load_config
from cta_board.data.cta_client import CTAClient
from cta_board.data.poller import ArrivalsScheduler
from cta_board.logging_setup import LOG_FORMAT, configure_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show upcoming CTA train arrivals.")
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Path to the YAML config file (default: config/config.yaml)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run one cycle per configured stop and exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
        logger.error("Failed to load config: %s", exc)
        return 1

    configure_logging(config.log)
    logger.debug(
        "Config loaded: %d stop(s), interval=%ss",
        len(config.cta.stops),
        config.cta.interval_seconds,
    )

    client = CTAClient(
        config.cta.api_key,
        base_url=config.cta.base_url,
        timeout_seconds=config.cta.request_timeout_seconds,
    )
    scheduler = ArrivalsScheduler(
        client=client,
        stops=config.cta.stops,
        interval_seconds=config.cta.interval_seconds,
    )

    if args.once:
        results = scheduler.run_each_once()
        return 1 if any(result.error for result in results) else 0

    try:
        scheduler.run()
    except KeyboardInterrupt:
        scheduler.stop()
        logger.info("Shutting down.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
