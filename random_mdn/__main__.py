from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

from random_mdn.config import load_config
from random_mdn.errors import ConfigError
from random_mdn.jobs.pipeline import RunResult, run
from random_mdn.logging_setup import setup_logging


logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="random-mdn")
    parser.add_argument(
        "--env",
        default=".env",
        help="Path to .env file (default: .env).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the post instead of publishing it, even when APP_ENV=production.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when the run fails.",
    )
    return parser.parse_args(argv)


def _log_result(result: RunResult) -> None:
    if result.ok:
        logger.info("run finished: posted %s after %s attempt(s)", result.url, result.attempts)
        return
    logger.error(
        "run failed in %s after %s attempt(s): %s",
        result.failed_in,
        result.attempts,
        result.error,
    )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    env_path = Path(args.env)
    if env_path.exists():
        load_dotenv(env_path)
    else:
        load_dotenv()

    try:
        config = load_config(force_dry_run=args.dry_run)
    except ConfigError as e:
        setup_logging("INFO", "")
        logger.error("config error: %s", e)
        return 1 if args.strict else 0

    setup_logging(config.log_level, config.log_file)
    logger.info("starting run live=%s", config.live)

    try:
        result = asyncio.run(run(config))
    except Exception:
        logger.exception("run crashed")
        return 1 if args.strict else 0

    _log_result(result)
    if args.strict and not result.ok:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
