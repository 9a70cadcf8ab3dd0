#!/usr/bin/env python3
"""
CLI for minigrep - print the lines of a file that contain a query

Usage:
  minigrep duct poem.txt                       # Case-sensitive search
  minigrep rust poem.txt -i                    # Case-insensitive search
  minigrep Rust poem.txt -s                    # Force case-sensitive
  CASE_INSENSITIVE=1 minigrep rust poem.txt    # Case-insensitive by default

Environment:
  CASE_INSENSITIVE     if set (to anything), search case-insensitively unless -s is given
  MINIGREP_ENCODING    file encoding (default: utf-8)
  MINIGREP_LOG_LEVEL   logging level (default: WARNING)
"""

import logging
import os
import sys
from typing import Optional, Sequence

from .container import Container
from .core import EnvLookup, InvalidFlag, MinigrepError, MissingArgument
from .formatters import format_search_result

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"

USAGE = "usage: minigrep <query> <filename> [-i|-s]"

logger = logging.getLogger(__name__)


def get_log_level() -> str:
    """Get log level from env or use fallback"""
    level = os.environ.get("MINIGREP_LOG_LEVEL", "WARNING").upper()

    # getLevelName maps a known name to its number, anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr so stdout only carries results"""
    logging.basicConfig(
        level=level or get_log_level(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr
    )


def main(argv: Optional[Sequence[str]] = None, env: Optional[EnvLookup] = None) -> int:
    """Run one search. Returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        container = Container(env=env)

        config = container.resolve_config.execute(args)
        result = container.search_file.execute(config)

        print(format_search_result(result))
        return 0

    except MinigrepError as e:
        logger.debug("Search aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        if isinstance(e, (MissingArgument, InvalidFlag)):
            print(USAGE, file=sys.stderr)
        return 1


def run():
    """Console script entry point"""
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
