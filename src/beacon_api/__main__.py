"""
Beacon validator API CLI entry point.

Serve validator queries from a state database.

Usage::

    python -m beacon_api --db ./beacon.sqlite
    python -m beacon_api --db ./beacon.sqlite --host 127.0.0.1 --port 5052 -v

Options:
    --db        Path to the SQLite state database (required)
    --host      Address to bind to (default: 0.0.0.0)
    --port      Port to listen on (default: 5052)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from beacon_api.api import ApiServer, ApiServerConfig
from beacon_api.storage import SQLiteDatabase

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = self.formatTime(record, self.datefmt)
        colored_time = f"{self.CYAN}{timestamp}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"

        return f"{colored_time} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging with optional colors."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


async def serve(db_path: Path, host: str, port: int) -> None:
    """
    Serve the API from a database until cancelled.

    Args:
        db_path: Path to the SQLite state database.
        host: Address to bind to.
        port: Port to listen on.
    """
    if not db_path.exists():
        raise FileNotFoundError(f"Database not found: {db_path}")

    with SQLiteDatabase(db_path) as database:
        server = ApiServer(config=ApiServerConfig(host=host, port=port), database=database)
        logger.info(f"Serving validator queries from {db_path}")
        await server.run()


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Beacon validator API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--db",
        required=True,
        type=Path,
        help="Path to the SQLite state database",
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Address to bind to (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=5052,
        help="Port to listen on (default: 5052)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    args = parser.parse_args()

    setup_logging(args.verbose, args.no_color)

    try:
        asyncio.run(serve(args.db, args.host, args.port))
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except FileNotFoundError as e:
        logger.error("%s", e)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
