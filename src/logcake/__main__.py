"""Log Cake entry point.

Usage:
    python -m logcake [OPTIONS]

Options:
    --config PATH    Path to YAML config file
    --profile NAME   Profile name (dev, prod, test)
    --dry-run        Load config and exit
    --help           Show this help message
    --version        Show version
"""

import argparse
import logging
import signal
import sys
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .config import LoggingConfig
from .config.loader import load_config
from .config.profiles import detect_profile


def load_env() -> None:
    """Load .env from the project root, falling back to the working directory."""
    env_file = Path(__file__).parent.parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        load_dotenv()


def setup_logging(config: LoggingConfig) -> None:
    """Configure logging based on config."""
    numeric_level = getattr(logging, config.level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format=config.format,
        datefmt=config.datefmt,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="logcake",
        description="Log Cake - menu bar time tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m logcake                     # Run with auto-detected profile
  python -m logcake --profile dev       # Run with development profile
  python -m logcake --config my.yaml    # Run with custom config file

Environment:
  LOGCAKE_PROFILE    Set profile (dev, prod, test)
""",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML config file",
        metavar="PATH",
    )

    parser.add_argument(
        "--profile",
        choices=["dev", "prod", "test"],
        help="Configuration profile to use",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Log Cake v{__version__}",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Load config and exit (for testing)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for Log Cake.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parse_args(argv)
    load_env()
    profile = args.profile or detect_profile().value

    try:
        if args.config:
            config = load_config(path=args.config)
        else:
            config = load_config(profile=profile)
    except FileNotFoundError as e:
        print(f"Error: Config file not found: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging)
    logger = logging.getLogger("logcake")

    logger.info(f"Log Cake v{__version__}")
    logger.info(f"Profile: {profile}")
    logger.info(f"Log level: {config.logging.level}")

    if args.dry_run:
        logger.info("Dry run mode - exiting after config load")
        logger.info(f"Data directory: {config.resolve_data_dir()}")
        logger.info(f"Report directory: {config.resolve_report_dir()}")
        return 0

    from .app import TimeTrackerApp

    app = TimeTrackerApp.from_config(config)
    app.launch()

    shutdown_requested = False

    def signal_handler(_signum: int, _frame: object) -> None:
        nonlocal shutdown_requested
        if shutdown_requested:
            logger.warning("Force quit requested")
            sys.exit(1)
        shutdown_requested = True
        logger.info("Shutdown requested, saving state...")

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        app.scheduler.run_forever(
            should_stop=lambda: shutdown_requested,
            poll_interval=config.schedule.poll_interval,
        )
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
    finally:
        app.application_terminating()
        logger.info("Log Cake shut down gracefully")

    return 0


if __name__ == "__main__":
    sys.exit(main())
