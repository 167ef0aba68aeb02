#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
NoGAL - Startup Script

Command-line front-end: parses arguments, loads configuration and
catver.ini, then hands a CurationOptions object to the curation engine.
"""

import sys
import logging
import argparse
from typing import List, Optional

from nogal.app.api import CurationOptions, run_curation, write_curation_report
from nogal.config import load_config
from nogal.config.models import LoggingSettings
from nogal.core.category_db import load_category_file, resolve_category_path
from nogal.exceptions import (
    CategoryFileNotFoundError,
    CategoryFileUnreadableError,
    ConfigurationError,
)
from nogal.logging_config import cleanup_logging, setup_logging
from nogal.version import load_version

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_PARTIAL = 2


def _load_version() -> str:
    return str(load_version())


def _print_error(message: str) -> None:
    print(message, file=sys.stderr)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses command line arguments."""
    parser = argparse.ArgumentParser(
        prog="nogal",
        description="NoGAL - MAME game purging tool",
    )
    parser.add_argument("-d", "--directory", metavar="PATH", help="directory containing MAME files")
    parser.add_argument("-c", "--category", help="category to filter (default: mature games)")
    parser.add_argument("-i", "--case-insensitive", action="store_true",
                        help="case insensitive category matching")
    parser.add_argument("-l", "--list", action="store_true",
                        help="list matching games instead of deleting them")
    parser.add_argument("-o", "--video", action="store_true", help="delete/move videos as well")
    parser.add_argument("-b", "--backup", metavar="PATH",
                        help="backup directory to move files instead of deleting")
    parser.add_argument("--catver", metavar="PATH",
                        help="catver.ini to use (default: next to the executable)")
    parser.add_argument("--config", metavar="PATH", help="JSON or YAML configuration file")
    parser.add_argument("--report", metavar="PATH", help="write a JSON report of the run")
    parser.add_argument("--log-dir", metavar="PATH", help="write rotating log files to PATH")
    parser.add_argument("--log-json", action="store_true", help="structured JSON log records")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--version", action="store_true", help="Show version information")

    args = parser.parse_args(argv)
    if not args.version and not args.directory:
        parser.error("the following arguments are required: -d/--directory")
    return args


def _configure_logging(args: argparse.Namespace, log_cfg: LoggingSettings) -> None:
    setup_logging(
        log_level="DEBUG" if args.debug else log_cfg.level,
        log_dir=args.log_dir or log_cfg.log_dir,
        enable_file_logging=bool(args.log_dir) or log_cfg.file_logging,
        enable_console_logging=args.debug,
        max_log_size=log_cfg.max_log_size,
        backup_count=log_cfg.backup_count,
        structured_json=True if args.log_json else (log_cfg.structured_json or None),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to start the application."""
    args = parse_arguments(argv)

    if args.version:
        print(f"NoGAL v{_load_version()}")
        return EXIT_OK

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        _print_error(f"Error: {e}")
        return EXIT_ERROR

    log_cfg = config.model.logging
    try:
        _configure_logging(args, log_cfg)
    except OSError as e:
        cleanup_logging()
        _print_error(f"Error: cannot create log directory {args.log_dir or log_cfg.log_dir or 'logs'}: {e}")
        return EXIT_ERROR

    logger.info("Starting NoGAL v%s", _load_version())

    try:
        category_settings = config.model.category_file
        catver_path = resolve_category_path(args.catver, config.config_data)
        try:
            category_map = load_category_file(
                catver_path,
                encoding=category_settings.encoding,
                section=category_settings.section,
            )
        except CategoryFileNotFoundError:
            _print_error(f"Error: {catver_path.name} not found in the same directory as the executable.")
            _print_error(f"Looked for: {catver_path}")
            return EXIT_ERROR
        except CategoryFileUnreadableError as e:
            logger.error("Category file unreadable: %s", e.to_dict())
            _print_error(str(e))
            return EXIT_ERROR

        options = CurationOptions(
            directory=args.directory,
            category=args.category,
            case_insensitive=args.case_insensitive,
            list_only=args.list,
            include_videos=args.video,
            backup_dir=args.backup,
        )
        report = run_curation(options, category_map, log_cb=print, error_cb=_print_error)

        if args.report:
            try:
                write_curation_report(report, args.report)
            except OSError as e:
                _print_error(f"Error writing report {args.report}: {e}")

        if report.status == "aborted":
            return EXIT_ERROR
        if report.failed or report.errors:
            return EXIT_PARTIAL
        return EXIT_OK
    finally:
        cleanup_logging()


if __name__ == "__main__":
    sys.exit(main())
