# src/main.py — v3
"""CLI entry point — analyze, history, provider commands.

Usage:
    aidetector analyze [file|-] --platform twitter [--author NAME]
    aidetector history [--limit N] [--offset N] [--author NAME]
    aidetector provider

Results are printed to stdout as JSON; logs go to stderr.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from aidetector.config.settings import ConfigurationError, Settings
from aidetector.core.errors import DetectorError, InvalidInput
from aidetector.core.models import Platform
from aidetector.logging.logger import get_logger, setup_logging
from aidetector.version import __version__

logger = get_logger("cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_FAILURE

    try:
        settings = Settings()
    except (ConfigurationError, ValidationError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    _setup_logging(settings, args.verbose)

    try:
        return asyncio.run(args.func(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except InvalidInput as exc:
        logger.error("Invalid input: %s", exc)
        return EXIT_INVALID_INPUT
    except DetectorError as exc:
        logger.error("Analysis failed: %s", exc.public_message)
        return EXIT_FAILURE


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="aidetector",
        description=f"aidetector v{__version__} — AI-generated text detector",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- analyze ---
    p_analyze = subparsers.add_parser(
        "analyze", help="Score one post",
    )
    p_analyze.add_argument(
        "file", nargs="?", default="-",
        help="Text file to analyze, '-' for stdin (default: stdin)",
    )
    p_analyze.add_argument(
        "-p", "--platform", choices=[p.value for p in Platform],
        default=Platform.TWITTER.value,
        help="Platform the post came from (default: twitter)",
    )
    p_analyze.add_argument("--post-id", default=None, help="Platform post ID")
    p_analyze.add_argument("--author", default=None, help="Post author handle")
    p_analyze.set_defaults(func=_cmd_analyze)

    # --- history ---
    p_history = subparsers.add_parser(
        "history", help="List stored analyses, newest first",
    )
    p_history.add_argument(
        "-n", "--limit", type=int, default=20,
        help="Page size, 1-100 (default: 20)",
    )
    p_history.add_argument(
        "--offset", type=int, default=0, help="Rows to skip (default: 0)",
    )
    p_history.add_argument("--author", default=None, help="Filter by author")
    p_history.set_defaults(func=_cmd_history)

    # --- provider ---
    p_provider = subparsers.add_parser(
        "provider", help="Show the active judge provider and model",
    )
    p_provider.set_defaults(func=_cmd_provider)

    return parser


async def _cmd_analyze(args: argparse.Namespace, settings: Settings) -> int:
    """Analyze one post read from a file or stdin."""
    from aidetector.api.facade import analyze
    from aidetector.api.models import AnalyzeRequest

    content = _read_content(args.file)
    if content is None:
        return EXIT_FAILURE

    request = AnalyzeRequest(
        content=content,
        platform=args.platform,
        post_id=args.post_id,
        author=args.author,
    )
    response = await analyze(request, settings=settings)
    print(response.model_dump_json(indent=2))
    return EXIT_OK


async def _cmd_history(args: argparse.Namespace, settings: Settings) -> int:
    """Print one page of stored analyses."""
    from aidetector.api.facade import history

    page = await history(
        limit=args.limit, offset=args.offset, author=args.author,
        settings=settings,
    )
    print(page.model_dump_json(indent=2))
    return EXIT_OK


async def _cmd_provider(args: argparse.Namespace, settings: Settings) -> int:
    """Print provider status."""
    from aidetector.api.facade import provider_status

    print(json.dumps(provider_status(settings), indent=2))
    return EXIT_OK


def _read_content(source: str) -> str | None:
    """Read post text from a path or stdin, without trimming."""
    try:
        if source == "-":
            return sys.stdin.read()
        path = Path(source)
        if not path.is_file():
            logger.error("File not found: %s", path)
            return None
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidInput(f"Content is not valid UTF-8: {source}") from e


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging for CLI usage from settings."""
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
