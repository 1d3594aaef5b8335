"""Command-line parsing into a SearchConfig."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from omdbsearch.core.config import SearchConfig, Settings, get_settings
from omdbsearch.core.errors import ConfigError, UsageError

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 5


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on malformed input."""

    def error(self, message: str):
        raise ConfigError(f"{self.prog}: {message}")


def build_parser() -> argparse.ArgumentParser:
    # Single-dash spellings (-api-key) are accepted alongside the double-dash ones
    parser = _ArgumentParser(
        prog="omdb-search",
        description="Search OMDb for a title and show the details of one result.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--api-key", "-api-key", dest="api_key", default="", help="OMDB api key"
    )
    parser.add_argument(
        "--search",
        "-search",
        dest="search",
        default="",
        help="Movie title to search for.",
    )
    parser.add_argument(
        "--size",
        "-size",
        dest="size",
        type=int,
        default=DEFAULT_SIZE,
        help="Number of movies to search (default: %(default)s)",
    )
    return parser


def _options_given(parser: argparse.ArgumentParser, argv: List[str]) -> bool:
    """True when at least one known option appears on the command line."""
    known = {
        option for action in parser._actions for option in action.option_strings
    }
    return any(token.split("=", 1)[0] in known for token in argv)


def parse_config(
    argv: Optional[List[str]] = None,
    settings: Optional[Settings] = None,
    stream: Optional[TextIO] = None,
) -> SearchConfig:
    """Resolve the command line into a SearchConfig.

    Missing options print usage to ``stream`` (stderr by default) and raise
    UsageError, which callers treat as a successful exit. Malformed options
    raise ConfigError. Bare words are ignored, so a command line holding
    no option at all is a usage request.
    """
    if argv is None:
        argv = sys.argv[1:]
    if stream is None:
        stream = sys.stderr
    settings = settings or get_settings()
    parser = build_parser()

    args, extras = parser.parse_known_args(argv)
    unknown = [token for token in extras if token.startswith("-")]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    if extras:
        logger.debug("Ignoring extra arguments: %s", extras)

    if not _options_given(parser, argv):
        parser.print_help(stream)
        raise UsageError("no options given")

    api_key = args.api_key.strip() or (settings.omdb_api_key or "").strip()
    if not api_key:
        print("api-key is mandatory!", file=stream)
        parser.print_usage(stream)
        raise UsageError("api-key is mandatory!")

    search_term = args.search.strip()
    if not search_term:
        print("search field is mandatory!", file=stream)
        parser.print_usage(stream)
        raise UsageError("search field is mandatory!")

    if args.size < 1:
        raise ConfigError(f"size must be a positive integer, got {args.size}")

    logger.debug("Resolved search for '%s' listing %d results", search_term, args.size)
    return SearchConfig(
        api_key=api_key, search_term=search_term, result_count=args.size
    )
