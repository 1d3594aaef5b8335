"""Command-line entry point: search, pick, show."""

import logging
import sys
from enum import Enum
from typing import Callable, List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from omdbsearch.core.cli import parse_config
from omdbsearch.core.config import Settings, get_settings
from omdbsearch.core.errors import OMDbSearchError, UsageError
from omdbsearch.services.omdb import OMDbClient
from omdbsearch.services.presenter import format_movie
from omdbsearch.services.selector import choose

logger = logging.getLogger(__name__)

FAREWELL = "Bye!\n"


class Stage(str, Enum):
    """Steps of a single invocation, in order."""

    CONFIGURING = "configuring"
    SEARCHING = "searching"
    SELECTING = "selecting"
    DETAILING = "detailing"
    PRESENTING = "presenting"
    DONE = "done"


def run(
    argv: Optional[List[str]] = None,
    *,
    client: Optional[OMDbClient] = None,
    input_func: Callable[[str], str] = input,
    print_func: Callable[..., None] = print,
    settings: Optional[Settings] = None,
) -> int:
    """Run one search session and return the process exit code.

    Fatal errors are reported on stderr and yield 1. Missing options and
    quitting the menu are not failures and yield 0.
    """
    settings = settings or get_settings()
    stage = Stage.CONFIGURING
    owns_client = client is None

    try:
        config = parse_config(argv, settings)
        if owns_client:
            client = OMDbClient(settings)
        try:
            stage = _advance(Stage.SEARCHING)
            response = client.search(config)

            stage = _advance(Stage.SELECTING)
            entry = choose(
                response,
                config,
                input_func=input_func,
                print_func=print_func,
                strict=settings.omdb_strict_input,
            )

            if entry is not None:
                stage = _advance(Stage.DETAILING)
                movie = client.get_movie(config, entry.imdb_id)

                stage = _advance(Stage.PRESENTING)
                print_func(format_movie(movie))
        finally:
            if owns_client and client is not None:
                client.close()
    except UsageError as exc:
        logger.debug("Usage printed: %s", exc)
        return exc.exit_code
    except OMDbSearchError as exc:
        logger.debug("Aborted while %s", stage.value, exc_info=exc)
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code

    _advance(Stage.DONE)
    print_func(FAREWELL)
    return 0


def _advance(stage: Stage) -> Stage:
    logger.debug("Stage: %s", stage.value)
    return stage


def main() -> None:
    load_dotenv()
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Error: invalid settings: {exc}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        code = run(settings=settings)
    except KeyboardInterrupt:
        print("\nExiting.", file=sys.stderr)
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
