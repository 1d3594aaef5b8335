"""Interactive numbered menu for picking one search result."""

import logging
from typing import Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from omdbsearch.core.config import SearchConfig
from omdbsearch.core.errors import InputError
from omdbsearch.models.media import SearchResponse, SearchResult

logger = logging.getLogger(__name__)

QUIT_COMMAND = "q"
PROMPT = "\nType the number for movie detail [1-{upper}] [q for quit]: "
RETRY_MESSAGE = "Value entered is not valid, try again!"


class Selected(BaseModel):
    """A valid 1-based menu index."""

    model_config = ConfigDict(frozen=True)

    index: int


class Quit(BaseModel):
    """The user asked to leave without choosing."""

    model_config = ConfigDict(frozen=True)


class Invalid(BaseModel):
    """Input that does not name a menu entry."""

    model_config = ConfigDict(frozen=True)

    raw: str
    reason: Literal["not a number", "out of range"]


Selection = Union[Selected, Quit, Invalid]


def visible_entries(response: SearchResponse, config: SearchConfig) -> list[SearchResult]:
    """Entries shown in the menu, capped at the configured result count."""
    return response.search[: config.result_count]


def render_menu(
    response: SearchResponse,
    config: SearchConfig,
    print_func: Callable[..., None] = print,
) -> list[SearchResult]:
    """Print the numbered menu and return the entries it lists."""
    entries = visible_entries(response, config)
    print_func(f'Here are the results for "{config.search_term}"\n')
    for i, entry in enumerate(entries, start=1):
        print_func(f"[{i}] {entry.title} ({entry.year})")
    return entries


def parse_selection(raw: str, upper: int) -> Selection:
    """Classify one line of menu input against the range ``[1, upper]``."""
    text = raw.strip()
    if text == QUIT_COMMAND:
        return Quit()
    try:
        # int() also accepts "+3", "1_0" and non-ASCII digits; only plain 0-9 here
        if not (text.isascii() and text.lstrip("-").isdigit()):
            raise ValueError(text)
        choice = int(text, 10)
    except ValueError:
        return Invalid(raw=text, reason="not a number")
    if choice < 1 or choice > upper:
        return Invalid(raw=text, reason="out of range")
    return Selected(index=choice)


def choose(
    response: SearchResponse,
    config: SearchConfig,
    input_func: Callable[[str], str] = input,
    print_func: Callable[..., None] = print,
    strict: bool = False,
) -> Optional[SearchResult]:
    """Show the menu and read input until a valid choice or quit.

    Returns the chosen entry, or None when the user quits or there is
    nothing to choose from. Out-of-range numbers always re-prompt; other
    unparsable input re-prompts too unless ``strict`` is set, in which
    case it raises InputError.
    """
    entries = render_menu(response, config, print_func)
    if not entries:
        print_func("No results found.")
        return None

    # Bounded by what was listed, not only by the configured size
    upper = len(entries)
    while True:
        try:
            raw = input_func(PROMPT.format(upper=upper))
        except EOFError as exc:
            raise InputError("no selection entered: input closed", exc) from exc

        selection = parse_selection(raw, upper)
        if isinstance(selection, Quit):
            logger.debug("User quit the menu")
            return None
        if isinstance(selection, Selected):
            logger.debug("User selected entry %d", selection.index)
            return entries[selection.index - 1]

        if strict and selection.reason == "not a number":
            raise InputError(f"invalid selection {selection.raw!r}: not a number")
        logger.debug("Rejected menu input %r: %s", selection.raw, selection.reason)
        print_func(RETRY_MESSAGE)
