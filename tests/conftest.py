import json
from unittest.mock import MagicMock

import pytest

from omdbsearch.core.config import SearchConfig, Settings


MATRIX_SEARCH = {
    "Search": [
        {
            "Title": "The Matrix",
            "Year": "1999",
            "imdbID": "tt0133093",
            "Type": "movie",
            "Poster": "https://example.com/matrix.jpg",
        },
        {
            "Title": "The Matrix Reloaded",
            "Year": "2003",
            "imdbID": "tt0234215",
            "Type": "movie",
            "Poster": "https://example.com/reloaded.jpg",
        },
        {
            "Title": "The Matrix Revolutions",
            "Year": "2003",
            "imdbID": "tt0242653",
            "Type": "movie",
            "Poster": "N/A",
        },
    ],
    "totalResults": "3",
    "Response": "True",
}

RELOADED_DETAIL = {
    "Title": "The Matrix Reloaded",
    "Year": "2003",
    "Rated": "R",
    "Released": "15 May 2003",
    "Runtime": "138 min",
    "Genre": "Action, Sci-Fi",
    "Director": "Lana Wachowski, Lilly Wachowski",
    "Writer": "Lilly Wachowski, Lana Wachowski",
    "Actors": "Keanu Reeves, Laurence Fishburne, Carrie-Anne Moss",
    "Plot": "Freedom fighters Neo, Trinity and Morpheus continue to lead the revolt.",
    "Language": "English, French",
    "Country": "United States, Australia",
    "Awards": "7 wins & 47 nominations",
    "Poster": "https://example.com/reloaded.jpg",
    "Ratings": [
        {"Source": "Internet Movie Database", "Value": "7.2/10"},
        {"Source": "Rotten Tomatoes", "Value": "74%"},
    ],
    "Metascore": "62",
    "imdbRating": "7.2",
    "imdbVotes": "636,133",
    "imdbID": "tt0234215",
    "Type": "movie",
    "DVD": "14 Oct 2003",
    "BoxOffice": "$281,576,461",
    "Production": "N/A",
    "Website": "N/A",
    "Response": "True",
}


@pytest.fixture
def settings():
    """Settings isolated from the environment and any local .env file."""
    return Settings(
        _env_file=None,
        omdb_api_key=None,
        omdb_base_url="http://www.omdbapi.com/",
        omdb_request_timeout=None,
        omdb_strict_input=False,
        proxy=None,
        debug=False,
    )


@pytest.fixture
def config():
    return SearchConfig(api_key="X", search_term="Matrix", result_count=2)


def json_response(payload, status_code=200):
    """Fake niquests response carrying ``payload`` as a JSON body."""
    response = MagicMock()
    response.status_code = status_code
    response.content = json.dumps(payload).encode("utf-8")
    return response


def raw_response(body: bytes, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.content = body
    return response


class Console:
    """Scripted stdin lines plus captured stdout lines for the menu."""

    def __init__(self, *lines: str):
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def print(self, *args, **kwargs) -> None:
        self.output.append(" ".join(str(a) for a in args))

    @property
    def text(self) -> str:
        return "\n".join(self.output)
