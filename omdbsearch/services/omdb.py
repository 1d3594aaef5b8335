"""OMDb service for searching titles and fetching title details."""

import logging
from typing import Any, Optional, Type, TypeVar

import niquests
from pydantic import ValidationError

from omdbsearch.core.config import SearchConfig, Settings, get_settings
from omdbsearch.core.errors import APIError, DecodeError, NetworkError
from omdbsearch.models.media import MovieDetail, OMDbModel, SearchResponse

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=OMDbModel)


class OMDbClient:
    """Thin wrapper around the two OMDb endpoints used by the CLI.

    One GET per call, no retries. Failures are raised as NetworkError,
    DecodeError or APIError.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[niquests.Session] = None,
    ):
        self._settings = settings or get_settings()
        self.base_url = self._settings.omdb_base_url
        self.session = session if session is not None else niquests.Session()
        if self._settings.proxy:
            self.session.proxies = {
                "http": self._settings.proxy,
                "https": self._settings.proxy,
            }

    def close(self) -> None:
        """Properly close the internal HTTP session."""
        if self.session is not None:
            self.session.close()

    def __enter__(self) -> "OMDbClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def search(self, config: SearchConfig) -> SearchResponse:
        """Search OMDb titles matching ``config.search_term``."""
        response = self._get(
            {"apikey": config.api_key, "s": config.search_term},
            SearchResponse,
            f"search for '{config.search_term}'",
        )
        logger.debug(
            "Search for '%s' returned %d entries (totalResults=%s)",
            config.search_term,
            len(response.search),
            response.total_results,
        )
        return response

    def get_movie(self, config: SearchConfig, imdb_id: str) -> MovieDetail:
        """Fetch the full record of the title identified by ``imdb_id``."""
        return self._get(
            {"apikey": config.api_key, "i": imdb_id},
            MovieDetail,
            f"lookup of {imdb_id}",
        )

    def _get(self, params: dict[str, Any], model: Type[ModelT], what: str) -> ModelT:
        """Perform one GET against the base URL and decode it into ``model``."""
        # Never log the api key
        logger.debug(
            "GET %s %s",
            self.base_url,
            {k: v for k, v in params.items() if k != "apikey"},
        )
        kwargs: dict[str, Any] = {"params": params}
        if self._settings.omdb_request_timeout:
            kwargs["timeout"] = self._settings.omdb_request_timeout

        try:
            response = self.session.get(self.base_url, **kwargs)
        except niquests.exceptions.RequestException as exc:
            raise NetworkError(f"OMDb {what} failed: {exc}", exc) from exc

        try:
            result = model.model_validate_json(response.content or b"")
        except ValidationError as exc:
            logger.debug(
                "Undecodable body for %s (HTTP %s): %r",
                what,
                response.status_code,
                response.content,
            )
            raise DecodeError(
                f"OMDb {what} returned an unexpected body: {exc}", exc
            ) from exc

        if not result.succeeded:
            raise APIError(f"OMDb {what} failed: {result.error or 'unknown error'}")
        return result


def search_movies(config: SearchConfig) -> SearchResponse:
    """Search OMDb with a one-off client.

    Convenience entry point for scripts that need a single call; the
    command line keeps one OMDbClient open for both requests instead.
    """
    with OMDbClient() as client:
        return client.search(config)


def get_movie_details(config: SearchConfig, imdb_id: str) -> MovieDetail:
    """Fetch a title record with a one-off client, see search_movies."""
    with OMDbClient() as client:
        return client.get_movie(config, imdb_id)
