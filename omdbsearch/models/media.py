"""Media models mirroring the OMDb JSON payloads."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OMDbModel(BaseModel):
    """Read-only model populated from OMDb's capitalised JSON keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SearchResult(OMDbModel):
    """A single hit from an OMDb title search."""

    title: str = Field("", alias="Title")
    year: str = Field("", alias="Year")
    imdb_id: str = Field("", alias="imdbID")
    type: str = Field("", alias="Type")  # movie, series, episode
    poster: str = Field("", alias="Poster")


class SearchResponse(OMDbModel):
    """Envelope returned by the search endpoint (``?s=``)."""

    search: List[SearchResult] = Field([], alias="Search")
    total_results: str = Field("", alias="totalResults")
    response: str = Field("", alias="Response")
    error: str = Field("", alias="Error")

    @property
    def succeeded(self) -> bool:
        return self.response != "False"


class Rating(OMDbModel):
    """One entry of the ``Ratings`` list (IMDb, Rotten Tomatoes, Metacritic)."""

    source: str = Field("", alias="Source")
    value: str = Field("", alias="Value")


class MovieDetail(OMDbModel):
    """A full title record returned by the lookup endpoint (``?i=``).

    Values are kept as OMDb sends them, including the literal ``"N/A"``.
    """

    title: str = Field("", alias="Title")
    year: str = Field("", alias="Year")
    rated: str = Field("", alias="Rated")
    released: str = Field("", alias="Released")
    runtime: str = Field("", alias="Runtime")
    genre: str = Field("", alias="Genre")
    director: str = Field("", alias="Director")
    writer: str = Field("", alias="Writer")
    actors: str = Field("", alias="Actors")
    plot: str = Field("", alias="Plot")
    language: str = Field("", alias="Language")
    country: str = Field("", alias="Country")
    awards: str = Field("", alias="Awards")
    poster: str = Field("", alias="Poster")
    ratings: List[Rating] = Field([], alias="Ratings")
    metascore: str = Field("", alias="Metascore")
    imdb_rating: str = Field("", alias="imdbRating")
    imdb_votes: str = Field("", alias="imdbVotes")
    imdb_id: str = Field("", alias="imdbID")
    type: str = Field("", alias="Type")
    dvd: str = Field("", alias="DVD")
    box_office: str = Field("", alias="BoxOffice")
    production: str = Field("", alias="Production")
    website: str = Field("", alias="Website")
    response: str = Field("", alias="Response")
    error: str = Field("", alias="Error")

    @property
    def succeeded(self) -> bool:
        return self.response != "False"
