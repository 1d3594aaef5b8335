"""Human-readable rendering of a MovieDetail."""

from omdbsearch.models.media import MovieDetail

IMDB_TITLE_URL = "https://www.imdb.com/title/{imdb_id}/"

MOVIE_TEMPLATE = """
{title} ({year})
  {plot}
Genre       : {genre}
IMDB Rating : {imdb_rating}
MetaScore   : {metascore}
Director    : {director}
Writers     : {writer}
Actors      : {actors}
Awards      : {awards}
BoxOffice   : {box_office}
IMDB Page   : {imdb_url}
"""


def imdb_url(imdb_id: str) -> str:
    return IMDB_TITLE_URL.format(imdb_id=imdb_id)


def format_movie(movie: MovieDetail) -> str:
    """Render the detail block; values are printed exactly as OMDb sent them."""
    return MOVIE_TEMPLATE.format(
        title=movie.title,
        year=movie.year,
        plot=movie.plot,
        genre=movie.genre,
        imdb_rating=movie.imdb_rating,
        metascore=movie.metascore,
        director=movie.director,
        writer=movie.writer,
        actors=movie.actors,
        awards=movie.awards,
        box_office=movie.box_office,
        imdb_url=imdb_url(movie.imdb_id),
    )
