from __future__ import annotations
import datetime as _dt
from typing import Dict, List, Tuple

from movieCatalog.settings import MIN_YEAR
from movieCatalog.metadata import Movie, MovieRepo, NotFoundError

# type alias for one row of the main table
TableRow = Tuple[int, str, int, str, float, int, int, str]

# raw text keyed like the form fields in `MovieDialog`
FormData = Dict[str, str]


def table_row(movie: Movie) -> TableRow:
    """Display values for *movie* in `TABLE_HEADERS` order."""
    return (
        movie.id, movie.title, movie.year, movie.director,
        movie.rating, movie.runtime_minutes, movie.votes,
        "Yes" if movie.watched else "No",
    )


def load_movies(repo: MovieRepo) -> List[TableRow]:
    """Every stored movie as a table row (“Refresh” button)."""
    return [table_row(m) for m in repo.get_all()]


def catalog_status(repo: MovieRepo) -> str:
    """Status-bar text with the stored row count."""
    return f"{repo.count()} movies"


def selected_movie(repo: MovieRepo, movie_id: int) -> Movie:
    """
    Re-read the row the user has selected.

    Raises `NotFoundError` when it vanished since the table was drawn, so
    the caller can refresh.
    """
    movie = repo.get_by_id(movie_id)
    if movie is None:
        raise NotFoundError(movie_id)
    return movie


def form_labels(today: _dt.date | None = None) -> Tuple[Tuple[str, str], ...]:
    """(form key, label) pairs in display order; the year bound is today's."""
    max_year = (today or _dt.date.today()).year
    return (
        ("title",           "Title:"),
        ("year",            f"Year ({MIN_YEAR}-{max_year}):"),
        ("director",        "Director:"),
        ("rating",          "Rating (0-10):"),
        ("runtime_minutes", "Runtime (minutes):"),
        ("votes",           "Votes:"),
    )


def form_from_movie(movie: Movie) -> FormData:
    """Pre-fill values for the edit dialog."""
    return {
        "title":           movie.title,
        "year":            str(movie.year),
        "director":        movie.director,
        "rating":          str(movie.rating),
        "runtime_minutes": str(movie.runtime_minutes),
        "votes":           str(movie.votes),
    }


# ------------------------------------------------------------------
def add_movie(repo: MovieRepo, movie: Movie) -> Movie:
    """Store a movie from the add dialog. Returns it with its new id."""
    new_id = repo.insert(movie)
    return movie.with_id(new_id)


def edit_movie(repo: MovieRepo, movie: Movie) -> Movie:
    """Overwrite the row with *movie*.id; the dialog keeps the original id."""
    repo.update(movie)
    return movie


def delete_movie(repo: MovieRepo, movie_id: int) -> None:
    repo.delete(movie_id)


def delete_prompt(movie: Movie) -> str:
    return f'Are you sure you want to delete "{movie.title}"?'


def scariness_message(movie: Movie) -> str:
    """Text for the “Show Scariness” popup."""
    return f'Scariness Score for "{movie.title}":\n\n{movie.scariness()} / 10'
