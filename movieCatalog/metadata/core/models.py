# Movie dataclass + form parsing
from __future__ import annotations
import dataclasses
import datetime as _dt
from dataclasses import dataclass

from movieCatalog.settings import MIN_YEAR
from movieCatalog.metadata.errors import ValidationError
from movieCatalog.metadata.analytics.scoring import calculate_scariness

NUMERIC_FORM_ERROR = (
    "Please enter valid numeric values for Year, Rating, Runtime, and Votes."
)

# largest value an sqlite INTEGER column holds
SQLITE_MAX_INT = 2**63 - 1


def _is_whole(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True, eq=False)
class Movie:
    """
    One catalog row. ``id == 0`` means the movie has not been stored yet.

    Equality is identity: two stored movies are the same record iff their
    ids match, whatever the other fields say.
    """
    id: int
    title: str
    year: int
    director: str
    rating: float
    runtime_minutes: int
    votes: int
    watched: bool = False

    # ───────────────────────────── identity ──────────────────────────────
    @property
    def is_persisted(self) -> bool:
        return self.id > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        if not self.is_persisted or not other.is_persisted:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.is_persisted else object.__hash__(self)

    def values(self) -> tuple:
        """Every field except `id`, in column order."""
        return dataclasses.astuple(self)[1:]

    def with_id(self, movie_id: int) -> Movie:
        return dataclasses.replace(self, id=movie_id)

    # ───────────────────────────── checks ────────────────────────────────
    def validate(self, today: _dt.date | None = None) -> None:
        """Raise `ValidationError` for the first field that breaks a rule.

        Order: title, director, year, rating, runtime, votes.
        """
        max_year = (today or _dt.date.today()).year

        if not isinstance(self.title, str) or not self.title.strip():
            raise ValidationError("title", "Title cannot be empty.")
        if not isinstance(self.director, str) or not self.director.strip():
            raise ValidationError("director", "Director cannot be empty.")
        if not _is_whole(self.year):
            raise ValidationError("year", "Year must be a whole number.")
        if not MIN_YEAR <= self.year <= max_year:
            raise ValidationError(
                "year", f"Year must be between {MIN_YEAR} and {max_year}."
            )
        if not _is_number(self.rating):
            raise ValidationError("rating", "Rating must be a number.")
        if not 0 <= self.rating <= 10:           # also rejects NaN
            raise ValidationError("rating", "Rating must be between 0 and 10.")
        if not _is_whole(self.runtime_minutes):
            raise ValidationError("runtime_minutes", "Runtime must be a whole number of minutes.")
        if self.runtime_minutes <= 0:
            raise ValidationError("runtime_minutes", "Runtime must be positive.")
        if self.runtime_minutes > SQLITE_MAX_INT:
            raise ValidationError("runtime_minutes", "Runtime is too large.")
        if not _is_whole(self.votes):
            raise ValidationError("votes", "Votes must be a whole number.")
        if self.votes < 0:
            raise ValidationError("votes", "Votes cannot be negative.")
        if self.votes > SQLITE_MAX_INT:
            raise ValidationError("votes", "Votes is too large.")

    def scariness(self) -> float:
        """0-10 score, recomputed on every call and never stored."""
        return calculate_scariness(
            self.rating, self.votes, self.runtime_minutes, self.watched
        )


def movie_from_form(
    title: str,
    year: str,
    director: str,
    rating: str,
    runtime_minutes: str,
    votes: str,
    watched: bool,
    movie_id: int = 0,
    today: _dt.date | None = None,
) -> Movie:
    """
    Build a validated `Movie` from raw form text.

    Text fields are trimmed. *movie_id* is 0 for a new movie and the
    original id when editing, so an edit never changes identity.
    """
    try:
        parsed_year    = int(year.strip())
        parsed_rating  = float(rating.strip())
        parsed_runtime = int(runtime_minutes.strip())
        parsed_votes   = int(votes.strip())
    except ValueError:
        raise ValidationError("form", NUMERIC_FORM_ERROR) from None

    movie = Movie(
        id=movie_id,
        title=title.strip(),
        year=parsed_year,
        director=director.strip(),
        rating=parsed_rating,
        runtime_minutes=parsed_runtime,
        votes=parsed_votes,
        watched=bool(watched),
    )
    movie.validate(today)
    return movie
