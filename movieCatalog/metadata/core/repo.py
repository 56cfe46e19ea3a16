"""metadata.core.repo
Persistence gateway for the movie catalog.

All SQL lives here; other layers go through `MovieRepo` instead of touching
`sqlite3` directly. The repo is bound to one explicit `CatalogDB` session.
"""

from __future__ import annotations
import sqlite3
from typing import List, Optional

from movieCatalog.metadata.movie_catalog_db import CatalogDB
from movieCatalog.metadata.core.models import Movie
from movieCatalog.metadata.errors import NotFoundError
from movieCatalog.utils import log_debug

# python attribute → column, in table order (id excluded)
_COLUMNS = (
    ("title",           "title"),
    ("year",            "year"),
    ("director",        "director"),
    ("rating",          "rating"),
    ("runtime_minutes", "runtimeMinutes"),
    ("votes",           "votes"),
    ("watched",         "watched"),
)
_COL_NAMES = ", ".join(col for _, col in _COLUMNS)


def _row_to_movie(row: sqlite3.Row) -> Movie:
    return Movie(
        id=row["id"],
        title=row["title"],
        year=row["year"],
        director=row["director"],
        rating=row["rating"],
        runtime_minutes=row["runtimeMinutes"],
        votes=row["votes"],
        watched=bool(row["watched"]),
    )


def _params(movie: Movie) -> tuple:
    return tuple(getattr(movie, attr) for attr, _ in _COLUMNS)


class MovieRepo:
    """CRUD helpers for Movie objects against the **movies** table."""

    def __init__(self, db: CatalogDB) -> None:
        self.db = db

    # ───────────────────────────── look-ups ──────────────────────────
    def get_all(self) -> List[Movie]:
        """Every stored movie, ordered by id. Empty list for an empty table."""
        with self.db.transaction():
            rows = self.db.execute(
                f"SELECT id, {_COL_NAMES} FROM movies ORDER BY id"
            ).fetchall()
        return [_row_to_movie(r) for r in rows]

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Return the `Movie` for *movie_id* or **None** if not found."""
        with self.db.transaction():
            row = self.db.execute(
                f"SELECT id, {_COL_NAMES} FROM movies WHERE id=?", (movie_id,)
            ).fetchone()
        return _row_to_movie(row) if row else None

    def count(self) -> int:
        with self.db.transaction():
            return self.db.execute("SELECT COUNT(*) AS n FROM movies").fetchone()["n"]

    # ───────────────────────────── writers ───────────────────────────
    def insert(self, movie: Movie) -> int:
        """Insert one row into **movies** and return the new row-id.

        The id on *movie* is ignored; storage always assigns a fresh one.

        Raises
        ------
        ValidationError
            If *movie* breaks a field rule (nothing is written).
        PersistenceError
            For any storage fault (rolled back, nothing is written).
        """
        movie.validate()
        ph = ", ".join("?" for _ in _COLUMNS)
        with self.db.transaction():
            cur = self.db.execute(
                f"INSERT INTO movies ({_COL_NAMES}) VALUES ({ph})", _params(movie)
            )
            new_id = cur.lastrowid
        log_debug(f"inserted movie {new_id} ({movie.title!r})")
        return new_id

    def update(self, movie: Movie) -> None:
        """Replace every column of the row with *movie*'s id.

        Raises
        ------
        NotFoundError
            If no row has that id; the table is left as it was.
        """
        movie.validate()
        assignments = ", ".join(f"{col}=?" for _, col in _COLUMNS)
        with self.db.transaction():
            cur = self.db.execute(
                f"UPDATE movies SET {assignments} WHERE id=?",
                _params(movie) + (movie.id,),
            )
            if cur.rowcount == 0:
                raise NotFoundError(movie.id)
        log_debug(f"updated movie {movie.id} ({movie.title!r})")

    def delete(self, movie_id: int) -> None:
        """Remove the row for good. A second delete of the same id raises."""
        with self.db.transaction():
            cur = self.db.execute("DELETE FROM movies WHERE id=?", (movie_id,))
            if cur.rowcount == 0:
                raise NotFoundError(movie_id)
        log_debug(f"deleted movie {movie_id}")

