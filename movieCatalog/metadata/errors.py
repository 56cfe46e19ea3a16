"""metadata.errors
Exceptions raised by the record model and the persistence gateway.

Every error carries a human-readable ``detail`` that the GUI shows as-is.
"""

from __future__ import annotations


class CatalogError(Exception):
    detail: str = "An unexpected error occurred"

    def __init__(self, detail: str | None = None):
        if detail:
            self.detail = detail
        super().__init__(self.detail)


class ValidationError(CatalogError):
    """Bad user input; the caller should re-prompt."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class NotFoundError(CatalogError):
    """Stale reference to a deleted or nonexistent movie id."""

    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        super().__init__(f"Movie with ID {movie_id} not found.")


class PersistenceError(CatalogError):
    """Connectivity or storage fault."""

    def __init__(self, message: str):
        super().__init__(f"Database error: {message}")
