"""
movieCatalog
~~~~~~~~~~~~

Top-level package for the Movie Catalog desktop application.

Exports:
  - DATABASE_PATH, LOG_PATH
  - Domain objects: Movie, MovieRepo, CatalogDB and the error types
  - Utility: log_debug
"""

# settings
from movieCatalog.settings import DATABASE_PATH, LOG_PATH

# utils
from movieCatalog.utils import log_debug

# domain
from movieCatalog.metadata import (
    Movie,
    movie_from_form,
    MovieRepo,
    CatalogDB,
    CatalogError,
    ValidationError,
    NotFoundError,
    PersistenceError,
)

__all__ = [
    # settings
    "DATABASE_PATH",
    "LOG_PATH",
    # utils
    "log_debug",
    # domain
    "Movie",
    "movie_from_form",
    "MovieRepo",
    "CatalogDB",
    "CatalogError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
]
