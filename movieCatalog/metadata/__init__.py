"""
metadata
~~~~~~~~
Top-level package that bundles:

* core      – Movie dataclass + MovieRepo gateway
* analytics – scariness scoring
* errors    – ValidationError / NotFoundError / PersistenceError
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieCatalog.metadata.core.models     import Movie, movie_from_form
from movieCatalog.metadata.core.repo       import MovieRepo
from movieCatalog.metadata.movie_catalog_db import CatalogDB

# ── errors ────────────────────────────────────────────────────────────────
from movieCatalog.metadata.errors import (
    CatalogError,
    ValidationError,
    NotFoundError,
    PersistenceError,
)

# ── analytics convenience ────────────────────────────────────────────────
from movieCatalog.metadata.analytics.scoring import calculate_scariness

__all__ = [
    "Movie",
    "movie_from_form",
    "MovieRepo",
    "CatalogDB",
    "CatalogError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
    "calculate_scariness",
]
