"""
metadata.core
~~~~~~~~~~~~~
Domain layer – record dataclass & repository.
"""

from .models import Movie, movie_from_form
from .repo   import MovieRepo

__all__ = ["Movie", "movie_from_form", "MovieRepo"]
