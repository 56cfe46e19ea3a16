"""Shared test fixtures."""

import os
import tempfile
from pathlib import Path

# keep test runs out of the package's own log file
os.environ.setdefault(
    "MOVIE_CATALOG_LOG", str(Path(tempfile.gettempdir()) / "movie_catalog_test.log")
)

import pytest

from movieCatalog.metadata import CatalogDB, Movie, MovieRepo


@pytest.fixture
def db():
    """Fresh in-memory database per test."""
    with CatalogDB(":memory:") as conn:
        yield conn


@pytest.fixture
def repo(db) -> MovieRepo:
    return MovieRepo(db)


@pytest.fixture
def inception() -> Movie:
    return Movie(
        id=0,
        title="Inception",
        year=2010,
        director="Christopher Nolan",
        rating=8.8,
        runtime_minutes=148,
        votes=2_200_000,
        watched=True,
    )


@pytest.fixture
def hereditary() -> Movie:
    return Movie(
        id=0,
        title="Hereditary",
        year=2018,
        director="Ari Aster",
        rating=7.3,
        runtime_minutes=127,
        votes=400_000,
        watched=False,
    )
