from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables (optional file, real env wins)
load_dotenv(BASE_DIR / "catalog.env")

# File / folder paths
DATABASE_PATH = Path(os.getenv("MOVIE_CATALOG_DB") or BASE_DIR / "movie_catalog.sqlite")
SCHEMA_PATH   = BASE_DIR / "movie_catalog_schema.sql"
LOG_PATH      = Path(os.getenv("MOVIE_CATALOG_LOG") or BASE_DIR / "catalog_debug.log")

# Validation bounds
MIN_YEAR = 1888

# UI constants
ACCENT_COLOR  = "#c9a86a"
TABLE_HEADERS = (
    "ID", "Title", "Year", "Director", "Rating", "Runtime (min)", "Votes", "Watched"
)

SCARINESS_WEIGHTS = {
    "rating":  0.5,
    "votes":   0.2,
    "runtime": 0.2,
    "watched": 0.1,
}
SCARINESS_VOTES_CEILING   = 3_000_000   # votes at which the votes part saturates
SCARINESS_RUNTIME_CEILING = 240         # minutes
