# calculate_scariness()
from __future__ import annotations
import math
from typing import Dict

from movieCatalog.settings import (
    SCARINESS_WEIGHTS,
    SCARINESS_VOTES_CEILING,
    SCARINESS_RUNTIME_CEILING,
)


def calculate_scariness(
    rating: float,
    votes: int,
    runtime_minutes: int,
    watched: bool,
    weights: Dict[str, float] | None = None,
) -> float:
    """
    Scariness on a 0-10 scale, rounded to 2 decimals.

    Each input is squashed onto 0..1 first:

    * rating  – ``rating / 10``
    * votes   – log-scaled against `SCARINESS_VOTES_CEILING`, capped at 1
    * runtime – linear up to `SCARINESS_RUNTIME_CEILING` minutes, capped at 1
    * watched – 1 for a movie you have not seen yet, 0 otherwise

    and the weighted sum is stretched to 0..10. Weights are expected to sum
    to 1; the result is clamped either way.
    """
    weights = weights or SCARINESS_WEIGHTS

    rating_part  = min(max(rating, 0.0), 10.0) / 10.0
    votes_part   = min(
        math.log10(max(votes, 0) + 1) / math.log10(SCARINESS_VOTES_CEILING + 1), 1.0
    )
    runtime_part = min(max(runtime_minutes, 0), SCARINESS_RUNTIME_CEILING) / SCARINESS_RUNTIME_CEILING
    watched_part = 0.0 if watched else 1.0

    score = 10 * (
        rating_part  * weights["rating"]  +
        votes_part   * weights["votes"]   +
        runtime_part * weights["runtime"] +
        watched_part * weights["watched"]
    )
    return round(min(max(score, 0.0), 10.0), 2)
