"""
metadata.analytics
~~~~~~~~~~~~~~~~~~
Stateless scoring helpers.
"""

from .scoring import calculate_scariness

__all__ = ["calculate_scariness"]
