"""Shared abstractions used across feature modules."""

from .clock import as_utc, day_bounds, utcnow
from .repository import AsyncRepository

__all__ = ["AsyncRepository", "as_utc", "day_bounds", "utcnow"]
