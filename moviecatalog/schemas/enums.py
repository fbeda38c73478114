from __future__ import annotations

"""
Central enum definitions used across What To Watch.

• Enums subclass `str, PyEnum` for JSON-friendly serialization.
• VALUE STRINGS are **stable** once deployed (stored in the `movies.genre` column).
"""

from enum import Enum as PyEnum


# ──────────────────────────────────────────────────────────────
# Catalog
# ──────────────────────────────────────────────────────────────
class Genre(str, PyEnum):
    """Movie genre."""
    COMEDY = "comedy"
    CRIME = "crime"
    DOCUMENTARY = "documentary"
    DRAMA = "drama"
    HORROR = "horror"
    FAMILY = "family"
    ROMANCE = "romance"
    SCIFI = "scifi"
    THRILLER = "thriller"


__all__ = ["Genre"]
