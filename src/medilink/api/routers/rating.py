"""
Rating endpoints.
"""

from ..deps import get_rating_service
from ..schemas.booking import RatingIn, RatingOut
from .crud import build_entity_router

router = build_entity_router("rating", "Ratings", RatingIn, RatingOut, get_rating_service)
