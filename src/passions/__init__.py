"""
Passion matching for hotel search.

Scores hotels against a traveller's travel interests ("passions") by
keyword overlap and keeps the traveller's selection in a key-value store.

Quick start::

    from passions import PassionMatcher, PassionProfile, default_catalog, hotel_from_dict
    from services import create_store

    catalog = default_catalog()
    matcher = PassionMatcher(catalog)
    profile = PassionProfile(create_store(), catalog)

    profile.toggle_passion("relaxation-wellness")

    result = matcher.calculate_passion_score(
        hotel_from_dict(search_result), profile.get_selected(),
    )
    label = matcher.get_passion_strength(result.total_score)
    ranked = matcher.rank_hotels(search_results, profile.get_selected())
"""

from passions.catalog import PassionCatalog, default_catalog
from passions.hotels import as_hotel_summary, hotel_from_dict
from passions.matcher import PassionMatcher, PassionScoringConfig
from passions.models import (
    EMPTY_RESULT,
    HotelSummary,
    MatchResult,
    PassionCategory,
    PassionMatch,
    RankedHotel,
    get_passion_strength,
)
from passions.profile import DEFAULT_STORAGE_KEY, PassionProfile, storage_key_for

__all__ = [
    "PassionCategory",
    "HotelSummary",
    "PassionMatch",
    "MatchResult",
    "RankedHotel",
    "EMPTY_RESULT",
    "PassionCatalog",
    "default_catalog",
    "hotel_from_dict",
    "as_hotel_summary",
    "PassionMatcher",
    "PassionScoringConfig",
    "get_passion_strength",
    "PassionProfile",
    "DEFAULT_STORAGE_KEY",
    "storage_key_for",
]
