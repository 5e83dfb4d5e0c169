"""
Dataclasses shared by the catalog, matcher and profile.

PassionCategory is static catalog data; HotelSummary is the one
canonical hotel shape the matcher reads (see ``passions.hotels`` for the
adapters that build it); PassionMatch / MatchResult are created fresh for
every scoring call and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple


# ── Strength labels ───────────────────────────────────────────────
# (lower bound, label), checked top-down; anything <= 0 is "No Match"
STRENGTH_LABELS: Tuple[Tuple[int, str], ...] = (
    (30, "Excellent Match"),
    (20, "Great Match"),
    (10, "Good Match"),
)
SOME_MATCH = "Some Match"
NO_MATCH = "No Match"

RATING_BONUS_REASON = "Highly rated for this experience"


def get_passion_strength(score: float) -> str:
    """Human label for a passion or total score."""
    for lower_bound, label in STRENGTH_LABELS:
        if score >= lower_bound:
            return label
    if score > 0:
        return SOME_MATCH
    return NO_MATCH


@dataclass(frozen=True)
class PassionCategory:
    """A named travel-interest cluster and the terms that signal it."""
    id: str
    name: str
    icon: str
    color: str
    description: str
    keywords: Tuple[str, ...]            # matched against name + description
    amenity_matches: Tuple[str, ...]     # matched against facilities
    location_keywords: Tuple[str, ...]   # matched against address + location

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "color": self.color,
            "description": self.description,
            "keywords": list(self.keywords),
            "amenityMatches": list(self.amenity_matches),
            "locationKeywords": list(self.location_keywords),
        }


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _rating(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return None
    return rating if rating == rating else None  # NaN


def _string_tuple(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    if not values:
        return ()
    if isinstance(values, str):
        return (values,)
    try:
        return tuple(v for v in values if isinstance(v, str))
    except TypeError:
        return ()


@dataclass(frozen=True)
class HotelSummary:
    """
    Canonical hotel record consumed by PassionMatcher.

    Missing text fields are empty strings and a missing facility list is
    an empty tuple, so scoring never has to guard against ``None``.
    """
    name: str = ""
    description: str = ""
    facilities: Tuple[str, ...] = ()
    address: str = ""
    location: str = ""
    rating: Optional[float] = None
    hotel_id: Optional[str] = None

    def __post_init__(self) -> None:
        # frozen, so normalise through object.__setattr__
        object.__setattr__(self, "name", _text(self.name))
        object.__setattr__(self, "description", _text(self.description))
        object.__setattr__(self, "address", _text(self.address))
        object.__setattr__(self, "location", _text(self.location))
        object.__setattr__(self, "facilities", _string_tuple(self.facilities))
        object.__setattr__(self, "rating", _rating(self.rating))


@dataclass(frozen=True)
class PassionMatch:
    """One passion's contribution to a hotel's score."""
    passion: PassionCategory
    score: int
    reasons: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passion": self.passion.to_dict(),
            "score": self.score,
            "reasons": list(self.reasons),
        }


@dataclass(frozen=True)
class MatchResult:
    """Aggregate score for one hotel, matches sorted by score descending."""
    total_score: int = 0
    matches: Tuple[PassionMatch, ...] = field(default_factory=tuple)

    @property
    def strength(self) -> str:
        return get_passion_strength(self.total_score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "matches": [m.to_dict() for m in self.matches],
        }


EMPTY_RESULT = MatchResult(total_score=0, matches=())


@dataclass(frozen=True)
class RankedHotel:
    """A hotel paired with its MatchResult, as returned by rank/filter."""
    hotel: HotelSummary
    result: MatchResult

    @property
    def total_score(self) -> int:
        return self.result.total_score
