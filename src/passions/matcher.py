"""
PassionMatcher -- keyword-overlap scoring of hotels against passions.

For every selected passion the hotel earns points for each catalog term
found (case-insensitive substring) in three places:

    name + description     keywords            +5 each
    facilities             amenity matches     +8 each
    address + location     location keywords   +10 each

A rating above 8 adds a flat +5, but only when the hotel already matched
on content. Each passion is capped at 50 and the total at 100, so no
single passion dominates the aggregate.

Usage::

    from passions import PassionMatcher, hotel_from_dict

    matcher = PassionMatcher()
    result = matcher.calculate_passion_score(
        hotel_from_dict(raw_hotel), ["relaxation-wellness", "gourmet-foodie"],
    )
    result.total_score            # 0..100
    result.matches[0].reasons     # ("Hotel features: spa, yoga", ...)
    matcher.get_passion_strength(result.total_score)   # "Excellent Match"

    ranked = matcher.rank_hotels(hotels, selected_ids)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from core.logging import get_logger
from passions.catalog import PassionCatalog, default_catalog
from passions.hotels import as_hotel_summary
from passions.models import (
    EMPTY_RESULT,
    RATING_BONUS_REASON,
    HotelSummary,
    MatchResult,
    PassionCategory,
    PassionMatch,
    RankedHotel,
    get_passion_strength,
)

logger = get_logger(__name__)


# ── Scoring configuration ────────────────────────────────────────

@dataclass(frozen=True)
class PassionScoringConfig:
    """
    Integer weights and caps for passion scoring.

    Each weight is the points earned per matched term in its field.
    """

    keyword_weight: int = 5
    amenity_weight: int = 8
    location_weight: int = 10

    # Flat bonus when rating > threshold and the passion already scored
    rating_bonus: int = 5
    rating_bonus_threshold: float = 8

    # How many matched terms each reason string quotes
    keyword_reason_limit: int = 3
    amenity_reason_limit: int = 2
    location_reason_limit: int = 1

    # Caps
    max_passion_score: int = 50
    max_total_score: int = 100


@dataclass(frozen=True)
class _Breakdown:
    keywords: Tuple[str, ...]
    amenities: Tuple[str, ...]
    locations: Tuple[str, ...]
    rating_bonus: int
    raw: int
    score: int
    reasons: Tuple[str, ...]


def _matched(terms: Sequence[str], text: str) -> Tuple[str, ...]:
    """Terms contained in ``text``, in catalog order."""
    if not text:
        return ()
    return tuple(t for t in terms if t.lower() in text)


# ── Main matcher ──────────────────────────────────────────────────

class PassionMatcher:
    """
    Scores hotels against a list of selected passion ids.

    Holds only the catalog and config, both immutable -- safe to share
    across threads and reuse across requests.
    """

    def __init__(
        self,
        catalog: Optional[PassionCatalog] = None,
        config: Optional[PassionScoringConfig] = None,
    ) -> None:
        self.catalog = catalog or default_catalog()
        self.config = config or PassionScoringConfig()

    # ── Catalog passthrough ───────────────────────────────────────

    def get_all_passions(self) -> List[PassionCategory]:
        return self.catalog.get_all_passions()

    def get_passion(self, passion_id: str) -> Optional[PassionCategory]:
        return self.catalog.get_passion(passion_id)

    @staticmethod
    def get_passion_strength(score: float) -> str:
        return get_passion_strength(score)

    # ── Public API ────────────────────────────────────────────────

    def calculate_passion_score(
        self,
        hotel: HotelSummary,
        selected_passion_ids: Optional[Sequence[str]],
    ) -> MatchResult:
        """
        Score one hotel against the selected passions.

        Args:
            hotel: Canonical hotel record. Anything else is adapted with
                ``as_hotel_summary`` first.
            selected_passion_ids: Passion ids in selection order. Unknown
                ids are skipped.

        Returns:
            MatchResult with total clamped to [0, max_total_score] and
            non-zero matches sorted by score descending.
        """
        if isinstance(selected_passion_ids, str):
            selected_passion_ids = [selected_passion_ids]
        if not selected_passion_ids:
            return EMPTY_RESULT

        hotel = as_hotel_summary(hotel)
        cfg = self.config
        total = 0
        matches: List[PassionMatch] = []

        for passion_id in selected_passion_ids:
            passion = self.catalog.get_passion(passion_id)
            if passion is None:
                logger.debug("Skipping unknown passion id", passion_id=passion_id)
                continue

            match = self.calculate_single_passion_score(hotel, passion)
            if match.score > 0:
                total += match.score
                matches.append(match)

        # sorted() is stable: equal scores keep selection order
        matches = sorted(matches, key=lambda m: m.score, reverse=True)
        return MatchResult(
            total_score=max(0, min(cfg.max_total_score, total)),
            matches=tuple(matches),
        )

    def calculate_single_passion_score(
        self,
        hotel: HotelSummary,
        passion: PassionCategory,
    ) -> PassionMatch:
        """Score one passion; the result may carry a score of 0."""
        b = self._breakdown(as_hotel_summary(hotel), passion)
        return PassionMatch(passion=passion, score=b.score, reasons=b.reasons)

    def score_hotels(
        self,
        hotels: Iterable[Any],
        selected_passion_ids: Optional[Sequence[str]],
    ) -> List[RankedHotel]:
        """Score every hotel, keeping input order."""
        scored = []
        for hotel in hotels:
            summary = as_hotel_summary(hotel)
            scored.append(RankedHotel(
                hotel=summary,
                result=self.calculate_passion_score(summary, selected_passion_ids),
            ))
        return scored

    def rank_hotels(
        self,
        hotels: Iterable[Any],
        selected_passion_ids: Optional[Sequence[str]],
    ) -> List[RankedHotel]:
        """Best match first; ties keep input order."""
        scored = self.score_hotels(hotels, selected_passion_ids)
        return sorted(scored, key=lambda r: r.total_score, reverse=True)

    def filter_hotels(
        self,
        hotels: Iterable[Any],
        selected_passion_ids: Optional[Sequence[str]],
        min_score: int = 1,
    ) -> List[RankedHotel]:
        """
        Ranked hotels scoring at least ``min_score``.

        With no passions selected there is nothing to filter on, so every
        hotel is returned (all with a zero score, in input order).
        """
        ranked = self.rank_hotels(hotels, selected_passion_ids)
        if not selected_passion_ids:
            return ranked
        kept = [r for r in ranked if r.total_score >= min_score]
        logger.debug(
            "Filtered hotels by passion score",
            total=len(ranked),
            kept=len(kept),
            min_score=min_score,
        )
        return kept

    def explain_hotel(
        self,
        hotel: Any,
        selected_passion_ids: Optional[Sequence[str]],
    ) -> Dict[str, Any]:
        """Return a detailed per-passion breakdown for debugging / admin UI."""
        if isinstance(selected_passion_ids, str):
            selected_passion_ids = [selected_passion_ids]
        summary = as_hotel_summary(hotel)
        cfg = self.config
        passions: Dict[str, Dict[str, Any]] = {}

        for passion in self.catalog.resolve(selected_passion_ids or ()):
            b = self._breakdown(summary, passion)
            passions[passion.id] = {
                "keywords": list(b.keywords),
                "amenities": list(b.amenities),
                "location": list(b.locations),
                "keyword_points": len(b.keywords) * cfg.keyword_weight,
                "amenity_points": len(b.amenities) * cfg.amenity_weight,
                "location_points": len(b.locations) * cfg.location_weight,
                "rating_bonus": b.rating_bonus,
                "raw": b.raw,
                "score": b.score,
                "strength": get_passion_strength(b.score),
            }

        result = self.calculate_passion_score(summary, selected_passion_ids)
        return {
            "passions": passions,
            "total": result.total_score,
            "strength": result.strength,
        }

    # ── Scoring internals ─────────────────────────────────────────

    def _breakdown(self, hotel: HotelSummary, passion: PassionCategory) -> _Breakdown:
        cfg = self.config
        score = 0
        reasons: List[str] = []

        # 1. Name + description
        hotel_text = f"{hotel.name} {hotel.description}".lower()
        keywords = _matched(passion.keywords, hotel_text)
        if keywords:
            score += len(keywords) * cfg.keyword_weight
            reasons.append(
                f"Hotel features: {', '.join(keywords[:cfg.keyword_reason_limit])}"
            )

        # 2. Facilities / amenities
        facilities_text = " ".join(hotel.facilities).lower()
        amenities = _matched(passion.amenity_matches, facilities_text)
        if amenities:
            score += len(amenities) * cfg.amenity_weight
            reasons.append(
                f"Amenities: {', '.join(amenities[:cfg.amenity_reason_limit])}"
            )

        # 3. Address + location
        location_text = f"{hotel.address} {hotel.location}".lower()
        locations = _matched(passion.location_keywords, location_text)
        if locations:
            score += len(locations) * cfg.location_weight
            reasons.append(
                f"Location: {', '.join(locations[:cfg.location_reason_limit])}"
            )

        # 4. Rating bonus, only on top of a content match
        rating_bonus = 0
        if (
            score > 0
            and hotel.rating is not None
            and hotel.rating > cfg.rating_bonus_threshold
        ):
            rating_bonus = cfg.rating_bonus
            score += rating_bonus
            reasons.append(RATING_BONUS_REASON)

        return _Breakdown(
            keywords=keywords,
            amenities=amenities,
            locations=locations,
            rating_bonus=rating_bonus,
            raw=score,
            score=max(0, min(cfg.max_passion_score, score)),
            reasons=tuple(reasons),
        )
