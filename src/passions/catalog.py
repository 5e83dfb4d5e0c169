"""
PassionCatalog -- read-only registry of passion categories.

Built once (``default_catalog()`` caches the stock seven categories) and
passed explicitly to the matcher and profile. Lookups never raise: an
unknown id is simply "not found".
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from passions.constants.catalog_data import DEFAULT_PASSIONS
from passions.models import PassionCategory


def _terms(values: Iterable[str]) -> tuple:
    return tuple(v.lower().strip() for v in values if v and v.strip())


def category_from_dict(passion_id: str, data: Mapping[str, Any]) -> PassionCategory:
    """Build a PassionCategory from a catalog-data entry."""
    return PassionCategory(
        id=passion_id,
        name=data.get("name", passion_id),
        icon=data.get("icon", ""),
        color=data.get("color", ""),
        description=data.get("description", ""),
        keywords=_terms(data.get("keywords", [])),
        amenity_matches=_terms(
            data.get("amenity_matches", data.get("amenityMatches", []))
        ),
        location_keywords=_terms(
            data.get("location_keywords", data.get("locationKeywords", []))
        ),
    )


class PassionCatalog:
    """
    Ordered, immutable set of PassionCategory objects keyed by id.

    Stateless after construction -- safe to share across threads.
    """

    def __init__(self, categories: Iterable[PassionCategory]) -> None:
        self._by_id: Dict[str, PassionCategory] = {}
        for category in categories:
            if category.id in self._by_id:
                raise ValueError(f"Duplicate passion id: {category.id}")
            self._by_id[category.id] = category

    @classmethod
    def from_data(cls, data: Mapping[str, Mapping[str, Any]]) -> "PassionCatalog":
        return cls(category_from_dict(pid, entry) for pid, entry in data.items())

    def get_all_passions(self) -> List[PassionCategory]:
        """All categories in definition order."""
        return list(self._by_id.values())

    def get_passion(self, passion_id: str) -> Optional[PassionCategory]:
        if not isinstance(passion_id, str):
            return None
        return self._by_id.get(passion_id)

    def resolve(self, passion_ids: Iterable[str]) -> List[PassionCategory]:
        """Resolve ids in input order, silently dropping unknown ones."""
        resolved = []
        for pid in passion_ids or ():
            category = self.get_passion(pid)
            if category is not None:
                resolved.append(category)
        return resolved

    def ids(self) -> List[str]:
        return list(self._by_id)

    def __contains__(self, passion_id: object) -> bool:
        return isinstance(passion_id, str) and passion_id in self._by_id

    def __iter__(self) -> Iterator[PassionCategory]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)


@lru_cache(maxsize=1)
def default_catalog() -> PassionCatalog:
    """The stock seven-category catalog (cached)."""
    return PassionCatalog.from_data(DEFAULT_PASSIONS)
