"""
Hotel record adapters.

Search results reach us in several shapes: flat dicts with either
``facilities`` or ``amenities``, results carrying a nested ``hotel_data``
block, ``location`` as a string or as a ``{"city": ..., "country": ...}``
mapping, ratings as strings. These helpers fold all of them into the one
canonical HotelSummary so the matcher never branches on field aliases.

Nothing here raises on malformed input; anything unusable becomes empty.
"""

from typing import Any, Callable, List, Mapping, Optional, Tuple

from passions.models import HotelSummary

# Keys tried, in order, when a location arrives as a mapping
_LOCATION_PARTS: Tuple[str, ...] = (
    "name", "area", "district", "neighborhood", "city", "region", "state", "country",
)


def _getter(obj: Any) -> Callable[[str], Any]:
    """Return a getter that works with both mappings and plain objects."""
    if isinstance(obj, Mapping):
        return lambda key: obj.get(key)
    return lambda key: getattr(obj, key, None)


def _first(*values: Any) -> Any:
    """First value that is neither None nor empty."""
    for value in values:
        if value is not None and value != "" and value != [] and value != ():
            return value
    return None


def _facility_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, Mapping):
        # {"wifi": True, "spa": False} style flags
        return [str(k) for k, v in value.items() if v]
    try:
        items = list(value)
    except TypeError:
        return []
    facilities = []
    for item in items:
        if isinstance(item, str):
            facilities.append(item)
        elif isinstance(item, Mapping) and isinstance(item.get("name"), str):
            facilities.append(item["name"])
    return facilities


def _location_text(value: Any) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        parts = [value.get(k) for k in _LOCATION_PARTS]
        return " ".join(p for p in parts if isinstance(p, str) and p)
    return ""


def _optional_id(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def hotel_from_dict(data: Optional[Mapping[str, Any]]) -> HotelSummary:
    """
    Normalise a loosely shaped hotel mapping into a HotelSummary.

    Top-level fields win; a nested ``hotel_data`` block fills the gaps.
    ``facilities`` is preferred over ``amenities`` when both are present.
    """
    if not isinstance(data, Mapping):
        return HotelSummary()

    nested = data.get("hotel_data")
    if not isinstance(nested, Mapping):
        nested = {}

    g = _getter(data)
    n = _getter(nested)

    facilities = _first(
        _facility_list(g("facilities")),
        _facility_list(g("amenities")),
        _facility_list(n("facilities")),
        _facility_list(n("amenities")),
    ) or []

    return HotelSummary(
        name=_first(g("name"), n("name")) or "",
        description=_first(g("description"), n("description")) or "",
        facilities=tuple(facilities),
        address=_location_text(_first(g("address"), n("address"))),
        location=_location_text(_first(g("location"), n("location"))),
        rating=_first(g("rating"), n("rating")),
        hotel_id=_optional_id(_first(g("id"), g("hotel_id"), n("id"))),
    )


def as_hotel_summary(hotel: Any) -> HotelSummary:
    """
    Adapt any hotel-like value: HotelSummary passes through, mappings go
    through ``hotel_from_dict``, other objects are read by attribute.
    """
    if isinstance(hotel, HotelSummary):
        return hotel
    if hotel is None or isinstance(hotel, Mapping):
        return hotel_from_dict(hotel)

    g = _getter(hotel)
    return HotelSummary(
        name=g("name") or "",
        description=g("description") or "",
        facilities=tuple(_facility_list(_first(g("facilities"), g("amenities")))),
        address=_location_text(g("address")),
        location=_location_text(g("location")),
        rating=g("rating"),
        hotel_id=_optional_id(_first(g("id"), g("hotel_id"))),
    )
