"""
Tests for PassionCatalog and the default catalog data.
"""

import pytest

from passions.catalog import PassionCatalog, category_from_dict, default_catalog
from passions.constants.catalog_data import DEFAULT_PASSIONS


EXPECTED_IDS = [
    "gourmet-foodie",
    "outdoor-adventure",
    "historical-exploration",
    "sustainable-stays",
    "arts-culture",
    "relaxation-wellness",
    "stargazing-hotspots",
]


class TestDefaultCatalog:

    def test_definition_order(self, catalog):
        assert [p.id for p in catalog.get_all_passions()] == EXPECTED_IDS
        assert catalog.ids() == EXPECTED_IDS

    def test_cached(self):
        assert default_catalog() is default_catalog()

    def test_every_list_non_empty(self, catalog):
        for passion in catalog:
            assert passion.keywords, passion.id
            assert passion.amenity_matches, passion.id
            assert passion.location_keywords, passion.id

    def test_terms_are_lowercase(self, catalog):
        for passion in catalog:
            for term in passion.keywords + passion.amenity_matches + passion.location_keywords:
                assert term == term.lower()

    def test_display_metadata(self, catalog):
        wellness = catalog.get_passion("relaxation-wellness")
        assert wellness.name == "Relaxation & Wellness"
        assert wellness.color == "#CE93D8"
        assert wellness.keywords[:3] == ("spa", "wellness", "relaxation")

    def test_categories_are_immutable(self, catalog):
        with pytest.raises(AttributeError):
            catalog.get_passion("gourmet-foodie").name = "Changed"


class TestLookups:

    def test_unknown_id_returns_none(self, catalog):
        assert catalog.get_passion("underwater-basket-weaving") is None

    def test_non_string_id_returns_none(self, catalog):
        assert catalog.get_passion(None) is None
        assert catalog.get_passion(["gourmet-foodie"]) is None

    def test_contains_and_len(self, catalog):
        assert "arts-culture" in catalog
        assert "nope" not in catalog
        assert len(catalog) == len(DEFAULT_PASSIONS)

    def test_resolve_keeps_order_and_drops_unknown(self, catalog):
        resolved = catalog.resolve(["stargazing-hotspots", "nope", "gourmet-foodie"])
        assert [p.id for p in resolved] == ["stargazing-hotspots", "gourmet-foodie"]

    def test_resolve_none(self, catalog):
        assert catalog.resolve(None) == []


class TestCustomCatalog:

    def test_duplicate_ids_rejected(self):
        category = category_from_dict("x", {"keywords": ["a"]})
        with pytest.raises(ValueError):
            PassionCatalog([category, category])

    def test_from_data_accepts_camel_case_lists(self):
        catalog = PassionCatalog.from_data({
            "night-owl": {
                "name": "Night Owl",
                "keywords": ["Nightlife", " Club "],
                "amenityMatches": ["24-hour bar"],
                "locationKeywords": ["Entertainment District"],
            },
        })
        owl = catalog.get_passion("night-owl")
        assert owl.keywords == ("nightlife", "club")
        assert owl.amenity_matches == ("24-hour bar",)
        assert owl.location_keywords == ("entertainment district",)

    def test_to_dict_uses_wire_names(self, catalog):
        data = catalog.get_passion("sustainable-stays").to_dict()
        assert data["id"] == "sustainable-stays"
        assert "amenityMatches" in data
        assert "locationKeywords" in data
        assert isinstance(data["keywords"], list)
