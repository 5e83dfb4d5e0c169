"""
Pytest configuration and shared fixtures for the passion matching tests.
"""
import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

# Load environment variables
from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"))


# ============================================================================
# Fixtures: Test Data Factories
# ============================================================================

@pytest.fixture
def spa_hotel_dict() -> dict:
    """Spa resort as it arrives from the search layer."""
    return {
        "id": "hotel-spa-001",
        "name": "Spa Resort",
        "description": "relaxing spa and yoga retreat",
        "facilities": ["spa", "yoga"],
        "rating": 9,
    }


@pytest.fixture
def plain_hotel_dict() -> dict:
    """Hotel with nothing any passion keyword could match."""
    return {
        "id": "hotel-plain-001",
        "name": "Budget Inn",
        "description": "Simple rooms near the motorway",
        "amenities": ["wifi", "parking"],
        "address": "12 Ring Road",
        "rating": 6.5,
    }


@pytest.fixture
def search_results(spa_hotel_dict, plain_hotel_dict) -> list[dict]:
    """Mixed result page in the shapes the search layer returns."""
    return [
        plain_hotel_dict,
        spa_hotel_dict,
        {
            "id": "hotel-food-001",
            "name": "Le Bistro Hotel",
            "description": "Michelin chef, rooftop bar and wine cellar",
            "amenities": ["restaurant", "bar", "room service"],
            "location": "culinary district",
            "rating": "8.7",
        },
        {
            "id": "hotel-nested-001",
            "hotel_data": {
                "name": "Old Town Palace",
                "description": "Historic palace beside the cathedral",
                "facilities": ["concierge", "tour desk"],
                "address": "1 Castle Square, Old Town",
                "rating": 8.2,
            },
        },
    ]


# ============================================================================
# Fixtures: Library objects
# ============================================================================

@pytest.fixture
def catalog():
    from passions.catalog import default_catalog
    return default_catalog()


@pytest.fixture
def matcher(catalog):
    from passions.matcher import PassionMatcher
    return PassionMatcher(catalog)


@pytest.fixture
def memory_store():
    """In-memory key-value store for profile tests."""
    from services.profile_store import InMemoryStore
    return InMemoryStore()


@pytest.fixture
def test_settings():
    from config.settings import get_settings_for_testing
    return get_settings_for_testing()


# ============================================================================
# Markers auto-use
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests that need a live Redis")


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests if no Redis URL is configured."""
    skip_integration = pytest.mark.skip(reason="Integration tests require REDIS_URL")

    if os.getenv("REDIS_URL"):
        return
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
