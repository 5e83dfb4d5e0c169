"""
Default passion catalog: seven travel-interest categories.

Each entry carries display metadata for the selector UI plus three term
lists. All terms are lowercase; matching is case-insensitive substring
containment, so multi-word terms ("hot springs") and hyphenated ones
("eco-friendly") work as written. List order is significant: match
reasons quote the first matches in this order.
"""

from typing import Any, Dict

DEFAULT_PASSIONS: Dict[str, Dict[str, Any]] = {
    "gourmet-foodie": {
        "name": "Gourmet Foodie",
        "icon": "🍽️",
        "description": "Savor exceptional dining experiences and culinary adventures",
        "color": "#FF6B6B",
        "keywords": [
            "restaurant", "dining", "chef", "cuisine", "culinary", "gourmet",
            "michelin", "food", "kitchen", "breakfast", "lunch", "dinner",
            "bar", "wine", "cocktail", "rooftop", "bistro", "cafe",
        ],
        "amenity_matches": [
            "restaurant", "bar", "room service", "kitchen", "dining",
            "breakfast", "coffee", "wine", "cocktail",
        ],
        "location_keywords": [
            "culinary district", "food market", "restaurant district",
            "gastronomic", "food scene", "dining",
        ],
    },

    "outdoor-adventure": {
        "name": "Outdoor Adventure",
        "icon": "🏔️",
        "description": "Embrace nature and thrilling outdoor activities",
        "color": "#4ECDC4",
        "keywords": [
            "hiking", "mountain", "nature", "outdoor", "adventure", "trail",
            "forest", "park", "beach", "water sports", "skiing", "cycling",
            "climbing", "kayaking", "fishing", "safari", "wildlife",
        ],
        "amenity_matches": [
            "outdoor pool", "fitness center", "spa", "bicycle rental",
            "water sports", "hiking", "golf", "tennis", "beach access",
        ],
        "location_keywords": [
            "national park", "mountain", "beach", "nature reserve",
            "outdoor activities", "adventure sports", "hiking trails",
        ],
    },

    "historical-exploration": {
        "name": "Historical Exploration",
        "icon": "🏛️",
        "description": "Discover rich history and cultural heritage",
        "color": "#A8E6CF",
        "keywords": [
            "historic", "heritage", "museum", "castle", "monument",
            "ancient", "cultural", "architecture", "landmark", "cathedral",
            "palace", "ruins", "archaeological", "traditional", "historic center",
        ],
        "amenity_matches": [
            "concierge", "tour desk", "cultural activities",
            "historic building", "traditional architecture",
        ],
        "location_keywords": [
            "historic center", "old town", "heritage site", "museum district",
            "cultural quarter", "historic district", "archaeological site",
        ],
    },

    "sustainable-stays": {
        "name": "Sustainable Stays",
        "icon": "🌱",
        "description": "Support eco-friendly and sustainable travel",
        "color": "#88D8B0",
        "keywords": [
            "eco", "sustainable", "green", "organic", "renewable",
            "environmental", "carbon neutral", "solar", "recycling",
            "local sourcing", "eco-friendly", "conservation",
        ],
        "amenity_matches": [
            "eco-friendly", "solar power", "recycling", "organic",
            "local sourcing", "green building", "energy efficient",
        ],
        "location_keywords": [
            "eco resort", "sustainable tourism", "green hotel",
            "environmental conservation", "organic farm",
        ],
    },

    "arts-culture": {
        "name": "Arts & Culture Vulture",
        "icon": "🎨",
        "description": "Immerse yourself in art, music, and cultural experiences",
        "color": "#FFB74D",
        "keywords": [
            "art", "gallery", "museum", "theater", "music", "cultural",
            "exhibition", "performance", "artist", "creative", "design",
            "contemporary", "sculpture", "painting", "concert", "opera",
        ],
        "amenity_matches": [
            "art gallery", "cultural activities", "entertainment",
            "live music", "theater", "exhibition space",
        ],
        "location_keywords": [
            "arts district", "cultural quarter", "gallery district",
            "theater district", "creative hub", "art scene",
        ],
    },

    "relaxation-wellness": {
        "name": "Relaxation & Wellness",
        "icon": "🧘",
        "description": "Rejuvenate your mind, body, and soul",
        "color": "#CE93D8",
        "keywords": [
            "spa", "wellness", "relaxation", "massage", "meditation",
            "yoga", "thermal", "sauna", "hot springs", "retreat",
            "peaceful", "tranquil", "serene", "zen", "mindfulness",
        ],
        "amenity_matches": [
            "spa", "wellness center", "massage", "sauna", "hot tub",
            "yoga", "meditation", "fitness center", "pool", "quiet",
        ],
        "location_keywords": [
            "spa resort", "wellness retreat", "thermal springs",
            "peaceful location", "quiet area", "meditation center",
        ],
    },

    "stargazing-hotspots": {
        "name": "Stargazing Hotspots",
        "icon": "⭐",
        "description": "Experience the wonder of dark skies and celestial beauty",
        "color": "#7986CB",
        "keywords": [
            "stargazing", "astronomy", "dark sky", "observatory",
            "planetarium", "celestial", "night sky", "telescope",
            "constellation", "milky way", "remote", "rural",
        ],
        "amenity_matches": [
            "observatory", "telescope", "dark sky", "remote location",
            "outdoor terrace", "rooftop", "minimal light pollution",
        ],
        "location_keywords": [
            "dark sky reserve", "observatory", "remote location",
            "rural area", "mountain top", "desert", "minimal light pollution",
        ],
    },
}
