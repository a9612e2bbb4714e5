"""
Reference Data

Fixed lookup lists used by the master data screens. These are not editable
from the console; master rows point at them by id and carry the looked-up
name alongside.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# MOTOR SEGMENTS
# =============================================================================

MOTOR_SEGMENTS = [
    {"id": "1", "name": "Private"},
    {"id": "2", "name": "Commercial"},
]

# =============================================================================
# GEOGRAPHY
# =============================================================================

COUNTRIES = [
    {"id": "1", "name": "India", "code": "IN"},
    {"id": "2", "name": "United States", "code": "US"},
    {"id": "3", "name": "United Kingdom", "code": "GB"},
    {"id": "4", "name": "Canada", "code": "CA"},
    {"id": "5", "name": "Australia", "code": "AU"},
    {"id": "6", "name": "Germany", "code": "DE"},
    {"id": "7", "name": "France", "code": "FR"},
    {"id": "8", "name": "Japan", "code": "JP"},
    {"id": "9", "name": "China", "code": "CN"},
    {"id": "10", "name": "UAE", "code": "AE"},
    {"id": "11", "name": "Saudi Arabia", "code": "SA"},
    {"id": "12", "name": "Singapore", "code": "SG"},
    {"id": "13", "name": "Malaysia", "code": "MY"},
]

CITIES = [
    # India
    {"id": "1", "name": "Mumbai", "state_id": "1", "state_name": "Maharashtra", "country_id": "1"},
    {"id": "2", "name": "Pune", "state_id": "1", "state_name": "Maharashtra", "country_id": "1"},
    {"id": "3", "name": "New Delhi", "state_id": "2", "state_name": "Delhi", "country_id": "1"},
    {"id": "4", "name": "Bangalore", "state_id": "3", "state_name": "Karnataka", "country_id": "1"},
    {"id": "5", "name": "Chennai", "state_id": "4", "state_name": "Tamil Nadu", "country_id": "1"},
    {"id": "6", "name": "Ahmedabad", "state_id": "5", "state_name": "Gujarat", "country_id": "1"},
    {"id": "7", "name": "Kolkata", "state_id": "6", "state_name": "West Bengal", "country_id": "1"},
    {"id": "8", "name": "Lucknow", "state_id": "7", "state_name": "Uttar Pradesh", "country_id": "1"},
    {"id": "9", "name": "Jaipur", "state_id": "8", "state_name": "Rajasthan", "country_id": "1"},
    {"id": "10", "name": "Chandigarh", "state_id": "9", "state_name": "Punjab", "country_id": "1"},
    # United States
    {"id": "11", "name": "Los Angeles", "state_id": "11", "state_name": "California", "country_id": "2"},
    {"id": "12", "name": "New York City", "state_id": "12", "state_name": "New York", "country_id": "2"},
    {"id": "13", "name": "Houston", "state_id": "13", "state_name": "Texas", "country_id": "2"},
    # United Kingdom
    {"id": "14", "name": "London", "state_id": "15", "state_name": "England", "country_id": "3"},
    {"id": "15", "name": "Manchester", "state_id": "15", "state_name": "England", "country_id": "3"},
    # Canada
    {"id": "16", "name": "Toronto", "state_id": "17", "state_name": "Ontario", "country_id": "4"},
    {"id": "17", "name": "Montreal", "state_id": "18", "state_name": "Quebec", "country_id": "4"},
    # Australia
    {"id": "18", "name": "Sydney", "state_id": "19", "state_name": "New South Wales", "country_id": "5"},
    {"id": "19", "name": "Melbourne", "state_id": "20", "state_name": "Victoria", "country_id": "5"},
]

# =============================================================================
# LMS
# =============================================================================

AGENT_TYPES = [
    {"id": "1", "name": "PoSP", "code": "POSP"},
    {"id": "2", "name": "MISP", "code": "MISP"},
    {"id": "3", "name": "Agent", "code": "AGENT"},
    {"id": "4", "name": "PoSP – Motor", "code": "POSP_MOTOR"},
    {"id": "5", "name": "PoSP – Health", "code": "POSP_HEALTH"},
    {"id": "6", "name": "PoSP – Life", "code": "POSP_LIFE"},
]

POLICY_TYPES = [
    {"id": "1", "name": "Life Insurance", "code": "LI"},
    {"id": "2", "name": "Term Life Insurance", "code": "TLI"},
    {"id": "3", "name": "Whole Life Insurance", "code": "WLI"},
    {"id": "4", "name": "Endowment Policy", "code": "EP"},
    {"id": "5", "name": "Motor Insurance", "code": "MI"},
    {"id": "6", "name": "Health Insurance", "code": "HI"},
    {"id": "7", "name": "Travel Insurance", "code": "TI"},
    {"id": "8", "name": "Home Insurance", "code": "HOMI"},
    {"id": "9", "name": "Fire Insurance", "code": "FI"},
    {"id": "10", "name": "Marine Insurance", "code": "MARINE"},
    {"id": "11", "name": "Corporate Insurance", "code": "CI"},
    {"id": "12", "name": "Group Insurance", "code": "GI"},
]


def _find(items: list[dict], item_id) -> Optional[dict]:
    if item_id is None:
        return None
    return next((item for item in items if item["id"] == str(item_id)), None)


def get_motor_segment(segment_id) -> Optional[dict]:
    return _find(MOTOR_SEGMENTS, segment_id)


def get_country(country_id) -> Optional[dict]:
    return _find(COUNTRIES, country_id)


def get_city(city_id) -> Optional[dict]:
    """Look up a city, with its country name filled in."""
    city = _find(CITIES, city_id)
    if city is None:
        return None
    country = get_country(city["country_id"])
    return {**city, "country_name": country["name"] if country else None}


def get_agent_type(agent_type_id) -> Optional[dict]:
    return _find(AGENT_TYPES, agent_type_id)


def get_policy_type(policy_type_id) -> Optional[dict]:
    return _find(POLICY_TYPES, policy_type_id)


LOOKUPS = {
    "motor-segments": MOTOR_SEGMENTS,
    "countries": COUNTRIES,
    "cities": CITIES,
    "agent-types": AGENT_TYPES,
    "policy-types": POLICY_TYPES,
}


def list_lookup(kind: str, country_id: str = None, state_id: str = None, search: str = None) -> list[dict]:
    """
    Items of one lookup list, for the master data forms.

    country_id / state_id narrow cities; search is a case-insensitive
    substring of the name. Unknown kinds raise ValueError.
    """
    if kind not in LOOKUPS:
        raise ValueError(f"Unknown lookup: {kind}")

    items = LOOKUPS[kind]
    if kind == "cities":
        items = [get_city(city["id"]) for city in items]
        if country_id:
            items = [city for city in items if city["country_id"] == str(country_id)]
        if state_id:
            items = [city for city in items if city["state_id"] == str(state_id)]
    if search:
        items = [item for item in items if search.lower() in item["name"].lower()]
    return list(items)
