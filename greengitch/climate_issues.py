"""Fixed catalogue of cities and the climate issues offered for each of them.

The table is stub data compiled into the application. It is never persisted
or mutated at runtime; callers receive copies.
"""

from __future__ import annotations

from typing import Dict, List

CLIMATE_ISSUES: Dict[str, List[str]] = {
    "New York": ["Sea Level Rise", "Urban Heat Island", "Air Pollution"],
    "London": ["Flooding", "Air Quality", "Heat Waves"],
    "Tokyo": ["Typhoons", "Urban Flooding", "Heat Stress"],
    "Mumbai": ["Monsoon Flooding", "Coastal Erosion", "Air Pollution"],
}


def list_cities() -> List[str]:
    return list(CLIMATE_ISSUES)


def issues_for(city: str) -> List[str]:
    """Return the issues offered for ``city``, or an empty list for unknown cities."""
    return list(CLIMATE_ISSUES.get(city, ()))


def as_mapping() -> Dict[str, List[str]]:
    return {city: list(issues) for city, issues in CLIMATE_ISSUES.items()}
