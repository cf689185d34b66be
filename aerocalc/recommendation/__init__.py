"""Route-based aircraft recommendation"""

from .engine import (
    calculate_great_circle_distance,
    calculate_route_distance,
    find_airport,
    find_suitable_aircraft,
    recommend_aircraft,
    score_aircraft,
)

__all__ = [
    "calculate_great_circle_distance",
    "calculate_route_distance",
    "find_airport",
    "find_suitable_aircraft",
    "score_aircraft",
    "recommend_aircraft",
]
