"""Data models for route-based aircraft recommendation"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class AircraftProfile:
    """Mission capability of a fleet type.

    Cargo capacity in kg, range in km, cruise speed in knots, fuel
    efficiency in litres per km and CO2 factor in kg CO2 per kg of fuel.
    """
    max_passengers: int
    cargo_capacity: float
    max_range: float
    cruise_speed: float
    fuel_efficiency: float
    co2_factor: float


@dataclass(frozen=True)
class Airport:
    name: str
    city: str
    country: str
    lat: float  # degrees
    lon: float  # degrees


class RoutePriority(str, Enum):
    COST = "cost"
    ENVIRONMENT = "environment"
    SPEED = "speed"


@dataclass(frozen=True)
class AircraftCapacity:
    range: float
    passengers: int
    cargo: float
    cruise_speed: float


@dataclass(frozen=True)
class AircraftScore:
    """Scored candidate for a mission; money in USD, emissions in kg CO2"""
    aircraft: str
    score: int
    fuel_efficiency: float
    operating_cost: float
    revenue: float
    profit: float
    co2_emissions: float
    break_even_load_factor: int  # percent
    details: AircraftCapacity
    reasoning: tuple[str, ...]
