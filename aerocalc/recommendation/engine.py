"""
Aircraft recommendation for a route.

Every fleet type that can fly the mission (range with margin, seats, cargo)
is scored out of roughly 100 points and candidates are ranked best first:

- fuel efficiency against a fleet benchmark: 0-30
- profit per flight from CASK/RASK unit economics: 0-40
- CO2 per passenger against a benchmark: 0-20
- seat and cargo utilization: 0-10

A route priority re-weights the components toward cost or environment, or
adds a cruise speed bonus.
"""

import math
from typing import Optional, Union

from ..config.defaults import DEFAULT_AIRPORTS, DEFAULT_FLEET, RecommendationParams
from ..errors import InvalidInputError
from ..logging import get_logger, log_calculation
from ..models.recommendation import (
    AircraftCapacity,
    AircraftProfile,
    AircraftScore,
    Airport,
    RoutePriority,
)
from ..utils.numeric import clamp, require_non_negative, require_positive, round_half_up, round_to, safe_divide

logger = get_logger(__name__)

EFFICIENCY_POINTS = 30.0
PROFIT_POINTS = 40.0
ENVIRONMENT_POINTS = 20.0
UTILIZATION_POINTS = 10.0
PROFIT_PER_POINT = 1000.0                # USD

# Thresholds for reasoning lines
EXCELLENT_FUEL_EFFICIENCY = 2.5          # litres per km
HIGH_PROFIT = 30000.0                    # USD per flight
LOW_CO2_PER_PASSENGER = 80.0             # kg
HIGH_UTILIZATION = 0.85

SPEED_BONUS_BASELINE = 800.0
SPEED_BONUS_DIVISOR = 10.0


def calculate_great_circle_distance(lat1: float, lon1: float, lat2: float, lon2: float,
                                    earth_radius_km: float = 6371.0) -> float:
    """Haversine distance in km between two points given in degrees"""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2)
    return earth_radius_km * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def find_airport(code: str, airports: Optional[dict[str, Airport]] = None) -> Airport:
    """Look up an airport by IATA code, case-insensitively"""
    airports = DEFAULT_AIRPORTS if airports is None else airports
    airport = airports.get(code.upper())
    if airport is None:
        raise InvalidInputError(f"Invalid airport code: {code}", field="airport_code", value=code)
    return airport


def calculate_route_distance(origin: str, destination: str,
                             airports: Optional[dict[str, Airport]] = None,
                             params: Optional[RecommendationParams] = None) -> float:
    """Great-circle distance in km between two airports"""
    params = params or RecommendationParams()
    origin_airport = find_airport(origin, airports)
    destination_airport = find_airport(destination, airports)

    return calculate_great_circle_distance(origin_airport.lat, origin_airport.lon,
                                           destination_airport.lat, destination_airport.lon,
                                           params.earth_radius_km)


def find_suitable_aircraft(distance: float, passengers: int, cargo_kg: float,
                           fleet: Optional[dict[str, AircraftProfile]] = None,
                           params: Optional[RecommendationParams] = None) -> dict[str, AircraftProfile]:
    """Fleet types with enough range (including margin), seats and cargo capacity"""
    fleet = DEFAULT_FLEET if fleet is None else fleet
    params = params or RecommendationParams()
    required_range = distance * params.range_margin

    return {
        name: aircraft for name, aircraft in fleet.items()
        if aircraft.max_range >= required_range
        and aircraft.max_passengers >= passengers
        and aircraft.cargo_capacity >= cargo_kg
    }


def score_aircraft(name: str, aircraft: AircraftProfile, distance: float, passengers: int,
                   cargo_kg: float = 0, priority: Optional[RoutePriority] = None,
                   params: Optional[RecommendationParams] = None) -> AircraftScore:
    """
    Score one aircraft for a mission

    Unit economics assume the configured load factor:
        operating_cost = CASK * ASK + fuel_litres * fuel_price
        revenue        = revenue_per_seat_km * ASK * load_factor
        break_even     = min(1, operating_cost / (revenue_per_seat_km * ASK))

    Raises:
        InvalidInputError: If distance is not positive
        DivisionByZeroError: If the aircraft has no seats or cargo capacity
    """
    params = params or RecommendationParams()
    require_positive(distance, "distance")
    reasoning: list[str] = []

    fuel_litres = aircraft.fuel_efficiency * distance
    fuel_cost = fuel_litres * params.fuel_price_per_litre

    ask = distance * aircraft.max_passengers
    operating_cost = params.cost_per_ask * ask + fuel_cost
    rpk = ask * params.assumed_load_factor
    revenue = params.revenue_per_seat_km * rpk
    profit = revenue - operating_cost

    co2_emissions = fuel_litres * params.fuel_density * aircraft.co2_factor
    break_even = min(1.0, safe_divide(operating_cost, params.revenue_per_seat_km * ask, "potential_revenue"))

    benchmark_efficiency = params.average_fuel_efficiency
    efficiency_score = max(0.0, (benchmark_efficiency - aircraft.fuel_efficiency) / benchmark_efficiency
                           * EFFICIENCY_POINTS)
    if aircraft.fuel_efficiency < EXCELLENT_FUEL_EFFICIENCY:
        reasoning.append(f"Excellent fuel efficiency: {aircraft.fuel_efficiency:.1f}L/km")

    profit_score = clamp(profit / PROFIT_PER_POINT, 0.0, PROFIT_POINTS)
    if profit > HIGH_PROFIT:
        reasoning.append(f"High profitability: ${round_half_up(profit):,} per flight")

    co2_per_passenger = safe_divide(co2_emissions, aircraft.max_passengers * params.assumed_load_factor,
                                    "expected_passengers")
    benchmark_co2 = params.average_co2_per_passenger
    environment_score = max(0.0, (benchmark_co2 - co2_per_passenger) / benchmark_co2 * ENVIRONMENT_POINTS)
    if co2_per_passenger < LOW_CO2_PER_PASSENGER:
        reasoning.append(f"Low emissions: {round_half_up(co2_per_passenger)}kg CO2 per passenger")

    passenger_utilization = safe_divide(passengers, aircraft.max_passengers, "max_passengers")
    cargo_utilization = safe_divide(cargo_kg, aircraft.cargo_capacity, "cargo_capacity")
    utilization_score = (passenger_utilization + cargo_utilization) / 2 * UTILIZATION_POINTS
    if passenger_utilization > HIGH_UTILIZATION:
        reasoning.append(f"Efficient capacity usage: {round_half_up(passenger_utilization * 100)}% utilization")

    score = efficiency_score + profit_score + environment_score + utilization_score

    # A priority replaces the balanced total, except speed which adds to it
    if priority is RoutePriority.COST:
        score = profit_score * 1.5 + efficiency_score * 1.2 + environment_score * 0.8
        reasoning.append("Optimized for cost efficiency")
    elif priority is RoutePriority.ENVIRONMENT:
        score = environment_score * 2 + profit_score * 0.8 + efficiency_score * 1.2
        reasoning.append("Optimized for environmental impact")
    elif priority is RoutePriority.SPEED:
        score += (aircraft.cruise_speed - SPEED_BONUS_BASELINE) / SPEED_BONUS_DIVISOR
        reasoning.append(f"Fast cruise speed: {aircraft.cruise_speed:g} knots")

    return AircraftScore(
        aircraft=name,
        score=round_half_up(score),
        fuel_efficiency=aircraft.fuel_efficiency,
        operating_cost=operating_cost,
        revenue=revenue,
        profit=profit,
        co2_emissions=co2_emissions,
        break_even_load_factor=round_half_up(break_even * 100),
        details=AircraftCapacity(
            range=aircraft.max_range,
            passengers=aircraft.max_passengers,
            cargo=aircraft.cargo_capacity,
            cruise_speed=aircraft.cruise_speed,
        ),
        reasoning=tuple(reasoning[:params.reasoning_limit]),
    )


def _as_priority(priority: Union[RoutePriority, str, None]) -> Optional[RoutePriority]:
    if priority is None or isinstance(priority, RoutePriority):
        return priority
    try:
        return RoutePriority(priority)
    except ValueError:
        raise InvalidInputError(f"Unknown route priority: {priority}", field="priority", value=priority)


def recommend_aircraft(origin: str, destination: str, passengers: int, cargo_kg: float = 0,
                       priority: Union[RoutePriority, str, None] = None,
                       fleet: Optional[dict[str, AircraftProfile]] = None,
                       airports: Optional[dict[str, Airport]] = None,
                       params: Optional[RecommendationParams] = None) -> list[AircraftScore]:
    """
    Rank the fleet for a route and payload

    Args:
        origin: IATA code of the departure airport
        destination: IATA code of the arrival airport
        passengers: Seats required
        cargo_kg: Cargo to carry in kg
        priority: Optional re-weighting toward cost, environment or speed
        fleet: Fleet capabilities by type name, built-in fleet by default
        airports: Airports by IATA code, built-in airports by default
        params: Unit economics and benchmarks

    Returns:
        Scores for every suitable aircraft, highest score first; equal
        scores keep fleet order

    Raises:
        InvalidInputError: For unknown airport codes, identical endpoints,
            negative demand, or when no aircraft can fly the mission
    """
    params = params or RecommendationParams()
    priority = _as_priority(priority)
    require_non_negative(passengers, "passengers")
    require_non_negative(cargo_kg, "cargo_kg")

    distance = calculate_route_distance(origin, destination, airports, params)
    if distance == 0:
        raise InvalidInputError("Origin and destination must be different airports",
                                field="destination", value=destination)

    suitable = find_suitable_aircraft(distance, passengers, cargo_kg, fleet, params)
    if not suitable:
        raise InvalidInputError(
            f"No aircraft can handle this mission. Required: {passengers} pax, "
            f"{cargo_kg}kg cargo, {round_half_up(distance)}km range",
            field="mission",
            value={"passengers": passengers, "cargo_kg": cargo_kg, "distance_km": round_to(distance, 1)},
        )

    scored = [
        score_aircraft(name, aircraft, distance, passengers, cargo_kg, priority, params)
        for name, aircraft in suitable.items()
    ]
    ranked = sorted(scored, key=lambda candidate: candidate.score, reverse=True)

    log_calculation(logger, "aircraft_recommendation", ranked[0].aircraft,
                    {"origin": origin, "destination": destination, "distance_km": round_to(distance, 1),
                     "candidates": len(ranked), "priority": priority.value if priority else None})
    return ranked
