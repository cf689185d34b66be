"""Per-passenger carbon footprint, offset cost and environmental score"""

from typing import Optional

from ..config.defaults import DEFAULT_AIRCRAFT_CATALOG, EmissionParams
from ..errors import InvalidInputError
from ..logging import get_logger, log_calculation
from ..models.aircraft import AircraftEfficiency
from ..models.passenger import DistanceUnit
from ..utils.numeric import clamp, require_non_negative, safe_divide

logger = get_logger(__name__)


def get_aircraft_efficiency(aircraft_type: str,
                            catalog: Optional[dict[str, AircraftEfficiency]] = None) -> AircraftEfficiency:
    """Look up efficiency data for an aircraft type, raising on unknown types."""
    catalog = DEFAULT_AIRCRAFT_CATALOG if catalog is None else catalog
    efficiency = catalog.get(aircraft_type)
    if efficiency is None:
        raise InvalidInputError(f"Invalid aircraft type: {aircraft_type}",
                                field="aircraft_type", value=aircraft_type,
                                context={"known_types": sorted(catalog)})
    return efficiency


def calculate_carbon_emissions(distance: float, passengers: float, aircraft_type: str,
                               unit: DistanceUnit = DistanceUnit.KILOMETERS,
                               catalog: Optional[dict[str, AircraftEfficiency]] = None,
                               emissions: Optional[EmissionParams] = None) -> float:
    """
    Calculate CO2 for a group of passengers on one flight

    fuel = km / 100 * fuel_burn_per_100km_seat * passengers
    CO2  = fuel * co2_emission_factor

    Args:
        distance: Flight distance in the given unit
        passengers: Number of passengers
        aircraft_type: Catalogue key, e.g. 'Airbus A320'
        unit: Unit of distance
        catalog: Aircraft efficiency catalogue (defaults if omitted)
        emissions: Unit conversion factors (defaults if omitted)

    Returns:
        CO2 emissions (kg)

    Raises:
        InvalidInputError: For unknown aircraft types or negative inputs
    """
    emissions = emissions or EmissionParams()
    aircraft = get_aircraft_efficiency(aircraft_type, catalog)

    distance = require_non_negative(distance, "distance")
    passengers = require_non_negative(passengers, "passengers")

    if DistanceUnit(unit) is DistanceUnit.MILES:
        distance_km = distance / emissions.km_to_miles
    else:
        distance_km = distance

    fuel_consumption = (distance_km / 100) * aircraft.fuel_burn_per_100km_seat * passengers
    co2 = fuel_consumption * aircraft.co2_emission_factor

    log_calculation(logger, "carbon_emissions", co2,
                    {"aircraft_type": aircraft_type, "distance_km": distance_km, "passengers": passengers})
    return co2


def calculate_offset_credits(distance: float, passengers: float, aircraft_type: str,
                             offset_price_per_ton: float,
                             unit: DistanceUnit = DistanceUnit.KILOMETERS,
                             catalog: Optional[dict[str, AircraftEfficiency]] = None,
                             emissions: Optional[EmissionParams] = None) -> float:
    """Cost of offsetting a flight's CO2 at a price per metric ton."""
    co2_kg = calculate_carbon_emissions(distance, passengers, aircraft_type, unit, catalog, emissions)
    return (co2_kg / 1000) * offset_price_per_ton


def calculate_environmental_score(distance: float, passengers: float, aircraft_type: str,
                                  unit: DistanceUnit = DistanceUnit.KILOMETERS,
                                  catalog: Optional[dict[str, AircraftEfficiency]] = None,
                                  emissions: Optional[EmissionParams] = None) -> float:
    """
    Score a flight 0-100 on per-passenger CO2 (higher is cleaner)

    50 kg per passenger or less scores 100, 200 kg or more scores 0, linear between.

    Raises:
        DivisionByZeroError: If passengers is zero
    """
    emissions = emissions or EmissionParams()
    co2 = calculate_carbon_emissions(distance, passengers, aircraft_type, unit, catalog, emissions)
    per_passenger = safe_divide(co2, passengers, "passengers")

    best = emissions.best_case_kg_per_pax
    worst = emissions.worst_case_kg_per_pax
    score = 100 - (((per_passenger - best) / (worst - best)) * 100)
    return clamp(score, 0.0, 100.0)
