"""Fuel burn and CO2 models: high-fidelity segment model and quadratic regression"""

from typing import Optional

from ..config.defaults import EmissionParams, FlightModelParams
from ..errors import DivisionByZeroError, InvalidInputError
from ..logging import get_logger, log_calculation
from ..models.aircraft import (
    AircraftSpec,
    FlightParams,
    FuelSegments,
    HighFidelityResult,
    SimplifiedResult,
)
from ..utils.numeric import require_finite, require_non_negative, safe_divide

logger = get_logger(__name__)


def calculate_co2_emissions(fuel_consumption: float, emissions: Optional[EmissionParams] = None) -> float:
    """
    Convert burnt fuel to CO2

    CO2 = fuel * 3.16 (kg CO2 per kg of jet fuel)

    Args:
        fuel_consumption: Fuel burnt (kg)
        emissions: Emission factors (defaults if omitted)

    Returns:
        CO2 emitted (kg)
    """
    emissions = emissions or EmissionParams()
    return fuel_consumption * emissions.co2_per_kg_fuel


def calculate_high_fidelity(aircraft: AircraftSpec, params: FlightParams,
                            model: Optional[FlightModelParams] = None,
                            emissions: Optional[EmissionParams] = None) -> HighFidelityResult:
    """
    Estimate mission fuel from takeoff, climb and cruise segments

    takeoff = flow * 0.2
    climb   = flow * 0.3 * altitude / 10000
    cruise  = distance * flow / cruise_speed * temp_corr * wind_corr
    total   = (takeoff + climb + cruise) * (1 + payload / payload_capacity * 0.1)

    Args:
        aircraft: Airframe data
        params: Distance, altitude, payload, temperature and wind
        model: Model coefficients (defaults if omitted)
        emissions: Emission factors (defaults if omitted)

    Returns:
        HighFidelityResult with total fuel, CO2 and per-segment fuel

    Raises:
        InvalidInputError: If cruise speed is not positive or an input is not finite
        DivisionByZeroError: If the aircraft has no payload capacity
    """
    model = model or FlightModelParams()

    if aircraft.cruise_speed <= 0:
        raise InvalidInputError("Cruise speed must be positive for the cruise segment",
                                field="cruise_speed", value=aircraft.cruise_speed)

    distance = require_non_negative(params.distance, "distance")
    altitude = require_finite(params.altitude, "altitude")
    payload = require_non_negative(params.payload, "payload")
    temperature = require_finite(params.temperature, "temperature")
    wind_speed = require_finite(params.wind_speed, "wind_speed")

    flow = aircraft.base_fuel_flow
    takeoff_fuel = flow * model.takeoff_flow_fraction
    climb_fuel = flow * model.climb_flow_fraction * (altitude / model.climb_reference_altitude)

    temp_correction = 1 + ((temperature - model.isa_temperature) * model.temperature_coefficient)
    wind_correction = 1 - (wind_speed / model.wind_drag_divisor)

    cruise_fuel = (distance * flow / aircraft.cruise_speed) * temp_correction * wind_correction

    try:
        payload_ratio = safe_divide(payload, aircraft.payload_capacity, "payload_capacity")
    except DivisionByZeroError as e:
        e.metric_name = "high_fidelity_fuel"
        raise
    payload_factor = 1 + payload_ratio * model.payload_sensitivity

    segments = FuelSegments(takeoff=takeoff_fuel, climb=climb_fuel, cruise=cruise_fuel)
    total_fuel = segments.total * payload_factor

    if total_fuel < 0:
        logger.warning("Negative fuel estimate", total_fuel=total_fuel,
                       wind_speed=wind_speed, altitude=altitude)

    result = HighFidelityResult(
        fuel_required=total_fuel,
        co2_emissions=calculate_co2_emissions(total_fuel, emissions),
        segments=segments,
    )
    log_calculation(logger, "high_fidelity_fuel", result.fuel_required,
                    {"aircraft": aircraft.name, "distance": distance, "payload": payload})
    return result


def calculate_simplified(aircraft: AircraftSpec, distance: float,
                         model: Optional[FlightModelParams] = None,
                         emissions: Optional[EmissionParams] = None) -> SimplifiedResult:
    """
    Estimate trip fuel with a quadratic regression on distance

    fuel = a * d^2 + b * d + c, a = 0.0001, b = fuel_efficiency, c = 0.1 * base_fuel_flow

    Args:
        aircraft: Airframe data
        distance: Trip distance (nm)
        model: Model coefficients (defaults if omitted)
        emissions: Emission factors (defaults if omitted)

    Returns:
        SimplifiedResult with fuel and CO2
    """
    model = model or FlightModelParams()
    distance = require_finite(distance, "distance")

    a = model.quadratic_coefficient
    b = aircraft.fuel_efficiency
    c = aircraft.base_fuel_flow * model.fixed_flow_fraction

    fuel_required = (a * distance * distance) + (b * distance) + c

    result = SimplifiedResult(
        fuel_required=fuel_required,
        co2_emissions=calculate_co2_emissions(fuel_required, emissions),
    )
    log_calculation(logger, "simplified_fuel", result.fuel_required,
                    {"aircraft": aircraft.name, "distance": distance})
    return result


def calculate_fuel_consumption(distance: float, aircraft_class: str, payload: float,
                               model: Optional[FlightModelParams] = None) -> float:
    """
    Rough fuel consumption from an aircraft class coefficient

    fuel = distance * coefficient * payload, where the coefficient is kg per
    seat per km for narrow-body, wide-body or regional aircraft. Unknown
    classes use the generic coefficient.

    Args:
        distance: Route distance (km)
        aircraft_class: 'narrow-body', 'wide-body' or 'regional'
        payload: Seats or passengers carried

    Returns:
        Fuel consumption (kg)
    """
    model = model or FlightModelParams()
    consumption = model.class_consumption.get(aircraft_class, model.default_class_consumption)
    return distance * consumption * payload
