"""Data models for aircraft performance and emissions calculations"""

from dataclasses import dataclass, fields
from typing import Optional

from ..errors import InvalidInputError
from ..utils.numeric import require_non_negative


@dataclass(frozen=True)
class AircraftSpec:
    """Airframe data used by the fuel models.

    Weights in kg, cruise speed in knots, base fuel flow in kg per hour of
    cruise, fuel efficiency in kg per nautical mile.
    """
    empty_weight: float
    max_takeoff_weight: float
    fuel_capacity: float
    cruise_speed: float
    base_fuel_flow: float
    fuel_efficiency: float
    max_payload: Optional[float] = None
    cargo_volume: Optional[float] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        for spec_field in fields(self):
            value = getattr(self, spec_field.name)
            if spec_field.name == "name" or value is None:
                continue
            require_non_negative(value, spec_field.name)

        if self.max_takeoff_weight <= self.empty_weight:
            raise InvalidInputError(
                "max_takeoff_weight must exceed empty_weight",
                field="max_takeoff_weight",
                value=self.max_takeoff_weight,
            )

    @property
    def payload_capacity(self) -> float:
        """Structural payload limit; falls back to MTOW minus empty weight."""
        if self.max_payload is not None:
            return self.max_payload
        return self.max_takeoff_weight - self.empty_weight


@dataclass(frozen=True)
class FlightParams:
    """Mission inputs for the high-fidelity fuel model"""
    distance: float       # nm
    altitude: float       # ft
    payload: float        # kg
    temperature: float    # deg C
    wind_speed: float     # kt


@dataclass(frozen=True)
class FuelSegments:
    """Fuel split by flight phase"""
    takeoff: float
    climb: float
    cruise: float

    @property
    def total(self) -> float:
        return self.takeoff + self.climb + self.cruise


@dataclass(frozen=True)
class HighFidelityResult:
    fuel_required: float
    co2_emissions: float
    segments: FuelSegments


@dataclass(frozen=True)
class SimplifiedResult:
    fuel_required: float
    co2_emissions: float


@dataclass(frozen=True)
class AircraftEfficiency:
    """Per-type efficiency data for carbon footprint estimates"""
    fuel_burn_per_100km_seat: float
    co2_emission_factor: float
    fuel_efficiency: float
    operating_cost_per_hour: float
    turnaround_time: float  # minutes
