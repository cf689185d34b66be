"""Data models for passenger revenue and weight calculations"""

from dataclasses import dataclass
from enum import Enum


class DistanceUnit(str, Enum):
    MILES = "miles"
    KILOMETERS = "kilometers"


@dataclass(frozen=True)
class LoadFactorParams:
    passengers_booked: float
    available_seats: float


@dataclass(frozen=True)
class OverbookingParams:
    total_seats: float
    historical_no_show_rate: float  # fraction, e.g. 0.05
    desired_load_factor: float      # fraction


@dataclass(frozen=True)
class RASMParams:
    total_revenue: float
    available_seats: float
    distance: float  # per flight
    number_of_flights: float
    unit: DistanceUnit = DistanceUnit.MILES


@dataclass(frozen=True)
class CASMParams:
    total_cost: float
    available_seats: float
    distance: float
    number_of_flights: float
    unit: DistanceUnit = DistanceUnit.MILES


@dataclass(frozen=True)
class BreakEvenParams:
    fixed_costs: float
    average_ticket_price: float
    variable_cost_per_passenger: float
    total_seats: float


class FlightCategory(str, Enum):
    DOMESTIC = "domestic"
    SHORT_HAUL = "short_haul"
    MEDIUM_HAUL = "medium_haul"
    LONG_HAUL = "long_haul"
    CHARTER = "charter"


@dataclass(frozen=True)
class PassengerManifest:
    adult_male: int = 0
    adult_female: int = 0
    children: int = 0
    infants: int = 0

    @property
    def seated_passengers(self) -> int:
        """Passengers occupying a seat (infants travel on a lap)"""
        return self.adult_male + self.adult_female + self.children


@dataclass(frozen=True)
class FlightWeightParams:
    passengers: PassengerManifest
    flight_category: FlightCategory
    checked_bags_per_pax: float
    cabin_bags_per_pax: float
    flight_crew: int
    cabin_crew: int


@dataclass(frozen=True)
class WeightBreakdown:
    """Total weight with named components, all in kg"""
    total_weight: float
    components: dict[str, float]


@dataclass(frozen=True)
class PayloadResult:
    total_payload: float
    passengers: WeightBreakdown
    baggage: WeightBreakdown
    crew: WeightBreakdown
    service_load: float


@dataclass(frozen=True)
class TakeOffWeightParams:
    basic_empty_weight: float
    payload: float
    fuel_weight: float
    max_take_off_weight: float
    max_zero_fuel_weight: float
    max_landing_weight: float


@dataclass(frozen=True)
class TakeOffWeightResult:
    take_off_weight: float
    zero_fuel_weight: float
    estimated_landing_weight: float
    within_mtow: bool
    within_mzfw: bool
    within_mlw: bool
    mtow_margin: float
    mzfw_margin: float
    mlw_margin: float

    @property
    def within_limits(self) -> bool:
        return self.within_mtow and self.within_mzfw and self.within_mlw


@dataclass(frozen=True)
class FlightWeightEstimate:
    total_payload_weight: float
    passenger_weight: float
    baggage_weight: float
    crew_weight: float
    service_weight: float
