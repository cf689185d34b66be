"""
EASA standard mass calculations for passengers, baggage and crew.

Standard values follow the EASA survey on standard weights of passengers
and baggage. All masses are in kilograms.
"""

from ..logging import get_logger, log_calculation
from ..models.passenger import (
    FlightCategory,
    FlightWeightEstimate,
    FlightWeightParams,
    PassengerManifest,
    PayloadResult,
    TakeOffWeightParams,
    TakeOffWeightResult,
    WeightBreakdown,
)

logger = get_logger(__name__)

# Standard passenger masses
ADULT_MALE_WEIGHT = 88.6
ADULT_FEMALE_WEIGHT = 72.9
CHILD_WEIGHT = 35.0    # ages 2-12
INFANT_WEIGHT = 10.0   # under 2

# Standard baggage masses (per item)
CHECKED_BAG_WEIGHT = 15.0
CABIN_BAG_WEIGHT = 6.0
PERSONAL_ITEM_WEIGHT = 2.0

# Crew masses, baggage per crew member
FLIGHT_CREW_WEIGHT = 85.0
CABIN_CREW_WEIGHT = 75.0
CREW_BAGGAGE_WEIGHT = 20.0

# Passenger and total baggage mass by flight category
FLIGHT_CATEGORY_WEIGHTS: dict[FlightCategory, dict[str, float]] = {
    FlightCategory.DOMESTIC: {"passenger": 84, "total_baggage": 13},
    FlightCategory.SHORT_HAUL: {"passenger": 84, "total_baggage": 16},
    FlightCategory.MEDIUM_HAUL: {"passenger": 84, "total_baggage": 20},
    FlightCategory.LONG_HAUL: {"passenger": 84, "total_baggage": 25},
    FlightCategory.CHARTER: {"passenger": 76, "total_baggage": 20},
}

# Catering and consumables per passenger
SERVICE_LOAD_PER_PAX: dict[FlightCategory, float] = {
    FlightCategory.DOMESTIC: 1.5,
    FlightCategory.SHORT_HAUL: 2.0,
    FlightCategory.MEDIUM_HAUL: 4.0,
    FlightCategory.LONG_HAUL: 6.0,
    FlightCategory.CHARTER: 3.5,
}

# Share of block fuel assumed burnt before landing
TRIP_FUEL_FRACTION = 0.3


def calculate_passenger_weight(manifest: PassengerManifest) -> WeightBreakdown:
    """Standard mass of all passengers on the manifest"""
    components = {
        "males": manifest.adult_male * ADULT_MALE_WEIGHT,
        "females": manifest.adult_female * ADULT_FEMALE_WEIGHT,
        "children": manifest.children * CHILD_WEIGHT,
        "infants": manifest.infants * INFANT_WEIGHT,
    }
    return WeightBreakdown(total_weight=sum(components.values()), components=components)


def calculate_baggage_weight(total_passengers: int, checked_bags_per_pax: float,
                             cabin_bags_per_pax: float = 1) -> WeightBreakdown:
    """Standard mass of checked bags, cabin bags and one personal item per passenger"""
    components = {
        "checked_bags": total_passengers * checked_bags_per_pax * CHECKED_BAG_WEIGHT,
        "cabin_bags": total_passengers * cabin_bags_per_pax * CABIN_BAG_WEIGHT,
        "personal_items": total_passengers * PERSONAL_ITEM_WEIGHT,
    }
    return WeightBreakdown(total_weight=sum(components.values()), components=components)


def calculate_crew_weight(flight_crew: int, cabin_crew: int) -> WeightBreakdown:
    """Standard mass of flight and cabin crew including their baggage"""
    components = {
        "flight_crew": flight_crew * FLIGHT_CREW_WEIGHT,
        "cabin_crew": cabin_crew * CABIN_CREW_WEIGHT,
        "crew_baggage": (flight_crew + cabin_crew) * CREW_BAGGAGE_WEIGHT,
    }
    return WeightBreakdown(total_weight=sum(components.values()), components=components)


def calculate_service_load(total_passengers: int, flight_category: FlightCategory) -> float:
    """Catering and consumables mass for the flight category"""
    return total_passengers * SERVICE_LOAD_PER_PAX[FlightCategory(flight_category)]


def calculate_total_payload(params: FlightWeightParams) -> PayloadResult:
    """
    Total traffic load: passengers, baggage, crew and service load

    Infants count toward passenger mass but carry no baggage or service load.
    """
    seated = params.passengers.seated_passengers

    passengers = calculate_passenger_weight(params.passengers)
    baggage = calculate_baggage_weight(seated, params.checked_bags_per_pax, params.cabin_bags_per_pax)
    crew = calculate_crew_weight(params.flight_crew, params.cabin_crew)
    service_load = calculate_service_load(seated, params.flight_category)

    result = PayloadResult(
        total_payload=passengers.total_weight + baggage.total_weight + crew.total_weight + service_load,
        passengers=passengers,
        baggage=baggage,
        crew=crew,
        service_load=service_load,
    )
    log_calculation(logger, "total_payload", result.total_payload,
                    {"seated_passengers": seated, "flight_category": FlightCategory(params.flight_category).value})
    return result


def calculate_take_off_weight(params: TakeOffWeightParams) -> TakeOffWeightResult:
    """
    Take-off and zero-fuel weight checked against MTOW, MZFW and MLW

    Landing weight assumes 30% of block fuel is burnt en route.
    """
    zero_fuel_weight = params.basic_empty_weight + params.payload
    take_off_weight = zero_fuel_weight + params.fuel_weight
    estimated_landing_weight = take_off_weight - (params.fuel_weight * TRIP_FUEL_FRACTION)

    result = TakeOffWeightResult(
        take_off_weight=take_off_weight,
        zero_fuel_weight=zero_fuel_weight,
        estimated_landing_weight=estimated_landing_weight,
        within_mtow=take_off_weight <= params.max_take_off_weight,
        within_mzfw=zero_fuel_weight <= params.max_zero_fuel_weight,
        within_mlw=estimated_landing_weight <= params.max_landing_weight,
        mtow_margin=params.max_take_off_weight - take_off_weight,
        mzfw_margin=params.max_zero_fuel_weight - zero_fuel_weight,
        mlw_margin=params.max_landing_weight - estimated_landing_weight,
    )

    if not result.within_limits:
        logger.warning("Aircraft weight limits exceeded",
                       within_mtow=result.within_mtow,
                       within_mzfw=result.within_mzfw,
                       within_mlw=result.within_mlw)

    return result


def estimate_flight_weight(passenger_count: int, flight_category: FlightCategory,
                           checked_bag_ratio: float = 1.0, cabin_crew: int = 4,
                           flight_crew: int = 2) -> FlightWeightEstimate:
    """Quick payload estimate from category standard masses"""
    flight_category = FlightCategory(flight_category)
    category_weights = FLIGHT_CATEGORY_WEIGHTS[flight_category]

    passenger_weight = passenger_count * category_weights["passenger"]
    baggage_weight = passenger_count * category_weights["total_baggage"] * checked_bag_ratio
    crew_weight = calculate_crew_weight(flight_crew, cabin_crew).total_weight
    service_weight = calculate_service_load(passenger_count, flight_category)

    return FlightWeightEstimate(
        total_payload_weight=passenger_weight + baggage_weight + crew_weight + service_weight,
        passenger_weight=passenger_weight,
        baggage_weight=baggage_weight,
        crew_weight=crew_weight,
        service_weight=service_weight,
    )
