"""Passenger revenue metrics and standard weight calculations"""

from .revenue import (
    calculate_break_even_load_factor,
    calculate_casm,
    calculate_load_factor,
    calculate_overbooking_limit,
    calculate_rasm,
    calculate_recommended_bookings,
)
from .weights import (
    calculate_baggage_weight,
    calculate_crew_weight,
    calculate_passenger_weight,
    calculate_service_load,
    calculate_take_off_weight,
    calculate_total_payload,
    estimate_flight_weight,
)

__all__ = [
    "calculate_load_factor",
    "calculate_overbooking_limit",
    "calculate_recommended_bookings",
    "calculate_rasm",
    "calculate_casm",
    "calculate_break_even_load_factor",
    "calculate_passenger_weight",
    "calculate_baggage_weight",
    "calculate_crew_weight",
    "calculate_service_load",
    "calculate_total_payload",
    "calculate_take_off_weight",
    "estimate_flight_weight",
]
