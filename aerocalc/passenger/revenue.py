"""Passenger load factor, overbooking, unit revenue/cost and break-even metrics"""

import math
from typing import Optional

from ..config.defaults import PassengerParams
from ..errors import InvalidInputError
from ..logging import get_logger, log_calculation
from ..models.passenger import (
    BreakEvenParams,
    CASMParams,
    DistanceUnit,
    LoadFactorParams,
    OverbookingParams,
    RASMParams,
)
from ..utils.numeric import percentage, safe_divide

logger = get_logger(__name__)


def calculate_load_factor(params: LoadFactorParams) -> float:
    """
    Passenger load factor

    load_factor = booked / available * 100 (not clamped; overbooked flights exceed 100)

    Raises:
        DivisionByZeroError: If available seats is zero
    """
    load_factor = percentage(params.passengers_booked, params.available_seats, "available_seats")
    if load_factor > 100:
        logger.warning("Passenger load factor above 100%", load_factor=load_factor,
                       passengers_booked=params.passengers_booked,
                       available_seats=params.available_seats)
    return load_factor


def calculate_overbooking_limit(params: OverbookingParams) -> int:
    """
    Booking limit covering expected no-shows or the target load factor

    limit = ceil(max(seats * (1 + no_show_rate), seats * desired_load_factor))

    Args:
        params: Seats, no-show rate and desired load factor (both as fractions)

    Returns:
        Maximum number of bookings to accept
    """
    seats = params.total_seats
    no_show_cover = seats * (1 + params.historical_no_show_rate)
    target_passengers = seats * params.desired_load_factor

    limit = math.ceil(max(no_show_cover, target_passengers))
    log_calculation(logger, "overbooking_limit", limit,
                    {"total_seats": seats, "no_show_rate": params.historical_no_show_rate})
    return limit


def calculate_recommended_bookings(params: OverbookingParams,
                                   passenger: Optional[PassengerParams] = None) -> int:
    """
    Bookings needed to seat the target load after no-shows, capped for safety

    bookings = ceil(ceil(seats * load_factor) / (1 - no_show_rate)),
    capped at ceil(seats * 1.2).

    Raises:
        InvalidInputError: If the no-show rate is 1 or more
    """
    passenger = passenger or PassengerParams()

    if params.historical_no_show_rate >= 1:
        raise InvalidInputError("No-show rate must be below 1",
                                field="historical_no_show_rate",
                                value=params.historical_no_show_rate)

    target_passengers = math.ceil(params.total_seats * params.desired_load_factor)
    recommended = math.ceil(target_passengers / (1 - params.historical_no_show_rate))
    max_safe = math.ceil(params.total_seats * passenger.max_overbooking_ratio)

    return min(recommended, max_safe)


def _available_seat_miles(available_seats: float, distance: float, number_of_flights: float,
                          unit: DistanceUnit, passenger: PassengerParams) -> float:
    if DistanceUnit(unit) is DistanceUnit.KILOMETERS:
        distance = distance * passenger.km_to_miles
    return available_seats * distance * number_of_flights


def calculate_rasm(params: RASMParams, passenger: Optional[PassengerParams] = None) -> float:
    """
    Revenue per available seat-mile

    RASM = revenue / (seats * miles_per_flight * flights); kilometre distances
    are converted to miles first.

    Raises:
        DivisionByZeroError: If seats, distance or flights is zero
    """
    passenger = passenger or PassengerParams()
    asm = _available_seat_miles(params.available_seats, params.distance,
                                params.number_of_flights, params.unit, passenger)
    return safe_divide(params.total_revenue, asm, "available_seat_miles")


def calculate_casm(params: CASMParams, passenger: Optional[PassengerParams] = None) -> float:
    """
    Cost per available seat-mile

    Raises:
        DivisionByZeroError: If seats, distance or flights is zero
    """
    passenger = passenger or PassengerParams()
    asm = _available_seat_miles(params.available_seats, params.distance,
                                params.number_of_flights, params.unit, passenger)
    return safe_divide(params.total_cost, asm, "available_seat_miles")


def calculate_break_even_load_factor(params: BreakEvenParams) -> float:
    """
    Load factor at which ticket contribution covers fixed costs

    BELF = (fixed_costs / (ticket_price - variable_cost)) / seats * 100

    Raises:
        DivisionByZeroError: If the contribution margin or seat count is zero
    """
    contribution_margin = params.average_ticket_price - params.variable_cost_per_passenger
    break_even_passengers = safe_divide(params.fixed_costs, contribution_margin,
                                        "contribution_margin")

    if contribution_margin < 0:
        logger.warning("Negative contribution margin; break-even is unreachable",
                       contribution_margin=contribution_margin)

    return percentage(break_even_passengers, params.total_seats, "total_seats")
