"""Customer lifetime value, churn probability and segmentation heuristics"""

from typing import Optional

from ..logging import get_logger, log_calculation
from ..models.crm import (
    CLVConfig,
    CustomerCategorization,
    CustomerCategory,
    CustomerSegmentConfig,
)
from ..utils.numeric import clamp, require_non_negative, round_half_up, safe_divide

logger = get_logger(__name__)


def calculate_clv(config: CLVConfig) -> int:
    """
    Discounted customer lifetime value

    CLV = sum over year 1..N of yearly_revenue * (1 + g)^(year - 1) * (1 + r)^(-year)

    Args:
        config: Ticket price, flights per year, horizon and growth/discount rates (percent)

    Returns:
        CLV rounded to the nearest whole currency unit
    """
    yearly_revenue = config.average_ticket_price * config.flights_per_year
    growth = 1 + config.annual_growth_rate / 100
    discount = 1 + config.discount_rate / 100

    total_value = 0.0
    for year in range(1, int(config.projection_years) + 1):
        growth_multiplier = growth ** (year - 1)
        discount_multiplier = discount ** -year
        total_value += yearly_revenue * growth_multiplier * discount_multiplier

    clv = round_half_up(total_value)
    log_calculation(logger, "clv", clv,
                    {"yearly_revenue": yearly_revenue, "projection_years": config.projection_years})
    return clv


def calculate_churn_probability(last_flight_months: float, average_frequency: float,
                                config: CustomerSegmentConfig) -> float:
    """
    Probability (0-1) that a customer has churned

    p = clamp01(last_flight_months / churn_threshold * (1 - average_frequency / loyal_min_flights))

    Recency raises the probability; flying at or above the loyalty frequency
    cancels it.

    Raises:
        DivisionByZeroError: If churn_threshold or loyal_min_flights is zero
    """
    normalized_recency = safe_divide(last_flight_months, config.churn_threshold, "churn_threshold")
    frequency_factor = safe_divide(average_frequency, config.loyal_min_flights, "loyal_min_flights")

    probability = normalized_recency * (1 - frequency_factor)
    return clamp(probability, 0.0, 1.0)


def _format_count(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def categorize_customer(last_flight_months: float, flights_last_year: float,
                        previous_year_flights: float,
                        config: CustomerSegmentConfig) -> CustomerCategorization:
    """
    Place a customer in the new / churned / at-risk / loyal ladder

    Rules are evaluated in order and the first match wins:
    1. recency within the new-customer period -> new
    2. recency at or past the churn threshold -> churned
    3. yearly flights dropped by at least the at-risk percentage -> at-risk
    4. flights at or above the loyalty minimum -> loyal
    5. otherwise -> at-risk

    A customer with no flights in the previous year has no measurable drop,
    so rule 3 is skipped for them.
    """
    require_non_negative(last_flight_months, "last_flight_months")

    if last_flight_months <= config.new_customer_period:
        return CustomerCategorization(
            category=CustomerCategory.NEW,
            details="First-time or recent customer",
        )

    if last_flight_months >= config.churn_threshold:
        return CustomerCategorization(
            category=CustomerCategory.CHURNED,
            details=f"No flights in {_format_count(config.churn_threshold)}+ months",
        )

    frequency_change: Optional[float] = None
    if previous_year_flights != 0:
        frequency_change = ((flights_last_year - previous_year_flights) / previous_year_flights) * 100

    if frequency_change is not None and frequency_change <= -config.at_risk_flight_reduction:
        return CustomerCategorization(
            category=CustomerCategory.AT_RISK,
            details=f"{abs(round_half_up(frequency_change))}% reduction in flight frequency",
        )

    if flights_last_year >= config.loyal_min_flights:
        return CustomerCategorization(
            category=CustomerCategory.LOYAL,
            details=f"{_format_count(flights_last_year)} flights in the last year",
        )

    return CustomerCategorization(
        category=CustomerCategory.AT_RISK,
        details="Below loyalty threshold",
    )
