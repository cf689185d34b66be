"""Data models for customer relationship heuristics"""

from dataclasses import dataclass
from enum import Enum


class CustomerCategory(str, Enum):
    NEW = "new"
    LOYAL = "loyal"
    AT_RISK = "at-risk"
    CHURNED = "churned"


@dataclass(frozen=True)
class CustomerSegmentConfig:
    """Thresholds for the customer segmentation ladder"""
    new_customer_period: float      # months
    churn_threshold: float          # months
    at_risk_flight_reduction: float # percent drop in yearly flights
    loyal_min_flights: float        # flights per year


@dataclass(frozen=True)
class CLVConfig:
    average_ticket_price: float
    flights_per_year: float
    projection_years: int
    annual_growth_rate: float  # percent
    discount_rate: float       # percent


@dataclass(frozen=True)
class CustomerCategorization:
    category: CustomerCategory
    details: str
