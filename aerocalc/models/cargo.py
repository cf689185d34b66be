"""Data models for cargo economics and freight pricing"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .aircraft import AircraftSpec


@dataclass(frozen=True)
class CargoCalculationParams:
    """Aircraft, cargo and fuel inputs for payload and utilization metrics.

    max_payload derived from these may be negative for an overfuelled
    aircraft; that is reported, not rejected.
    """
    aircraft: AircraftSpec
    cargo_weight: float
    distance: float
    fuel_load: float
    cargo_volume: Optional[float] = None


@dataclass(frozen=True)
class FreightRevenueParams:
    cargo_weight: float     # tonnes
    distance: float         # km
    revenue_per_ftk: float  # currency per freight tonne-km


@dataclass(frozen=True)
class ULDParams:
    uld_capacity: float
    cargo_weight: float
    cargo_volume: float
    max_volume: float


@dataclass(frozen=True)
class ULDLoadResult:
    weight_load_factor: float
    volume_load_factor: float
    is_optimal: bool


@dataclass(frozen=True)
class DynamicPricingParams:
    base_rate: float       # USD per kg
    fuel_surcharge: float  # percent
    demand_factor: float   # percent


class RouteType(str, Enum):
    DOMESTIC = "domestic"
    SHORT_HAUL = "shortHaul"
    MEDIUM_HAUL = "mediumHaul"
    LONG_HAUL = "longHaul"
    INTERCONTINENTAL = "intercontinental"


class CargoCategory(str, Enum):
    GENERAL = "general"
    PERISHABLE = "perishable"
    DANGEROUS = "dangerous"
    VALUABLE = "valuable"
    EXPRESS = "express"
    ECONOMY = "economy"


class SeasonType(str, Enum):
    LOW = "low"
    SHOULDER = "shoulder"
    PEAK = "peak"


class ChargeType(str, Enum):
    VOLUMETRIC = "volumetric"
    GROSS = "gross"


class PriceRecommendation(str, Enum):
    DISCOUNT = "discount"
    STANDARD = "standard"
    PREMIUM = "premium"
    SURGE = "surge"


@dataclass(frozen=True)
class CargoMeasurements:
    length: float        # cm
    width: float         # cm
    height: float        # cm
    gross_weight: float  # kg


@dataclass(frozen=True)
class ChargeableWeightResult:
    volumetric_weight: float
    gross_weight: float
    chargeable_weight: float
    charge_type: ChargeType
    volume_factor: float
    actual_volume: float  # m3


@dataclass(frozen=True)
class FreightPricingParams:
    chargeable_weight: float
    route_type: RouteType
    cargo_category: CargoCategory
    season: SeasonType
    fuel_surcharge_percent: float
    security_surcharge: float  # per kg
    handling_fee: float        # flat
    custom_rate: Optional[float] = None


@dataclass(frozen=True)
class FreightPricingResult:
    base_charge: float
    fuel_surcharge: float
    security_charge: float
    handling_fee: float
    total_charge: float
    rate_per_kg: float
    effective_rate_per_kg: float
    base_rate: float
    category_multiplier: float
    season_multiplier: float


@dataclass(frozen=True)
class MarketPricingFactors:
    capacity_utilization: float    # 0-100
    days_until_departure: float
    competitor_price_index: float  # 1.0 = parity
    historical_demand: float       # 0-100


@dataclass(frozen=True)
class MarketPriceResult:
    recommended_rate: float
    price_multiplier: float
    demand_score: int
    urgency_score: int
    recommendation: PriceRecommendation


@dataclass(frozen=True)
class OperatingCosts:
    fuel_cost_per_km: float
    crew_cost_per_hour: float
    maintenance_per_hour: float
    handling_per_flight: float
    insurance_per_flight: float
    navigation_fees: float
    landing_fees: float


@dataclass(frozen=True)
class CostPlusParams:
    operating_costs: OperatingCosts
    distance_km: float
    flight_hours: float
    cargo_capacity_kg: float
    target_load_factor: float     # fraction, e.g. 0.75
    target_margin_percent: float


@dataclass(frozen=True)
class CostPlusResult:
    total_operating_cost: float
    cost_per_kg: float
    recommended_rate_per_kg: float
    break_even_load_factor: float  # percent, one decimal
    projected_revenue: float
    projected_profit: float


@dataclass(frozen=True)
class RevenueOptimizationResult:
    optimal_price: float
    expected_demand: int
    expected_revenue: float
    price_elasticity: float
    recommendation: str


@dataclass(frozen=True)
class PricingFactors:
    capacity_utilization: float  # 0-100
    days_until_departure: float
    season_index: float          # 0.85-1.30


@dataclass(frozen=True)
class DynamicFreightPriceResult:
    base_rate: float
    price_multiplier: float
    adjusted_rate: float
    base_charge: float
    fuel_surcharge: float
    security_charge: float
    handling_fee: float
    total_charge: float
    effective_rate_per_kg: float
    recommendation: PriceRecommendation
