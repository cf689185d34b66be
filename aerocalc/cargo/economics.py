"""Cargo payload, utilization, FTK revenue and pricing calculations"""

from typing import Optional

from ..config.defaults import CargoEconomicsParams
from ..logging import get_logger, log_calculation
from ..models.cargo import (
    CargoCalculationParams,
    DynamicPricingParams,
    FreightRevenueParams,
    ULDLoadResult,
    ULDParams,
)
from ..utils.numeric import percentage, safe_divide

logger = get_logger(__name__)


def calculate_max_payload(params: CargoCalculationParams) -> float:
    """
    Calculate payload available after empty weight and fuel

    max_payload = MTOW - empty_weight - fuel_load

    A negative result (fuel load above the useful load) is returned as-is.
    """
    aircraft = params.aircraft
    max_payload = aircraft.max_takeoff_weight - aircraft.empty_weight - params.fuel_load

    if max_payload < 0:
        logger.warning("Fuel load exceeds useful load", max_payload=max_payload,
                       fuel_load=params.fuel_load, aircraft=aircraft.name)

    return max_payload


def calculate_volume_utilization(cargo_volume: float, max_volume: float) -> float:
    """Cargo volume as a percentage of hold volume (not clamped)"""
    return percentage(cargo_volume, max_volume, "max_volume")


def calculate_load_factor(actual_weight: float, max_capacity: float) -> float:
    """
    Weight-based cargo load factor

    load_factor = actual / capacity * 100, values above 100 indicate overload.

    Raises:
        DivisionByZeroError: If max_capacity is zero
    """
    load_factor = percentage(actual_weight, max_capacity, "max_capacity")
    if load_factor > 100:
        logger.warning("Cargo load factor above 100%", load_factor=load_factor,
                       actual_weight=actual_weight, max_capacity=max_capacity)
    return load_factor


def calculate_ftk(params: FreightRevenueParams) -> float:
    """Freight tonne-kilometres: weight (t) * distance (km)"""
    return params.cargo_weight * params.distance


def calculate_cargo_revenue(params: FreightRevenueParams) -> float:
    """Revenue = FTK * revenue per FTK"""
    revenue = calculate_ftk(params) * params.revenue_per_ftk
    log_calculation(logger, "cargo_revenue", revenue,
                    {"cargo_weight": params.cargo_weight, "distance": params.distance})
    return revenue


def calculate_belf(operating_cost: float, max_revenue: float) -> float:
    """
    Break-even load factor

    BELF = operating_cost / max_revenue * 100

    Raises:
        DivisionByZeroError: If max_revenue is zero
    """
    return percentage(operating_cost, max_revenue, "max_revenue")


def calculate_uld_load_factor(params: ULDParams,
                              cargo: Optional[CargoEconomicsParams] = None) -> ULDLoadResult:
    """
    Weight and volume utilization of a unit load device

    The load is optimal when both factors reach the threshold (80% by default).
    """
    cargo = cargo or CargoEconomicsParams()

    weight_load_factor = percentage(params.cargo_weight, params.uld_capacity, "uld_capacity")
    volume_load_factor = percentage(params.cargo_volume, params.max_volume, "max_volume")

    is_optimal = (weight_load_factor >= cargo.uld_optimal_threshold and
                  volume_load_factor >= cargo.uld_optimal_threshold)

    return ULDLoadResult(
        weight_load_factor=weight_load_factor,
        volume_load_factor=volume_load_factor,
        is_optimal=is_optimal,
    )


def calculate_dynamic_price(params: DynamicPricingParams) -> float:
    """
    Apply fuel surcharge and demand adjustments to a base rate

    price = base * (1 + surcharge / 100) * (1 + demand / 100)
    """
    if params.fuel_surcharge < -100 or params.demand_factor < -100:
        logger.warning("Pricing adjustment below -100% yields a negative multiplier",
                       fuel_surcharge=params.fuel_surcharge, demand_factor=params.demand_factor)

    return params.base_rate * (1 + params.fuel_surcharge / 100) * (1 + params.demand_factor / 100)


def calculate_fuel_efficiency(fuel_burn: float, cargo_weight: float, distance: float) -> float:
    """
    Fuel burn per freight tonne-kilometre

    efficiency = fuel / (weight * distance) * 1000 (grams per tonne-km for kg fuel)

    Raises:
        DivisionByZeroError: If weight or distance is zero
    """
    return safe_divide(fuel_burn, cargo_weight * distance, "cargo_weight * distance") * 1000
