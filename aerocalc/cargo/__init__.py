"""Cargo economics and air freight pricing"""

from .economics import (
    calculate_belf,
    calculate_cargo_revenue,
    calculate_dynamic_price,
    calculate_ftk,
    calculate_fuel_efficiency,
    calculate_load_factor,
    calculate_max_payload,
    calculate_uld_load_factor,
    calculate_volume_utilization,
)
from .freight_pricing import (
    calculate_chargeable_weight,
    calculate_cost_plus_price,
    calculate_dynamic_freight_price,
    calculate_freight_price,
    calculate_market_price,
    calculate_rule_based_multiplier,
    get_season_index,
    optimize_revenue,
    volumetric_weight_from_m3,
)

__all__ = [
    "calculate_max_payload",
    "calculate_volume_utilization",
    "calculate_load_factor",
    "calculate_ftk",
    "calculate_cargo_revenue",
    "calculate_belf",
    "calculate_uld_load_factor",
    "calculate_dynamic_price",
    "calculate_fuel_efficiency",
    "calculate_chargeable_weight",
    "volumetric_weight_from_m3",
    "calculate_freight_price",
    "get_season_index",
    "calculate_rule_based_multiplier",
    "calculate_dynamic_freight_price",
    "calculate_market_price",
    "calculate_cost_plus_price",
    "optimize_revenue",
]
