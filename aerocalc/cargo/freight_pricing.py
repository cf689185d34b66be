"""
Air freight pricing based on IATA chargeable weight.

Covers volumetric/chargeable weight, tariff pricing by route, category and
season, a rule-based dynamic tariff price, a market-driven price multiplier,
cost-plus pricing and an elasticity-based revenue optimizer.
"""

from typing import Optional

from ..config.defaults import FreightTariffParams as TariffParams
from ..errors import InvalidInputError
from ..logging import get_logger, log_calculation
from ..models.cargo import (
    CargoMeasurements,
    ChargeableWeightResult,
    ChargeType,
    CostPlusParams,
    CostPlusResult,
    DynamicFreightPriceResult,
    FreightPricingParams,
    FreightPricingResult,
    MarketPriceResult,
    MarketPricingFactors,
    PriceRecommendation,
    PricingFactors,
    RevenueOptimizationResult,
)
from ..utils.numeric import require_finite, require_positive, round_half_up, round_to, safe_divide

logger = get_logger(__name__)


def get_volumetric_divisor(carrier: str, tariff: Optional[TariffParams] = None) -> float:
    """Volumetric divisor (cm3 per kg) used by a carrier or mode"""
    tariff = tariff or TariffParams()
    try:
        return tariff.carrier_divisors[carrier.lower()]
    except KeyError:
        raise InvalidInputError(f"Unknown carrier divisor: {carrier}", field="carrier", value=carrier)


def calculate_chargeable_weight(cargo: CargoMeasurements,
                                divisor: Optional[float] = None) -> ChargeableWeightResult:
    """
    Calculate the weight a shipment is billed on

    volumetric = L * W * H (cm3) / divisor
    chargeable = max(volumetric, gross)

    Args:
        cargo: Dimensions in cm and gross weight in kg
        divisor: Volumetric divisor, IATA 6000 by default

    Returns:
        ChargeableWeightResult rounded for display (weights 2dp, m3 3dp)

    Raises:
        InvalidInputError: If the divisor is not positive
        DivisionByZeroError: If gross weight is zero
    """
    divisor = require_positive(divisor if divisor is not None else TariffParams().volumetric_divisor,
                               "divisor")

    volume_cm3 = cargo.length * cargo.width * cargo.height
    volume_m3 = volume_cm3 / 1_000_000
    volumetric_weight = volume_cm3 / divisor

    chargeable_weight = max(volumetric_weight, cargo.gross_weight)
    charge_type = ChargeType.VOLUMETRIC if volumetric_weight > cargo.gross_weight else ChargeType.GROSS
    volume_factor = safe_divide(volumetric_weight, cargo.gross_weight, "gross_weight")

    return ChargeableWeightResult(
        volumetric_weight=round_to(volumetric_weight, 2),
        gross_weight=cargo.gross_weight,
        chargeable_weight=round_to(chargeable_weight, 2),
        charge_type=charge_type,
        volume_factor=round_to(volume_factor, 2),
        actual_volume=round_to(volume_m3, 3),
    )


def volumetric_weight_from_m3(volume_m3: float, tariff: Optional[TariffParams] = None) -> float:
    """Volumetric weight from cubic metres (167 kg per m3)"""
    tariff = tariff or TariffParams()
    return volume_m3 * tariff.volumetric_m3_factor


def calculate_freight_price(params: FreightPricingParams,
                            tariff: Optional[TariffParams] = None) -> FreightPricingResult:
    """
    Price a shipment from tariff tables

    rate   = base_rate * category_multiplier * season_multiplier
    total  = weight * rate * (1 + fuel%) + weight * security + handling

    A custom_rate replaces the route's typical base rate.

    Raises:
        InvalidInputError: For route types, categories or seasons missing from the tariff
        DivisionByZeroError: If chargeable weight is zero
    """
    tariff = tariff or TariffParams()
    route_type = getattr(params.route_type, "value", params.route_type)
    cargo_category = getattr(params.cargo_category, "value", params.cargo_category)
    season = getattr(params.season, "value", params.season)

    if route_type not in tariff.base_rates:
        raise InvalidInputError(f"Unknown route type: {route_type}", field="route_type", value=route_type)
    if cargo_category not in tariff.category_multipliers:
        raise InvalidInputError(f"Unknown cargo category: {cargo_category}",
                                field="cargo_category", value=cargo_category)
    if season not in tariff.season_multipliers:
        raise InvalidInputError(f"Unknown season: {season}", field="season", value=season)

    base_rate = params.custom_rate or tariff.base_rates[route_type]["typical"]
    category_multiplier = tariff.category_multipliers[cargo_category]
    season_multiplier = tariff.season_multipliers[season]

    adjusted_rate = base_rate * category_multiplier * season_multiplier
    base_charge = params.chargeable_weight * adjusted_rate
    fuel_surcharge = base_charge * (params.fuel_surcharge_percent / 100)
    security_charge = params.chargeable_weight * params.security_surcharge

    total_charge = base_charge + fuel_surcharge + security_charge + params.handling_fee
    effective_rate_per_kg = safe_divide(total_charge, params.chargeable_weight, "chargeable_weight")

    result = FreightPricingResult(
        base_charge=round_to(base_charge),
        fuel_surcharge=round_to(fuel_surcharge),
        security_charge=round_to(security_charge),
        handling_fee=params.handling_fee,
        total_charge=round_to(total_charge),
        rate_per_kg=round_to(adjusted_rate),
        effective_rate_per_kg=round_to(effective_rate_per_kg),
        base_rate=base_rate,
        category_multiplier=category_multiplier,
        season_multiplier=season_multiplier,
    )
    log_calculation(logger, "freight_price", result.total_charge,
                    {"route_type": route_type, "cargo_category": cargo_category, "season": season})
    return result


def get_pricing_recommendation(multiplier: float) -> PriceRecommendation:
    """Label a price multiplier as discount, standard, premium or surge"""
    if multiplier < 0.90:
        return PriceRecommendation.DISCOUNT
    if multiplier <= 1.10:
        return PriceRecommendation.STANDARD
    if multiplier <= 1.30:
        return PriceRecommendation.PREMIUM
    return PriceRecommendation.SURGE


def calculate_urgency_score(days_until_departure: float) -> int:
    """Urgency 0-100: 100 for departures within a day, decaying as 1/days"""
    return round_half_up((1 / max(days_until_departure, 1)) * 100)


def _capacity_factor(capacity_utilization: float) -> float:
    # Full flights carry a premium, empty ones a discount
    if capacity_utilization > 80:
        return 1 + ((capacity_utilization - 80) * 0.02)
    if capacity_utilization < 40:
        return 0.85 + (capacity_utilization * 0.00375)
    return 1.0


def _urgency_factor(days_until_departure: float) -> float:
    if days_until_departure < 3:
        return 1.35
    if days_until_departure < 7:
        return 1.15
    if days_until_departure > 30:
        return 0.90
    return 1.0


def get_season_index(season: str, tariff: Optional[TariffParams] = None) -> float:
    """Season index (multiplier) for a low, shoulder or peak season"""
    tariff = tariff or TariffParams()
    season = getattr(season, "value", season)
    try:
        return tariff.season_multipliers[season]
    except KeyError:
        raise InvalidInputError(f"Unknown season: {season}", field="season", value=season)


def calculate_rule_based_multiplier(factors: PricingFactors) -> float:
    """
    Deterministic price multiplier from capacity, booking window and season

    multiplier = capacity_factor * urgency_factor * season_index
    """
    return (_capacity_factor(factors.capacity_utilization) *
            _urgency_factor(factors.days_until_departure) *
            factors.season_index)


def calculate_dynamic_freight_price(params: FreightPricingParams, factors: PricingFactors,
                                    multiplier: Optional[float] = None,
                                    tariff: Optional[TariffParams] = None) -> DynamicFreightPriceResult:
    """
    Price a shipment from the route base rate with a dynamic multiplier

    rate  = base_rate * category_multiplier * multiplier
    total = weight * rate * (1 + fuel%) + weight * security + handling

    The multiplier defaults to calculate_rule_based_multiplier(factors); an
    externally supplied multiplier (e.g. from a pricing model) replaces it.
    Seasonality enters only through factors.season_index, so params.season
    is not applied a second time.

    Raises:
        InvalidInputError: For unknown route types or categories, or a non-finite multiplier
        DivisionByZeroError: If chargeable weight is zero
    """
    tariff = tariff or TariffParams()
    route_type = getattr(params.route_type, "value", params.route_type)
    cargo_category = getattr(params.cargo_category, "value", params.cargo_category)

    if route_type not in tariff.base_rates:
        raise InvalidInputError(f"Unknown route type: {route_type}", field="route_type", value=route_type)
    if cargo_category not in tariff.category_multipliers:
        raise InvalidInputError(f"Unknown cargo category: {cargo_category}",
                                field="cargo_category", value=cargo_category)

    if multiplier is None:
        multiplier = calculate_rule_based_multiplier(factors)
    else:
        multiplier = require_finite(multiplier, "multiplier")

    base_rate = params.custom_rate or tariff.base_rates[route_type]["typical"]
    adjusted_rate = base_rate * tariff.category_multipliers[cargo_category] * multiplier
    base_charge = params.chargeable_weight * adjusted_rate
    fuel_surcharge = base_charge * (params.fuel_surcharge_percent / 100)
    security_charge = params.chargeable_weight * params.security_surcharge

    total_charge = base_charge + fuel_surcharge + security_charge + params.handling_fee
    effective_rate_per_kg = safe_divide(total_charge, params.chargeable_weight, "chargeable_weight")

    result = DynamicFreightPriceResult(
        base_rate=base_rate,
        price_multiplier=round_to(multiplier),
        adjusted_rate=round_to(adjusted_rate),
        base_charge=round_to(base_charge),
        fuel_surcharge=round_to(fuel_surcharge),
        security_charge=round_to(security_charge),
        handling_fee=params.handling_fee,
        total_charge=round_to(total_charge),
        effective_rate_per_kg=round_to(effective_rate_per_kg),
        recommendation=get_pricing_recommendation(multiplier),
    )
    log_calculation(logger, "dynamic_freight_price", result.total_charge,
                    {"route_type": route_type, "cargo_category": cargo_category,
                     "multiplier": result.price_multiplier})
    return result


def calculate_market_price(base_rate: float, factors: MarketPricingFactors) -> MarketPriceResult:
    """
    Adjust a base rate to capacity, booking window, demand and competition

    Each factor yields a multiplier; their product scales the base rate.
    """
    capacity_factor = _capacity_factor(factors.capacity_utilization)
    days = factors.days_until_departure
    urgency_factor = _urgency_factor(days)

    demand = factors.historical_demand
    if demand > 80:
        demand_factor = 1.20
    elif demand < 40:
        demand_factor = 0.85
    else:
        demand_factor = 1 + ((demand - 50) * 0.004)

    competitor_factor = 0.7 + (factors.competitor_price_index * 0.3)

    price_multiplier = capacity_factor * urgency_factor * demand_factor * competitor_factor
    recommended_rate = base_rate * price_multiplier

    return MarketPriceResult(
        recommended_rate=round_to(recommended_rate),
        price_multiplier=round_to(price_multiplier),
        demand_score=round_half_up(demand),
        urgency_score=calculate_urgency_score(days),
        recommendation=get_pricing_recommendation(price_multiplier),
    )


def calculate_cost_plus_price(params: CostPlusParams) -> CostPlusResult:
    """
    Derive a rate per kg from operating cost, expected load and target margin

    Raises:
        DivisionByZeroError: If capacity, load factor or resulting rate is zero
    """
    costs = params.operating_costs
    total_operating_cost = (
        (costs.fuel_cost_per_km * params.distance_km) +
        (costs.crew_cost_per_hour * params.flight_hours) +
        (costs.maintenance_per_hour * params.flight_hours) +
        costs.handling_per_flight +
        costs.insurance_per_flight +
        costs.navigation_fees +
        costs.landing_fees
    )

    expected_cargo_kg = params.cargo_capacity_kg * params.target_load_factor
    cost_per_kg = safe_divide(total_operating_cost, expected_cargo_kg, "expected_cargo_kg")
    recommended_rate_per_kg = cost_per_kg * (1 + params.target_margin_percent / 100)
    break_even_load_factor = safe_divide(total_operating_cost,
                                         params.cargo_capacity_kg * recommended_rate_per_kg,
                                         "capacity_revenue")

    projected_revenue = expected_cargo_kg * recommended_rate_per_kg
    projected_profit = projected_revenue - total_operating_cost

    return CostPlusResult(
        total_operating_cost=round_to(total_operating_cost),
        cost_per_kg=round_to(cost_per_kg),
        recommended_rate_per_kg=round_to(recommended_rate_per_kg),
        break_even_load_factor=round_half_up(break_even_load_factor * 1000) / 10,
        projected_revenue=round_to(projected_revenue),
        projected_profit=round_to(projected_profit),
    )


def optimize_revenue(current_price: float, current_demand: float,
                     price_elasticity: float = -1.5) -> RevenueOptimizationResult:
    """
    Suggested price under constant price elasticity

    optimal = current * (1 + 1 / elasticity); demand moves by
    price_change * elasticity.

    Raises:
        InvalidInputError: If elasticity is zero or -1 (no finite optimum)
        DivisionByZeroError: If current price is zero
    """
    if price_elasticity == 0 or price_elasticity == -1:
        raise InvalidInputError("Price elasticity must be non-zero and not -1",
                                field="price_elasticity", value=price_elasticity)

    optimal_multiplier = 1 / (1 + (1 / price_elasticity))
    optimal_price = current_price / optimal_multiplier

    price_change = safe_divide(optimal_price - current_price, current_price, "current_price")
    demand_change = price_change * price_elasticity
    expected_demand = current_demand * (1 + demand_change)
    expected_revenue = optimal_price * expected_demand

    if optimal_price > current_price * 1.05:
        recommendation = "Consider increasing price - demand is relatively inelastic"
    elif optimal_price < current_price * 0.95:
        recommendation = "Consider reducing price to increase volume"
    else:
        recommendation = "Current pricing is near optimal"

    return RevenueOptimizationResult(
        optimal_price=round_to(optimal_price),
        expected_demand=round_half_up(expected_demand),
        expected_revenue=round_to(expected_revenue),
        price_elasticity=price_elasticity,
        recommendation=recommendation,
    )
