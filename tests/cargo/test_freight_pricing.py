"""Tests for chargeable weight and freight pricing"""

import pytest

from aerocalc.cargo.freight_pricing import (
    calculate_chargeable_weight,
    calculate_cost_plus_price,
    calculate_dynamic_freight_price,
    calculate_freight_price,
    calculate_market_price,
    calculate_rule_based_multiplier,
    calculate_urgency_score,
    get_pricing_recommendation,
    get_season_index,
    get_volumetric_divisor,
    optimize_revenue,
    volumetric_weight_from_m3,
)
from aerocalc.errors import DivisionByZeroError, InvalidInputError
from aerocalc.models.cargo import (
    CargoCategory,
    CargoMeasurements,
    ChargeType,
    CostPlusParams,
    FreightPricingParams,
    MarketPricingFactors,
    OperatingCosts,
    PriceRecommendation,
    PricingFactors,
    RouteType,
    SeasonType,
)


def make_pricing_params(**overrides) -> FreightPricingParams:
    values = {
        "chargeable_weight": 100,
        "route_type": RouteType.LONG_HAUL,
        "cargo_category": CargoCategory.GENERAL,
        "season": SeasonType.SHOULDER,
        "fuel_surcharge_percent": 20,
        "security_surcharge": 0.15,
        "handling_fee": 50,
    }
    values.update(overrides)
    return FreightPricingParams(**values)


class TestChargeableWeight:
    """Test IATA volumetric and chargeable weight"""

    def test_volumetric_exceeds_gross(self):
        """Test light bulky shipment billed on volume"""
        result = calculate_chargeable_weight(CargoMeasurements(length=100, width=80, height=60,
                                                               gross_weight=50))
        assert result.volumetric_weight == 80.0
        assert result.chargeable_weight == 80.0
        assert result.charge_type is ChargeType.VOLUMETRIC
        assert result.volume_factor == 1.6
        assert result.actual_volume == 0.48

    def test_gross_exceeds_volumetric(self):
        """Test dense shipment billed on gross weight"""
        result = calculate_chargeable_weight(CargoMeasurements(length=100, width=80, height=60,
                                                               gross_weight=100))
        assert result.chargeable_weight == 100
        assert result.charge_type is ChargeType.GROSS

    def test_carrier_divisor(self):
        """Test courier divisor increases volumetric weight"""
        divisor = get_volumetric_divisor("DHL")
        result = calculate_chargeable_weight(CargoMeasurements(length=100, width=80, height=60,
                                                               gross_weight=50), divisor)
        assert divisor == 5000
        assert result.volumetric_weight == 96.0

    def test_unknown_carrier(self):
        """Test unknown carrier raises"""
        with pytest.raises(InvalidInputError):
            get_volumetric_divisor("pigeon")

    def test_non_positive_divisor(self):
        """Test zero divisor is rejected"""
        with pytest.raises(InvalidInputError):
            calculate_chargeable_weight(CargoMeasurements(length=10, width=10, height=10,
                                                          gross_weight=1), divisor=0)

    def test_volumetric_from_cubic_metres(self):
        """Test 167 kg per m3"""
        assert volumetric_weight_from_m3(2) == pytest.approx(334.0)


class TestFreightPrice:
    """Test tariff pricing"""

    def test_standard_shipment(self):
        """Test long-haul general cargo in shoulder season"""
        result = calculate_freight_price(make_pricing_params())

        assert result.base_rate == 2.75
        assert result.base_charge == 275.0
        assert result.fuel_surcharge == 55.0
        assert result.security_charge == 15.0
        assert result.handling_fee == 50
        assert result.total_charge == 395.0
        assert result.rate_per_kg == 2.75
        assert result.effective_rate_per_kg == 3.95

    def test_category_and_season_multipliers(self):
        """Test perishable cargo in peak season"""
        result = calculate_freight_price(make_pricing_params(cargo_category=CargoCategory.PERISHABLE,
                                                             season=SeasonType.PEAK))
        assert result.category_multiplier == 1.25
        assert result.season_multiplier == 1.30
        assert result.rate_per_kg == 4.47

    def test_plain_string_keys(self):
        """Test enum values may be passed as strings"""
        result = calculate_freight_price(make_pricing_params(route_type="domestic",
                                                             cargo_category="general",
                                                             season="shoulder"))
        assert result.base_rate == 0.75

    def test_custom_rate(self):
        """Test custom rate replaces typical route rate"""
        result = calculate_freight_price(make_pricing_params(custom_rate=3.0))
        assert result.base_rate == 3.0
        assert result.base_charge == 300.0

    def test_unknown_route_type(self):
        """Test unknown route type raises"""
        with pytest.raises(InvalidInputError) as exc_info:
            calculate_freight_price(make_pricing_params(route_type="lunar"))
        assert exc_info.value.field == "route_type"

    def test_zero_weight(self):
        """Test zero chargeable weight raises"""
        with pytest.raises(DivisionByZeroError):
            calculate_freight_price(make_pricing_params(chargeable_weight=0))


class TestMarketPrice:
    """Test market-driven pricing"""

    def test_recommendation_bands(self):
        """Test multiplier labels"""
        assert get_pricing_recommendation(0.85) is PriceRecommendation.DISCOUNT
        assert get_pricing_recommendation(1.0) is PriceRecommendation.STANDARD
        assert get_pricing_recommendation(1.2) is PriceRecommendation.PREMIUM
        assert get_pricing_recommendation(1.5) is PriceRecommendation.SURGE

    def test_urgency_score(self):
        """Test urgency decays with days to departure"""
        assert calculate_urgency_score(0.5) == 100
        assert calculate_urgency_score(4) == 25

    def test_neutral_market(self):
        """Test neutral factors leave the rate unchanged"""
        result = calculate_market_price(2.0, MarketPricingFactors(capacity_utilization=60,
                                                                  days_until_departure=14,
                                                                  competitor_price_index=1.0,
                                                                  historical_demand=50))
        assert result.price_multiplier == 1.0
        assert result.recommended_rate == 2.0
        assert result.demand_score == 50
        assert result.urgency_score == 7
        assert result.recommendation is PriceRecommendation.STANDARD

    def test_tight_market(self):
        """Test high load, imminent departure and strong demand surge the price"""
        result = calculate_market_price(2.0, MarketPricingFactors(capacity_utilization=90,
                                                                  days_until_departure=2,
                                                                  competitor_price_index=1.0,
                                                                  historical_demand=85))
        # 1.2 * 1.35 * 1.2 * 1.0
        assert result.price_multiplier == 1.94
        assert result.recommended_rate == 3.89
        assert result.recommendation is PriceRecommendation.SURGE


class TestCostPlusAndOptimization:
    """Test cost-plus pricing and revenue optimization"""

    def test_cost_plus(self):
        """Test rate derived from cost, load and margin"""
        costs = OperatingCosts(fuel_cost_per_km=5, crew_cost_per_hour=1000, maintenance_per_hour=500,
                               handling_per_flight=2000, insurance_per_flight=500,
                               navigation_fees=300, landing_fees=200)
        result = calculate_cost_plus_price(CostPlusParams(operating_costs=costs, distance_km=1000,
                                                          flight_hours=2, cargo_capacity_kg=10000,
                                                          target_load_factor=0.8,
                                                          target_margin_percent=20))
        assert result.total_operating_cost == 11000
        assert result.cost_per_kg == 1.38
        assert result.recommended_rate_per_kg == 1.65
        assert result.break_even_load_factor == 66.7
        assert result.projected_revenue == pytest.approx(13200.0)
        assert result.projected_profit == pytest.approx(2200.0)

    def test_cost_plus_zero_load(self):
        """Test zero target load factor raises"""
        costs = OperatingCosts(fuel_cost_per_km=5, crew_cost_per_hour=0, maintenance_per_hour=0,
                               handling_per_flight=0, insurance_per_flight=0,
                               navigation_fees=0, landing_fees=0)
        with pytest.raises(DivisionByZeroError):
            calculate_cost_plus_price(CostPlusParams(operating_costs=costs, distance_km=100,
                                                     flight_hours=1, cargo_capacity_kg=1000,
                                                     target_load_factor=0, target_margin_percent=10))

    def test_optimize_revenue(self):
        """Test optimum under default elasticity"""
        result = optimize_revenue(100, 1000)
        assert result.optimal_price == 33.33
        assert result.expected_demand == 2000
        assert result.expected_revenue == pytest.approx(66666.67)
        assert result.price_elasticity == -1.5
        assert result.recommendation == "Consider reducing price to increase volume"

    @pytest.mark.parametrize("elasticity", [0, -1])
    def test_optimize_revenue_degenerate_elasticity(self, elasticity):
        """Test elasticities with no finite optimum"""
        with pytest.raises(InvalidInputError):
            optimize_revenue(100, 1000, elasticity)


class TestRuleBasedPricing:
    """Test rule-based dynamic tariff pricing"""

    def test_season_index(self):
        """Test season index from the tariff"""
        assert get_season_index(SeasonType.PEAK) == 1.30
        assert get_season_index("low") == 0.85

    def test_unknown_season_index(self):
        """Test unknown season is rejected"""
        with pytest.raises(InvalidInputError):
            get_season_index("monsoon")

    def test_multiplier_premium_factors(self):
        """Test full aircraft, short notice and peak season compound"""
        factors = PricingFactors(capacity_utilization=90, days_until_departure=5, season_index=1.30)
        assert calculate_rule_based_multiplier(factors) == pytest.approx(1.2 * 1.15 * 1.30)

    def test_multiplier_discount_factors(self):
        """Test empty aircraft, early booking and low season compound"""
        factors = PricingFactors(capacity_utilization=20, days_until_departure=40, season_index=0.85)
        assert calculate_rule_based_multiplier(factors) == pytest.approx(0.707625)

    def test_multiplier_neutral(self):
        """Test mid-range capacity and booking window leave the season index"""
        factors = PricingFactors(capacity_utilization=60, days_until_departure=14, season_index=1.0)
        assert calculate_rule_based_multiplier(factors) == 1.0

    def test_rule_based_price(self):
        """Test 200 kg long-haul general at multiplier 1.794"""
        factors = PricingFactors(capacity_utilization=90, days_until_departure=5, season_index=1.30)
        result = calculate_dynamic_freight_price(make_pricing_params(chargeable_weight=200), factors)

        assert result.base_rate == 2.75
        assert result.price_multiplier == pytest.approx(1.79)
        assert result.adjusted_rate == pytest.approx(4.93)
        assert result.base_charge == pytest.approx(986.7)
        assert result.fuel_surcharge == pytest.approx(197.34)
        assert result.security_charge == pytest.approx(30.0)
        assert result.handling_fee == 50
        assert result.total_charge == pytest.approx(1264.04)
        assert result.effective_rate_per_kg == pytest.approx(6.32)
        assert result.recommendation is PriceRecommendation.SURGE

    def test_supplied_multiplier_replaces_rules(self):
        """Test an external multiplier overrides the rule-based one"""
        factors = PricingFactors(capacity_utilization=90, days_until_departure=1, season_index=1.30)
        result = calculate_dynamic_freight_price(make_pricing_params(chargeable_weight=200), factors,
                                                 multiplier=1.0)

        assert result.adjusted_rate == pytest.approx(2.75)
        assert result.total_charge == pytest.approx(740.0)
        assert result.effective_rate_per_kg == pytest.approx(3.7)
        assert result.recommendation is PriceRecommendation.STANDARD

    def test_season_not_applied_twice(self):
        """Test the params season does not change the price"""
        factors = PricingFactors(capacity_utilization=60, days_until_departure=14, season_index=1.0)
        peak = calculate_dynamic_freight_price(make_pricing_params(season=SeasonType.PEAK), factors)
        low = calculate_dynamic_freight_price(make_pricing_params(season=SeasonType.LOW), factors)

        assert peak == low

    def test_zero_weight(self):
        """Test zero chargeable weight is rejected"""
        factors = PricingFactors(capacity_utilization=60, days_until_departure=14, season_index=1.0)
        with pytest.raises(DivisionByZeroError):
            calculate_dynamic_freight_price(make_pricing_params(chargeable_weight=0), factors)

    def test_non_finite_multiplier(self):
        """Test NaN multiplier is rejected"""
        factors = PricingFactors(capacity_utilization=60, days_until_departure=14, season_index=1.0)
        with pytest.raises(InvalidInputError):
            calculate_dynamic_freight_price(make_pricing_params(), factors, multiplier=float("nan"))

    def test_unknown_category(self):
        """Test unknown cargo category is rejected"""
        factors = PricingFactors(capacity_utilization=60, days_until_departure=14, season_index=1.0)
        with pytest.raises(InvalidInputError) as exc_info:
            calculate_dynamic_freight_price(make_pricing_params(cargo_category="livestock"), factors)
        assert exc_info.value.field == "cargo_category"
