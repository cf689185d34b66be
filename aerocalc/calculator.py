"""Main aviation calculator coordinating all calculation families"""

from typing import Any, Callable, Optional, TypeVar, Union

from .cargo import economics as cargo_economics
from .cargo import freight_pricing
from .config.defaults import CalculatorConfig, get_default_config
from .crm import heuristics as crm
from .demographics import predictor as demographics
from .errors import CalculationError, ConfigurationError
from .logging import get_logger
from .models.aircraft import AircraftSpec, FlightParams, HighFidelityResult, SimplifiedResult
from .models.cargo import (
    CargoCalculationParams,
    CargoMeasurements,
    ChargeableWeightResult,
    CostPlusParams,
    CostPlusResult,
    DynamicFreightPriceResult,
    DynamicPricingParams,
    FreightPricingParams,
    FreightPricingResult,
    FreightRevenueParams,
    MarketPriceResult,
    MarketPricingFactors,
    PricingFactors,
    RevenueOptimizationResult,
    ULDLoadResult,
    ULDParams,
)
from .models.crm import CLVConfig, CustomerCategorization, CustomerSegmentConfig
from .models.demographics import DemographicsResult
from .models.passenger import (
    BreakEvenParams,
    CASMParams,
    DistanceUnit,
    FlightCategory,
    FlightWeightEstimate,
    FlightWeightParams,
    LoadFactorParams,
    OverbookingParams,
    PayloadResult,
    RASMParams,
    TakeOffWeightParams,
    TakeOffWeightResult,
)
from .models.recommendation import AircraftScore, RoutePriority
from .passenger import revenue as passenger_revenue
from .passenger import weights as passenger_weights
from .performance import carbon, fuel
from .recommendation import engine as recommendation

logger = get_logger(__name__)

T = TypeVar("T")


class AviationCalculator:
    """
    Single entry point that binds every calculation to one configuration

    The calculation functions themselves are pure and can be called directly;
    the calculator supplies configured coefficients and turns unexpected
    failures into CalculationError carrying the metric name.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or get_default_config()

    def _run(self, metric_name: str, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except (CalculationError, ConfigurationError):
            # Re-raise known error types
            raise
        except Exception as e:
            logger.error("Unexpected calculation failure", metric_name=metric_name,
                         error=str(e), error_type=type(e).__name__)
            raise CalculationError(
                f"Unexpected error in {metric_name} calculation: {str(e)}",
                metric_name=metric_name,
                context={"error_type": type(e).__name__},
            ) from e

    # Aircraft performance

    def high_fidelity_fuel(self, aircraft: AircraftSpec, params: FlightParams) -> HighFidelityResult:
        return self._run("high_fidelity_fuel", fuel.calculate_high_fidelity, aircraft, params,
                         self.config.flight_model, self.config.emissions)

    def simplified_fuel(self, aircraft: AircraftSpec, distance: float) -> SimplifiedResult:
        return self._run("simplified_fuel", fuel.calculate_simplified, aircraft, distance,
                         self.config.flight_model, self.config.emissions)

    def fuel_consumption(self, distance: float, aircraft_class: str, payload: float) -> float:
        return self._run("fuel_consumption", fuel.calculate_fuel_consumption,
                         distance, aircraft_class, payload, self.config.flight_model)

    def carbon_emissions(self, distance: float, passengers: float, aircraft_type: str,
                         unit: DistanceUnit = DistanceUnit.KILOMETERS) -> float:
        return self._run("carbon_emissions", carbon.calculate_carbon_emissions,
                         distance, passengers, aircraft_type, unit,
                         self.config.aircraft_catalog, self.config.emissions)

    def offset_credits(self, distance: float, passengers: float, aircraft_type: str,
                       offset_price_per_ton: float,
                       unit: DistanceUnit = DistanceUnit.KILOMETERS) -> float:
        return self._run("offset_credits", carbon.calculate_offset_credits,
                         distance, passengers, aircraft_type, offset_price_per_ton, unit,
                         self.config.aircraft_catalog, self.config.emissions)

    def environmental_score(self, distance: float, passengers: float, aircraft_type: str,
                            unit: DistanceUnit = DistanceUnit.KILOMETERS) -> float:
        return self._run("environmental_score", carbon.calculate_environmental_score,
                         distance, passengers, aircraft_type, unit,
                         self.config.aircraft_catalog, self.config.emissions)

    # Cargo economics

    def cargo_max_payload(self, params: CargoCalculationParams) -> float:
        return self._run("cargo_max_payload", cargo_economics.calculate_max_payload, params)

    def cargo_volume_utilization(self, cargo_volume: float, max_volume: float) -> float:
        return self._run("cargo_volume_utilization", cargo_economics.calculate_volume_utilization,
                         cargo_volume, max_volume)

    def cargo_load_factor(self, actual_weight: float, max_capacity: float) -> float:
        return self._run("cargo_load_factor", cargo_economics.calculate_load_factor,
                         actual_weight, max_capacity)

    def ftk(self, params: FreightRevenueParams) -> float:
        return self._run("ftk", cargo_economics.calculate_ftk, params)

    def cargo_revenue(self, params: FreightRevenueParams) -> float:
        return self._run("cargo_revenue", cargo_economics.calculate_cargo_revenue, params)

    def belf(self, operating_cost: float, max_revenue: float) -> float:
        return self._run("belf", cargo_economics.calculate_belf, operating_cost, max_revenue)

    def uld_load_factor(self, params: ULDParams) -> ULDLoadResult:
        return self._run("uld_load_factor", cargo_economics.calculate_uld_load_factor,
                         params, self.config.cargo)

    def dynamic_price(self, params: DynamicPricingParams) -> float:
        return self._run("dynamic_price", cargo_economics.calculate_dynamic_price, params)

    def cargo_fuel_efficiency(self, fuel_burn: float, cargo_weight: float, distance: float) -> float:
        return self._run("cargo_fuel_efficiency", cargo_economics.calculate_fuel_efficiency,
                         fuel_burn, cargo_weight, distance)

    # Freight pricing

    def chargeable_weight(self, cargo: CargoMeasurements,
                          carrier: Optional[str] = None) -> ChargeableWeightResult:
        divisor = None
        if carrier is not None:
            divisor = self._run("volumetric_divisor", freight_pricing.get_volumetric_divisor,
                                carrier, self.config.freight_pricing)
        return self._run("chargeable_weight", freight_pricing.calculate_chargeable_weight,
                         cargo, divisor)

    def freight_price(self, params: FreightPricingParams) -> FreightPricingResult:
        return self._run("freight_price", freight_pricing.calculate_freight_price,
                         params, self.config.freight_pricing)

    def season_index(self, season: str) -> float:
        return self._run("season_index", freight_pricing.get_season_index, season,
                         self.config.freight_pricing)

    def rule_based_price(self, params: FreightPricingParams, factors: PricingFactors,
                         multiplier: Optional[float] = None) -> DynamicFreightPriceResult:
        """Dynamic tariff price; an external multiplier replaces the rule-based one"""
        return self._run("dynamic_freight_price", freight_pricing.calculate_dynamic_freight_price,
                         params, factors, multiplier, self.config.freight_pricing)

    def market_price(self, base_rate: float, factors: MarketPricingFactors) -> MarketPriceResult:
        return self._run("market_price", freight_pricing.calculate_market_price, base_rate, factors)

    def cost_plus_price(self, params: CostPlusParams) -> CostPlusResult:
        return self._run("cost_plus_price", freight_pricing.calculate_cost_plus_price, params)

    def optimize_revenue(self, current_price: float, current_demand: float,
                         price_elasticity: Optional[float] = None) -> RevenueOptimizationResult:
        if price_elasticity is None:
            price_elasticity = self.config.freight_pricing.default_price_elasticity
        return self._run("revenue_optimization", freight_pricing.optimize_revenue,
                         current_price, current_demand, price_elasticity)

    # Passenger revenue

    def passenger_load_factor(self, params: LoadFactorParams) -> float:
        return self._run("passenger_load_factor", passenger_revenue.calculate_load_factor, params)

    def overbooking_limit(self, params: OverbookingParams) -> int:
        return self._run("overbooking_limit", passenger_revenue.calculate_overbooking_limit, params)

    def recommended_bookings(self, params: OverbookingParams) -> int:
        return self._run("recommended_bookings", passenger_revenue.calculate_recommended_bookings,
                         params, self.config.passenger)

    def rasm(self, params: RASMParams) -> float:
        return self._run("rasm", passenger_revenue.calculate_rasm, params, self.config.passenger)

    def casm(self, params: CASMParams) -> float:
        return self._run("casm", passenger_revenue.calculate_casm, params, self.config.passenger)

    def break_even_load_factor(self, params: BreakEvenParams) -> float:
        return self._run("break_even_load_factor",
                         passenger_revenue.calculate_break_even_load_factor, params)

    def total_payload(self, params: FlightWeightParams) -> PayloadResult:
        return self._run("total_payload", passenger_weights.calculate_total_payload, params)

    def take_off_weight(self, params: TakeOffWeightParams) -> TakeOffWeightResult:
        return self._run("take_off_weight", passenger_weights.calculate_take_off_weight, params)

    def estimate_flight_weight(self, passenger_count: int, flight_category: FlightCategory,
                               checked_bag_ratio: float = 1.0, cabin_crew: int = 4,
                               flight_crew: int = 2) -> FlightWeightEstimate:
        return self._run("flight_weight_estimate", passenger_weights.estimate_flight_weight,
                         passenger_count, flight_category, checked_bag_ratio, cabin_crew, flight_crew)

    # Customer relationship

    def segment_config(self) -> CustomerSegmentConfig:
        """Segmentation thresholds from the active configuration"""
        seg = self.config.segmentation
        return CustomerSegmentConfig(
            new_customer_period=seg.new_customer_period,
            churn_threshold=seg.churn_threshold,
            at_risk_flight_reduction=seg.at_risk_flight_reduction,
            loyal_min_flights=seg.loyal_min_flights,
        )

    def clv_config(self, **overrides: Any) -> CLVConfig:
        """CLV inputs from the active configuration, with per-customer overrides"""
        clv = self.config.clv
        values = {
            "average_ticket_price": clv.average_ticket_price,
            "flights_per_year": clv.flights_per_year,
            "projection_years": clv.projection_years,
            "annual_growth_rate": clv.annual_growth_rate,
            "discount_rate": clv.discount_rate,
        }
        values.update(overrides)
        return CLVConfig(**values)

    def clv(self, config: Optional[CLVConfig] = None) -> int:
        return self._run("clv", crm.calculate_clv, config or self.clv_config())

    def churn_probability(self, last_flight_months: float, average_frequency: float) -> float:
        return self._run("churn_probability", crm.calculate_churn_probability,
                         last_flight_months, average_frequency, self.segment_config())

    def categorize_customer(self, last_flight_months: float, flights_last_year: float,
                            previous_year_flights: float) -> CustomerCategorization:
        return self._run("customer_category", crm.categorize_customer,
                         last_flight_months, flights_last_year, previous_year_flights,
                         self.segment_config())

    # Demographics

    def passenger_demographics(self, day_of_week: str, season: str, time_of_day: str,
                               booking_type: str, route_type: str, price_sensitivity: str,
                               distance: float) -> DemographicsResult:
        return self._run("passenger_demographics", demographics.predict_passenger_demographics,
                         day_of_week, season, time_of_day, booking_type, route_type,
                         price_sensitivity, distance, self.config.demographics)

    # Route recommendation

    def route_distance(self, origin: str, destination: str) -> float:
        return self._run("route_distance", recommendation.calculate_route_distance,
                         origin, destination, self.config.airports, self.config.recommendation)

    def recommend_aircraft(self, origin: str, destination: str, passengers: int, cargo_kg: float = 0,
                           priority: Union[RoutePriority, str, None] = None) -> list[AircraftScore]:
        """Rank the configured fleet for a route, best first"""
        return self._run("aircraft_recommendation", recommendation.recommend_aircraft,
                         origin, destination, passengers, cargo_kg, priority,
                         self.config.fleet, self.config.airports, self.config.recommendation)

    def update_config(self, new_config: CalculatorConfig):
        """Replace the configuration used by subsequent calculations"""
        self.config = new_config
        logger.info("Calculator configuration updated")
