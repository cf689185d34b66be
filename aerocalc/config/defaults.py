"""Default configuration parameters for the aviation calculators."""

from dataclasses import dataclass, field

from ..models.aircraft import AircraftEfficiency
from ..models.recommendation import AircraftProfile, Airport


@dataclass(frozen=True)
class FlightModelParams:
    """Coefficients of the high-fidelity and simplified fuel models."""
    # High-fidelity segments
    takeoff_flow_fraction: float = 0.2               # Share of base flow burnt on takeoff
    climb_flow_fraction: float = 0.3                 # Share of base flow per reference altitude
    climb_reference_altitude: float = 10000.0        # ft

    # Atmospheric corrections
    isa_temperature: float = 15.0                    # deg C
    temperature_coefficient: float = 0.002           # Fuel change per deg C deviation
    wind_drag_divisor: float = 100.0                 # Wind speed scale for drag term

    # Payload impact
    payload_sensitivity: float = 0.1                 # Fuel increase at full payload

    # Simplified quadratic regression
    quadratic_coefficient: float = 0.0001            # a in a*d^2 + b*d + c
    fixed_flow_fraction: float = 0.1                 # c as a share of base flow

    # Class-based consumption (kg per seat per km)
    class_consumption: dict[str, float] = field(default_factory=lambda: {
        "narrow-body": 0.033,
        "wide-body": 0.039,
        "regional": 0.029,
    })
    default_class_consumption: float = 0.035


@dataclass(frozen=True)
class EmissionParams:
    """Emission factors and carbon footprint benchmarks."""
    co2_per_kg_fuel: float = 3.16
    km_to_miles: float = 0.621371
    best_case_kg_per_pax: float = 50.0
    worst_case_kg_per_pax: float = 200.0


@dataclass(frozen=True)
class CargoEconomicsParams:
    """Cargo utilization parameters."""
    uld_optimal_threshold: float = 80.0              # Percent for both weight and volume


@dataclass(frozen=True)
class FreightTariffParams:
    """Tariff tables for air freight pricing."""
    volumetric_divisor: float = 6000.0               # IATA cm3 per kg
    volumetric_m3_factor: float = 167.0              # kg per m3
    carrier_divisors: dict[str, float] = field(default_factory=lambda: {
        "iata": 6000.0,
        "dhl": 5000.0,
        "fedex": 5000.0,
        "ups": 5000.0,
        "sea": 1000.0,
    })
    base_rates: dict[str, dict[str, float]] = field(default_factory=lambda: {
        "domestic": {"min": 0.30, "max": 1.50, "typical": 0.75},
        "shortHaul": {"min": 0.50, "max": 2.50, "typical": 1.25},
        "mediumHaul": {"min": 1.00, "max": 3.50, "typical": 2.00},
        "longHaul": {"min": 1.50, "max": 4.50, "typical": 2.75},
        "intercontinental": {"min": 2.00, "max": 5.50, "typical": 3.50},
    })
    category_multipliers: dict[str, float] = field(default_factory=lambda: {
        "economy": 0.85,
        "general": 1.00,
        "perishable": 1.25,
        "dangerous": 1.50,
        "valuable": 1.75,
        "express": 2.00,
    })
    season_multipliers: dict[str, float] = field(default_factory=lambda: {
        "low": 0.85,
        "shoulder": 1.00,
        "peak": 1.30,
    })
    default_price_elasticity: float = -1.5


@dataclass(frozen=True)
class PassengerParams:
    """Passenger revenue parameters."""
    km_to_miles: float = 0.621371
    max_overbooking_ratio: float = 1.2               # Safe cap on bookings vs seats


@dataclass(frozen=True)
class SegmentationParams:
    """Customer segmentation thresholds."""
    new_customer_period: float = 3                   # months
    churn_threshold: float = 12                      # months
    at_risk_flight_reduction: float = 30             # percent
    loyal_min_flights: float = 4                     # flights per year


@dataclass(frozen=True)
class CLVParams:
    """Customer lifetime value projection defaults."""
    average_ticket_price: float = 300.0
    flights_per_year: float = 4
    projection_years: int = 5
    annual_growth_rate: float = 2.0                  # percent
    discount_rate: float = 5.0                       # percent


@dataclass(frozen=True)
class DemographicsParams:
    """Demographics scorer output shaping."""
    mixed_threshold: float = 15.0                    # Percentage-point gap for Mixed
    confidence_cap: int = 95
    insight_limit: int = 4
    long_haul_distance: float = 5000.0               # km
    short_haul_distance: float = 1000.0              # km


@dataclass(frozen=True)
class RecommendationParams:
    """Unit economics and benchmarks for scoring aircraft on a route."""
    range_margin: float = 1.1                        # Required range over route distance
    fuel_price_per_litre: float = 0.75               # USD
    fuel_density: float = 0.8                        # kg per litre
    cost_per_ask: float = 0.08                       # USD per available seat-km
    revenue_per_seat_km: float = 0.12                # USD, applied to RPK and ASK
    assumed_load_factor: float = 0.80
    average_fuel_efficiency: float = 3.0             # litres per km benchmark
    average_co2_per_passenger: float = 100.0         # kg benchmark
    earth_radius_km: float = 6371.0
    reasoning_limit: int = 3


DEFAULT_AIRCRAFT_CATALOG: dict[str, AircraftEfficiency] = {
    "Boeing 737-800": AircraftEfficiency(
        fuel_burn_per_100km_seat=2.4, co2_emission_factor=2.5, fuel_efficiency=0.024,
        operating_cost_per_hour=3200, turnaround_time=35),
    "Airbus A320": AircraftEfficiency(
        fuel_burn_per_100km_seat=2.4, co2_emission_factor=2.5, fuel_efficiency=0.024,
        operating_cost_per_hour=5000, turnaround_time=40),
    "Boeing 787-9": AircraftEfficiency(
        fuel_burn_per_100km_seat=2.3, co2_emission_factor=2.5, fuel_efficiency=0.023,
        operating_cost_per_hour=7000, turnaround_time=50),
    "Airbus A350": AircraftEfficiency(
        fuel_burn_per_100km_seat=2.2, co2_emission_factor=2.5, fuel_efficiency=0.022,
        operating_cost_per_hour=6800, turnaround_time=60),
    "Regional Jet": AircraftEfficiency(
        fuel_burn_per_100km_seat=1.8, co2_emission_factor=2.5, fuel_efficiency=0.018,
        operating_cost_per_hour=2800, turnaround_time=25),
}


# Mission capabilities used for route recommendations
DEFAULT_FLEET: dict[str, AircraftProfile] = {
    "Airbus A350-900": AircraftProfile(315, 51000, 15327, 470, 0.0239, 3.15),
    "Boeing 787-9": AircraftProfile(296, 43000, 14010, 488, 0.023, 3.15),
    "Airbus A220-300": AircraftProfile(149, 18000, 6297, 447, 0.021, 3.15),
    "Boeing 737 MAX 8": AircraftProfile(210, 20865, 6570, 449, 0.022, 3.15),
    "Airbus A321neo": AircraftProfile(244, 23400, 7400, 470, 0.022, 3.15),
    "Airbus A380-800": AircraftProfile(555, 84000, 15700, 490, 0.035, 3.15),
    "Embraer E195": AircraftProfile(124, 13933, 4260, 447, 0.025, 3.15),
    "Cessna CJ4": AircraftProfile(10, 1007, 4010, 451, 0.03, 3.15),
    "Boeing 737 MAX 7": AircraftProfile(172, 20865, 7130, 470, 0.0225, 3.15),
    "Airbus A318": AircraftProfile(132, 18000, 5700, 470, 0.024, 3.15),
    "Airbus A319": AircraftProfile(156, 19500, 6850, 470, 0.0235, 3.15),
    "Airbus A320": AircraftProfile(180, 21000, 6150, 470, 0.023, 3.15),
    "Boeing 737-800": AircraftProfile(189, 20865, 5765, 470, 0.024, 3.15),
    "Boeing 727-200": AircraftProfile(189, 20000, 4000, 470, 0.03, 3.15),
    "McDonnell-Douglas MD-83": AircraftProfile(155, 17000, 4600, 470, 0.028, 3.15),
    "Boeing 757-200": AircraftProfile(239, 27200, 7222, 470, 0.025, 3.15),
    "Boeing 767-300ER": AircraftProfile(269, 42000, 11070, 470, 0.026, 3.15),
    "Boeing 777-300ER": AircraftProfile(396, 56000, 13650, 470, 0.027, 3.15),
    "Boeing 787-8": AircraftProfile(242, 43000, 13530, 470, 0.023, 3.15),
    "Airbus A330-300": AircraftProfile(277, 43000, 11750, 470, 0.026, 3.15),
    "Airbus A340-600": AircraftProfile(379, 59000, 14450, 470, 0.028, 3.15),
    "Embraer E190": AircraftProfile(114, 13000, 4537, 447, 0.025, 3.15),
    "Bombardier CRJ-900": AircraftProfile(90, 8000, 2956, 447, 0.024, 3.15),
    "Bombardier Q400": AircraftProfile(78, 8000, 2522, 360, 0.022, 3.15),
    "ATR 72-600": AircraftProfile(78, 7500, 1665, 275, 0.021, 3.15),
}

# Keyed by upper-case IATA code
DEFAULT_AIRPORTS: dict[str, Airport] = {
    "IST": Airport("Istanbul Airport", "Istanbul", "Turkey", 41.2753, 28.7519),
    "JFK": Airport("John F. Kennedy International Airport", "New York", "USA", 40.6413, -73.7781),
}


@dataclass(frozen=True)
class CalculatorConfig:
    """Complete calculator configuration."""
    flight_model: FlightModelParams
    emissions: EmissionParams
    cargo: CargoEconomicsParams
    freight_pricing: FreightTariffParams
    passenger: PassengerParams
    segmentation: SegmentationParams
    clv: CLVParams
    demographics: DemographicsParams
    aircraft_catalog: dict[str, AircraftEfficiency]
    recommendation: RecommendationParams
    fleet: dict[str, AircraftProfile]
    airports: dict[str, Airport]


def get_default_config() -> CalculatorConfig:
    """Get the default configuration instance."""
    return CalculatorConfig(
        flight_model=FlightModelParams(),
        emissions=EmissionParams(),
        cargo=CargoEconomicsParams(),
        freight_pricing=FreightTariffParams(),
        passenger=PassengerParams(),
        segmentation=SegmentationParams(),
        clv=CLVParams(),
        demographics=DemographicsParams(),
        aircraft_catalog=dict(DEFAULT_AIRCRAFT_CATALOG),
        recommendation=RecommendationParams(),
        fleet=dict(DEFAULT_FLEET),
        airports=dict(DEFAULT_AIRPORTS),
    )
