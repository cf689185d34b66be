"""Pytest configuration and shared fixtures."""

import pytest

from aerocalc.config.defaults import CalculatorConfig, get_default_config
from aerocalc.models.aircraft import AircraftSpec, FlightParams
from aerocalc.models.crm import CustomerSegmentConfig


@pytest.fixture
def narrow_body() -> AircraftSpec:
    """Narrow-body airframe with an explicit structural payload limit."""
    return AircraftSpec(
        empty_weight=42000.0,
        max_takeoff_weight=79000.0,
        fuel_capacity=26000.0,
        cruise_speed=450.0,
        base_fuel_flow=2500.0,
        fuel_efficiency=5.0,
        max_payload=20000.0,
        name="Boeing 737-800",
    )


@pytest.fixture
def cruise_flight() -> FlightParams:
    """1000 nm flight at FL350 in ISA conditions, half payload, no wind."""
    return FlightParams(
        distance=1000.0,
        altitude=35000.0,
        payload=10000.0,
        temperature=15.0,
        wind_speed=0.0,
    )


@pytest.fixture
def segment_config() -> CustomerSegmentConfig:
    """Default customer segmentation thresholds."""
    return CustomerSegmentConfig(
        new_customer_period=3,
        churn_threshold=12,
        at_risk_flight_reduction=30,
        loyal_min_flights=4,
    )


@pytest.fixture
def default_config() -> CalculatorConfig:
    """Default calculator configuration."""
    return get_default_config()
