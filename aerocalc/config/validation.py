"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_segmentation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate customer segmentation thresholds."""
        errors = []

        # Validate new_customer_period
        if "new_customer_period" in params:
            value = params["new_customer_period"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="new_customer_period",
                    message="Must be a non-negative number",
                    value=value
                ))

        # Validate churn_threshold (divisor of churn probability)
        if "churn_threshold" in params:
            value = params["churn_threshold"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="churn_threshold",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate at_risk_flight_reduction
        if "at_risk_flight_reduction" in params:
            value = params["at_risk_flight_reduction"]
            if not _is_number(value) or value < 0 or value > 100:
                errors.append(ValidationError(
                    field="at_risk_flight_reduction",
                    message="Must be a percentage between 0 and 100",
                    value=value
                ))

        # Validate loyal_min_flights (divisor of frequency factor)
        if "loyal_min_flights" in params:
            value = params["loyal_min_flights"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="loyal_min_flights",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_clv_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate customer lifetime value defaults."""
        errors = []

        for name in ("average_ticket_price", "flights_per_year"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        # Validate projection_years
        if "projection_years" in params:
            value = params["projection_years"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="projection_years",
                    message="Must be a positive integer",
                    value=value
                ))

        # Rates at or below -100% make the compounding base non-positive
        for name in ("annual_growth_rate", "discount_rate"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= -100:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number greater than -100",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_flight_model_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate fuel model coefficients."""
        errors = []

        for name in ("climb_reference_altitude", "wind_drag_divisor"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        for name in ("takeoff_flow_fraction", "climb_flow_fraction", "payload_sensitivity",
                     "quadratic_coefficient", "fixed_flow_fraction", "temperature_coefficient",
                     "default_class_consumption"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_demographics_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate demographics output shaping parameters."""
        errors = []

        # Validate confidence_cap
        if "confidence_cap" in params:
            value = params["confidence_cap"]
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 100:
                errors.append(ValidationError(
                    field="confidence_cap",
                    message="Must be an integer between 0 and 100",
                    value=value
                ))

        # Validate insight_limit
        if "insight_limit" in params:
            value = params["insight_limit"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="insight_limit",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_aircraft_catalog(catalog: dict[str, Any]) -> list[ValidationError]:
        """Validate aircraft efficiency catalogue entries."""
        errors = []

        for aircraft_type, entry in catalog.items():
            if not isinstance(entry, dict):
                errors.append(ValidationError(
                    field=aircraft_type,
                    message="Must be a mapping of efficiency values",
                    value=entry
                ))
                continue
            for name, value in entry.items():
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=f"{aircraft_type}.{name}",
                        message="Must be a non-negative number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_recommendation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate route recommendation economics."""
        errors = []

        for name in ("range_margin", "fuel_density", "revenue_per_seat_km",
                     "average_fuel_efficiency", "average_co2_per_passenger", "earth_radius_km"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        for name in ("fuel_price_per_litre", "cost_per_ask"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        # Divisor of emissions per passenger
        if "assumed_load_factor" in params:
            value = params["assumed_load_factor"]
            if not _is_number(value) or not 0 < value <= 1:
                errors.append(ValidationError(
                    field="assumed_load_factor",
                    message="Must be a fraction in (0, 1]",
                    value=value
                ))

        if "reasoning_limit" in params:
            value = params["reasoning_limit"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="reasoning_limit",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_fleet(fleet: dict[str, Any]) -> list[ValidationError]:
        """Validate fleet capability entries; every capability divides or bounds a score."""
        errors = []

        for aircraft_type, entry in fleet.items():
            if not isinstance(entry, dict):
                errors.append(ValidationError(
                    field=aircraft_type,
                    message="Must be a mapping of capability values",
                    value=entry
                ))
                continue
            for name, value in entry.items():
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=f"{aircraft_type}.{name}",
                        message="Must be a positive number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_airports(airports: dict[str, Any]) -> list[ValidationError]:
        """Validate airport coordinates."""
        errors = []

        for code, entry in airports.items():
            if not isinstance(entry, dict):
                errors.append(ValidationError(
                    field=str(code),
                    message="Must be a mapping with name, city, country, lat and lon",
                    value=entry
                ))
                continue
            for name, limit in (("lat", 90), ("lon", 180)):
                if name in entry:
                    value = entry[name]
                    if not _is_number(value) or not -limit <= value <= limit:
                        errors.append(ValidationError(
                            field=f"{code}.{name}",
                            message=f"Must be a number between -{limit} and {limit}",
                            value=value
                        ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "segmentation" in config:
            errors.extend(ConfigValidator.validate_segmentation_params(config["segmentation"]))

        if "clv" in config:
            errors.extend(ConfigValidator.validate_clv_params(config["clv"]))

        if "flight_model" in config:
            errors.extend(ConfigValidator.validate_flight_model_params(config["flight_model"]))

        if "demographics" in config:
            errors.extend(ConfigValidator.validate_demographics_params(config["demographics"]))

        if "aircraft_catalog" in config:
            errors.extend(ConfigValidator.validate_aircraft_catalog(config["aircraft_catalog"]))

        if "recommendation" in config:
            errors.extend(ConfigValidator.validate_recommendation_params(config["recommendation"]))

        if "fleet" in config:
            errors.extend(ConfigValidator.validate_fleet(config["fleet"]))

        if "airports" in config:
            errors.extend(ConfigValidator.validate_airports(config["airports"]))

        return errors
