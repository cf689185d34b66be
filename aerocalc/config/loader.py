"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from ..logging import get_logger
from ..models.aircraft import AircraftEfficiency
from ..models.recommendation import AircraftProfile, Airport
from .defaults import (
    DEFAULT_AIRCRAFT_CATALOG,
    DEFAULT_AIRPORTS,
    DEFAULT_FLEET,
    CalculatorConfig,
    CargoEconomicsParams,
    CLVParams,
    DemographicsParams,
    EmissionParams,
    FlightModelParams,
    FreightTariffParams,
    PassengerParams,
    RecommendationParams,
    SegmentationParams,
    get_default_config,
)
from .validation import ConfigValidator

logger = get_logger(__name__)

SECTION_TYPES: dict[str, type] = {
    "flight_model": FlightModelParams,
    "emissions": EmissionParams,
    "cargo": CargoEconomicsParams,
    "freight_pricing": FreightTariffParams,
    "passenger": PassengerParams,
    "segmentation": SegmentationParams,
    "clv": CLVParams,
    "demographics": DemographicsParams,
    "recommendation": RecommendationParams,
}

# Keyed catalogues: config key -> (entry type, built-in entries)
CATALOG_TYPES: dict[str, tuple[type, dict[str, Any]]] = {
    "aircraft_catalog": (AircraftEfficiency, DEFAULT_AIRCRAFT_CATALOG),
    "fleet": (AircraftProfile, DEFAULT_FLEET),
    "airports": (Airport, DEFAULT_AIRPORTS),
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: CalculatorConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=config_dir,
            defaults=get_default_config(),
        )

    def _read_yaml(self, filename: str) -> dict[str, Any]:
        """Read a YAML file from the config directory; missing files are empty."""
        path = self.config_dir / filename

        if not path.exists():
            return {}

        try:
            with open(path) as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}", source=str(path)) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(f"Expected a mapping at top level of {path}", source=str(path))
        return content

    def load_profile_config(self, profile: str) -> dict[str, Any]:
        """Load named profile overrides (e.g. an airline or a market)."""
        profiles_config = self._read_yaml("profiles.yaml")
        return profiles_config.get("profiles", {}).get(profile, {})  # type: ignore[no-any-return]

    def load_aircraft_catalog(self) -> dict[str, dict[str, Any]]:
        """Load aircraft efficiency entries that extend or replace the defaults."""
        catalog_config = self._read_yaml("aircraft.yaml")
        return catalog_config.get("aircraft", {})  # type: ignore[no-any-return]

    def load_route_catalog(self) -> dict[str, dict[str, Any]]:
        """Load fleet capabilities and airports used for route recommendations."""
        route_config = self._read_yaml("fleet.yaml")
        return {key: route_config[key] for key in ("fleet", "airports") if route_config.get(key)}

    def merge_config(
        self,
        profile: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call-time overrides (highest priority)
        2. Profile overrides and catalogue files (aircraft.yaml, fleet.yaml)
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        catalog = self.load_aircraft_catalog()
        if catalog:
            config = self._deep_merge(config, {"aircraft_catalog": catalog})

        route_catalog = self.load_route_catalog()
        if route_catalog:
            config = self._deep_merge(config, route_catalog)

        if profile:
            profile_config = self.load_profile_config(profile)
            if not profile_config:
                logger.warning("Configuration profile not found", profile=profile,
                               config_dir=str(self.config_dir))
            config = self._deep_merge(config, profile_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(
        self,
        profile: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> CalculatorConfig:
        """Merge, validate and build a CalculatorConfig."""
        merged = self.merge_config(profile, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise ConfigurationError(
                f"Configuration has {len(errors)} invalid value(s): "
                + ", ".join(f"{e.field} ({e.message})" for e in errors),
                errors=errors,
                source=profile,
            )

        config = build_config(merged)
        logger.debug("Configuration loaded", profile=profile,
                     aircraft_types=len(config.aircraft_catalog),
                     fleet_types=len(config.fleet), airports=len(config.airports))
        return config

    def _dataclass_to_dict(self, obj: Any) -> Any:
        """Convert nested dataclasses (including dict values) to plain data."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                result[field_name] = self._dataclass_to_dict(getattr(obj, field_name))
            return result
        if isinstance(obj, dict):
            return {key: self._dataclass_to_dict(value) for key, value in obj.items()}
        return obj

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(data: dict[str, Any]) -> CalculatorConfig:
    """
    Build a CalculatorConfig from a merged configuration dictionary.

    Missing sections fall back to their defaults.

    Raises:
        ConfigurationError: On unknown sections or unknown parameter names
    """
    unknown_sections = set(data) - set(SECTION_TYPES) - set(CATALOG_TYPES)
    if unknown_sections:
        raise ConfigurationError(f"Unknown configuration sections: {sorted(unknown_sections)}")

    sections: dict[str, Any] = {}
    for name, section_type in SECTION_TYPES.items():
        try:
            sections[name] = section_type(**data.get(name, {}))
        except TypeError as e:
            raise ConfigurationError(f"Invalid parameters in section '{name}': {e}", source=name) from e

    for name, (entry_type, builtin) in CATALOG_TYPES.items():
        sections[name] = _build_catalog(name, entry_type, data.get(name), builtin)

    return CalculatorConfig(**sections)


def _build_catalog(name: str, entry_type: type, entries: Optional[dict[str, Any]],
                   builtin: dict[str, Any]) -> dict[str, Any]:
    if entries is None:
        return dict(builtin)

    catalog: dict[str, Any] = {}
    for key, entry in entries.items():
        # Airports are looked up by upper-case IATA code
        if name == "airports":
            key = str(key).upper()
        try:
            catalog[key] = entry_type(**entry)
        except TypeError as e:
            raise ConfigurationError(f"Invalid {name} entry '{key}': {e}", source=name) from e
    return catalog
