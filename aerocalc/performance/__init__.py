"""Aircraft performance: fuel burn, CO2 and carbon footprint"""

from .carbon import (
    calculate_carbon_emissions,
    calculate_environmental_score,
    calculate_offset_credits,
    get_aircraft_efficiency,
)
from .fuel import (
    calculate_co2_emissions,
    calculate_fuel_consumption,
    calculate_high_fidelity,
    calculate_simplified,
)

__all__ = [
    "calculate_high_fidelity",
    "calculate_simplified",
    "calculate_fuel_consumption",
    "calculate_co2_emissions",
    "calculate_carbon_emissions",
    "calculate_offset_credits",
    "calculate_environmental_score",
    "get_aircraft_efficiency",
]
