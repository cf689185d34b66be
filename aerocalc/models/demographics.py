"""Data models for passenger demographics predictions"""

from dataclasses import dataclass, field
from enum import Enum


class DominantType(str, Enum):
    BUSINESS = "Business"
    LEISURE = "Leisure"
    MIXED = "Mixed"


@dataclass(frozen=True)
class DemographicsResult:
    """Business/leisure split for a flight"""
    business_percentage: int
    leisure_percentage: int
    mixed_percentage: int
    dominant_type: DominantType
    confidence: int  # 0-95
    insights: list[str] = field(default_factory=list)
