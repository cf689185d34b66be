"""
Rule-weighted business/leisure passenger mix predictor.

Seven independent factors add fixed points to a business and a leisure
score. Percentages are each score's share of the combined total; the point
values are heuristics and are kept exactly as tuned.
"""

from typing import Optional

from ..config.defaults import DemographicsParams
from ..logging import get_logger, log_calculation
from ..models.demographics import DemographicsResult, DominantType
from ..utils.numeric import round_half_up

logger = get_logger(__name__)

BUSINESS_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday")
BUSINESS_SEASONS = ("spring", "fall")
LEISURE_SEASONS = ("summer", "holiday")


class _Scorecard:
    """Accumulates points and the insight trail for one prediction"""

    def __init__(self):
        self.business = 0
        self.leisure = 0
        self.insights: list[str] = []

    def add(self, business: int = 0, leisure: int = 0, insight: Optional[str] = None):
        self.business += business
        self.leisure += leisure
        if insight:
            self.insights.append(insight)

    @property
    def total(self) -> int:
        return self.business + self.leisure


def _score_day(card: _Scorecard, day_of_week: str):
    if day_of_week in BUSINESS_DAYS:
        card.add(business=25, insight=f"{day_of_week} is a typical business travel day")
    elif day_of_week == "Friday":
        card.add(business=15, leisure=10,
                 insight="Friday sees mixed business and weekend leisure traffic")
    else:
        card.add(leisure=25, insight=f"{day_of_week} is primarily leisure travel")


def _score_time_of_day(card: _Scorecard, time_of_day: str):
    if time_of_day in ("morning", "evening"):
        card.add(business=20, insight="Morning/evening flights favor business travelers")
    elif time_of_day == "afternoon":
        card.add(business=10, leisure=10, insight="Afternoon flights see balanced traffic")
    else:  # night
        card.add(business=5, leisure=15, insight="Night flights often budget-conscious leisure")


def _score_season(card: _Scorecard, season: str):
    if season in BUSINESS_SEASONS:
        card.add(business=15, insight=f"{season} is peak business conference season")
    elif season in LEISURE_SEASONS:
        holiday_bonus = 5 if season == "holiday" else 0
        card.add(leisure=15 + holiday_bonus, insight=f"{season} is peak vacation season")
    else:  # winter
        card.add(business=10, leisure=5)


def _score_booking(card: _Scorecard, booking_type: str):
    if booking_type == "last_minute":
        card.add(business=20, insight="Last-minute bookings indicate urgent business travel")
    elif booking_type == "early":
        card.add(leisure=20, insight="Early bookings suggest planned vacations")
    else:
        card.add(business=10, leisure=10, insight="Regular booking window shows mixed demand")


def _score_route(card: _Scorecard, route_type: str):
    if route_type == "business":
        card.add(business=10, insight="Route designated as business-oriented")
    elif route_type == "leisure":
        card.add(leisure=10, insight="Route designated as leisure-oriented")
    else:
        card.add(business=5, leisure=5)


def _score_price_sensitivity(card: _Scorecard, price_sensitivity: str):
    if price_sensitivity == "low":
        card.add(business=10, insight="Low price sensitivity indicates business travelers")
    elif price_sensitivity == "high":
        card.add(leisure=10, insight="High price sensitivity common in leisure travel")
    else:
        card.add(business=5, leisure=5)


def _score_distance(card: _Scorecard, distance: float, params: DemographicsParams):
    if distance > params.long_haul_distance:
        card.add(business=5, leisure=5, insight="Long-haul route attracts both segments")
    elif distance < params.short_haul_distance:
        card.add(business=5, insight="Short-haul favors business commuters")
    else:
        card.add(leisure=5)


def predict_passenger_demographics(day_of_week: str, season: str, time_of_day: str,
                                   booking_type: str, route_type: str,
                                   price_sensitivity: str, distance: float,
                                   params: Optional[DemographicsParams] = None) -> DemographicsResult:
    """
    Predict the business/leisure split of a flight's passengers

    Args:
        day_of_week: Capitalised weekday name, e.g. "Monday"
        season: spring, summer, fall, winter or holiday
        time_of_day: morning, afternoon, evening or night
        booking_type: last_minute, regular or early
        route_type: business, leisure or mixed
        price_sensitivity: low, medium or high
        distance: Route distance in km
        params: Output shaping thresholds

    Returns:
        DemographicsResult with rounded percentages, dominant type,
        confidence and up to four insights
    """
    params = params or DemographicsParams()
    card = _Scorecard()

    _score_day(card, day_of_week)
    _score_time_of_day(card, time_of_day)
    _score_season(card, season)
    _score_booking(card, booking_type)
    _score_route(card, route_type)
    _score_price_sensitivity(card, price_sensitivity)
    _score_distance(card, distance, params)

    # Every factor scores at least 5 points, so total is never zero
    total = card.total
    business_pct = round_half_up(card.business / total * 100)
    leisure_pct = round_half_up(card.leisure / total * 100)
    mixed_pct = 100 - business_pct - leisure_pct

    if abs(business_pct - leisure_pct) < params.mixed_threshold:
        dominant = DominantType.MIXED
    elif business_pct > leisure_pct:
        dominant = DominantType.BUSINESS
    else:
        dominant = DominantType.LEISURE

    score_diff = abs(card.business - card.leisure)
    confidence = min(params.confidence_cap, round_half_up(score_diff / total * 200))

    result = DemographicsResult(
        business_percentage=business_pct,
        leisure_percentage=leisure_pct,
        mixed_percentage=max(0, mixed_pct),
        dominant_type=dominant,
        confidence=confidence,
        insights=card.insights[:params.insight_limit],
    )
    log_calculation(logger, "passenger_demographics", dominant.value,
                    {"business_score": card.business, "leisure_score": card.leisure,
                     "confidence": confidence})
    return result
