"""Tests for route-based aircraft recommendation"""

import pytest

from aerocalc.config.defaults import RecommendationParams
from aerocalc.errors import InvalidInputError
from aerocalc.models.recommendation import AircraftProfile, Airport, RoutePriority
from aerocalc.recommendation.engine import (
    calculate_great_circle_distance,
    calculate_route_distance,
    find_airport,
    find_suitable_aircraft,
    recommend_aircraft,
    score_aircraft,
)

# Two points on the equator 9 degrees apart: 6371 km * radians(9)
EQUATOR_AIRPORTS = {
    "AAA": Airport("Alpha Field", "Alpha", "Equatoria", 0.0, 0.0),
    "BBB": Airport("Bravo Field", "Bravo", "Equatoria", 0.0, 9.0),
}
EQUATOR_DISTANCE = 1000.754


@pytest.fixture
def narrow_body_profile() -> AircraftProfile:
    return AircraftProfile(max_passengers=180, cargo_capacity=21000, max_range=6150,
                           cruise_speed=470, fuel_efficiency=0.023, co2_factor=3.15)


@pytest.fixture
def jumbo_profile() -> AircraftProfile:
    return AircraftProfile(max_passengers=555, cargo_capacity=84000, max_range=15700,
                           cruise_speed=490, fuel_efficiency=0.035, co2_factor=3.15)


class TestRouteDistance:
    """Test great-circle route distance"""

    def test_equator_distance(self):
        """Test distance along the equator equals radius times angle"""
        assert calculate_great_circle_distance(0, 0, 0, 9) == pytest.approx(EQUATOR_DISTANCE, rel=1e-5)

    def test_same_point(self):
        """Test identical coordinates are zero apart"""
        assert calculate_great_circle_distance(41.2753, 28.7519, 41.2753, 28.7519) == 0

    def test_built_in_route(self):
        """Test Istanbul to New York from the built-in airports"""
        distance = calculate_route_distance("IST", "JFK")
        assert 7900 < distance < 8200

    def test_symmetric(self):
        """Test distance does not depend on direction"""
        assert calculate_route_distance("JFK", "IST") == pytest.approx(calculate_route_distance("IST", "JFK"))

    def test_lookup_is_case_insensitive(self):
        """Test lower-case codes resolve"""
        assert find_airport("ist").city == "Istanbul"

    def test_unknown_airport(self):
        """Test unknown IATA code is rejected"""
        with pytest.raises(InvalidInputError) as exc_info:
            calculate_route_distance("IST", "XXX")
        assert exc_info.value.field == "airport_code"
        assert exc_info.value.value == "XXX"


class TestSuitableAircraft:
    """Test mission filtering"""

    def test_range_margin(self):
        """Test required range includes a 10% margin"""
        fleet = {
            "Short": AircraftProfile(100, 5000, 1100, 450, 0.02, 3.15),
            "Enough": AircraftProfile(100, 5000, 1200, 450, 0.02, 3.15),
        }
        assert list(find_suitable_aircraft(1000, 50, 0, fleet)) == ["Enough"]

    def test_seats_and_cargo(self):
        """Test seat and cargo capacity must cover the mission"""
        fleet = {
            "Few seats": AircraftProfile(90, 9000, 3000, 450, 0.02, 3.15),
            "Small hold": AircraftProfile(150, 1000, 3000, 450, 0.02, 3.15),
            "Fits": AircraftProfile(150, 9000, 3000, 450, 0.02, 3.15),
        }
        assert list(find_suitable_aircraft(1000, 100, 2000, fleet)) == ["Fits"]

    def test_exact_capacity_fits(self):
        """Test capacities equal to the demand are accepted"""
        fleet = {"Exact": AircraftProfile(100, 2000, 1100, 450, 0.02, 3.15)}
        assert list(find_suitable_aircraft(1000, 100, 2000, fleet)) == ["Exact"]


class TestScoreAircraft:
    """Test scoring of a single candidate"""

    def test_unit_economics(self, narrow_body_profile):
        """Test cost, revenue, profit, emissions and break-even"""
        result = score_aircraft("Airbus A320", narrow_body_profile, 1000, 90, 2100)

        assert result.operating_cost == pytest.approx(14417.25)
        assert result.revenue == pytest.approx(17280.0)
        assert result.profit == pytest.approx(2862.75)
        assert result.co2_emissions == pytest.approx(57.96)
        assert result.break_even_load_factor == 67
        assert result.details.passengers == 180
        assert result.details.range == 6150

    def test_balanced_score(self, narrow_body_profile):
        """Test efficiency 29.77 + profit 2.86 + environment 19.92 + utilization 3.0"""
        result = score_aircraft("Airbus A320", narrow_body_profile, 1000, 90, 2100)

        assert result.score == 56
        assert result.reasoning == (
            "Excellent fuel efficiency: 0.0L/km",
            "Low emissions: 0kg CO2 per passenger",
        )

    @pytest.mark.parametrize("priority,expected_score", [
        (RoutePriority.COST, 56),
        (RoutePriority.ENVIRONMENT, 78),
        (RoutePriority.SPEED, 23),
    ])
    def test_priority_weighting(self, narrow_body_profile, priority, expected_score):
        """Test cost and environment re-weight, speed adds a cruise speed bonus"""
        result = score_aircraft("Airbus A320", narrow_body_profile, 1000, 90, 2100, priority)
        assert result.score == expected_score

    def test_speed_reasoning(self, narrow_body_profile):
        """Test speed priority explains the cruise speed"""
        result = score_aircraft("Airbus A320", narrow_body_profile, 1000, 90, 2100, RoutePriority.SPEED)
        assert result.reasoning[-1] == "Fast cruise speed: 470 knots"

    def test_profit_points_capped(self, jumbo_profile):
        """Test profit contributes at most 40 points"""
        result = score_aircraft("Airbus A380-800", jumbo_profile, 8000, 500)

        assert result.profit == pytest.approx(70830.0)
        assert result.score == 94

    def test_reasoning_limited_to_three(self, jumbo_profile):
        """Test only the first three reasons are kept"""
        result = score_aircraft("Airbus A380-800", jumbo_profile, 8000, 500)

        assert result.reasoning == (
            "Excellent fuel efficiency: 0.0L/km",
            "High profitability: $70,830 per flight",
            "Low emissions: 2kg CO2 per passenger",
        )

    def test_reasoning_limit_configurable(self, jumbo_profile):
        """Test a larger limit keeps the utilization reason"""
        result = score_aircraft("Airbus A380-800", jumbo_profile, 8000, 500,
                                params=RecommendationParams(reasoning_limit=5))
        assert result.reasoning[-1] == "Efficient capacity usage: 90% utilization"

    def test_break_even_capped(self, narrow_body_profile):
        """Test break-even load factor never exceeds 100%"""
        params = RecommendationParams(cost_per_ask=0.2)
        result = score_aircraft("Airbus A320", narrow_body_profile, 1000, 90, params=params)

        assert result.profit < 0
        assert result.break_even_load_factor == 100

    def test_zero_distance_rejected(self, narrow_body_profile):
        """Test scoring needs a positive distance"""
        with pytest.raises(InvalidInputError):
            score_aircraft("Airbus A320", narrow_body_profile, 0, 90)


class TestRecommendAircraft:
    """Test fleet ranking for a route"""

    def test_ranked_best_first(self):
        """Test candidates are sorted by score descending"""
        fleet = {
            "Thirsty": AircraftProfile(150, 9000, 5000, 450, 2.9, 3.15),
            "Frugal": AircraftProfile(150, 9000, 5000, 450, 0.02, 3.15),
        }
        result = recommend_aircraft("AAA", "BBB", 100, fleet=fleet, airports=EQUATOR_AIRPORTS)

        assert [candidate.aircraft for candidate in result] == ["Frugal", "Thirsty"]
        assert result[0].score > result[1].score

    def test_equal_scores_keep_fleet_order(self):
        """Test ties keep the fleet order"""
        profile = AircraftProfile(150, 9000, 5000, 450, 0.02, 3.15)
        fleet = {"First": profile, "Second": profile}
        result = recommend_aircraft("AAA", "BBB", 100, fleet=fleet, airports=EQUATOR_AIRPORTS)

        assert [candidate.aircraft for candidate in result] == ["First", "Second"]

    def test_unsuitable_aircraft_excluded(self):
        """Test aircraft short of range are not ranked"""
        fleet = {
            "Short": AircraftProfile(150, 9000, 1000, 450, 0.02, 3.15),
            "Long": AircraftProfile(150, 9000, 5000, 450, 0.02, 3.15),
        }
        result = recommend_aircraft("AAA", "BBB", 100, fleet=fleet, airports=EQUATOR_AIRPORTS)
        assert [candidate.aircraft for candidate in result] == ["Long"]

    def test_no_aircraft_fits(self):
        """Test mission nobody can fly is rejected"""
        fleet = {"Small": AircraftProfile(50, 9000, 5000, 450, 0.02, 3.15)}

        with pytest.raises(InvalidInputError) as exc_info:
            recommend_aircraft("AAA", "BBB", 100, 500, fleet=fleet, airports=EQUATOR_AIRPORTS)

        error = exc_info.value
        assert error.field == "mission"
        assert "100 pax" in str(error)
        assert "1001km range" in str(error)
        assert error.value["passengers"] == 100

    def test_unknown_destination(self):
        """Test unknown destination code is reported"""
        with pytest.raises(InvalidInputError) as exc_info:
            recommend_aircraft("AAA", "ZZZ", 100, airports=EQUATOR_AIRPORTS)
        assert exc_info.value.value == "ZZZ"

    def test_same_airport_rejected(self):
        """Test a route needs two different airports"""
        with pytest.raises(InvalidInputError) as exc_info:
            recommend_aircraft("AAA", "aaa", 100, airports=EQUATOR_AIRPORTS)
        assert exc_info.value.field == "destination"

    def test_negative_passengers(self):
        """Test negative demand is rejected"""
        with pytest.raises(InvalidInputError):
            recommend_aircraft("AAA", "BBB", -1, airports=EQUATOR_AIRPORTS)

    def test_priority_as_string(self):
        """Test priority may be given by value"""
        fleet = {"Only": AircraftProfile(150, 9000, 5000, 450, 0.02, 3.15)}
        result = recommend_aircraft("AAA", "BBB", 100, priority="cost", fleet=fleet,
                                    airports=EQUATOR_AIRPORTS)
        assert "Optimized for cost efficiency" in result[0].reasoning

    def test_unknown_priority(self):
        """Test unknown priority is rejected"""
        with pytest.raises(InvalidInputError) as exc_info:
            recommend_aircraft("AAA", "BBB", 100, priority="fastest", airports=EQUATOR_AIRPORTS)
        assert exc_info.value.field == "priority"

    def test_built_in_fleet_long_haul(self):
        """Test built-in fleet and airports for a transatlantic mission"""
        result = recommend_aircraft("IST", "JFK", 150, 5000)
        distance = calculate_route_distance("IST", "JFK")

        assert result
        assert all(candidate.details.range >= distance * 1.1 for candidate in result)
        assert "Airbus A320" not in [candidate.aircraft for candidate in result]
        scores = [candidate.score for candidate in result]
        assert scores == sorted(scores, reverse=True)
