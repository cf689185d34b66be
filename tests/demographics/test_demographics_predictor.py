"""Tests for the business/leisure demographics predictor"""

import pytest

from aerocalc.config.defaults import DemographicsParams
from aerocalc.demographics.predictor import predict_passenger_demographics
from aerocalc.models.demographics import DominantType


class TestDominantType:
    """Test dominant segment classification"""

    def test_business_profile(self):
        """Test weekday morning last-minute business route"""
        result = predict_passenger_demographics("Monday", "spring", "morning", "last_minute",
                                                "business", "low", 2000)

        assert result.dominant_type is DominantType.BUSINESS
        assert result.business_percentage > result.leisure_percentage
        assert result.business_percentage == 95
        assert result.leisure_percentage == 5
        assert result.mixed_percentage == 0
        assert result.confidence == 95
        assert result.insights == [
            "Monday is a typical business travel day",
            "Morning/evening flights favor business travelers",
            "spring is peak business conference season",
            "Last-minute bookings indicate urgent business travel",
        ]

    def test_leisure_profile(self):
        """Test weekend night holiday early booking"""
        result = predict_passenger_demographics("Saturday", "holiday", "night", "early",
                                                "leisure", "high", 6000)

        assert result.dominant_type is DominantType.LEISURE
        assert result.business_percentage == 9
        assert result.leisure_percentage == 91
        assert result.confidence == 95
        assert result.insights == [
            "Saturday is primarily leisure travel",
            "Night flights often budget-conscious leisure",
            "holiday is peak vacation season",
            "Early bookings suggest planned vacations",
        ]

    def test_mixed_profile(self):
        """Test Friday afternoon in winter with neutral factors"""
        result = predict_passenger_demographics("Friday", "winter", "afternoon", "regular",
                                                "mixed", "medium", 2000)

        assert result.dominant_type is DominantType.MIXED
        assert result.business_percentage == 52
        assert result.leisure_percentage == 48
        assert result.confidence == 10
        # Winter, neutral route and price add no insight
        assert result.insights == [
            "Friday sees mixed business and weekend leisure traffic",
            "Afternoon flights see balanced traffic",
            "Regular booking window shows mixed demand",
        ]


class TestOutputShaping:
    """Test percentages, confidence and insight limits"""

    def test_even_split(self):
        """Test equal scores give zero confidence"""
        result = predict_passenger_demographics("Tuesday", "summer", "night", "early",
                                                "business", "low", 6000)

        assert result.business_percentage == 50
        assert result.leisure_percentage == 50
        assert result.confidence == 0
        assert result.dominant_type is DominantType.MIXED

    def test_insights_truncated(self):
        """Test at most four insights are returned"""
        result = predict_passenger_demographics("Tuesday", "summer", "night", "early",
                                                "business", "low", 6000)
        assert len(result.insights) == 4

    def test_custom_insight_limit(self):
        """Test insight limit from config"""
        result = predict_passenger_demographics("Tuesday", "summer", "night", "early",
                                                "business", "low", 6000,
                                                DemographicsParams(insight_limit=7))
        assert len(result.insights) == 7
        assert result.insights[-1] == "Long-haul route attracts both segments"

    def test_short_haul_insight(self):
        """Test short routes add the commuter insight"""
        result = predict_passenger_demographics("Sunday", "fall", "evening", "regular",
                                                "mixed", "medium", 500,
                                                DemographicsParams(insight_limit=10))
        assert "Short-haul favors business commuters" in result.insights

    @pytest.mark.parametrize("day", ["Monday", "Friday", "Sunday"])
    @pytest.mark.parametrize("season", ["spring", "summer", "winter", "holiday"])
    def test_percentages_bounded(self, day, season):
        """Test mixed percentage never negative and totals stay at 100 or below"""
        result = predict_passenger_demographics(day, season, "afternoon", "regular",
                                                "mixed", "medium", 3000)
        assert result.mixed_percentage >= 0
        assert 0 <= result.confidence <= 95
        assert result.business_percentage + result.leisure_percentage + result.mixed_percentage <= 101
