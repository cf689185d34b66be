"""
AeroCalc - Aviation Business Calculations

A library of pure calculation functions for airline business analysis:
aircraft fuel and emissions, cargo economics and freight pricing, passenger
revenue and standard weights, customer relationship heuristics, passenger
demographics prediction and route-based aircraft recommendation.
"""

from .calculator import AviationCalculator

__version__ = "0.1.0"
__author__ = "AeroCalc Team"

__all__ = ["AviationCalculator"]
