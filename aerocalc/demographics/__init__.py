"""Heuristic passenger demographics prediction"""

from .predictor import predict_passenger_demographics

__all__ = ["predict_passenger_demographics"]
