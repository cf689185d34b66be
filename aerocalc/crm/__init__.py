"""Customer relationship heuristics: CLV, churn and segmentation"""

from .heuristics import calculate_churn_probability, calculate_clv, categorize_customer

__all__ = [
    "calculate_clv",
    "calculate_churn_probability",
    "categorize_customer",
]
