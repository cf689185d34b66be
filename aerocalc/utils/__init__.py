"""
Utility functions module.

Numeric helpers shared by every calculation family.

Numeric Semantics:
- Division by zero is an error, never Infinity or NaN
- Rounding is half-up, matching the figures the calculators have always shown
- Percentages are returned on a 0-100 scale unless a name says otherwise
"""
