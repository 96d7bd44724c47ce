"""
Validation modules for the GS1-128 decoder.
"""

from .validators import (
    calculate_check_digit_mod10,
    validate_check_digit,
    validate_date,
    ValidationResult,
)

__all__ = [
    "calculate_check_digit_mod10",
    "validate_check_digit",
    "validate_date",
    "ValidationResult",
]
