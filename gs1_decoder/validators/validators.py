"""
GS1 Validation Functions

Checks used by strict-mode decoding:
- Check digit validation (Mod10 for GTIN)
- Calendar validation of YYMMDD dates

Based on GS1 General Specifications. Lenient decoding never calls these;
they only report, they do not change decoded values.
"""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


def calculate_check_digit_mod10(digits: str) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm (GS1 General Specifications):
    1. From right to left, alternate multipliers 3 and 1
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        digits: Numeric string without check digit

    Returns:
        Calculated check digit (0-9)
    """
    if not digits or not digits.isdigit():
        raise ValueError("Input must be a non-empty numeric string")

    total = 0
    for i, digit in enumerate(reversed(digits)):
        multiplier = 3 if i % 2 == 0 else 1
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


def validate_check_digit(value: str) -> ValidationResult:
    """
    Validate the trailing Mod10 check digit of a GTIN (or any GS1 key).

    Args:
        value: The complete value including check digit

    Returns:
        ValidationResult with check digit status in meta
    """
    result = ValidationResult(valid=True)

    if not value or not value.isdigit():
        result.valid = False
        result.errors.append("Value must be numeric for check digit validation")
        return result

    if len(value) < 2:
        result.valid = False
        result.errors.append("Value too short for check digit validation")
        return result

    provided_check = int(value[-1])
    calculated_check = calculate_check_digit_mod10(value[:-1])

    result.meta['calculated_check_digit'] = calculated_check
    result.meta['provided_check_digit'] = provided_check
    result.meta['check_digit_valid'] = (provided_check == calculated_check)

    if provided_check != calculated_check:
        result.valid = False
        result.errors.append(
            f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
        )

    return result


def validate_date(value: str, century_prefix: str = "20") -> ValidationResult:
    """
    Validate a YYMMDD date.

    The century is always ``century_prefix`` (20YY), matching how dates
    are rendered on decoded records.

    Args:
        value: Six digit date string
        century_prefix: Two digits prepended to YY

    Returns:
        ValidationResult with year/month/day and iso_date in meta
    """
    result = ValidationResult(valid=True)

    if not value or not value.isdigit():
        result.valid = False
        result.errors.append("Date must be numeric")
        return result

    if len(value) != 6:
        result.valid = False
        result.errors.append(f"YYMMDD date must be 6 digits, got {len(value)}")
        return result

    year = int(century_prefix + value[0:2])
    mm = int(value[2:4])
    dd = int(value[4:6])

    if mm < 1 or mm > 12:
        result.valid = False
        result.errors.append(f"Invalid month: {mm}")
        return result

    max_day = monthrange(year, mm)[1]
    if dd < 1 or dd > max_day:
        result.valid = False
        result.errors.append(f"Day {dd} invalid for month {mm} in year {year}")
        return result

    result.meta['year'] = year
    result.meta['month'] = mm
    result.meta['day'] = dd
    result.meta['iso_date'] = f"{year:04d}-{mm:02d}-{dd:02d}"

    return result
