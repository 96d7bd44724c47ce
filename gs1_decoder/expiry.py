"""
Expiry status helpers for decoded records.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional

from dateutil.relativedelta import relativedelta


class ExpiryStatus(str, Enum):
    VALID = "Valid"
    NEAR_EXPIRY = "Near Expiry"
    EXPIRED = "Expired"
    UNKNOWN = "Unknown"


def parse_ddmmyyyy(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(value, "%d/%m/%Y").date()
    except ValueError:
        return None


def expiry_status(
    expiration_date: Optional[str],
    near_months: int = 6,
    today: Optional[date] = None,
) -> ExpiryStatus:
    """
    Classify a DD/MM/YYYY expiration date.

    Dates that are missing or not real calendar dates (e.g. 31/02/2023)
    are UNKNOWN. A date within ``near_months`` months of ``today``,
    inclusive, is NEAR_EXPIRY.
    """
    expiry = parse_ddmmyyyy(expiration_date)
    if expiry is None:
        return ExpiryStatus.UNKNOWN
    today = today or date.today()
    if expiry < today:
        return ExpiryStatus.EXPIRED
    if expiry <= today + relativedelta(months=near_months):
        return ExpiryStatus.NEAR_EXPIRY
    return ExpiryStatus.VALID
