"""Enum types shared by the service and API layers."""

from enum import Enum


class BusinessErrorCode(str, Enum):
    """Closed set of business-rule failures raised by the candidate core."""
    invalid_date = "invalid_date"
    invalid_age = "invalid_age"
    age_mismatch = "age_mismatch"
    no_data = "no_data"
