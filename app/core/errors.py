"""Domain exceptions.

Business-rule failures are a closed family: every ``BusinessError`` subclass
carries one ``BusinessErrorCode`` and the HTTP layer maps each code to its own
status.  ``DataIntegrityError`` belongs to the storage layer and is kept
outside that family.
"""

from __future__ import annotations

from datetime import date

from app.core.constants import MAX_AGE, MIN_AGE
from app.models.enums import BusinessErrorCode


class BusinessError(Exception):
    """Base class for recoverable, user-facing business-rule violations."""

    code: BusinessErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidDateError(BusinessError):
    """Birth date in the future or too far in the past."""

    code = BusinessErrorCode.invalid_date


class InvalidAgeError(BusinessError):
    """Declared age outside the accepted range."""

    code = BusinessErrorCode.invalid_age

    def __init__(self, age: int) -> None:
        super().__init__(
            f"Age {age} is out of range; it must be between {MIN_AGE} and {MAX_AGE}"
        )
        self.age = age


class AgeMismatchError(BusinessError):
    """Declared age disagrees with the age derived from the birth date."""

    code = BusinessErrorCode.age_mismatch

    def __init__(self, declared_age: int, calculated_age: int, birth_date: date) -> None:
        super().__init__(
            f"Declared age {declared_age} does not match birth date "
            f"{birth_date.isoformat()} (calculated age: {calculated_age})"
        )
        self.declared_age = declared_age
        self.calculated_age = calculated_age


class NoDataError(BusinessError):
    """Metrics requested while no candidates are stored."""

    code = BusinessErrorCode.no_data

    def __init__(self, message: str = "No candidates registered; metrics are unavailable") -> None:
        super().__init__(message)


class DataIntegrityError(Exception):
    """Storage rejected a write because of a constraint violation."""

    def __init__(self, message: str, *, db_code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.db_code = db_code
