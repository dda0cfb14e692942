"""Candidate validation, persistence and read-time derivation.

``validate_and_prepare`` and ``derive_view`` are pure functions of their
arguments; ``today`` is always passed in.  The public service operations
(``create_candidate``, ``list_candidates``) resolve today once per request
from ``settings.TIMEZONE`` and hand it down.
"""

from __future__ import annotations

import logging
from datetime import date

from app.core.config import settings
from app.core.constants import AGE_TOLERANCE_YEARS, ESTIMATED_EVENT_YEARS, MAX_AGE, MIN_AGE
from app.core.errors import AgeMismatchError, InvalidAgeError, InvalidDateError
from app.db.candidates import find_all_candidates, save_candidate
from app.models.candidate import Candidate, CandidateCreate, CandidateRequest, CandidateView
from app.services.dates import (
    add_years,
    current_date,
    days_between,
    months_between,
    next_birthday,
    years_between,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_and_prepare(request: CandidateRequest, today: date) -> CandidateCreate:
    """Apply the business rules to *request* and build the record to store.

    Rules run in a fixed order so the first violated one is reported:

    1. birth date must be before *today* (``InvalidDateError``)
    2. declared age within [MIN_AGE, MAX_AGE] (``InvalidAgeError``)
    3. birth date at most MAX_AGE years back (``InvalidDateError``)
    4. declared age within AGE_TOLERANCE_YEARS of the calculated age
       (``AgeMismatchError``)

    The stored age is the calculated one, never the declared one.
    """
    birth_date = request.birth_date

    if birth_date >= today:
        raise InvalidDateError(
            f"Birth date {birth_date.isoformat()} must be before today ({today.isoformat()})"
        )

    if not MIN_AGE <= request.age <= MAX_AGE:
        raise InvalidAgeError(request.age)

    if birth_date < add_years(today, -MAX_AGE):
        raise InvalidDateError(
            f"Birth date {birth_date.isoformat()} is more than {MAX_AGE} years in the past"
        )

    calculated_age = years_between(birth_date, today)
    if abs(request.age - calculated_age) > AGE_TOLERANCE_YEARS:
        raise AgeMismatchError(request.age, calculated_age, birth_date)

    return CandidateCreate(
        first_name=request.first_name.strip(),
        last_name=request.last_name.strip(),
        age=calculated_age,
        birth_date=birth_date,
    )


# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------

def derive_view(candidate: Candidate, today: date) -> CandidateView:
    """Project a stored candidate into its response view as of *today*."""
    upcoming = next_birthday(candidate.birth_date, today)
    return CandidateView(
        **candidate.model_dump(),
        estimated_event_date=add_years(candidate.birth_date, ESTIMATED_EVENT_YEARS),
        next_birthday=upcoming,
        days_to_next_birthday=days_between(today, upcoming),
        age_in_months=months_between(candidate.birth_date, today),
    )


# ---------------------------------------------------------------------------
# Service operations
# ---------------------------------------------------------------------------

def create_candidate(request: CandidateRequest) -> CandidateView:
    """Validate, persist and return the derived view of a new candidate."""
    today = current_date(settings.TIMEZONE)
    prepared = validate_and_prepare(request, today)
    saved = save_candidate(prepared)
    logger.info(
        "candidate_created",
        extra={
            "candidate_id": saved.id,
            "declared_age": request.age,
            "stored_age": saved.age,
        },
    )
    return derive_view(saved, today)


def list_candidates() -> list[CandidateView]:
    """Return every stored candidate with derived fields."""
    today = current_date(settings.TIMEZONE)
    return [derive_view(candidate, today) for candidate in find_all_candidates()]
