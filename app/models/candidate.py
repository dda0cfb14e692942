"""Pydantic models for the ``candidates`` table and its API projections.

Python attributes are snake_case (matching the table columns); the JSON
contract is camelCase through the alias generator.
"""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    """Base model serialising to camelCase and accepting either spelling."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CandidateRequest(CamelModel):
    """Payload for ``POST /api/v1/candidates``.

    Only structural checks live here; range and consistency rules are
    business rules applied by the candidates service.
    """
    first_name: NonBlankStr
    last_name: NonBlankStr
    age: int
    birth_date: date


class CandidateCreate(CamelModel):
    """Validated record ready for insert (no id yet)."""
    first_name: str
    last_name: str
    age: int
    birth_date: date


class Candidate(CandidateCreate):
    """Full candidate record returned from the database."""
    id: int


class CandidateView(Candidate):
    """Candidate enriched with fields derived at read time."""
    estimated_event_date: date
    next_birthday: date
    days_to_next_birthday: int
    age_in_months: int
