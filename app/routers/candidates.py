"""Candidate registration and statistics endpoints.

All routes require HTTP Basic authentication (applied at router
registration in ``app.main``).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from app.models.candidate import CandidateRequest, CandidateView
from app.models.error import ErrorResponse
from app.models.metrics import MetricsSnapshot
from app.services.candidates import create_candidate, list_candidates
from app.services.metrics import get_metrics

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=201,
    response_model=CandidateView,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid payload, date or age"},
        409: {"model": ErrorResponse, "description": "Declared age does not match birth date"},
        422: {"model": ErrorResponse, "description": "Storage constraint violated"},
    },
)
async def register_candidate(request: CandidateRequest) -> CandidateView:
    """Create a new candidate and return it with derived fields."""
    return create_candidate(request)


@router.get("", response_model=list[CandidateView])
async def get_candidates() -> list[CandidateView]:
    """Return all candidates with derived fields."""
    return list_candidates()


@router.get(
    "/metrics",
    response_model=MetricsSnapshot,
    responses={404: {"model": ErrorResponse, "description": "No candidates registered"}},
)
async def candidate_metrics() -> MetricsSnapshot:
    """Return average age and population standard deviation of ages."""
    return get_metrics()
