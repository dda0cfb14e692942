"""Supabase-backed storage for candidate records.

Thin append/scan access to the ``candidates`` table.  Constraint violations
reported by PostgREST are translated to ``DataIntegrityError``; every other
API failure propagates unchanged.
"""

from __future__ import annotations

import logging

from postgrest.exceptions import APIError

from app.core.config import settings
from app.core.constants import INTEGRITY_ERROR_CODES
from app.core.errors import DataIntegrityError
from app.db.supabase import get_supabase
from app.models.candidate import Candidate, CandidateCreate

logger = logging.getLogger(__name__)


def save_candidate(candidate: CandidateCreate) -> Candidate:
    """Insert *candidate* and return the stored row with its assigned id."""
    client = get_supabase()
    payload = candidate.model_dump(mode="json")

    try:
        result = client.table(settings.CANDIDATES_TABLE).insert(payload).execute()
    except APIError as exc:
        if exc.code in INTEGRITY_ERROR_CODES:
            logger.warning(
                "candidate_insert_rejected",
                extra={"db_code": exc.code, "error_message": exc.message},
            )
            raise DataIntegrityError(
                f"Candidate could not be stored: {exc.message}",
                db_code=exc.code,
            ) from exc
        raise

    rows = result.data or []
    if not rows:
        raise RuntimeError("Insert into candidates returned no row")

    saved = Candidate(**rows[0])
    logger.info("candidate_saved", extra={"candidate_id": saved.id})
    return saved


def find_all_candidates() -> list[Candidate]:
    """Return every stored candidate (full table scan, order unspecified)."""
    client = get_supabase()
    result = client.table(settings.CANDIDATES_TABLE).select("*").execute()
    return [Candidate(**row) for row in result.data or []]
