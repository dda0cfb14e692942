"""Application constants.

Business limits for candidate validation and derived date fields.
"""

# ---------------------------------------------------------------------------
# Candidate validation
# ---------------------------------------------------------------------------
MIN_AGE: int = 0
MAX_AGE: int = 150

# Declared age may lag the birth date by one birthday
AGE_TOLERANCE_YEARS: int = 1

# ---------------------------------------------------------------------------
# Derived fields
# ---------------------------------------------------------------------------
ESTIMATED_EVENT_YEARS: int = 75

# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------
# PostgreSQL SQLSTATE codes surfaced by PostgREST for constraint violations
INTEGRITY_ERROR_CODES: frozenset[str] = frozenset({
    "23502",  # not_null_violation
    "23505",  # unique_violation
    "23514",  # check_violation
})
