"""Age statistics over the stored candidates."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from app.core.errors import NoDataError
from app.db.candidates import find_all_candidates
from app.models.metrics import MetricsSnapshot

logger = logging.getLogger(__name__)


def compute_metrics(ages: Iterable[int]) -> MetricsSnapshot:
    """Return the mean and population standard deviation of *ages*.

    Raises ``NoDataError`` when *ages* is empty.  A single age has a
    standard deviation of exactly 0.0.
    """
    values = list(ages)
    count = len(values)
    if count == 0:
        raise NoDataError()

    average = sum(values) / count
    if count == 1:
        std_deviation = 0.0
    else:
        variance = sum((age - average) ** 2 for age in values) / count
        std_deviation = math.sqrt(variance)

    return MetricsSnapshot(average_age=average, age_std_deviation=std_deviation)


def get_metrics() -> MetricsSnapshot:
    """Compute age metrics across all stored candidates."""
    ages = [candidate.age for candidate in find_all_candidates()]
    snapshot = compute_metrics(ages)
    logger.info(
        "candidate_metrics_computed",
        extra={"candidate_count": len(ages), "average_age": snapshot.average_age},
    )
    return snapshot
