"""Response model for ``GET /api/v1/candidates/metrics``."""

from app.models.candidate import CamelModel


class MetricsSnapshot(CamelModel):
    """Age statistics over every stored candidate."""
    average_age: float
    age_std_deviation: float
