"""Backend services for the training analytics engine."""

from backend.services.training_analytics_service import (
    DashboardSnapshot,
    TrainingAnalyticsService,
)

__all__ = [
    "DashboardSnapshot",
    "TrainingAnalyticsService",
]
